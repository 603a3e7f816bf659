from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database.mysql import Base

ROLE_ADMIN = 0
ROLE_AGENT = 1
ROLE_CUSTOMER = 2

ROLE_NAMES = {
    ROLE_ADMIN: "Admin",
    ROLE_AGENT: "Agent",
    ROLE_CUSTOMER: "Customer",
}


def role_name(role) -> str:
    """정수 역할 코드를 표시용 이름으로 변환 (알 수 없는 값은 User)"""
    return ROLE_NAMES.get(role, "User")


class User(Base):
    __tablename__ = "users"

    # 로그인 식별자 (예: admin@mail.com)
    id = Column(String(255), primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    role = Column(Integer, nullable=False, default=ROLE_CUSTOMER)

    # Relationships
    room_participations = relationship("RoomParticipant", back_populates="user")
    messages = relationship("Message", back_populates="sender")

    @property
    def role_name(self) -> str:
        return role_name(self.role)

    def __repr__(self):
        return f"<User(id={self.id}, name={self.name}, role={self.role})>"
