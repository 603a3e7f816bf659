from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.database.mysql import Base


class RoomParticipant(Base):
    """
    채팅방 참여자 테이블

    행이 존재하면 해당 채팅방 메시지의 읽기/쓰기 권한을 가집니다.
    """
    __tablename__ = "room_participants"

    room_id = Column(Integer, ForeignKey("rooms.id"), primary_key=True)
    user_id = Column(String(255), ForeignKey("users.id"), primary_key=True, index=True)

    # Relationships
    room = relationship("Room", back_populates="participants")
    user = relationship("User", back_populates="room_participations")

    def __repr__(self):
        return f"<RoomParticipant(room_id={self.room_id}, user_id={self.user_id})>"
