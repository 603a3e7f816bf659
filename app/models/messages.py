from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.database.mysql import Base

MESSAGE_TYPE_TEXT = "text"
MESSAGE_TYPE_MEDIA = "media"


class Message(Base):
    __tablename__ = "messages"
    __table_args__ = (
        Index("ix_messages_room_created", "room_id", "created_at"),  # 채팅방 메시지 시간순 조회
    )

    id = Column(Integer, primary_key=True, index=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False)
    sender_id = Column(String(255), ForeignKey("users.id"), nullable=False, index=True)
    type = Column(String(20), nullable=False, default=MESSAGE_TYPE_TEXT)
    message = Column(Text, nullable=False, default="")

    # 미디어 첨부 정보
    media_url = Column(String(1000), nullable=True)
    media_type = Column(String(255), nullable=True)
    file_name = Column(String(255), nullable=True)
    file_size = Column(Integer, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    room = relationship("Room", back_populates="messages")
    sender = relationship("User", back_populates="messages")

    def __repr__(self):
        return f"<Message(id={self.id}, room_id={self.room_id}, sender_id={self.sender_id}, type={self.type})>"
