from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database.mysql import Base


class Room(Base):
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    image_url = Column(String(500), nullable=True)

    # Relationships
    participants = relationship("RoomParticipant", back_populates="room")
    messages = relationship("Message", back_populates="room")

    def __repr__(self):
        return f"<Room(id={self.id}, name={self.name})>"
