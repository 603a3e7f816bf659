from .users import User
from .rooms import Room
from .room_participants import RoomParticipant
from .messages import Message

__all__ = [
    "User",
    "Room",
    "RoomParticipant",
    "Message",
]
