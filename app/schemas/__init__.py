# User schemas
from .user import (
    UserLogin,
    UserResponse,
    LoginResponse
)

# Room schemas
from .room import (
    ParticipantResponse,
    RoomResponse,
    RoomListResponse
)

# Message schemas
from .message import (
    MessageSend,
    MessageResponse,
    MessageWithSenderResponse,
    MessageListResponse,
    MessageSendResponse
)

# Upload schemas
from .upload import UploadResponse

__all__ = [
    "UserLogin",
    "UserResponse",
    "LoginResponse",
    "ParticipantResponse",
    "RoomResponse",
    "RoomListResponse",
    "MessageSend",
    "MessageResponse",
    "MessageWithSenderResponse",
    "MessageListResponse",
    "MessageSendResponse",
    "UploadResponse",
]
