"""
Services layer for data access and file storage.

This layer handles:
- Database queries and operations
- Media file storage
- Data transformations
"""

from . import auth_service
from . import room_service
from . import message_service
from . import file_service

__all__ = [
    "auth_service",
    "room_service",
    "message_service",
    "file_service"
]
