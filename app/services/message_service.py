"""
Message service layer for relational database operations.

Handles message history queries and message creation.
"""

import time
from typing import List, Optional, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.core.logging import get_logger, log_database_operation
from app.models.messages import Message, MESSAGE_TYPE_TEXT
from app.models.users import User

logger = get_logger(__name__)


def message_to_dict(message: Message) -> Dict[str, Any]:
    """저장된 메시지 행을 응답 딕셔너리로 변환 (sender_id -> sender)"""
    return {
        "id": message.id,
        "type": message.type,
        "message": message.message,
        "sender": message.sender_id,
        "created_at": message.created_at,
        "media_url": message.media_url,
        "media_type": message.media_type,
        "file_name": message.file_name,
        "file_size": message.file_size,
    }


async def get_room_messages(db: AsyncSession, room_id: int) -> List[Dict[str, Any]]:
    """채팅방의 전체 메시지를 발신자 이름과 함께 시간순으로 조회 (페이지네이션 없음)"""
    result = await db.execute(
        select(Message, User.name)
        .join(User, Message.sender_id == User.id)
        .where(Message.room_id == room_id)
        .order_by(Message.created_at.asc(), Message.id.asc())
    )

    messages = []
    for message, sender_name in result.all():
        message_dict = message_to_dict(message)
        message_dict["sender_name"] = sender_name
        messages.append(message_dict)
    return messages


async def create_message(
    db: AsyncSession,
    room_id: int,
    sender_id: str,
    message: Optional[str] = None,
    message_type: Optional[str] = MESSAGE_TYPE_TEXT,
    media_url: Optional[str] = None,
    media_type: Optional[str] = None,
    file_name: Optional[str] = None,
    file_size: Optional[int] = None
) -> Message:
    """
    메시지 생성

    요청마다 새 행을 무조건 생성합니다 (중복/멱등성 검사 없음).
    빈 값의 미디어 필드는 NULL로 저장됩니다.
    """
    start_time = time.time()

    new_message = Message(
        room_id=room_id,
        sender_id=sender_id,
        type=message_type or MESSAGE_TYPE_TEXT,
        message=message or "",
        media_url=media_url or None,
        media_type=media_type or None,
        file_name=file_name or None,
        file_size=file_size or None
    )

    db.add(new_message)
    await db.commit()
    await db.refresh(new_message)

    log_database_operation(
        logger,
        "INSERT",
        "messages",
        duration_ms=(time.time() - start_time) * 1000,
        affected_rows=1,
        room_id=room_id,
        message_id=new_message.id,
        message_type=new_message.type
    )
    return new_message
