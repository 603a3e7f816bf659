from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.mysql import get_async_session
from app.schemas.message import (
    MessageSend, MessageResponse, MessageListResponse, MessageSendResponse
)
from app.api.dependencies import get_current_user_id, ensure_room_participant
from app.core.logging import get_logger
from app.services import message_service

logger = get_logger(__name__)
router = APIRouter(prefix="/api/messages", tags=["Messages"])


@router.post("/send", response_model=MessageSendResponse)
async def send_message(
    message_data: MessageSend,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session)
) -> MessageSendResponse:
    """
    메시지 전송 (텍스트 또는 미디어)

    - **roomId**: 채팅방 ID
    - **message**: 메시지 내용
    - **type**: 메시지 타입 (기본값: text)
    - **mediaUrl / mediaType / fileName / fileSize**: 미디어 첨부 정보 (선택사항)

    저장된 행을 그대로 반환합니다.
    """

    await ensure_room_participant(db, message_data.room_id, user_id)

    logger.info(
        f"Send message request: room_id={message_data.room_id}, type={message_data.type}",
        extra={
            "room_id": message_data.room_id,
            "message_type": message_data.type,
            "media_url": message_data.media_url,
            "file_name": message_data.file_name
        }
    )

    message = await message_service.create_message(
        db,
        room_id=message_data.room_id,
        sender_id=user_id,
        message=message_data.message,
        message_type=message_data.type,
        media_url=message_data.media_url,
        media_type=message_data.media_type,
        file_name=message_data.file_name,
        file_size=message_data.file_size
    )

    return MessageSendResponse(
        success=True,
        message=MessageResponse(**message_service.message_to_dict(message))
    )


@router.get("/{room_id}", response_model=MessageListResponse)
async def get_messages(
    room_id: int,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session)
) -> MessageListResponse:
    """
    채팅방 메시지 조회

    - **room_id**: 채팅방 ID

    전체 메시지를 생성 시간 오름차순으로 반환합니다 (페이지네이션 없음).
    """

    await ensure_room_participant(db, room_id, user_id)

    messages = await message_service.get_room_messages(db, room_id)
    return MessageListResponse(messages=messages)
