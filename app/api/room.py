"""
Room API - 채팅방 목록 API 엔드포인트
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.mysql import get_async_session
from app.schemas.room import RoomListResponse
from app.api.dependencies import get_current_user_id
from app.services import room_service

router = APIRouter(prefix="/api/rooms", tags=["Rooms"])


@router.get("", response_model=RoomListResponse)
async def get_rooms(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_session)
) -> RoomListResponse:
    """
    사용자가 참여한 채팅방 목록 조회

    각 채팅방에 참여자 목록과 마지막 메시지/시간이 포함됩니다.
    마지막 메시지 시간 내림차순, 메시지가 없는 방은 마지막.
    """
    rooms = await room_service.get_user_rooms(db, user_id)
    return RoomListResponse(rooms=rooms)
