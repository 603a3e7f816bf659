"""
API Dependencies

호출자 식별(x-user-id 헤더)과 채팅방 참여자 확인
"""

from typing import Optional
from fastapi import Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import missing_identity_error, not_a_participant_error
from app.core.logging import get_logger, log_security_event
from app.services import room_service

logger = get_logger(__name__)


async def get_current_user_id(
    request: Request,
    x_user_id: Optional[str] = Header(None, alias="x-user-id")
) -> str:
    """
    요청 헤더에서 호출자 ID를 가져옵니다.

    세션/토큰 검증은 하지 않으며, 헤더 값은 클라이언트가 자유롭게 설정할 수 있습니다.

    Raises:
        AuthenticationException: 헤더가 없는 경우 (401)
    """
    if not x_user_id:
        log_security_event(
            logger,
            "missing_identity_header",
            severity="low",
            ip_address=request.client.host if request.client else None,
            path=request.url.path
        )
        raise missing_identity_error()

    return x_user_id


async def ensure_room_participant(db: AsyncSession, room_id: int, user_id: str) -> None:
    """채팅방 참여자가 아니면 403"""
    if not await room_service.is_participant(db, room_id, user_id):
        log_security_event(
            logger,
            "not_a_participant",
            severity="medium",
            user_id=user_id,
            room_id=room_id
        )
        raise not_a_participant_error()
