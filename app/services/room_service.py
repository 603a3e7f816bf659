"""
Room Service - 채팅방 목록 및 참여자 관련 비즈니스 로직
"""

from collections import defaultdict
from typing import Dict, List, Any, Iterable
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.models.rooms import Room
from app.models.room_participants import RoomParticipant
from app.models.users import User
from app.models.messages import Message


async def is_participant(db: AsyncSession, room_id: int, user_id: str) -> bool:
    """사용자가 채팅방 참여자인지 확인 (유일한 권한 검사)"""
    result = await db.execute(
        select(RoomParticipant.room_id).where(
            RoomParticipant.room_id == room_id,
            RoomParticipant.user_id == user_id
        )
    )
    return result.first() is not None


def _last_message_column(column):
    """채팅방의 가장 최근 메시지 컬럼을 반환하는 상관 서브쿼리"""
    return (
        select(column)
        .where(Message.room_id == Room.id)
        .order_by(Message.created_at.desc(), Message.id.desc())
        .limit(1)
        .correlate(Room)
        .scalar_subquery()
    )


async def get_room_participants(
    db: AsyncSession,
    room_ids: Iterable[int]
) -> Dict[int, List[Dict[str, Any]]]:
    """채팅방별 참여자 목록 조회"""
    room_ids = list(room_ids)
    participants: Dict[int, List[Dict[str, Any]]] = defaultdict(list)
    if not room_ids:
        return participants

    result = await db.execute(
        select(RoomParticipant.room_id, User.id, User.name, User.role)
        .join(User, User.id == RoomParticipant.user_id)
        .where(RoomParticipant.room_id.in_(room_ids))
        .order_by(RoomParticipant.room_id, User.name)
    )
    for room_id, user_id, name, role in result.all():
        participants[room_id].append({"id": user_id, "name": name, "role": role})

    return participants


async def get_user_rooms(db: AsyncSession, user_id: str) -> List[Dict[str, Any]]:
    """
    사용자가 참여한 채팅방 목록 조회

    마지막 메시지가 있는 방이 최신순으로 먼저 오고, 메시지가 없는 방은 뒤에 옵니다.
    """
    last_message = _last_message_column(Message.message)
    last_message_time = _last_message_column(Message.created_at)

    result = await db.execute(
        select(
            Room.id,
            Room.name,
            Room.image_url,
            last_message.label("last_message"),
            last_message_time.label("last_message_time")
        )
        .join(RoomParticipant, RoomParticipant.room_id == Room.id)
        .where(RoomParticipant.user_id == user_id)
        # NULLS LAST 구문 대신 null 여부를 먼저 정렬 (MySQL 호환)
        .order_by(last_message_time.is_(None), last_message_time.desc(), Room.id)
    )
    rows = result.all()

    participants = await get_room_participants(db, (row.id for row in rows))

    return [
        {
            "id": row.id,
            "name": row.name,
            "image_url": row.image_url,
            "participants": participants.get(row.id, []),
            "last_message": row.last_message,
            "last_message_time": row.last_message_time,
        }
        for row in rows
    ]
