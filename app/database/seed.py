"""
데모 데이터 시드

users 테이블이 비어있을 때만 데모 사용자/채팅방을 생성합니다.
"""

import logging
from datetime import datetime, timedelta

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.users import User, ROLE_ADMIN, ROLE_AGENT, ROLE_CUSTOMER
from app.models.rooms import Room
from app.models.room_participants import RoomParticipant
from app.models.messages import Message

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {"id": "admin@mail.com", "name": "Admin", "role": ROLE_ADMIN},
    {"id": "agent@mail.com", "name": "Agent", "role": ROLE_AGENT},
    {"id": "customer@mail.com", "name": "Customer", "role": ROLE_CUSTOMER},
]

DEMO_ROOMS = [
    {
        "name": "Customer Support",
        "image_url": "https://picsum.photos/seed/support/200",
        "participants": ["admin@mail.com", "agent@mail.com", "customer@mail.com"],
        "messages": [
            ("customer@mail.com", "Halo, saya butuh bantuan dengan pesanan saya."),
            ("agent@mail.com", "Tentu, boleh minta nomor pesanannya?"),
        ],
    },
    {
        "name": "Internal Team",
        "image_url": "https://picsum.photos/seed/team/200",
        "participants": ["admin@mail.com", "agent@mail.com"],
        "messages": [],
    },
]


async def seed_demo_data(session: AsyncSession) -> bool:
    """데모 데이터 생성 (이미 데이터가 있으면 건너뜀)"""
    user_count = await session.scalar(select(func.count()).select_from(User))
    if user_count:
        logger.info("Demo seed skipped: users table is not empty")
        return False

    session.add_all(User(**user) for user in DEMO_USERS)

    base_time = datetime.utcnow() - timedelta(hours=1)
    for room_data in DEMO_ROOMS:
        room = Room(name=room_data["name"], image_url=room_data["image_url"])
        session.add(room)
        await session.flush()

        session.add_all(
            RoomParticipant(room_id=room.id, user_id=user_id)
            for user_id in room_data["participants"]
        )
        for offset, (sender_id, text) in enumerate(room_data["messages"]):
            session.add(Message(
                room_id=room.id,
                sender_id=sender_id,
                type="text",
                message=text,
                created_at=base_time + timedelta(minutes=offset)
            ))

    await session.commit()
    logger.info(f"Demo seed created {len(DEMO_USERS)} users and {len(DEMO_ROOMS)} rooms")
    return True
