import pytest
from sqlalchemy import select, func

from app.database.seed import seed_demo_data, DEMO_USERS, DEMO_ROOMS
from app.models.users import User
from app.models.rooms import Room
from app.models.room_participants import RoomParticipant
from app.models.messages import Message
from app.services import room_service


class TestDemoSeed:
    """데모 데이터 시드 테스트"""

    @pytest.mark.asyncio
    async def test_seed_creates_demo_data(self, test_session):
        created = await seed_demo_data(test_session)

        assert created is True
        assert await test_session.scalar(select(func.count()).select_from(User)) == len(DEMO_USERS)
        assert await test_session.scalar(select(func.count()).select_from(Room)) == len(DEMO_ROOMS)
        assert await test_session.scalar(select(func.count()).select_from(RoomParticipant)) == sum(
            len(room["participants"]) for room in DEMO_ROOMS
        )
        assert await test_session.scalar(select(func.count()).select_from(Message)) == sum(
            len(room["messages"]) for room in DEMO_ROOMS
        )

    @pytest.mark.asyncio
    async def test_seed_skips_when_users_exist(self, test_session, admin_user):
        created = await seed_demo_data(test_session)

        assert created is False
        assert await test_session.scalar(select(func.count()).select_from(Room)) == 0

    @pytest.mark.asyncio
    async def test_seeded_rooms_order(self, test_session):
        """시드 후 관리자의 방 목록: 메시지가 있는 방 먼저"""
        await seed_demo_data(test_session)

        rooms = await room_service.get_user_rooms(test_session, "admin@mail.com")

        assert [room["name"] for room in rooms] == ["Customer Support", "Internal Team"]
        assert rooms[0]["last_message"] == DEMO_ROOMS[0]["messages"][-1][1]
        assert rooms[1]["last_message"] is None
