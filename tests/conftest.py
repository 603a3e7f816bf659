import pytest
import pytest_asyncio
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from datetime import datetime

from app.main import app
from app.core.config import settings
from app.database.mysql import Base, get_async_session
from app.models.users import User, ROLE_ADMIN, ROLE_AGENT, ROLE_CUSTOMER
from app.models.rooms import Room
from app.models.room_participants import RoomParticipant
from app.models.messages import Message


# 테스트용 인메모리 SQLite 데이터베이스 설정
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """테스트용 비동기 데이터베이스 엔진 생성"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """테스트용 데이터베이스 세션"""
    async_session = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session() as session:
        yield session


@pytest_asyncio.fixture
async def client(test_session) -> AsyncGenerator[AsyncClient, None]:
    """테스트용 비동기 HTTP 클라이언트"""
    def get_test_session():
        return test_session

    app.dependency_overrides[get_async_session] = get_test_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    """업로드 디렉토리를 임시 경로로 변경"""
    target = tmp_path / "uploads"
    monkeypatch.setattr(settings, "upload_dir", str(target))
    return target


@pytest_asyncio.fixture
async def admin_user(test_session) -> User:
    """테스트용 관리자"""
    user = User(id="admin@mail.com", name="Admin", role=ROLE_ADMIN)
    test_session.add(user)
    await test_session.commit()
    return user


@pytest_asyncio.fixture
async def agent_user(test_session) -> User:
    """테스트용 상담원"""
    user = User(id="agent@mail.com", name="Agent Smith", role=ROLE_AGENT)
    test_session.add(user)
    await test_session.commit()
    return user


@pytest_asyncio.fixture
async def customer_user(test_session) -> User:
    """테스트용 고객 (u1)"""
    user = User(id="u1", name="Customer One", role=ROLE_CUSTOMER)
    test_session.add(user)
    await test_session.commit()
    return user


@pytest_asyncio.fixture
async def outsider_user(test_session) -> User:
    """어떤 채팅방에도 참여하지 않은 사용자"""
    user = User(id="outsider@mail.com", name="Outsider", role=7)
    test_session.add(user)
    await test_session.commit()
    return user


@pytest_asyncio.fixture
async def support_room(test_session, customer_user, agent_user) -> Room:
    """메시지가 있는 채팅방 (id=5)"""
    room = Room(id=5, name="Support", image_url="https://example.com/support.png")
    test_session.add(room)
    test_session.add_all([
        RoomParticipant(room_id=5, user_id=customer_user.id),
        RoomParticipant(room_id=5, user_id=agent_user.id),
    ])
    test_session.add_all([
        Message(
            room_id=5, sender_id=agent_user.id, type="text", message="welcome",
            created_at=datetime(2024, 1, 1, 9, 0, 0)
        ),
        Message(
            room_id=5, sender_id=customer_user.id, type="text", message="hi",
            created_at=datetime(2024, 1, 1, 10, 0, 0)
        ),
    ])
    await test_session.commit()
    return room


@pytest_asyncio.fixture
async def empty_room(test_session, customer_user) -> Room:
    """메시지가 없는 채팅방 (id=9)"""
    room = Room(id=9, name="Empty", image_url="https://example.com/empty.png")
    test_session.add(room)
    test_session.add(RoomParticipant(room_id=9, user_id=customer_user.id))
    await test_session.commit()
    return room
