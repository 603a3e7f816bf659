import pytest
from datetime import datetime
from unittest.mock import patch
from httpx import AsyncClient
from fastapi import status
from sqlalchemy import select, func

from app.models.messages import Message


class TestMessageListAPI:
    """메시지 조회 API 테스트"""

    @pytest.mark.asyncio
    async def test_get_messages_success(self, client: AsyncClient, support_room):
        """메시지 목록 조회 성공 테스트"""
        response = await client.get("/api/messages/5", headers={"x-user-id": "u1"})

        assert response.status_code == status.HTTP_200_OK
        messages = response.json()["messages"]
        assert [m["message"] for m in messages] == ["welcome", "hi"]
        assert messages[0]["sender"] == "agent@mail.com"
        assert messages[0]["sender_name"] == "Agent Smith"
        assert messages[1]["sender_name"] == "Customer One"
        for key in ("id", "type", "created_at", "media_url", "media_type", "file_name", "file_size"):
            assert key in messages[0]

    @pytest.mark.asyncio
    async def test_get_messages_sorted_by_created_at(self, client: AsyncClient, test_session, support_room):
        """나중에 삽입된 과거 메시지도 시간순으로 정렬"""
        test_session.add(Message(
            room_id=5, sender_id="u1", type="text", message="earliest",
            created_at=datetime(2023, 12, 31, 23, 0, 0)
        ))
        await test_session.commit()

        response = await client.get("/api/messages/5", headers={"x-user-id": "u1"})

        messages = response.json()["messages"]
        assert messages[0]["message"] == "earliest"
        times = [datetime.fromisoformat(m["created_at"]) for m in messages]
        assert times == sorted(times)

    @pytest.mark.asyncio
    async def test_get_messages_empty_room(self, client: AsyncClient, empty_room):
        """메시지가 없는 방은 빈 목록"""
        response = await client.get("/api/messages/9", headers={"x-user-id": "u1"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"messages": []}

    @pytest.mark.asyncio
    async def test_get_messages_without_header(self, client: AsyncClient, support_room):
        """x-user-id 헤더 없이 조회 실패 테스트"""
        response = await client.get("/api/messages/5")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "Unauthorized"

    @pytest.mark.asyncio
    async def test_get_messages_not_a_participant(self, client: AsyncClient, support_room, outsider_user):
        """참여자가 아닌 사용자 조회 실패 테스트"""
        response = await client.get("/api/messages/5", headers={"x-user-id": outsider_user.id})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["error"] == "Not a participant"

    @pytest.mark.asyncio
    async def test_get_messages_nonexistent_room(self, client: AsyncClient, customer_user):
        """존재하지 않는 방도 참여 행이 없으므로 403"""
        response = await client.get("/api/messages/99999", headers={"x-user-id": "u1"})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.asyncio
    async def test_get_messages_internal_error(self, client: AsyncClient, support_room):
        """처리되지 않은 예외는 일반적인 500 응답"""
        with patch(
            "app.services.message_service.get_room_messages",
            side_effect=RuntimeError("boom")
        ):
            response = await client.get("/api/messages/5", headers={"x-user-id": "u1"})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["error"] == "Internal server error"


class TestMessageSendAPI:
    """메시지 전송 API 테스트"""

    async def _count_messages(self, test_session) -> int:
        return await test_session.scalar(select(func.count()).select_from(Message))

    @pytest.mark.asyncio
    async def test_send_text_message(self, client: AsyncClient, support_room):
        """텍스트 메시지 전송 성공 테스트"""
        response = await client.post(
            "/api/messages/send",
            json={"roomId": 5, "message": "hello", "type": "text"},
            headers={"x-user-id": "u1"}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["success"] is True
        saved = data["message"]
        assert saved["message"] == "hello"
        assert saved["type"] == "text"
        assert saved["sender"] == "u1"
        assert isinstance(saved["id"], int)
        assert saved["created_at"]
        assert saved["media_url"] is None
        assert saved["file_size"] is None

    @pytest.mark.asyncio
    async def test_send_media_message(self, client: AsyncClient, support_room):
        """미디어 메시지 필드 그대로 반환 테스트"""
        payload = {
            "roomId": 5,
            "message": "",
            "type": "media",
            "mediaUrl": "/uploads/abc.png",
            "mediaType": "image/png",
            "fileName": "cat.png",
            "fileSize": 2048
        }

        response = await client.post("/api/messages/send", json=payload, headers={"x-user-id": "u1"})

        assert response.status_code == status.HTTP_200_OK
        saved = response.json()["message"]
        assert saved["type"] == "media"
        assert saved["message"] == ""
        assert saved["media_url"] == "/uploads/abc.png"
        assert saved["media_type"] == "image/png"
        assert saved["file_name"] == "cat.png"
        assert saved["file_size"] == 2048

    @pytest.mark.asyncio
    async def test_send_defaults(self, client: AsyncClient, support_room):
        """type 기본값 text, 메시지 누락 시 빈 문자열"""
        response = await client.post(
            "/api/messages/send",
            json={"roomId": "5"},
            headers={"x-user-id": "u1"}
        )

        assert response.status_code == status.HTTP_200_OK
        saved = response.json()["message"]
        assert saved["type"] == "text"
        assert saved["message"] == ""

    @pytest.mark.asyncio
    async def test_send_is_not_idempotent(self, client: AsyncClient, test_session, support_room):
        """같은 요청도 매번 새 행을 생성"""
        before = await self._count_messages(test_session)
        ids = set()
        for _ in range(2):
            response = await client.post(
                "/api/messages/send",
                json={"roomId": 5, "message": "dup"},
                headers={"x-user-id": "u1"}
            )
            ids.add(response.json()["message"]["id"])

        assert len(ids) == 2
        assert await self._count_messages(test_session) == before + 2

    @pytest.mark.asyncio
    async def test_sent_message_appears_in_listing(self, client: AsyncClient, support_room):
        """전송한 메시지가 목록 마지막에 표시"""
        await client.post(
            "/api/messages/send",
            json={"roomId": 5, "message": "newest"},
            headers={"x-user-id": "agent@mail.com"}
        )

        response = await client.get("/api/messages/5", headers={"x-user-id": "u1"})
        last = response.json()["messages"][-1]
        assert last["message"] == "newest"
        assert last["sender_name"] == "Agent Smith"

    @pytest.mark.asyncio
    async def test_send_not_a_participant(self, client: AsyncClient, test_session, support_room, outsider_user):
        """참여자가 아닌 사용자는 전송 불가, 행이 생성되지 않음"""
        before = await self._count_messages(test_session)

        response = await client.post(
            "/api/messages/send",
            json={"roomId": 5, "message": "hello", "type": "text"},
            headers={"x-user-id": outsider_user.id}
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["error"] == "Not a participant"
        assert await self._count_messages(test_session) == before

    @pytest.mark.asyncio
    async def test_send_without_header(self, client: AsyncClient, support_room):
        """x-user-id 헤더 없이 전송 실패 테스트"""
        response = await client.post("/api/messages/send", json={"roomId": 5, "message": "hello"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_send_without_room_id(self, client: AsyncClient, support_room):
        """roomId 누락 검증 실패 테스트"""
        response = await client.post(
            "/api/messages/send",
            json={"message": "hello"},
            headers={"x-user-id": "u1"}
        )

        assert response.status_code == 422
