"""
클라이언트 페이지 라우트

로그인(/)과 채팅(/chat) 화면의 정적 HTML을 반환합니다.
"""

from pathlib import Path
from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

router = APIRouter(include_in_schema=False)


@router.get("/")
async def login_page():
    return FileResponse(STATIC_DIR / "index.html")


@router.get("/chat")
async def chat_page():
    return FileResponse(STATIC_DIR / "chat.html")
