"""
Room Chat - FastAPI Application

로그인, 채팅방 목록, 메시지 조회/전송, 미디어 업로드와 브라우저 클라이언트를 제공합니다.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.logging import setup_logging, get_logger
from app.database import init_databases, close_databases
from app.middleware.error_handler import (
    ErrorHandlerMiddleware,
    create_http_exception_handler,
    create_validation_exception_handler
)
from app.middleware.logging_middleware import LoggingMiddleware
from app.services.file_service import ensure_upload_directory
from app.api import auth, room, message, upload, health, pages
from app.api.pages import STATIC_DIR

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management"""
    # Startup
    setup_logging()
    logger.info(f"{settings.app_name} starting up...")
    await init_databases()
    ensure_upload_directory()

    yield

    # Shutdown
    logger.info(f"{settings.app_name} shutting down...")
    await close_databases()


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    lifespan=lifespan
)

# Exception handlers
app.add_exception_handler(StarletteHTTPException, create_http_exception_handler())
app.add_exception_handler(RequestValidationError, create_validation_exception_handler())

# Middleware (마지막에 추가된 것이 가장 바깥쪽)
app.add_middleware(ErrorHandlerMiddleware)
app.add_middleware(LoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router)
app.include_router(room.router)
app.include_router(message.router)
app.include_router(upload.router)
app.include_router(upload.files_router)
app.include_router(health.router)
app.include_router(pages.router)

# Static files
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# Prometheus metrics
Instrumentator().instrument(app).expose(app)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
