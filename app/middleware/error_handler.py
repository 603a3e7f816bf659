import traceback
from typing import Callable
from fastapi import Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.errors import (
    BaseCustomException,
    ValidationError,
    create_error_response,
    create_validation_error_response
)
from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    통합 에러 처리 미들웨어

    처리되지 않은 예외를 캐치하고 일반적인 500 응답을 반환합니다.
    요청 단위로 종료되며 재시도하지 않습니다.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except BaseCustomException as e:
            return JSONResponse(
                status_code=e.status_code,
                content=e.to_dict()
            )

        except Exception as e:
            logger.error(
                f"Unhandled exception: {type(e).__name__}: {e}",
                extra={
                    "event_type": "unhandled_exception",
                    "method": request.method,
                    "path": request.url.path
                },
                exc_info=True
            )

            error_detail = None
            if settings.debug:
                error_detail = {
                    "exception": str(e),
                    "type": type(e).__name__,
                    "traceback": traceback.format_exc()
                }

            error_response = create_error_response(
                "internal_server_error",
                "Internal server error",
                error_detail
            )

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=error_response.model_dump(exclude_none=True)
            )


def create_http_exception_handler():
    """FastAPI HTTPException 핸들러 생성"""
    async def http_exception_handler(request: Request, exc):
        """HTTPException을 표준 형식으로 변환"""

        if isinstance(exc, BaseCustomException):
            return JSONResponse(
                status_code=exc.status_code,
                content=exc.to_dict(),
                headers=getattr(exc, "headers", None)
            )

        # 일반 HTTPException (404 라우트 없음, 405 등)
        error_response = create_error_response(
            "http_error",
            exc.detail if isinstance(exc.detail, str) else "HTTP error occurred",
            {"detail": exc.detail} if not isinstance(exc.detail, str) else None
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=error_response.model_dump(exclude_none=True),
            headers=getattr(exc, "headers", None)
        )

    return http_exception_handler


def create_validation_exception_handler():
    """요청 검증 에러(422) 핸들러 생성"""
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        validation_errors = [
            ValidationError(
                field=".".join(str(loc) for loc in error["loc"]),
                message=error["msg"],
                value=error.get("input")
            )
            for error in exc.errors()
        ]

        error_response = create_validation_error_response(
            "Request validation failed",
            validation_errors
        )

        return JSONResponse(
            status_code=422,
            content=jsonable_encoder(error_response.model_dump())
        )

    return validation_exception_handler
