from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.mysql import get_async_session
from app.schemas.user import UserLogin, UserResponse, LoginResponse
from app.core.errors import user_not_found_error
from app.core.logging import get_logger, log_authentication_event
from app.core.validators import validate_login
from app.services import auth_service

logger = get_logger(__name__)
router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post("/login", response_model=LoginResponse)
async def login(
        login_data: UserLogin,
        db: AsyncSession = Depends(get_async_session)
) -> LoginResponse:
    """
    사용자 로그인 (식별자만 확인)

    - **identifier**: 사용자 ID(이메일) 또는 이름. 정확히 일치해야 합니다.
    """

    identifier = validate_login(login_data.identifier)

    user = await auth_service.find_user_by_identifier(db, identifier)
    if not user:
        log_authentication_event(logger, "login", identifier=identifier, success=False)
        raise user_not_found_error()

    log_authentication_event(logger, "login", user_id=user.id, identifier=identifier)

    return LoginResponse(success=True, user=UserResponse.model_validate(user))
