from typing import Optional, Dict, Any, List
from fastapi import HTTPException, status
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """표준 에러 응답 모델"""
    error: str
    code: str
    details: Optional[Dict[str, Any]] = None


class ValidationError(BaseModel):
    """검증 에러 세부사항"""
    field: str
    message: str
    value: Optional[Any] = None


class ValidationErrorResponse(BaseModel):
    """검증 에러 응답 모델"""
    error: str
    code: str = "validation_error"
    validation_errors: List[ValidationError]


# =============================================================================
# 커스텀 예외 클래스들
# =============================================================================

class BaseCustomException(HTTPException):
    """기본 커스텀 예외 클래스"""
    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(status_code=status_code, detail=self.to_dict())

    def to_dict(self) -> Dict[str, Any]:
        """예외를 응답 본문 딕셔너리로 변환"""
        body: Dict[str, Any] = {"error": self.message, "code": self.code}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(BaseCustomException):
    """입력 검증 실패 예외"""
    def __init__(
        self,
        message: str = "Validation failed",
        validation_errors: Optional[List[ValidationError]] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.validation_errors = validation_errors or []
        super().__init__(
            status_code=422,
            code="validation_error",
            message=message,
            details=details
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.message,
            "code": self.code,
            "validation_errors": [error.model_dump() for error in self.validation_errors],
        }


class AuthenticationException(BaseCustomException):
    """인증 실패 예외 (x-user-id 헤더 없음)"""
    def __init__(
        self,
        message: str = "Unauthorized",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            code="unauthorized",
            message=message,
            details=details
        )


class AuthorizationException(BaseCustomException):
    """권한 부족 예외 (채팅방 참여자 아님)"""
    def __init__(
        self,
        message: str = "Forbidden",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            code="forbidden",
            message=message,
            details=details
        )


class ResourceNotFoundException(BaseCustomException):
    """리소스를 찾을 수 없음 예외"""
    def __init__(
        self,
        resource: str = "Resource",
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if message is None:
            message = f"{resource} not found"

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            code="not_found",
            message=message,
            details=details
        )


class UploadRejectedException(BaseCustomException):
    """업로드 파일 거부 예외 (크기/타입)"""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status_code,
            code="upload_rejected",
            message=message,
            details=details
        )


# =============================================================================
# 에러 헬퍼 함수들
# =============================================================================

def create_error_response(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None
) -> ErrorResponse:
    """표준 에러 응답 생성"""
    return ErrorResponse(error=message, code=code, details=details)


def create_validation_error_response(
    message: str,
    validation_errors: List[ValidationError]
) -> ValidationErrorResponse:
    """검증 에러 응답 생성"""
    return ValidationErrorResponse(
        error=message,
        validation_errors=validation_errors
    )


# =============================================================================
# 자주 사용되는 에러 팩토리 함수들
# =============================================================================

def user_not_found_error():
    """사용자를 찾을 수 없음 에러"""
    return ResourceNotFoundException("User")


def missing_identity_error():
    """x-user-id 헤더 누락 에러"""
    return AuthenticationException("Unauthorized")


def not_a_participant_error():
    """채팅방 참여자가 아님 에러"""
    return AuthorizationException("Not a participant")


def file_too_large_error(max_size: int):
    """파일 크기 초과 에러"""
    return UploadRejectedException(
        f"File size exceeds maximum limit of {max_size // (1024 * 1024)}MB",
        status_code=413,
        details={"max_size": max_size}
    )


def unsupported_file_type_error(content_type: Optional[str], allowed: List[str]):
    """허용되지 않은 파일 타입 에러"""
    return UploadRejectedException(
        f"Unsupported file type: {content_type or 'unknown'}",
        status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
        details={"allowed_types": allowed}
    )
