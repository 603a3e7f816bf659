from typing import Any, List, Optional

from .errors import (
    ValidationException,
    ValidationError,
    file_too_large_error,
    unsupported_file_type_error,
)


class Validator:
    """입력 검증을 위한 유틸리티 클래스"""

    @staticmethod
    def validate_required(value: Any, field_name: str) -> Any:
        """필수 필드 검증"""
        if value is None or (isinstance(value, str) and value.strip() == ""):
            raise ValidationException(
                f"{field_name} is required",
                validation_errors=[
                    ValidationError(field=field_name, message="This field is required", value=value)
                ]
            )
        return value

    @staticmethod
    def is_allowed_content_type(content_type: Optional[str], allowed_types: List[str]) -> bool:
        """
        MIME 타입 허용 여부

        `image/*` 처럼 와일드카드 서브타입을 지원합니다.
        """
        if not content_type:
            return False

        main_type = content_type.split(";")[0].strip().lower()
        for allowed in allowed_types:
            allowed = allowed.lower()
            if allowed.endswith("/*"):
                if main_type.startswith(allowed[:-1]):
                    return True
            elif main_type == allowed:
                return True
        return False

    @staticmethod
    def validate_file_size(file_size: int, max_size: int) -> int:
        """파일 크기 검증"""
        if file_size > max_size:
            raise file_too_large_error(max_size)
        return file_size

    @staticmethod
    def validate_content_type(content_type: Optional[str], allowed_types: List[str]) -> str:
        """파일 MIME 타입 검증"""
        if not Validator.is_allowed_content_type(content_type, allowed_types):
            raise unsupported_file_type_error(content_type, allowed_types)
        return content_type


# 편의 함수들
def validate_login(identifier: Optional[str]) -> str:
    """로그인 입력 검증"""
    return Validator.validate_required(identifier, "identifier")


def validate_file_upload(
    content_type: Optional[str],
    file_size: int,
    max_size: int,
    allowed_types: List[str]
) -> None:
    """파일 업로드 검증 (크기 먼저, 타입 다음)"""
    Validator.validate_file_size(file_size, max_size)
    Validator.validate_content_type(content_type, allowed_types)
