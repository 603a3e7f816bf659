"""
File upload service layer for handling media attachments.

Handles upload validation and local storage of chat media files.
"""

import uuid
from typing import Dict, Any, Optional
from pathlib import Path

import aiofiles
from fastapi import UploadFile

from app.core.config import settings
from app.core.errors import UploadRejectedException
from app.core.validators import Validator, validate_file_upload


# =============================================================================
# File Utilities
# =============================================================================

def get_upload_dir() -> Path:
    """업로드 디렉토리 경로"""
    return Path(settings.upload_dir)


def ensure_upload_directory() -> Path:
    """업로드 디렉토리가 존재하는지 확인하고 생성"""
    upload_dir = get_upload_dir()
    upload_dir.mkdir(parents=True, exist_ok=True)
    return upload_dir


def get_file_extension(filename: str) -> str:
    """파일 확장자 추출"""
    return Path(filename).suffix.lower()


def generate_unique_filename(original_filename: str) -> str:
    """고유한 파일명 생성"""
    extension = get_file_extension(original_filename)
    return f"{uuid.uuid4()}{extension}"


def build_file_url(stored_filename: str) -> str:
    """저장된 파일의 공개 URL"""
    return f"{settings.upload_url_prefix.rstrip('/')}/{stored_filename}"


# =============================================================================
# File Upload Operations
# =============================================================================

def validate_uploaded_file(file: UploadFile) -> None:
    """업로드된 파일 검증 (본문을 읽기 전, 선언된 크기/타입 기준)"""
    if not file.filename:
        raise UploadRejectedException("No file provided")

    validate_file_upload(
        file.content_type,
        file.size or 0,
        settings.max_upload_size,
        settings.allowed_upload_types
    )


async def save_uploaded_file(file: UploadFile) -> Dict[str, Any]:
    """미디어 파일 저장 후 URL/타입/이름/크기 반환"""

    validate_uploaded_file(file)

    upload_dir = ensure_upload_directory()
    unique_filename = generate_unique_filename(file.filename)
    file_path = upload_dir / unique_filename

    content = await file.read()

    # 실제 파일 크기 검증
    Validator.validate_file_size(len(content), settings.max_upload_size)

    try:
        async with aiofiles.open(file_path, 'wb') as f:
            await f.write(content)
    except OSError:
        # 저장 실패 시 파일 삭제
        if file_path.exists():
            file_path.unlink()
        raise

    return {
        "url": build_file_url(unique_filename),
        "file_type": file.content_type,
        "file_name": file.filename,
        "file_size": len(content),
        "path": str(file_path),
    }


def resolve_uploaded_file(stored_filename: str) -> Optional[Path]:
    """저장된 파일 경로 조회 (업로드 디렉토리 밖의 경로는 허용하지 않음)"""
    if not stored_filename or Path(stored_filename).name != stored_filename:
        return None

    file_path = get_upload_dir() / stored_filename
    if not file_path.is_file():
        return None
    return file_path
