from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse

from app.core.config import settings
from app.core.errors import ResourceNotFoundException
from app.schemas.upload import UploadResponse
from app.api.dependencies import get_current_user_id
from app.core.logging import get_logger, log_file_operation
from app.services import file_service

logger = get_logger(__name__)
router = APIRouter(prefix="/api/upload", tags=["Upload"])
files_router = APIRouter(prefix=settings.upload_url_prefix.rstrip("/"), include_in_schema=False)


@router.post("", response_model=UploadResponse)
async def upload_file(
    file: UploadFile = File(...),
    user_id: str = Depends(get_current_user_id)
) -> UploadResponse:
    """
    채팅 미디어 파일 업로드

    최대 10MB, image/*, video/*, application/pdf 만 허용됩니다.
    반환된 URL로 media 타입 메시지를 전송합니다.
    """
    saved = await file_service.save_uploaded_file(file)

    log_file_operation(
        logger,
        "upload",
        saved["path"],
        user_id=user_id,
        file_size=saved["file_size"],
        content_type=saved["file_type"]
    )

    return UploadResponse(
        url=saved["url"],
        file_type=saved["file_type"],
        file_name=saved["file_name"],
        file_size=saved["file_size"]
    )


@files_router.get("/{filename}")
async def get_uploaded_file(filename: str):
    """업로드된 파일 제공"""
    file_path = file_service.resolve_uploaded_file(filename)
    if file_path is None:
        raise ResourceNotFoundException("File")
    return FileResponse(file_path)
