from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


class UploadResponse(BaseModel):
    """파일 업로드 응답 스키마 (camelCase로 직렬화)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    url: str = Field(..., description="저장된 파일 URL")
    file_type: str = Field(..., description="파일 MIME 타입")
    file_name: str = Field(..., description="원본 파일명")
    file_size: int = Field(..., description="파일 크기 (bytes)")
