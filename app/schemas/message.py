from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


class MessageSend(BaseModel):
    """
    메시지 전송 요청 스키마

    클라이언트는 camelCase 키(roomId, mediaUrl, ...)로 전송합니다.
    길이/미디어 필드 일관성 검증은 하지 않습니다.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    room_id: int = Field(..., description="채팅방 ID")
    message: Optional[str] = Field(None, description="메시지 내용")
    type: Optional[str] = Field("text", description="메시지 타입: text, media")
    media_url: Optional[str] = Field(None, description="미디어 URL")
    media_type: Optional[str] = Field(None, description="미디어 MIME 타입")
    file_name: Optional[str] = Field(None, description="원본 파일명")
    file_size: Optional[int] = Field(None, description="파일 크기 (bytes)")


class MessageResponse(BaseModel):
    """메시지 응답 스키마 (저장된 행 그대로)"""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="메시지 ID")
    type: str = Field(..., description="메시지 타입")
    message: str = Field(..., description="메시지 내용")
    sender: str = Field(..., description="발신자 ID")
    created_at: datetime = Field(..., description="생성일시")
    media_url: Optional[str] = Field(None, description="미디어 URL")
    media_type: Optional[str] = Field(None, description="미디어 MIME 타입")
    file_name: Optional[str] = Field(None, description="원본 파일명")
    file_size: Optional[int] = Field(None, description="파일 크기")


class MessageWithSenderResponse(MessageResponse):
    """발신자 이름이 포함된 메시지 스키마"""
    sender_name: str = Field(..., description="발신자 표시 이름")


class MessageListResponse(BaseModel):
    """메시지 목록 응답 스키마"""
    messages: List[MessageWithSenderResponse] = Field(..., description="메시지 목록 (시간순)")


class MessageSendResponse(BaseModel):
    """메시지 전송 응답 스키마"""
    success: bool = Field(default=True, description="전송 성공 여부")
    message: MessageResponse = Field(..., description="저장된 메시지")
