from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict


class ParticipantResponse(BaseModel):
    """채팅방 참여자 스키마"""
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="사용자 ID")
    name: str = Field(..., description="표시 이름")
    role: int = Field(..., description="역할 코드")


class RoomResponse(BaseModel):
    """채팅방 응답 스키마"""
    id: int = Field(..., description="채팅방 ID")
    name: str = Field(..., description="채팅방 이름")
    image_url: Optional[str] = Field(None, description="채팅방 이미지 URL")
    participants: List[ParticipantResponse] = Field(default_factory=list, description="참여자 목록")
    last_message: Optional[str] = Field(None, description="마지막 메시지 내용")
    last_message_time: Optional[datetime] = Field(None, description="마지막 메시지 시간")


class RoomListResponse(BaseModel):
    """채팅방 목록 응답 스키마"""
    rooms: List[RoomResponse] = Field(..., description="채팅방 목록")
