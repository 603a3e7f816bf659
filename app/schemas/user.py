from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class UserLogin(BaseModel):
    """로그인 요청 스키마 (비밀번호 없음)"""
    identifier: Optional[str] = Field(None, description="사용자 ID(이메일) 또는 이름")


class UserResponse(BaseModel):
    """사용자 응답 스키마"""
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="사용자 ID")
    name: str = Field(..., description="표시 이름")
    role: int = Field(..., description="역할 코드 (0=Admin, 1=Agent, 2=Customer)")
    role_name: str = Field(..., description="역할 이름")


class LoginResponse(BaseModel):
    """로그인 응답 스키마"""
    success: bool = Field(default=True, description="로그인 성공 여부")
    user: UserResponse = Field(..., description="로그인한 사용자")
