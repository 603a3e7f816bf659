"""
Auth service layer - 사용자 식별 (비밀번호/토큰 검증 없음)
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_

from app.models.users import User


async def find_user_by_identifier(db: AsyncSession, identifier: str) -> Optional[User]:
    """ID(이메일) 또는 이름이 정확히 일치하는 첫 번째 사용자 조회"""
    result = await db.execute(
        select(User)
        .where(or_(User.id == identifier, User.name == identifier))
        .limit(1)
    )
    return result.scalars().first()
