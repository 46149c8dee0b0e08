# app/repositories/user_repo.py
# 負責與使用者相關的資料庫操作
from typing import Any, Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from app.models.user import User
from app.repositories.id_sequence_repo import IdSequenceRepository
from app.utils.timeutil import utcnow

class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.id_sequence = IdSequenceRepository(db)

    async def get_user(self, user_id: int) -> User | None:
        """
        透過 id 查詢使用者
        """
        return await self.db.get(User, user_id)

    async def get_user_by_email(self, email: str) -> User | None:
        """
        透過 email 查詢使用者
        """
        stmt = select(User).where(User.email == email)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_user_by_username(self, username: str) -> User | None:
        stmt = select(User).where(User.username == username)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def create_user(
        self,
        username: str,
        email: str,
        password_hash: str,
        full_name: str,
        user_type: str,
        avatar: Optional[str] = None,
    ) -> User:
        """
        新增使用者 (配發 id 與建立時間)
        """
        user = User(
            id=await self.id_sequence.next_id("user"),
            username=username,
            email=email,
            password_hash=password_hash,
            full_name=full_name,
            user_type=user_type,
            avatar=avatar,
            created_at=utcnow(),
        )
        self.db.add(user)
        await self.db.flush()
        return user

    async def update_user(self, user_id: int, updates: Dict[str, Any]) -> User | None:
        """
        部分欄位更新；使用者不存在時回傳 None
        """
        user = await self.get_user(user_id)
        if user is None:
            return None
        for key, value in updates.items():
            setattr(user, key, value)
        await self.db.flush()
        return user
