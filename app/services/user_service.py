# app/services/user_service.py
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError, ValidationError
from app.core.security import ensure_self
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.user_schema import UserUpdate

class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.user_repo = UserRepository(db)

    async def get_user(self, user_id: int) -> User:
        user = await self.user_repo.get_user(user_id)
        if user is None:
            raise NotFoundError("使用者不存在")
        return user

    async def update_user(self, user_id: int, data: UserUpdate, current_user_id: int) -> User:
        """只能修改自己的基本資料"""
        ensure_self(user_id, current_user_id)
        updates = data.model_dump(exclude_unset=True)
        if "full_name" in updates and updates["full_name"] is None:
            raise ValidationError("fullName 不可為空")
        user = await self.user_repo.update_user(user_id, updates)
        if user is None:
            raise NotFoundError("使用者不存在")
        await self.db.commit()
        return user
