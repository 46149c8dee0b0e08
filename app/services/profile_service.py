# app/services/profile_service.py
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from app.core.errors import AuthorizationError, NotFoundError, ValidationError
from app.core.security import ensure_self
from app.models.freelancer_profile import FreelancerProfile
from app.models.user import User, UserTypeEnum
from app.repositories.profile_repo import ProfileRepository
from app.schemas.profile_schema import FreelancerProfileCreate, FreelancerProfileUpdate

logger = logging.getLogger(__name__)

class ProfileService:
    def __init__(self, db: AsyncSession):
        self.repo = ProfileRepository(db)
        self.db = db

    async def list_freelancers(self) -> List[FreelancerProfile]:
        """所有工作者 (Profile + User)"""
        return await self.repo.get_all_freelancers()

    async def get_freelancer_profile(self, user_id: int) -> FreelancerProfile:
        """獲取指定使用者的工作者 Profile (公開用)"""
        profile = await self.repo.get_freelancer_profile(user_id)
        if not profile:
            raise NotFoundError("找不到此工作者的 Profile")
        return profile

    async def create_my_profile(self, user: User, profile_data: FreelancerProfileCreate) -> FreelancerProfile:
        """建立自己的工作者 Profile (每人限一份)"""
        if user.user_type != UserTypeEnum.freelancer:
            raise AuthorizationError("只有自由工作者可以建立 Profile")

        # 檢查是否已存在
        existing_profile = await self.repo.get_freelancer_profile(user.id)
        if existing_profile:
            raise ValidationError("Profile 已存在")

        profile = await self.repo.create_freelancer_profile(
            user_id=user.id,
            **profile_data.model_dump(),
        )
        await self.db.commit()
        logger.info(f"Freelancer profile created for user {user.id}")
        return profile

    async def update_my_profile(
        self, user_id: int, update_data: FreelancerProfileUpdate, current_user_id: int
    ) -> FreelancerProfile:
        """
        業務邏輯：更新 Profile (只更新有傳入的欄位)
        """
        ensure_self(user_id, current_user_id)

        # 只包含 "有被傳入" 欄位的 dict
        updates = update_data.model_dump(exclude_unset=True)
        if "title" in updates and updates["title"] is None:
            raise ValidationError("title 不可為空")
        for list_field in ("skills", "portfolio"):
            if list_field in updates and updates[list_field] is None:
                updates[list_field] = []

        profile = await self.repo.update_freelancer_profile(user_id, updates)
        if profile is None:
            raise NotFoundError("Profile 尚未建立")
        await self.db.commit()
        return profile
