# app/repositories/profile_repo.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from typing import Any, Dict, List, Optional
from app.models.freelancer_profile import FreelancerProfile
from app.repositories.id_sequence_repo import IdSequenceRepository


class ProfileRepository:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.id_sequence = IdSequenceRepository(db)

    # --- Freelancer ---
    async def get_freelancer_profile(self, user_id: int) -> FreelancerProfile | None:
        """依 user_id 取得 Profile (一併載入 user)"""
        stmt = (
            select(FreelancerProfile)
            .where(FreelancerProfile.user_id == user_id)
            .options(selectinload(FreelancerProfile.user))
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def create_freelancer_profile(
        self,
        user_id: int,
        title: str,
        bio: Optional[str] = None,
        skills: Optional[List[str]] = None,
        hourly_rate: Optional[int] = None,
        experience: Optional[str] = None,
        portfolio: Optional[List[dict]] = None,
    ) -> FreelancerProfile:
        new_profile = FreelancerProfile(
            id=await self.id_sequence.next_id("freelancer_profile"),
            user_id=user_id,
            title=title,
            bio=bio,
            skills=list(skills or []),
            hourly_rate=hourly_rate,
            experience=experience,
            portfolio=list(portfolio or []),
            rating=0,
            review_count=0,
            completed_projects=0,
        )
        self.db.add(new_profile)
        await self.db.flush()
        return new_profile

    async def update_freelancer_profile(
        self, user_id: int, updates: Dict[str, Any]
    ) -> FreelancerProfile | None:
        """更新工作者 Profile；不存在時回傳 None"""
        profile = await self.get_freelancer_profile(user_id)
        if profile is None:
            return None

        for key, value in updates.items():
            setattr(profile, key, value)

        await self.db.flush()
        return profile

    async def get_all_freelancers(self) -> List[FreelancerProfile]:
        """
        所有工作者 Profile (依建立順序)，並預先載入 user 以避免 N+1 查詢
        """
        stmt = (
            select(FreelancerProfile)
            .options(selectinload(FreelancerProfile.user))
            .order_by(FreelancerProfile.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
