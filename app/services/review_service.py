# app/services/review_service.py
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.errors import AuthorizationError, NotFoundError, ValidationError
from app.models.review import Review
from app.repositories.profile_repo import ProfileRepository
from app.repositories.project_repo import ProjectRepository
from app.repositories.review_repo import ReviewRepository
from app.repositories.user_repo import UserRepository
from app.schemas.review_schema import ReviewCreate

logger = logging.getLogger(__name__)

# 星等 1–5 換算成 Profile 的 0–100 分
RATING_SCALE = 20


class ReviewService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.review_repo = ReviewRepository(db)
        self.project_repo = ProjectRepository(db)
        self.profile_repo = ProfileRepository(db)
        self.user_repo = UserRepository(db)

    async def get_user_reviews(self, user_id: int) -> List[Review]:
        if await self.user_repo.get_user(user_id) is None:
            raise NotFoundError("使用者不存在")
        return await self.review_repo.get_reviews_by_reviewee(user_id)

    async def create_review(
        self, project_id: int, review_data: ReviewCreate, current_user_id: int
    ) -> Review:
        """
        雇主與被指派的工作者互相評價；每人每案限一次。
        被評價者若有工作者 Profile，會在同一個交易中更新 rating / reviewCount。
        """
        project = await self.project_repo.get_project(project_id)
        if not project:
            raise NotFoundError("案件不存在")
        if project.assigned_freelancer_id is None:
            raise ValidationError("案件尚未指派工作者，無法評價")

        parties = {project.client_id, project.assigned_freelancer_id}
        if current_user_id not in parties:
            raise AuthorizationError("你沒有權限評價此案件")
        if review_data.reviewee_id not in parties or review_data.reviewee_id == current_user_id:
            raise ValidationError("被評價者必須是此案件的另一方")

        existing = await self.review_repo.get_review_by_project_and_reviewer(project_id, current_user_id)
        if existing:
            raise ValidationError("你已經評價過此案件")

        try:
            review = await self.review_repo.create_review(
                project_id=project_id,
                reviewer_id=current_user_id,
                reviewee_id=review_data.reviewee_id,
                rating=review_data.rating,
                comment=review_data.comment,
            )

            average, count = await self.review_repo.get_rating_summary(review_data.reviewee_id)
            await self.profile_repo.update_freelancer_profile(review_data.reviewee_id, {
                "rating": round(average * RATING_SCALE),
                "review_count": count,
            })
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(f"Review {review.id} on project {project_id} by user {current_user_id}")
        return review
