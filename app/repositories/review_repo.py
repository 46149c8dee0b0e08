# app/repositories/review_repo.py
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import List, Optional, Tuple

from app.models.review import Review
from app.repositories.id_sequence_repo import IdSequenceRepository
from app.utils.timeutil import utcnow

class ReviewRepository:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.id_sequence = IdSequenceRepository(db)

    async def get_reviews_by_reviewee(self, reviewee_id: int) -> List[Review]:
        stmt = select(Review).where(Review.reviewee_id == reviewee_id).order_by(Review.id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_review_by_project_and_reviewer(
        self, project_id: int, reviewer_id: int
    ) -> Optional[Review]:
        stmt = select(Review).where(
            Review.project_id == project_id,
            Review.reviewer_id == reviewer_id,
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_rating_summary(self, reviewee_id: int) -> Tuple[float, int]:
        """
        回傳 (平均星等, 評價數)；沒有評價時為 (0.0, 0)
        """
        stmt = select(func.avg(Review.rating), func.count(Review.id)).where(
            Review.reviewee_id == reviewee_id
        )
        average, count = (await self.db.execute(stmt)).one()
        return float(average or 0.0), int(count or 0)

    async def create_review(
        self,
        project_id: int,
        reviewer_id: int,
        reviewee_id: int,
        rating: int,
        comment: Optional[str] = None,
    ) -> Review:
        review = Review(
            id=await self.id_sequence.next_id("review"),
            project_id=project_id,
            reviewer_id=reviewer_id,
            reviewee_id=reviewee_id,
            rating=rating,
            comment=comment,
            created_at=utcnow(),
        )
        self.db.add(review)
        await self.db.flush()
        return review
