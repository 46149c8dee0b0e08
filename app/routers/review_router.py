# app/routers/review_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.security import get_current_user_id
from app.schemas.review_schema import ReviewCreate, ReviewOut
from app.services.review_service import ReviewService

router = APIRouter(prefix="/projects", tags=["Reviews"])

@router.post("/{project_id}/reviews", response_model=ReviewOut, status_code=status.HTTP_201_CREATED)
async def create_review(
    project_id: int,
    review_data: ReviewCreate,
    current_user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    雇主與被指派的工作者互相評價 (1–5 星)
    """
    service = ReviewService(db)
    return await service.create_review(project_id, review_data, current_user_id)
