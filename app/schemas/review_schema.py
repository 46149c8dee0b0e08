# app/schemas/review_schema.py
from pydantic import Field
from datetime import datetime
from typing import Optional

from app.schemas.base_schema import CamelModel

class ReviewCreate(CamelModel):
    reviewee_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None

class ReviewOut(CamelModel):
    id: int
    project_id: int
    reviewer_id: int
    reviewee_id: int
    rating: int
    comment: Optional[str] = None
    created_at: datetime
