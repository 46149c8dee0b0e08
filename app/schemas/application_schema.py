# app/schemas/application_schema.py
from pydantic import Field
from datetime import datetime
from typing import List, Literal, Optional

from app.models.application import ApplicationStatusEnum
from app.schemas.base_schema import CamelModel
from app.schemas.profile_schema import FreelancerProfileOut
from app.schemas.user_schema import UserOut

class ApplicationPortfolioItem(CamelModel):
    title: str
    url: str

# --- 建立 (Create) ---
# project_id 和 freelancer_id 將從 URL 和 Token 中取得
class ApplicationCreate(CamelModel):
    cover_letter: str = Field(..., min_length=1)
    proposed_rate: str = Field(..., min_length=1, max_length=255)
    estimated_duration: str = Field(..., min_length=1, max_length=255)
    portfolio: List[ApplicationPortfolioItem] = []

# 雇主接受 / 拒絕申請
class ApplicationStatusUpdate(CamelModel):
    status: Literal["accepted", "rejected"]

# --- 讀取 (Read / Out) ---
class ApplicationOut(CamelModel):
    id: int
    project_id: int
    freelancer_id: int
    cover_letter: str
    proposed_rate: str
    estimated_duration: str
    portfolio: List[ApplicationPortfolioItem] = []
    status: ApplicationStatusEnum
    created_at: datetime

# --- 包含申請者資訊 (供雇主檢視列表用) ---
class ApplicationWithFreelancerOut(ApplicationOut):
    freelancer: Optional[UserOut] = None
    profile: Optional[FreelancerProfileOut] = None
