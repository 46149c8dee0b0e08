# app/schemas/profile_schema.py
from pydantic import Field, model_serializer
from typing import List, Optional
from app.schemas.base_schema import CamelModel
from app.schemas.user_schema import UserOut

# --- 作品集項目 ---
class PortfolioItem(CamelModel):
    title: str
    description: str
    url: str
    image: Optional[str] = None

    @model_serializer(mode="wrap")
    def _omit_missing_image(self, handler):
        # 沒有圖片的項目存回與讀出都不帶 image，與送出時完全相同
        data = handler(self)
        if data.get("image") is None:
            data.pop("image", None)
        return data

# --- 自由工作者 (Freelancer) ---
class FreelancerProfileBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    bio: Optional[str] = None
    skills: List[str] = [] # 保留使用者輸入的順序
    hourly_rate: Optional[int] = Field(None, ge=0)
    experience: Optional[str] = None
    portfolio: List[PortfolioItem] = []

class FreelancerProfileCreate(FreelancerProfileBase):
    pass

class FreelancerProfileUpdate(CamelModel):
    # 更新時全為選填；rating / reviewCount 由系統維護，不開放修改
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    bio: Optional[str] = None
    skills: Optional[List[str]] = None
    hourly_rate: Optional[int] = Field(None, ge=0)
    experience: Optional[str] = None
    portfolio: Optional[List[PortfolioItem]] = None

class FreelancerProfileOut(FreelancerProfileBase):
    id: int
    user_id: int
    rating: int
    review_count: int
    completed_projects: int

# 公開列表使用：Profile + 使用者資料
class FreelancerWithUserOut(FreelancerProfileOut):
    user: Optional[UserOut] = None
