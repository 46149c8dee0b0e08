# app/routers/profile_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.core.security import get_current_user, get_current_user_id
from app.models.user import User
from app.services.profile_service import ProfileService
from app.schemas.profile_schema import (
    FreelancerProfileCreate, FreelancerProfileOut,
    FreelancerProfileUpdate, FreelancerWithUserOut,
)
from typing import List

import logging

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/freelancers",
    tags=["Freelancers"],
)

@router.get("", response_model=List[FreelancerWithUserOut])
async def list_freelancers(db: AsyncSession = Depends(get_db)):
    """
    所有自由工作者的 Profile (附上使用者資料)
    """
    service = ProfileService(db)
    return await service.list_freelancers()

@router.get("/{user_id}", response_model=FreelancerWithUserOut)
async def get_freelancer(
    user_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    獲取指定工作者的 Profile，不存在時回傳 404
    """
    service = ProfileService(db)
    return await service.get_freelancer_profile(user_id)

@router.post("", response_model=FreelancerProfileOut, status_code=status.HTTP_201_CREATED)
async def create_my_profile(
    profile_data: FreelancerProfileCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    建立當前登入者的工作者 Profile (每人限一份)
    """
    service = ProfileService(db)
    # Service 層會處理角色驗證
    return await service.create_my_profile(current_user, profile_data)

@router.put("/{user_id}", response_model=FreelancerProfileOut)
async def update_my_profile(
    user_id: int,
    update_data: FreelancerProfileUpdate,
    current_user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    部分更新 Profile；rating / reviewCount 由系統維護
    """
    service = ProfileService(db)
    return await service.update_my_profile(user_id, update_data, current_user_id)
