# app/routers/user_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.database import get_db
from app.core.security import get_current_user_id
from app.schemas.message_schema import ConversationOut
from app.schemas.project_schema import ApplicationWithProjectOut, ProjectOut
from app.schemas.review_schema import ReviewOut
from app.schemas.user_schema import UserOut, UserUpdate
from app.services.application_service import ApplicationService
from app.services.message_service import MessageService
from app.services.project_service import ProjectService
from app.services.review_service import ReviewService
from app.services.user_service import UserService

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)

@router.get("/{user_id}", response_model=UserOut)
async def read_user(
    user_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    獲取指定使用者的公開資料 (不含密碼)
    """
    return await UserService(db).get_user(user_id)

@router.put("/{user_id}", response_model=UserOut)
async def update_user(
    user_id: int,
    update_data: UserUpdate,
    db: AsyncSession = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id)
):
    """
    更新自己的基本資料 (fullName / avatar)
    """
    return await UserService(db).update_user(user_id, update_data, current_user_id)

@router.get("/{user_id}/projects", response_model=List[ProjectOut])
async def read_user_projects(
    user_id: int,
    db: AsyncSession = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id)
):
    """(雇主) 自己刊登的所有案件"""
    return await ProjectService(db).get_client_projects(user_id, current_user_id)

@router.get("/{user_id}/applications", response_model=List[ApplicationWithProjectOut])
async def read_user_applications(
    user_id: int,
    db: AsyncSession = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id)
):
    """(工作者) 自己提出的所有申請，附上案件與雇主"""
    return await ApplicationService(db).get_freelancer_applications(user_id, current_user_id)

@router.get("/{user_id}/conversations", response_model=List[ConversationOut])
async def read_user_conversations(
    user_id: int,
    db: AsyncSession = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id)
):
    """
    對話列表：每個案件一筆，依最後一則訊息的時間由新到舊
    """
    return await MessageService(db).get_conversations(user_id, current_user_id)

@router.get("/{user_id}/reviews", response_model=List[ReviewOut])
async def read_user_reviews(
    user_id: int,
    db: AsyncSession = Depends(get_db)
):
    return await ReviewService(db).get_user_reviews(user_id)
