# app/routers/application_router.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.database import get_db
from app.core.security import get_current_user, get_current_user_id
from app.models.user import User
from app.services.application_service import ApplicationService
from app.schemas.application_schema import (
    ApplicationCreate,
    ApplicationOut,
    ApplicationStatusUpdate,
    ApplicationWithFreelancerOut,
)

# 建立 API Router
router = APIRouter(
    prefix="/applications",
    tags=["Applications"],
)

# 提交申請與列出申請掛在 /projects/ 下，語意更清晰
project_application_router = APIRouter(
    prefix="/projects",
    tags=["Applications"], # 歸類到同一個 Tag
)

@project_application_router.get(
    "/{project_id}/applications",
    response_model=List[ApplicationWithFreelancerOut]
)
async def list_project_applications(
    project_id: int,
    db: AsyncSession = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id)
):
    """
    (雇主) 檢視自己案件收到的所有申請，附上申請者與其 Profile
    """
    service = ApplicationService(db)
    return await service.get_project_applications(project_id, current_user_id)

@project_application_router.post(
    "/{project_id}/applications",
    response_model=ApplicationOut,
    status_code=status.HTTP_201_CREATED
)
async def submit_application(
    project_id: int,
    application_data: ApplicationCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    (工作者) 對招募中的案件提出申請，每個案件限一次
    """
    service = ApplicationService(db)
    return await service.create_application(
        project_id=project_id,
        freelancer=current_user,
        application_data=application_data,
    )

@router.put("/{application_id}", response_model=ApplicationOut)
async def update_application_status(
    application_id: int,
    status_data: ApplicationStatusUpdate,
    db: AsyncSession = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id)
):
    """
    (雇主) 接受或拒絕申請。

    接受時案件會變成 in_progress 並指派給該工作者。
    """
    service = ApplicationService(db)
    return await service.update_application_status(
        application_id=application_id,
        new_status=status_data.status,
        current_user_id=current_user_id,
    )
