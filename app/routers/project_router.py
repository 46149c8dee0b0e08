# app/routers/project_router.py
import logging
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

# 匯入核心依賴
from app.core.database import get_db
from app.core.security import get_current_user
from app.models.user import User

# 匯入 Service 和 Schemas
from app.services.project_service import ProjectService
from app.schemas.project_schema import ProjectCreate, ProjectDetailOut, ProjectOut

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/projects",
    tags=["Projects"],
)


def parse_skills(raw_values: List[str]) -> Optional[List[str]]:
    """
    skills 可以用逗號分隔 (?skills=a,b)，也可以重複傳 (?skills=a&skills=b)
    """
    skills = [s.strip() for value in raw_values for s in value.split(",") if s.strip()]
    return skills or None


@router.post(
    "",
    response_model=ProjectOut,
    status_code=status.HTTP_201_CREATED
)
async def create_new_project(
    project_data: ProjectCreate, # Request Body
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    刊登新案件。

    - (權限) 僅限「雇主」角色。
    """
    service = ProjectService(db)

    # Service 層會自動處理權限 (403)
    return await service.create_project(
        project_data=project_data,
        user=current_user
    )

@router.get("", response_model=List[ProjectOut])
async def search_all_projects(
    request: Request,
    db: AsyncSession = Depends(get_db),
    query: Optional[str] = None,
    category: Optional[str] = None,
):
    """
    搜尋招募中的案件。

    支援關鍵字 (標題/描述，不分大小寫)、分類 (精確)、技能 (任一符合)。
    """
    # .getlist() 會自動處理多個同名參數並返回列表
    skills = parse_skills(request.query_params.getlist("skills"))

    logger.info(f"Project search - query: {query}, category: {category}, skills: {skills}")

    service = ProjectService(db)
    return await service.search_projects(
        query=query or None,
        category=category or None,
        skills=skills,
    )

@router.get("/{project_id}", response_model=ProjectDetailOut)
async def get_project_by_id(
    project_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    獲取單一案件的詳細資料 (含雇主與申請列表)。
    """
    service = ProjectService(db)

    # Service 層會自動處理 404 Not Found
    return await service.get_project_details(project_id)
