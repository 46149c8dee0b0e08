# app/services/project_service.py
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

# 匯入 Models
from app.models.user import User, UserTypeEnum
from app.models.project import Project

# 匯入 Schemas
from app.schemas.application_schema import ApplicationOut
from app.schemas.project_schema import ProjectCreate, ProjectDetailOut, ProjectOut
from app.schemas.user_schema import UserOut

# 匯入 Repositories
from app.repositories.project_repo import ProjectRepository
from app.core.errors import AuthorizationError, NotFoundError
from app.core.security import ensure_self

logger = logging.getLogger(__name__)

class ProjectService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.project_repo = ProjectRepository(db)

    async def create_project(self, project_data: ProjectCreate, user: User) -> Project:
        """
        業務邏輯：建立案件
        """
        # 1. 權限驗證：必須是雇主
        if user.user_type != UserTypeEnum.client:
            raise AuthorizationError("只有雇主可以刊登案件")

        # 2. 執行 Repository 建立並提交
        new_project = await self.project_repo.create_project(
            client_id=user.id,
            **project_data.model_dump(),
        )
        await self.db.commit()

        logger.info(f"Project {new_project.id} created by client {user.id}")
        return new_project

    async def search_projects(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        skills: Optional[List[str]] = None,
    ) -> List[Project]:
        """
        業務邏輯：搜尋案件
        (業務邏輯主要在 Repository 的查詢中)
        """
        return await self.project_repo.search_projects(
            query=query,
            category=category,
            skills=skills,
        )

    async def get_project_details(self, project_id: int) -> ProjectDetailOut:
        """
        業務邏輯：獲取單一案件詳情 (案件 + 雇主 + 申請列表)
        """
        project = await self.project_repo.get_project_with_details(project_id)

        if not project:
            raise NotFoundError("案件不存在")

        return ProjectDetailOut(
            **ProjectOut.model_validate(project).model_dump(),
            client=UserOut.model_validate(project.client) if project.client else None,
            applications=[ApplicationOut.model_validate(a) for a in project.applications],
        )

    async def get_client_projects(self, user_id: int, current_user_id: int) -> List[Project]:
        """
        業務邏輯：獲取雇主自己刊登的所有案件
        """
        ensure_self(user_id, current_user_id)
        return await self.project_repo.get_projects_by_client(user_id)
