# app/repositories/project_repo.py

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

# 匯入 Models
from app.models.project import Project, ProjectStatusEnum
from app.repositories.id_sequence_repo import IdSequenceRepository
from app.utils.timeutil import utcnow

logger = logging.getLogger(__name__)


class ProjectRepository:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.id_sequence = IdSequenceRepository(db)

    # 建立新案件
    async def create_project(
        self,
        client_id: int,
        title: str,
        description: str,
        budget: str,
        duration: str,
        category: str,
        skills_required: Optional[List[str]] = None,
    ) -> Project:
        """
        建立新案件：狀態一律從 open 開始，尚未指派工作者
        """
        db_project = Project(
            id=await self.id_sequence.next_id("project"),
            client_id=client_id,
            title=title,
            description=description,
            budget=budget,
            duration=duration,
            skills_required=list(skills_required or []),
            category=category,
            status=ProjectStatusEnum.open,
            created_at=utcnow(),
            assigned_freelancer_id=None,
        )
        self.db.add(db_project)
        await self.db.flush()
        return db_project

    # 獲取單一案件
    async def get_project(self, project_id: int) -> Project | None:
        return await self.db.get(Project, project_id)

    async def get_project_with_details(self, project_id: int) -> Project | None:
        """
        透過 ID 獲取單一案件，並 Eager Load 雇主與所有申請
        """
        stmt = select(Project).where(Project.id == project_id).options(
            selectinload(Project.client),
            selectinload(Project.applications),
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_projects_by_ids(self, project_ids: List[int]) -> Dict[int, Project]:
        if not project_ids:
            return {}
        stmt = select(Project).where(Project.id.in_(project_ids))
        result = await self.db.execute(stmt)
        return {project.id: project for project in result.scalars().all()}

    # 查看特定雇主的所有案件
    async def get_projects_by_client(self, client_id: int) -> List[Project]:
        stmt = select(Project).where(Project.client_id == client_id).order_by(Project.id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_all_projects(self) -> List[Project]:
        stmt = select(Project).order_by(Project.id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    # 條件搜尋案件
    async def search_projects(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        skills: Optional[List[str]] = None,
    ) -> List[Project]:
        """
        (核心功能) 依條件複合式搜尋「招募中」的案件
        1. 關鍵字 (query): 標題或描述包含該字串 (不分大小寫)
        2. 分類 (category): 精確比對
        3. 技能 (skills): 任一技能符合 (OR 邏輯)
        回傳順序即建立順序，不做排序評分。
        """
        stmt = select(Project).where(Project.status == ProjectStatusEnum.open)

        # 1. 處理分類
        if category:
            logger.info(f"Applying category filter: {category}")
            stmt = stmt.where(Project.category == category)

        result = await self.db.execute(stmt.order_by(Project.id))
        projects = list(result.scalars().all())

        # 2. 處理關鍵字 (SQLite 的 lower() 只處理 ASCII，改在記憶體中用 casefold 比對)
        if query:
            logger.info(f"Applying query filter: {query}")
            needle = query.casefold()
            projects = [
                p for p in projects
                if needle in p.title.casefold() or needle in p.description.casefold()
            ]

        # 3. 處理技能 (skills_required 存成 JSON 列表，於記憶體中比對)
        if skills:
            logger.info(f"Applying skills filter: {skills}")
            wanted = set(skills)
            projects = [p for p in projects if wanted.intersection(p.skills_required or [])]

        return projects

    async def update_project(self, project_id: int, updates: Dict[str, Any]) -> Project | None:
        """
        (U) 部分欄位更新；案件不存在時回傳 None
        """
        project = await self.get_project(project_id)
        if project is None:
            return None
        for key, value in updates.items():
            setattr(project, key, value)
        await self.db.flush()
        return project

