# app/repositories/application_repo.py

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from typing import Any, Dict, List, Optional

from app.models.application import Application, ApplicationStatusEnum
from app.models.project import Project
from app.models.user import User # 用於 selectinload
from app.repositories.id_sequence_repo import IdSequenceRepository
from app.utils.timeutil import utcnow

class ApplicationRepository:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.id_sequence = IdSequenceRepository(db)

    async def get_application(self, application_id: int) -> Optional[Application]:
        """
        透過 ID 獲取單一申請
        """
        return await self.db.get(Application, application_id)

    async def get_application_with_project(self, application_id: int) -> Optional[Application]:
        """
        透過 ID 獲取單一申請，並載入關聯的 Project (用於權限檢查)
        """
        stmt = select(Application).where(Application.id == application_id).options(
            selectinload(Application.project)
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_application_by_project_and_freelancer(
        self, project_id: int, freelancer_id: int
    ) -> Optional[Application]:
        """
        檢查特定使用者是否已對特定案件提出申請 (唯一性檢查)
        """
        stmt = select(Application).where(
            Application.project_id == project_id,
            Application.freelancer_id == freelancer_id
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_applications_by_project(self, project_id: int) -> List[Application]:
        """
        獲取特定案件的所有申請 (雇主檢視用)
        """
        stmt = select(Application).where(Application.project_id == project_id).options(
            # 效能優化：一併載入申請者 (User) 與其 freelancer_profile
            selectinload(Application.freelancer).selectinload(User.freelancer_profile)
        ).order_by(Application.id)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_applications_by_freelancer(self, freelancer_id: int) -> List[Application]:
        """
        獲取特定工作者的所有申請 (工作者檢視「我的申請」用)
        """
        stmt = select(Application).where(Application.freelancer_id == freelancer_id).options(
            # 載入關聯的案件與案件的雇主
            selectinload(Application.project).selectinload(Project.client)
        ).order_by(Application.id)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create_application(
        self,
        project_id: int,
        freelancer_id: int,
        cover_letter: str,
        proposed_rate: str,
        estimated_duration: str,
        portfolio: Optional[List[dict]] = None,
    ) -> Application:
        """
        新增申請 (狀態一律從 pending 開始)
        """
        application = Application(
            id=await self.id_sequence.next_id("application"),
            project_id=project_id,
            freelancer_id=freelancer_id,
            cover_letter=cover_letter,
            proposed_rate=proposed_rate,
            estimated_duration=estimated_duration,
            portfolio=list(portfolio or []),
            status=ApplicationStatusEnum.pending,
            created_at=utcnow(),
        )
        self.db.add(application)
        await self.db.flush()
        return application

    async def update_application(
        self, application_id: int, updates: Dict[str, Any]
    ) -> Optional[Application]:
        """
        更新申請 (主要用於更新 status)；不存在時回傳 None
        """
        application = await self.get_application(application_id)
        if application is None:
            return None
        for key, value in updates.items():
            setattr(application, key, value)
        await self.db.flush()
        return application
