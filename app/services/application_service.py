# app/services/application_service.py

import logging
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.errors import AuthorizationError, NotFoundError, ValidationError
from app.core.security import ensure_self
from app.models.user import User, UserTypeEnum
from app.models.application import Application, ApplicationStatusEnum
from app.models.project import ProjectStatusEnum
from app.repositories.application_repo import ApplicationRepository
from app.repositories.project_repo import ProjectRepository
from app.schemas.application_schema import ApplicationCreate, ApplicationOut, ApplicationWithFreelancerOut
from app.schemas.profile_schema import FreelancerProfileOut
from app.schemas.project_schema import ApplicationWithProjectOut, ProjectOut
from app.schemas.user_schema import UserOut

logger = logging.getLogger(__name__)


class ApplicationService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.application_repo = ApplicationRepository(db)
        self.project_repo = ProjectRepository(db)

    async def create_application(
        self,
        project_id: int,
        freelancer: User,
        application_data: ApplicationCreate,
    ) -> Application:
        if freelancer.user_type != UserTypeEnum.freelancer:
            raise AuthorizationError("只有自由工作者可以提出申請")

        # 步驟 1: 驗證
        project = await self.project_repo.get_project(project_id)
        if not project:
            raise NotFoundError("案件不存在")
        if project.status != ProjectStatusEnum.open:
            raise ValidationError("此案件目前未在招募中")
        existing = await self.application_repo.get_application_by_project_and_freelancer(
            project_id, freelancer.id
        )
        if existing:
            raise ValidationError("你已經對此案件提出申請")

        # 步驟 2: 建立並提交
        new_application = await self.application_repo.create_application(
            project_id=project_id,
            freelancer_id=freelancer.id,
            **application_data.model_dump(),
        )
        await self.db.commit()

        logger.info(f"Application {new_application.id} submitted to project {project_id} by user {freelancer.id}")
        return new_application

    async def get_project_applications(
        self, project_id: int, current_user_id: int
    ) -> List[ApplicationWithFreelancerOut]:
        """
        (雇主) 檢視自己案件的所有申請，附上申請者與其 Profile
        """
        project = await self.project_repo.get_project(project_id)
        if not project:
            raise NotFoundError("案件不存在")
        if project.client_id != current_user_id:
            raise AuthorizationError("你沒有權限檢視此案件的申請")

        applications = await self.application_repo.get_applications_by_project(project_id)
        results = []
        for application in applications:
            freelancer = application.freelancer
            profile = freelancer.freelancer_profile if freelancer else None
            results.append(
                ApplicationWithFreelancerOut(
                    **ApplicationOut.model_validate(application).model_dump(),
                    freelancer=UserOut.model_validate(freelancer) if freelancer else None,
                    profile=FreelancerProfileOut.model_validate(profile) if profile else None,
                )
            )
        return results

    async def get_freelancer_applications(
        self, user_id: int, current_user_id: int
    ) -> List[ApplicationWithProjectOut]:
        """
        (工作者) 檢視自己提出的所有申請，附上案件與雇主
        """
        ensure_self(user_id, current_user_id)
        applications = await self.application_repo.get_applications_by_freelancer(user_id)
        results = []
        for application in applications:
            project = application.project
            client = project.client if project else None
            results.append(
                ApplicationWithProjectOut(
                    **ApplicationOut.model_validate(application).model_dump(),
                    project=ProjectOut.model_validate(project) if project else None,
                    client=UserOut.model_validate(client) if client else None,
                )
            )
        return results

    async def update_application_status(
        self, application_id: int, new_status: str, current_user_id: int
    ) -> Application:
        """
        (雇主) 接受或拒絕一個申請

        接受時會一併把案件改成 in_progress 並指派該工作者；
        申請與案件的變更在同一個交易中提交，要嘛都生效、要嘛都不生效。
        """
        if new_status not in (ApplicationStatusEnum.accepted.value, ApplicationStatusEnum.rejected.value):
            raise ValidationError("無效的狀態")

        application = await self.application_repo.get_application_with_project(application_id)
        if not application:
            raise NotFoundError("申請不存在")

        project = application.project
        if project is None or project.client_id != current_user_id:
            raise AuthorizationError("你沒有權限修改此申請")

        if application.status != ApplicationStatusEnum.pending:
            raise ValidationError("此申請已被處理")

        try:
            if new_status == ApplicationStatusEnum.accepted.value:
                # 只有仍在招募中的案件可以接受申請 (避免同一案件被指派兩次)
                if project.status != ProjectStatusEnum.open:
                    raise ValidationError("此案件已不在招募中")
                await self.project_repo.update_project(project.id, {
                    "status": ProjectStatusEnum.in_progress,
                    "assigned_freelancer_id": application.freelancer_id,
                })

            updated = await self.application_repo.update_application(
                application_id, {"status": ApplicationStatusEnum(new_status)}
            )
            # 最後一次性提交所有變更
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(f"Application {application_id} {new_status} by client {current_user_id}")
        return updated
