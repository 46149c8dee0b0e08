# app/services/message_service.py

import logging
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.errors import AuthorizationError, NotFoundError, ValidationError
from app.core.security import ensure_self
from app.models.message import Message
from app.models.project import Project
from app.repositories.message_repo import MessageRepository
from app.repositories.project_repo import ProjectRepository
from app.repositories.user_repo import UserRepository
from app.schemas.message_schema import ConversationOut, MessageCreate, MessageOut
from app.schemas.project_schema import ProjectOut

logger = logging.getLogger(__name__)


def _participant_ids(project: Project) -> set:
    """案件的對話參與者：雇主與被指派的工作者"""
    ids = {project.client_id}
    if project.assigned_freelancer_id is not None:
        ids.add(project.assigned_freelancer_id)
    return ids


class MessageService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.message_repo = MessageRepository(db)
        self.project_repo = ProjectRepository(db)
        self.user_repo = UserRepository(db)

    async def _get_project_as_participant(self, project_id: int, user_id: int) -> Project:
        project = await self.project_repo.get_project(project_id)
        if not project:
            raise NotFoundError("案件不存在")
        if user_id not in _participant_ids(project):
            raise AuthorizationError("你沒有權限檢視此案件的訊息")
        return project

    async def get_conversations(self, user_id: int, current_user_id: int) -> List[ConversationOut]:
        """
        獲取使用者的對話列表 (每個案件一筆，最新的在前)
        """
        ensure_self(user_id, current_user_id)
        conversations = await self.message_repo.get_conversations(user_id)
        return [
            ConversationOut(
                project_id=c["project_id"],
                project=ProjectOut.model_validate(c["project"]),
                last_message=MessageOut.model_validate(c["last_message"]),
                unread_count=c["unread_count"],
            )
            for c in conversations
            if c["project"] is not None
        ]

    async def get_project_messages(self, project_id: int, current_user_id: int) -> List[Message]:
        """獲取案件的所有訊息 (舊 -> 新)，僅限參與者"""
        await self._get_project_as_participant(project_id, current_user_id)
        return await self.message_repo.get_messages_by_project(project_id)

    async def send_message(
        self, project_id: int, message_data: MessageCreate, current_user_id: int
    ) -> Message:
        """
        業務邏輯：傳送訊息，收件者必須是案件的另一位參與者
        """
        project = await self._get_project_as_participant(project_id, current_user_id)

        receiver_id = message_data.receiver_id
        if receiver_id == current_user_id:
            raise ValidationError("不能傳送訊息給自己")
        if await self.user_repo.get_user(receiver_id) is None:
            raise NotFoundError("收件者不存在")
        if receiver_id not in _participant_ids(project):
            raise ValidationError("收件者不是此案件的參與者")

        message = await self.message_repo.create_message(
            project_id=project_id,
            sender_id=current_user_id,
            receiver_id=receiver_id,
            content=message_data.content,
        )
        await self.db.commit()
        return message

    async def mark_as_read(self, message_id: int, current_user_id: int) -> Message:
        """只有收件者可以把訊息標記為已讀"""
        message = await self.message_repo.get_message(message_id)
        if not message:
            raise NotFoundError("訊息不存在")
        if message.receiver_id != current_user_id:
            raise AuthorizationError("只有收件者可以標記已讀")

        message = await self.message_repo.mark_message_as_read(message_id)
        await self.db.commit()
        return message
