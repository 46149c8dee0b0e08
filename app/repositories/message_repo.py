# app/repositories/message_repo.py

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_
from typing import Any, Dict, List, Optional

from app.models.message import Message
from app.repositories.id_sequence_repo import IdSequenceRepository
from app.repositories.project_repo import ProjectRepository
from app.utils.timeutil import utcnow

class MessageRepository:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.id_sequence = IdSequenceRepository(db)
        self.project_repo = ProjectRepository(db)

    async def get_message(self, message_id: int) -> Optional[Message]:
        return await self.db.get(Message, message_id)

    async def get_messages_by_project(self, project_id: int) -> List[Message]:
        """
        案件內的所有訊息 (舊 -> 新)
        """
        stmt = (
            select(Message)
            .where(Message.project_id == project_id)
            .order_by(Message.created_at, Message.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_conversations(self, user_id: int) -> List[Dict[str, Any]]:
        """
        使用者的對話列表：以案件分組，每組一筆
        {project_id, project, last_message, unread_count}，最新的對話排最前面。
        """
        # 1. 使用者寄出或收到的所有訊息
        stmt = (
            select(Message)
            .where(or_(Message.sender_id == user_id, Message.receiver_id == user_id))
            .order_by(Message.id)
        )
        messages = (await self.db.execute(stmt)).scalars().all()

        # 2. 依案件分組
        groups: Dict[int, List[Message]] = {}
        for msg in messages:
            groups.setdefault(msg.project_id, []).append(msg)

        projects = await self.project_repo.get_projects_by_ids(list(groups))

        conversations = []
        for project_id, group in groups.items():
            # 3. 最後一則訊息：created_at 最大者 (相同時取 id 較大者)
            last_message = max(group, key=lambda m: (m.created_at, m.id))
            # 4. 未讀數：收件者是自己且尚未讀取
            unread_count = sum(1 for m in group if m.receiver_id == user_id and not m.is_read)
            conversations.append({
                "project_id": project_id,
                "project": projects.get(project_id),
                "last_message": last_message,
                "unread_count": unread_count,
            })

        # 5. 依最後訊息時間排序 (新 -> 舊)
        conversations.sort(
            key=lambda c: (c["last_message"].created_at, c["last_message"].id),
            reverse=True,
        )
        return conversations

    async def create_message(
        self, project_id: int, sender_id: int, receiver_id: int, content: str
    ) -> Message:
        new_message = Message(
            id=await self.id_sequence.next_id("message"),
            project_id=project_id,
            sender_id=sender_id,
            receiver_id=receiver_id,
            content=content,
            created_at=utcnow(),
            is_read=False,
        )
        self.db.add(new_message)
        await self.db.flush()
        return new_message

    async def mark_message_as_read(self, message_id: int) -> Optional[Message]:
        """將訊息標記為已讀 (訊息唯一允許的變更)"""
        message = await self.get_message(message_id)
        if message is None:
            return None
        message.is_read = True
        await self.db.flush()
        return message
