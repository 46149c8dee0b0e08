# app/schemas/message_schema.py

from pydantic import Field
from datetime import datetime

from app.schemas.base_schema import CamelModel
from app.schemas.project_schema import ProjectOut

class MessageCreate(CamelModel):
    """
    傳送訊息的請求體 (project_id 來自 URL，sender 來自 Token)
    """
    receiver_id: int
    content: str = Field(..., min_length=1, description="訊息內容")

class MessageOut(CamelModel):
    id: int
    project_id: int
    sender_id: int
    receiver_id: int
    content: str
    created_at: datetime
    is_read: bool

class ConversationOut(CamelModel):
    """每個案件一筆：最後一則訊息 + 未讀數"""
    project_id: int
    project: ProjectOut
    last_message: MessageOut
    unread_count: int
