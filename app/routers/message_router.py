# app/routers/message_router.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.core.security import get_current_user_id
from app.services.message_service import MessageService
from app.schemas.message_schema import MessageCreate, MessageOut
from typing import List

router = APIRouter(prefix="/messages", tags=["Messaging"])

project_message_router = APIRouter(prefix="/projects", tags=["Messaging"])


@project_message_router.get("/{project_id}/messages", response_model=List[MessageOut], summary="獲取案件的歷史訊息")
async def get_project_messages(
    project_id: int,
    current_user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    獲取案件的所有訊息 (舊 -> 新)。僅限雇主與被指派的工作者。
    """
    service = MessageService(db)
    return await service.get_project_messages(project_id, current_user_id)

@project_message_router.post(
    "/{project_id}/messages",
    response_model=MessageOut,
    status_code=status.HTTP_201_CREATED,
    summary="傳送訊息"
)
async def send_message(
    project_id: int,
    message_data: MessageCreate,
    current_user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    service = MessageService(db)
    return await service.send_message(project_id, message_data, current_user_id)

@router.put("/{message_id}/read", response_model=MessageOut, summary="標記訊息為已讀")
async def mark_message_as_read(
    message_id: int,
    current_user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    只有收件者可以標記；這是訊息唯一允許的修改。
    """
    service = MessageService(db)
    return await service.mark_as_read(message_id, current_user_id)
