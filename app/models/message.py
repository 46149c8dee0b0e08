# app/models/message.py

from sqlalchemy import Column, Integer, Text, ForeignKey, Boolean
from sqlalchemy.orm import relationship
from app.core.database import Base, UTCDateTime

class Message(Base):
    __tablename__ = "messages"
    id = Column(Integer, primary_key=True, autoincrement=False)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    receiver_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(UTCDateTime, nullable=False)
    # 訊息建立後唯一可以變動的欄位
    is_read = Column(Boolean, nullable=False, default=False)

    project = relationship("Project")
