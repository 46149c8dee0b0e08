# app/models/application.py
import enum
from sqlalchemy import Column, Integer, String, Text, ForeignKey, Enum, JSON
from sqlalchemy.orm import relationship
from app.core.database import Base, UTCDateTime

class ApplicationStatusEnum(str, enum.Enum):
    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"

class Application(Base):
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, autoincrement=False)

    # index=True 加快依案件 / 依工作者查詢
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    freelancer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    cover_letter = Column(Text, nullable=False)
    proposed_rate = Column(String(255), nullable=False)
    estimated_duration = Column(String(255), nullable=False)
    portfolio = Column(JSON, nullable=False) # [{title, url}]

    # pending -> accepted / rejected，之後不再變動
    status = Column(
        Enum(ApplicationStatusEnum, values_callable=lambda obj: [e.value for e in obj]),
        nullable=False,
        default=ApplicationStatusEnum.pending,
    )
    created_at = Column(UTCDateTime, nullable=False)

    # --- 建立關聯 (Relationships) ---
    project = relationship("Project", back_populates="applications")
    freelancer = relationship("User", foreign_keys=[freelancer_id])
