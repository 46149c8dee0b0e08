# models/project.py
import enum
from sqlalchemy import Column, Integer, String, Text, ForeignKey, Enum, JSON
from sqlalchemy.orm import relationship
from app.core.database import Base, UTCDateTime

class ProjectStatusEnum(str, enum.Enum):
    open = "open"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"

class Project(Base):
    # 告訴 SQLAlchemy，這個類別對應到資料庫中名為 projects 的表格 (table)
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=False)
    client_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    # 預算與工期都是自由文字 (e.g. "$500-1000", "2 weeks")
    budget = Column(String(255), nullable=False)
    duration = Column(String(255), nullable=False)
    skills_required = Column(JSON, nullable=False)
    status = Column(
        Enum(ProjectStatusEnum, values_callable=lambda obj: [e.value for e in obj]),
        nullable=False,
        default=ProjectStatusEnum.open,
    )
    category = Column(String(100), nullable=False, index=True)
    created_at = Column(UTCDateTime, nullable=False)
    # 只有在 status = in_progress 時才會有值
    assigned_freelancer_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)

    # 建立與 User (雇主) 的關聯
    client = relationship(
        "User",
        back_populates="projects_owned",
        foreign_keys=[client_id],
    )

    # 此案件收到的所有申請
    applications = relationship(
        "Application",
        back_populates="project",
        order_by="Application.id",
    )
