# models/user.py
from sqlalchemy import Column, Integer, String, Enum
from app.core.database import Base, UTCDateTime
import enum
from sqlalchemy.orm import relationship

# 使用者角色
class UserTypeEnum(str, enum.Enum):
    client = "client"
    freelancer = "freelancer"

class User(Base):
    __tablename__ = "users"

    # 基本欄位 (id 由 id_sequence 統一配發，不使用資料表自己的自動遞增)
    id = Column(Integer, primary_key=True, autoincrement=False)
    username = Column(String(100), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=False)
    user_type = Column(Enum(UserTypeEnum, values_callable=lambda obj: [e.value for e in obj]), nullable=False)
    avatar = Column(String(500), nullable=True)
    created_at = Column(UTCDateTime, nullable=False)

    # 關聯設定
    freelancer_profile = relationship(
        "FreelancerProfile",
        back_populates="user",
        uselist=False,
    )

    projects_owned = relationship(
        "Project",
        back_populates="client",
        foreign_keys="[Project.client_id]",
    )
