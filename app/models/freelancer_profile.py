# app/models/freelancer_profile.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey, JSON
from sqlalchemy.orm import relationship
from app.core.database import Base

class FreelancerProfile(Base):
    __tablename__ = "freelancer_profiles"
    id = Column(Integer, primary_key=True, autoincrement=False)
    # 每位使用者最多一份 Profile
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    bio = Column(Text)
    skills = Column(JSON, nullable=False) # 有序的字串列表
    hourly_rate = Column(Integer)
    experience = Column(Text)
    portfolio = Column(JSON, nullable=False) # [{title, description, url, image?}]
    # 0–100，前端除以 20 顯示成 0–5 顆星
    rating = Column(Integer, nullable=False, default=0)
    review_count = Column(Integer, nullable=False, default=0)
    completed_projects = Column(Integer, nullable=False, default=0)

    # 1-to-1 反向關聯到 User
    user = relationship("User", back_populates="freelancer_profile")
