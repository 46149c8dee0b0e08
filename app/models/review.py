# app/models/review.py
from sqlalchemy import Column, Integer, Text, ForeignKey
from app.core.database import Base, UTCDateTime

class Review(Base):
    __tablename__ = "reviews"
    id = Column(Integer, primary_key=True, autoincrement=False)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    reviewer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    reviewee_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    rating = Column(Integer, nullable=False) # 1–5
    comment = Column(Text)
    created_at = Column(UTCDateTime, nullable=False)
