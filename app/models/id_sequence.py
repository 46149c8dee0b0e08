# app/models/id_sequence.py
from sqlalchemy import Column, Integer, String
from app.core.database import Base

class IdSequence(Base):
    """
    全部實體共用的 ID 計數器：每發出一個 ID 就新增一列。
    sqlite_autoincrement 保證 ID 嚴格遞增且不會被重複使用。
    """
    __tablename__ = "id_sequence"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    entity_kind = Column(String(50), nullable=False)
