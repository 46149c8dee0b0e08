# app/repositories/id_sequence_repo.py
# 全部實體共用同一個 ID 計數器
from sqlalchemy.ext.asyncio import AsyncSession
from app.models.id_sequence import IdSequence

class IdSequenceRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def next_id(self, entity_kind: str) -> int:
        """
        發出下一個 ID：嚴格遞增，且跨所有實體種類共用
        (同一種實體的 ID 不一定連續)
        """
        row = IdSequence(entity_kind=entity_kind)
        self.db.add(row)
        await self.db.flush() # 執行 INSERT 以取得自動遞增的 id
        return row.id
