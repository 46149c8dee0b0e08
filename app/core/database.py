import asyncio
from contextlib import asynccontextmanager
from datetime import timezone
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import DateTime
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator
from sqlalchemy.pool import StaticPool

# 建立 ORM Model 基底類別
Base = declarative_base()


class UTCDateTime(TypeDecorator):
    """
    一律以 UTC 儲存並回傳帶時區的 datetime
    (SQLite 讀回來的值不含時區，在這裡補上)
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class Database:
    """
    資料儲存區 (Entity Store) 的控制代碼。

    由 create_app() 明確建立並掛在 app.state.db 上，
    測試時每個案例各自建立一個新的實例。
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        engine_kwargs = {"echo": echo}
        if url.startswith("sqlite") and ":memory:" in url:
            # 記憶體資料庫只存在於單一連線中，所有 session 必須共用同一條連線
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            engine_kwargs["pool_pre_ping"] = True # 每次從連線池取連線前，先 PING 一次，確保連線有效

        # 建立非同步引擎
        self.engine = create_async_engine(url, **engine_kwargs)
        # 建立非同步 Session
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        # 一次只發出一個 session：請求的處理彼此不會交錯
        self._lock = asyncio.Lock()

    async def create_all(self) -> None:
        """建立所有資料表 (應用程式啟動時呼叫)"""
        # 匯入所有 Model，確保都已註冊到 Base.metadata
        from app.models import application, freelancer_profile, id_sequence, message, project, review, user  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self._lock:
            async with self.session_factory() as session:
                try:
                    yield session
                finally:
                    await session.close()


# (重要) 取得 DB Session 的 Dependency
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI Dependency: 從 app.state.db 取得非同步資料庫 session"""
    database: Database = request.app.state.db
    async with database.session() as session:
        yield session
