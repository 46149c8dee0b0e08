import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.database import Database
from app.core.error_handlers import register_error_handlers
from app.routers import (
    auth_router, user_router,
    profile_router, project_router, review_router
)

# 單獨匯入同時掛在 /projects 下的第二個 router
from app.routers.application_router import (
    router as application_main_router,
    project_application_router,
)
from app.routers.message_router import (
    router as message_main_router,
    project_message_router,
)

# --- 匯入所有 Model 檔案 ---
# 都在應用程式啟動時被 SQLAlchemy 註冊。
from app.models import user
from app.models import freelancer_profile
from app.models import project
from app.models import application
from app.models import message
from app.models import review
from app.models import id_sequence


# 設定基礎日誌
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__) # 建立一個 logger 實例


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    建立 FastAPI 應用程式。

    database 未指定時依 settings.DATABASE_URL 建立；測試會傳入自己的 Database。
    """
    if database is None:
        database = Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await database.create_all()
        logger.info(f"Entity store ready ({database.url})")
        yield
        await database.dispose()

    app = FastAPI(title="SB Works API", lifespan=lifespan)
    app.state.db = database

    # --- 設定 CORS (跨來源資源共用) ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"], # 允許所有 HTTP 方法
        allow_headers=["*"], # 允許所有 HTTP 標頭
    )

    register_error_handlers(app)

    # --- 根路徑 ---
    @app.get("/")
    def read_root():
        return {"status": "success", "message": "Backend is running!"}

    # --- 載入 API 路由 (全部掛在 /api 下) ---
    app.include_router(auth_router.router, prefix="/api")
    app.include_router(user_router.router, prefix="/api")
    app.include_router(profile_router.router, prefix="/api")
    app.include_router(project_router.router, prefix="/api")
    app.include_router(project_application_router, prefix="/api")
    app.include_router(application_main_router, prefix="/api")
    app.include_router(project_message_router, prefix="/api")
    app.include_router(message_main_router, prefix="/api")
    app.include_router(review_router.router, prefix="/api")

    return app


app = create_app()
