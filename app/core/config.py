# app/core/config.py
# 應用程式設定 (例如資料庫連線字串、JWT 秘鑰等)
from typing import List, Optional
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # 資料庫設定 (預設為記憶體內的 SQLite，重啟後資料即消失)
    DATABASE_URL: str = "sqlite+aiosqlite:///:memory:"
    # 是否在 console 印出 SQL 語句
    SQL_ECHO: bool = False
    # JWT 設定
    JWT_SECRET_KEY: str
    # JWT 演算法
    JWT_ALGORITHM: str = "HS256"
    # 存取令牌過期時間（分鐘）；None 代表權杖在整個客戶端 session 期間有效
    ACCESS_TOKEN_EXPIRE_MINUTES: Optional[int] = None
    # 日誌等級
    LOG_LEVEL: str = "INFO"
    # CORS 允許的來源
    CORS_ORIGINS: List[str] = ["*"]

    # 環境變數檔案
    class Config:
        env_file = ".env"

# 建立設定實例
settings = Settings()
