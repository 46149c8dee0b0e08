# app/core/security.py
# 負責密碼雜湊與 JWT 權杖的產生與驗證
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from passlib.context import CryptContext
from jose import JWTError, jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import settings
from app.core.database import get_db
from app.core.errors import AuthenticationError, AuthorizationError, NotFoundError
from app.schemas.user_schema import TokenData
from app.repositories.user_repo import UserRepository
from app.models.user import User

logger = logging.getLogger(__name__)

# 1. 密碼雜湊設定 (Bcrypt)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# 2. 定義 Token 從哪裡來 (Authorization: Bearer <token>)
# auto_error=False：缺少 Token 時由我們自己決定回應 (401)
bearer_scheme = HTTPBearer(auto_error=False)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """驗證明文密碼是否與雜湊值相符"""
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    """產生密碼的雜湊值"""
    return pwd_context.hash(password)

# 3. JWT 權杖產生與驗證
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    根據傳入的 data (e.g., user_id) 產生 JWT access token

    未設定 ACCESS_TOKEN_EXPIRE_MINUTES 時不加 exp，
    權杖在整個客戶端 session 期間都有效。
    """
    to_encode = data.copy() # 避免修改原始資料
    if expires_delta is None and settings.ACCESS_TOKEN_EXPIRE_MINUTES is not None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    if expires_delta is not None:
        to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})

    encoded_jwt = jwt.encode(
        to_encode,
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM
    )
    return encoded_jwt

def create_user_token(user: User) -> str:
    """為指定使用者建立 access token"""
    return create_access_token(
        data={
            "sub": str(user.id), # 'sub' 是 JWT 的標準欄位 (必須是字串)
            "user_id": user.id,
        }
    )

def verify_access_token(token: str) -> TokenData | None:
    """
    驗證 JWT，回傳 TokenData (Pydantic Model) 或 None
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        return None

    user_id = payload.get("user_id")
    if not isinstance(user_id, int):
        return None

    return TokenData(user_id=user_id)

async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> int:
    """
    FastAPI 依賴項：驗證 Token 並回傳使用者 id
    - 沒有 Token -> 401
    - Token 無效或過期 -> 403
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("需要存取權杖")

    token_data = verify_access_token(credentials.credentials)
    if token_data is None:
        logger.warning("Rejected invalid or expired access token")
        raise AuthorizationError("無效的存取權杖")

    return token_data.user_id

async def get_current_user(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
) -> User:
    """
    FastAPI 依賴項：驗證 Token 並回傳 User Model
    """
    user = await UserRepository(db).get_user(user_id)
    if user is None:
        raise NotFoundError("使用者不存在")
    return user

def ensure_self(user_id: int, current_user_id: int) -> None:
    """只允許存取自己的資源"""
    if user_id != current_user_id:
        logger.warning(f"User {current_user_id} tried to access resources of user {user_id}")
        raise AuthorizationError("沒有權限")
