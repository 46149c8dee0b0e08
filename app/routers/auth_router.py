import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.core.security import get_current_user
from app.models.user import User
from app.services.auth_service import AuthService
from app.schemas.user_schema import AuthResponse, UserCreate, UserLogin, UserOut


logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth", # 路由前綴
    tags=["Auth"]    # API 文件分類標籤
)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_new_user(
    user_data: UserCreate, # Request Body 會被 Pydantic 驗證
    db: AsyncSession = Depends(get_db)
):
    """
    註冊新使用者 (自由工作者 / 雇主)

    - 密碼至少 6 碼，且需與 confirmPassword 相同。
    - 成功後直接回傳 token，不需要再登入一次。
    """
    auth_service = AuthService(db)
    new_user, token = await auth_service.register_user(user_data)
    return AuthResponse(user=UserOut.model_validate(new_user), token=token)


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    db: AsyncSession = Depends(get_db)
):
    """
    以 Email + 密碼登入，取得 Access Token
    """
    auth_service = AuthService(db)
    user, token = await auth_service.login(
        email=credentials.email,
        password=credentials.password,
    )
    return AuthResponse(user=UserOut.model_validate(user), token=token)


@router.get("/me", response_model=UserOut)
async def read_current_user(
    current_user: User = Depends(get_current_user)
):
    """
    獲取當前登入使用者的基本資料 (不含密碼)
    """
    return current_user
