import logging
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession
from app.repositories.user_repo import UserRepository
from app.core.errors import AuthenticationError, ValidationError
from app.core.security import verify_password, create_user_token, get_password_hash, pwd_context
from app.models.user import User
from app.schemas.user_schema import UserCreate

logger = logging.getLogger(__name__)

# 帳號不存在與密碼錯誤使用同一個訊息，避免洩漏帳號是否存在
INVALID_CREDENTIALS = "帳號或密碼不正確"

class AuthService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.user_repo = UserRepository(db)

    async def authenticate_user(self, email: str, password: str) -> User | None:
        """
        驗證使用者帳號密碼。
        成功回傳 User 物件，失敗回傳 None。
        """
        user = await self.user_repo.get_user_by_email(email)

        # 1. 檢查使用者是否存在
        if not user:
            # 仍然跑一次雜湊比對，讓兩種失敗花費的時間相近
            await run_in_threadpool(pwd_context.dummy_verify)
            return None

        # 2. 檢查密碼是否正確
        # bcrypt 很耗 CPU，放到 threadpool 執行，避免卡住 event loop
        if not await run_in_threadpool(verify_password, password, user.password_hash):
            return None

        return user

    async def login(self, email: str, password: str) -> tuple[User, str]:
        """
        登入：回傳 (使用者, access token)
        """
        user = await self.authenticate_user(email, password)
        if user is None:
            logger.warning("Failed login attempt")
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info(f"User logged in: {user.id}")
        return user, create_user_token(user)

    async def register_user(self, user_create: UserCreate) -> tuple[User, str]:
        """
        處理使用者註冊：回傳 (新使用者, access token)
        """
        # 1. 檢查 Email / 使用者名稱是否已被註冊
        if await self.user_repo.get_user_by_email(user_create.email):
            raise ValidationError("此 Email 已經被註冊")
        if await self.user_repo.get_user_by_username(user_create.username):
            raise ValidationError("此使用者名稱已經被使用")

        # 2. 雜湊密碼 (使用我們 security.py 中的函式)
        hashed_password = await run_in_threadpool(get_password_hash, user_create.password)

        # 3. 呼叫 Repository 建立使用者並提交
        new_user = await self.user_repo.create_user(
            username=user_create.username,
            email=user_create.email,
            password_hash=hashed_password,
            full_name=user_create.full_name,
            user_type=user_create.user_type,
            avatar=user_create.avatar,
        )
        await self.db.commit()

        logger.info(f"User registered: {new_user.id} ({new_user.user_type.value})")
        return new_user, create_user_token(new_user)
