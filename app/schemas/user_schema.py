# app/schemas/user_schema.py
from pydantic import EmailStr, Field, field_validator, model_validator
from datetime import datetime
from typing import Optional
from app.models.user import UserTypeEnum
from app.schemas.base_schema import CamelModel

# 登入請求的格式
class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

# Token 內的資料
class TokenData(CamelModel):
    user_id: int


# 註冊請求 Body
class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)
    confirm_password: str
    full_name: str = Field(..., min_length=1, max_length=255)
    user_type: UserTypeEnum # "client" 或 "freelancer"
    avatar: Optional[str] = Field(None, max_length=500)

    @field_validator('username')
    @classmethod
    def validate_username(cls, v: str) -> str:
        """
        使用者名稱不可包含空白
        """
        v = v.strip()
        if not v or any(ch.isspace() for ch in v):
            raise ValueError('使用者名稱不可為空或包含空白')
        return v

    @model_validator(mode='after')
    def passwords_match(self) -> 'UserCreate':
        if self.password != self.confirm_password:
            raise ValueError('兩次輸入的密碼不一致')
        return self

# 更新使用者基本資料 (皆為選填)
class UserUpdate(CamelModel):
    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    avatar: Optional[str] = Field(None, max_length=500)

# 註冊/查詢使用者的安全回應 (不含密碼)
class UserOut(CamelModel):
    id: int
    username: str
    email: str
    full_name: str
    user_type: UserTypeEnum
    avatar: Optional[str] = None
    created_at: datetime

# 登入 / 註冊成功的回應
class AuthResponse(CamelModel):
    user: UserOut
    token: str
