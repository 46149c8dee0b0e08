# app/core/errors.py
# 錯誤分類：Service 層拋出，由 error_handlers 統一轉成 {"message": ...} 回應
from fastapi import status


class MarketplaceError(Exception):
    """所有業務錯誤的基底類別"""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"message": self.message}


class ValidationError(MarketplaceError):
    """輸入格式錯誤或缺少欄位"""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(MarketplaceError):
    """缺少權杖或帳密錯誤"""
    status_code = status.HTTP_401_UNAUTHORIZED


class AuthorizationError(MarketplaceError):
    """已登入但沒有權限 (或權杖無效)"""
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(MarketplaceError):
    status_code = status.HTTP_404_NOT_FOUND


class UnexpectedError(MarketplaceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
