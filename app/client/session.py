# app/client/session.py
# 客戶端的登入狀態：目前使用者 + 權杖，權杖會同步寫入 TokenStore
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import aiofiles
import aiofiles.os

logger = logging.getLogger(__name__)


class TokenStore:
    """
    權杖的持久化儲存 (相當於瀏覽器的 localStorage)。
    path 為 None 時只保存在記憶體中。
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        self._token: Optional[str] = None

    async def load(self) -> Optional[str]:
        if self.path is None:
            return self._token
        if not await aiofiles.os.path.exists(self.path):
            return None
        async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
            token = (await f.read()).strip()
        return token or None

    async def save(self, token: Optional[str]) -> None:
        """寫入權杖；傳入 None 代表刪除"""
        self._token = token
        if self.path is None:
            return
        if token is None:
            if await aiofiles.os.path.exists(self.path):
                await aiofiles.os.remove(self.path)
            return
        async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
            await f.write(token)


class SessionContext:
    """目前登入的使用者與權杖"""

    def __init__(self, token_store: Optional[TokenStore] = None):
        self.token_store = token_store or TokenStore()
        self.user: Optional[Dict[str, Any]] = None
        self.token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    async def restore(self) -> Optional[str]:
        """從 TokenStore 讀回上次的權杖 (使用者資料需另外向伺服器取得)"""
        self.token = await self.token_store.load()
        return self.token

    async def set(self, user: Optional[Dict[str, Any]], token: Optional[str]) -> None:
        self.user = user
        self.token = token
        await self.token_store.save(token)

    async def clear(self) -> None:
        if self.token is not None:
            logger.info("Clearing client session")
        await self.set(None, None)
