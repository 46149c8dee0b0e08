# app/client/api_client.py
# 呼叫後端 /api 的非同步客戶端，自動附上 Bearer 權杖
import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx

from app.client.session import SessionContext

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """非 2xx 回應"""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class MarketplaceClient:
    def __init__(self, http: httpx.AsyncClient, session: Optional[SessionContext] = None):
        self.http = http
        self.session = session or SessionContext()

    async def request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        headers = {}
        if self.session.token:
            headers["Authorization"] = f"Bearer {self.session.token}"

        response = await self.http.request(method, path, json=json, params=params, headers=headers)

        if response.status_code == 401:
            # 權杖不被接受，登入狀態失效
            await self.session.clear()
        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        return response.json()

    # --- 登入狀態 ---

    async def register(self, data: Dict[str, Any]) -> Dict[str, Any]:
        result = await self.request("POST", "/api/auth/register", json=data)
        await self.session.set(result["user"], result["token"])
        return result

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        result = await self.request("POST", "/api/auth/login", json={"email": email, "password": password})
        await self.session.set(result["user"], result["token"])
        return result

    async def logout(self) -> None:
        await self.session.clear()

    async def fetch_current_user(self) -> Optional[Dict[str, Any]]:
        """
        用目前的權杖取得使用者；任何失敗都會清除登入狀態並回傳 None
        """
        if not self.session.token:
            return None
        try:
            user = await self.request("GET", "/api/auth/me")
        except (ApiError, httpx.HTTPError) as e:
            logger.info(f"Could not restore session: {e}")
            await self.session.clear()
            return None
        self.session.user = user
        return user

    async def initialize(self) -> Optional[Dict[str, Any]]:
        """程式啟動時呼叫：讀回權杖並取得使用者"""
        await self.session.restore()
        return await self.fetch_current_user()

    # --- 使用者 ---

    async def get_user(self, user_id: int) -> Dict[str, Any]:
        return await self.request("GET", f"/api/users/{user_id}")

    async def update_user(self, user_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("PUT", f"/api/users/{user_id}", json=data)

    # --- 工作者 Profile ---

    async def list_freelancers(self) -> List[Dict[str, Any]]:
        return await self.request("GET", "/api/freelancers")

    async def get_freelancer(self, user_id: int) -> Dict[str, Any]:
        return await self.request("GET", f"/api/freelancers/{user_id}")

    async def create_freelancer_profile(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("POST", "/api/freelancers", json=data)

    async def update_freelancer_profile(self, user_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("PUT", f"/api/freelancers/{user_id}", json=data)

    # --- 案件 ---

    async def search_projects(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        skills: Optional[Iterable[str]] = None,
    ) -> List[Dict[str, Any]]:
        params = {}
        if query:
            params["query"] = query
        if category:
            params["category"] = category
        if skills:
            params["skills"] = ",".join(skills)
        return await self.request("GET", "/api/projects", params=params)

    async def get_project(self, project_id: int) -> Dict[str, Any]:
        return await self.request("GET", f"/api/projects/{project_id}")

    async def create_project(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("POST", "/api/projects", json=data)

    async def get_user_projects(self, user_id: int) -> List[Dict[str, Any]]:
        return await self.request("GET", f"/api/users/{user_id}/projects")

    # --- 申請 ---

    async def get_project_applications(self, project_id: int) -> List[Dict[str, Any]]:
        return await self.request("GET", f"/api/projects/{project_id}/applications")

    async def apply_to_project(self, project_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("POST", f"/api/projects/{project_id}/applications", json=data)

    async def get_user_applications(self, user_id: int) -> List[Dict[str, Any]]:
        return await self.request("GET", f"/api/users/{user_id}/applications")

    async def update_application_status(self, application_id: int, status: str) -> Dict[str, Any]:
        return await self.request("PUT", f"/api/applications/{application_id}", json={"status": status})

    # --- 訊息 ---

    async def get_conversations(self, user_id: int) -> List[Dict[str, Any]]:
        return await self.request("GET", f"/api/users/{user_id}/conversations")

    async def get_project_messages(self, project_id: int) -> List[Dict[str, Any]]:
        return await self.request("GET", f"/api/projects/{project_id}/messages")

    async def send_message(self, project_id: int, receiver_id: int, content: str) -> Dict[str, Any]:
        return await self.request(
            "POST",
            f"/api/projects/{project_id}/messages",
            json={"receiverId": receiver_id, "content": content},
        )

    async def mark_message_as_read(self, message_id: int) -> Dict[str, Any]:
        return await self.request("PUT", f"/api/messages/{message_id}/read")

    # --- 評價 ---

    async def create_review(self, project_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("POST", f"/api/projects/{project_id}/reviews", json=data)

    async def get_user_reviews(self, user_id: int) -> List[Dict[str, Any]]:
        return await self.request("GET", f"/api/users/{user_id}/reviews")


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and "message" in body:
        return str(body["message"])
    return response.text
