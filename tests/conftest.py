"""共用的測試設定：每個測試都使用全新的記憶體資料庫"""
import os
import sys

# 測試不應使用真正的秘鑰或資料庫
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.database import Database
from app.main import create_app


@pytest.fixture
async def database():
    db = Database("sqlite+aiosqlite:///:memory:")
    # ASGITransport 不會觸發 lifespan，這裡自己建表
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def session(database):
    async with database.session() as s:
        yield s


@pytest.fixture
def app(database):
    return create_app(database)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


async def register(client, username, user_type="client", password="secret123", **extra):
    """註冊一位使用者，回傳 (user dict, Authorization headers)"""
    body = {
        "username": username,
        "email": f"{username}@example.com",
        "password": password,
        "confirmPassword": password,
        "fullName": username.title(),
        "userType": user_type,
        **extra,
    }
    response = await client.post("/api/auth/register", json=body)
    assert response.status_code == 201, response.text
    data = response.json()
    return data["user"], {"Authorization": f"Bearer {data['token']}"}


PROJECT_BODY = {
    "title": "Build a landing page",
    "description": "Responsive landing page for a coffee shop",
    "budget": "$500-$800",
    "duration": "2 weeks",
    "skillsRequired": ["React", "CSS"],
    "category": "web",
}

APPLICATION_BODY = {
    "coverLetter": "I have built many landing pages.",
    "proposedRate": "$600",
    "estimatedDuration": "10 days",
}


async def create_project(client, headers, **overrides):
    response = await client.post("/api/projects", json={**PROJECT_BODY, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def apply(client, project_id, headers, **overrides):
    response = await client.post(
        f"/api/projects/{project_id}/applications",
        json={**APPLICATION_BODY, **overrides},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
async def hired(client):
    """雇主刊登案件並接受一位工作者的申請 (已指派的案件)"""
    client_user, client_headers = await register(client, "alice", "client")
    freelancer, freelancer_headers = await register(client, "bob", "freelancer")
    project = await create_project(client, client_headers)
    application = await apply(client, project["id"], freelancer_headers)
    response = await client.put(
        f"/api/applications/{application['id']}",
        json={"status": "accepted"},
        headers=client_headers,
    )
    assert response.status_code == 200, response.text
    return {
        "client": client_user,
        "client_headers": client_headers,
        "freelancer": freelancer,
        "freelancer_headers": freelancer_headers,
        "project": project,
        "application": application,
    }
