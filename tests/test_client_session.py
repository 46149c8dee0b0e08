import pytest

from app.client.api_client import ApiError, MarketplaceClient
from app.client.session import SessionContext, TokenStore

REGISTRATION = {
    "username": "alice",
    "email": "alice@example.com",
    "password": "secret123",
    "confirmPassword": "secret123",
    "fullName": "Alice",
    "userType": "client",
}


async def test_token_store_persists_to_file(tmp_path):
    path = tmp_path / "auth_token"
    store = TokenStore(path)
    assert await store.load() is None

    await store.save("abc")
    assert await TokenStore(path).load() == "abc"

    await store.save(None)
    assert not path.exists()
    assert await store.load() is None


async def test_memory_token_store():
    store = TokenStore()
    await store.save("abc")
    assert await store.load() == "abc"


async def test_register_sets_session_and_logout_clears(client, tmp_path):
    session = SessionContext(TokenStore(tmp_path / "auth_token"))
    api = MarketplaceClient(client, session)

    result = await api.register(REGISTRATION)
    assert session.is_authenticated
    assert session.user["id"] == result["user"]["id"]
    assert (tmp_path / "auth_token").read_text() == result["token"]

    project = await api.create_project({
        "title": "Logo", "description": "A logo", "budget": "$50",
        "duration": "3 days", "skillsRequired": ["Design"], "category": "design",
    })
    assert [p["id"] for p in await api.search_projects(skills=["Design"])] == [project["id"]]

    await api.logout()
    assert not session.is_authenticated
    assert session.user is None
    assert not (tmp_path / "auth_token").exists()


async def test_initialize_restores_session(client, tmp_path):
    path = tmp_path / "auth_token"
    first = MarketplaceClient(client, SessionContext(TokenStore(path)))
    await first.register(REGISTRATION)

    # 重新啟動：新的 SessionContext 從檔案讀回權杖
    second = MarketplaceClient(client, SessionContext(TokenStore(path)))
    user = await second.initialize()
    assert user["username"] == "alice"
    assert second.session.user == user


async def test_invalid_stored_token_clears_session(client, tmp_path):
    path = tmp_path / "auth_token"
    path.write_text("garbage")
    api = MarketplaceClient(client, SessionContext(TokenStore(path)))

    assert await api.initialize() is None
    assert not api.session.is_authenticated
    assert not path.exists()


async def test_unauthorized_response_clears_session(client):
    api = MarketplaceClient(client)
    await api.register(REGISTRATION)

    with pytest.raises(ApiError) as exc_info:
        await api.login("alice@example.com", "wrong-password")
    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "帳號或密碼不正確"
    assert not api.session.is_authenticated


async def test_errors_carry_server_message(client):
    api = MarketplaceClient(client)
    with pytest.raises(ApiError) as exc_info:
        await api.get_project(99999)
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "案件不存在"
