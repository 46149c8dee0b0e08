from conftest import register


async def test_register_returns_user_and_token(client):
    user, headers = await register(client, "alice", "client", avatar="https://img.example.com/a.png")
    assert user["username"] == "alice"
    assert user["userType"] == "client"
    assert user["fullName"] == "Alice"
    assert "password" not in user and "passwordHash" not in user

    me = await client.get("/api/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["id"] == user["id"]


async def test_register_rejects_duplicates(client):
    await register(client, "alice")
    body = {
        "username": "alice",
        "email": "other@example.com",
        "password": "secret123",
        "confirmPassword": "secret123",
        "fullName": "Alice Again",
        "userType": "client",
    }
    response = await client.post("/api/auth/register", json=body)
    assert response.status_code == 400
    assert response.json()["message"] == "此使用者名稱已經被使用"

    body.update(username="alice2", email="alice@example.com")
    response = await client.post("/api/auth/register", json=body)
    assert response.status_code == 400
    assert response.json()["message"] == "此 Email 已經被註冊"


async def test_register_validates_password(client):
    body = {
        "username": "carol",
        "email": "carol@example.com",
        "password": "123",
        "confirmPassword": "123",
        "fullName": "Carol",
        "userType": "freelancer",
    }
    response = await client.post("/api/auth/register", json=body)
    assert response.status_code == 400
    assert "password" in response.json()["message"]

    body.update(password="secret123", confirmPassword="secret124")
    response = await client.post("/api/auth/register", json=body)
    assert response.status_code == 400


async def test_register_rejects_unknown_user_type(client):
    body = {
        "username": "dave",
        "email": "dave@example.com",
        "password": "secret123",
        "confirmPassword": "secret123",
        "fullName": "Dave",
        "userType": "admin",
    }
    response = await client.post("/api/auth/register", json=body)
    assert response.status_code == 400


async def test_login_success_and_uniform_failure(client):
    await register(client, "alice")

    ok = await client.post("/api/auth/login", json={"email": "alice@example.com", "password": "secret123"})
    assert ok.status_code == 200
    assert ok.json()["user"]["username"] == "alice"
    assert ok.json()["token"]

    wrong_password = await client.post("/api/auth/login", json={"email": "alice@example.com", "password": "nope"})
    unknown_email = await client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "secret123"})
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"message": "帳號或密碼不正確"}


async def test_me_requires_token(client):
    response = await client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.json() == {"message": "需要存取權杖"}


async def test_invalid_token_is_forbidden(client):
    response = await client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 403
    assert response.json() == {"message": "無效的存取權杖"}


async def test_get_and_update_user(client):
    alice, alice_headers = await register(client, "alice")
    bob, bob_headers = await register(client, "bob", "freelancer")

    public = await client.get(f"/api/users/{alice['id']}")
    assert public.status_code == 200
    assert public.json()["email"] == "alice@example.com"

    assert (await client.get("/api/users/99999")).status_code == 404

    forbidden = await client.put(f"/api/users/{alice['id']}", json={"fullName": "Hacked"}, headers=bob_headers)
    assert forbidden.status_code == 403
    assert forbidden.json() == {"message": "沒有權限"}

    updated = await client.put(
        f"/api/users/{alice['id']}",
        json={"fullName": "Alice Liddell", "avatar": "https://img.example.com/new.png"},
        headers=alice_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["fullName"] == "Alice Liddell"
    assert updated.json()["avatar"] == "https://img.example.com/new.png"
    assert updated.json()["username"] == "alice"


async def test_password_hashing_runs_off_the_event_loop(client, monkeypatch):
    from app.services import auth_service

    called = []
    original = auth_service.run_in_threadpool

    async def recording_threadpool(func, *args, **kwargs):
        called.append(func.__name__)
        return await original(func, *args, **kwargs)

    monkeypatch.setattr(auth_service, "run_in_threadpool", recording_threadpool)

    await register(client, "alice")
    await client.post("/api/auth/login", json={"email": "alice@example.com", "password": "secret123"})
    await client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "secret123"})

    assert called == ["get_password_hash", "verify_password", "dummy_verify"]
