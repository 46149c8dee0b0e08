from conftest import register

PROFILE_BODY = {
    "title": "Full-stack developer",
    "bio": "Ten years of web work",
    "skills": ["TypeScript", "React", "Node.js"],
    "hourlyRate": 60,
    "experience": "senior",
    "portfolio": [
        {"title": "Shop", "description": "E-commerce site", "url": "https://example.com/shop"},
    ],
}


async def test_create_and_read_profile(client):
    bob, headers = await register(client, "bob", "freelancer")

    response = await client.post("/api/freelancers", json=PROFILE_BODY, headers=headers)
    assert response.status_code == 201
    profile = response.json()
    assert profile["userId"] == bob["id"]
    assert profile["skills"] == ["TypeScript", "React", "Node.js"]
    assert profile["rating"] == 0
    assert profile["reviewCount"] == 0

    response = await client.get(f"/api/freelancers/{bob['id']}")
    assert response.status_code == 200
    assert response.json()["user"]["username"] == "bob"
    assert response.json()["portfolio"] == PROFILE_BODY["portfolio"]


async def test_one_profile_per_user(client):
    _, headers = await register(client, "bob", "freelancer")
    assert (await client.post("/api/freelancers", json=PROFILE_BODY, headers=headers)).status_code == 201
    response = await client.post("/api/freelancers", json=PROFILE_BODY, headers=headers)
    assert response.status_code == 400


async def test_clients_cannot_create_profiles(client):
    _, headers = await register(client, "alice", "client")
    response = await client.post("/api/freelancers", json=PROFILE_BODY, headers=headers)
    assert response.status_code == 403


async def test_list_freelancers_in_creation_order(client):
    names = ["bob", "dan", "eve"]
    for name in names:
        _, headers = await register(client, name, "freelancer")
        await client.post("/api/freelancers", json={"title": f"{name} dev"}, headers=headers)

    response = await client.get("/api/freelancers")
    assert response.status_code == 200
    assert [p["user"]["username"] for p in response.json()] == names


async def test_missing_profile_is_404(client):
    bob, _ = await register(client, "bob", "freelancer")
    assert (await client.get(f"/api/freelancers/{bob['id']}")).status_code == 404


async def test_partial_update(client):
    bob, headers = await register(client, "bob", "freelancer")
    await client.post("/api/freelancers", json=PROFILE_BODY, headers=headers)

    response = await client.put(
        f"/api/freelancers/{bob['id']}",
        json={"hourlyRate": 75, "skills": ["Go"], "rating": 100},
        headers=headers,
    )
    assert response.status_code == 200
    profile = response.json()
    assert profile["hourlyRate"] == 75
    assert profile["skills"] == ["Go"]
    assert profile["title"] == PROFILE_BODY["title"]
    # rating 由系統維護，傳入也不會生效
    assert profile["rating"] == 0


async def test_update_is_self_only(client):
    bob, bob_headers = await register(client, "bob", "freelancer")
    _, dan_headers = await register(client, "dan", "freelancer")
    await client.post("/api/freelancers", json=PROFILE_BODY, headers=bob_headers)

    response = await client.put(f"/api/freelancers/{bob['id']}", json={"title": "pwned"}, headers=dan_headers)
    assert response.status_code == 403

    dan = (await client.get("/api/auth/me", headers=dan_headers)).json()
    response = await client.put(f"/api/freelancers/{dan['id']}", json={"title": "x"}, headers=dan_headers)
    assert response.status_code == 404


async def test_portfolio_round_trips_with_and_without_image(client):
    bob, headers = await register(client, "bob", "freelancer")
    portfolio = [
        {"title": "Shop", "description": "d", "url": "https://e.com"},
        {"title": "Blog", "description": "b", "url": "https://b.com", "image": "https://b.com/cover.png"},
    ]
    await client.post("/api/freelancers", json={"title": "Dev", "portfolio": portfolio}, headers=headers)
    assert (await client.get(f"/api/freelancers/{bob['id']}")).json()["portfolio"] == portfolio

    updated = await client.put(
        f"/api/freelancers/{bob['id']}", json={"portfolio": portfolio[:1]}, headers=headers
    )
    assert updated.json()["portfolio"] == portfolio[:1]
    listed = (await client.get("/api/freelancers")).json()
    assert listed[0]["portfolio"] == portfolio[:1]
