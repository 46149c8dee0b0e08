from conftest import create_project, register


async def test_review_updates_freelancer_rating(client, hired):
    bob_id = hired["freelancer"]["id"]
    await client.post("/api/freelancers", json={"title": "Frontend dev"}, headers=hired["freelancer_headers"])

    response = await client.post(
        f"/api/projects/{hired['project']['id']}/reviews",
        json={"revieweeId": bob_id, "rating": 4, "comment": "Great work"},
        headers=hired["client_headers"],
    )
    assert response.status_code == 201
    assert response.json()["reviewerId"] == hired["client"]["id"]

    profile = (await client.get(f"/api/freelancers/{bob_id}")).json()
    assert profile["rating"] == 80
    assert profile["reviewCount"] == 1

    reviews = (await client.get(f"/api/users/{bob_id}/reviews")).json()
    assert [r["rating"] for r in reviews] == [4]


async def test_freelancer_can_review_client(client, hired):
    response = await client.post(
        f"/api/projects/{hired['project']['id']}/reviews",
        json={"revieweeId": hired["client"]["id"], "rating": 5},
        headers=hired["freelancer_headers"],
    )
    assert response.status_code == 201
    assert response.json()["comment"] is None


async def test_one_review_per_reviewer(client, hired):
    url = f"/api/projects/{hired['project']['id']}/reviews"
    body = {"revieweeId": hired["freelancer"]["id"], "rating": 5}
    assert (await client.post(url, json=body, headers=hired["client_headers"])).status_code == 201
    assert (await client.post(url, json=body, headers=hired["client_headers"])).status_code == 400


async def test_review_rules(client, hired):
    url = f"/api/projects/{hired['project']['id']}/reviews"
    _, outsider_headers = await register(client, "mallory", "freelancer")

    response = await client.post(url, json={"revieweeId": hired["freelancer"]["id"], "rating": 5},
                                 headers=outsider_headers)
    assert response.status_code == 403

    response = await client.post(url, json={"revieweeId": hired["client"]["id"], "rating": 5},
                                 headers=hired["client_headers"])
    assert response.status_code == 400

    response = await client.post(url, json={"revieweeId": hired["freelancer"]["id"], "rating": 6},
                                 headers=hired["client_headers"])
    assert response.status_code == 400


async def test_unassigned_project_cannot_be_reviewed(client):
    _, headers = await register(client, "alice")
    bob, _ = await register(client, "bob", "freelancer")
    project = await create_project(client, headers)
    response = await client.post(
        f"/api/projects/{project['id']}/reviews", json={"revieweeId": bob["id"], "rating": 3}, headers=headers
    )
    assert response.status_code == 400
