from conftest import create_project, register


async def send(client, project_id, receiver_id, content, headers):
    return await client.post(
        f"/api/projects/{project_id}/messages",
        json={"receiverId": receiver_id, "content": content},
        headers=headers,
    )


async def test_participants_exchange_messages(client, hired):
    project_id = hired["project"]["id"]
    first = await send(client, project_id, hired["freelancer"]["id"], "Welcome aboard", hired["client_headers"])
    assert first.status_code == 201
    assert first.json()["isRead"] is False
    assert first.json()["senderId"] == hired["client"]["id"]

    reply = await send(client, project_id, hired["client"]["id"], "Thanks!", hired["freelancer_headers"])
    assert reply.status_code == 201

    response = await client.get(f"/api/projects/{project_id}/messages", headers=hired["client_headers"])
    assert response.status_code == 200
    assert [m["content"] for m in response.json()] == ["Welcome aboard", "Thanks!"]


async def test_outsiders_cannot_read_or_write(client, hired):
    project_id = hired["project"]["id"]
    outsider, outsider_headers = await register(client, "mallory", "freelancer")

    response = await client.get(f"/api/projects/{project_id}/messages", headers=outsider_headers)
    assert response.status_code == 403

    response = await send(client, project_id, hired["client"]["id"], "hey", outsider_headers)
    assert response.status_code == 403

    # 參與者也不能寄給案件外的人
    response = await send(client, project_id, outsider["id"], "psst", hired["client_headers"])
    assert response.status_code == 400

    response = await send(client, project_id, hired["client"]["id"], "me", hired["client_headers"])
    assert response.status_code == 400


async def test_messages_on_missing_project(client):
    _, headers = await register(client, "alice")
    assert (await client.get("/api/projects/99999/messages", headers=headers)).status_code == 404


async def test_conversations_and_read_state(client, hired):
    alice_id = hired["client"]["id"]
    bob_id = hired["freelancer"]["id"]
    first_project = hired["project"]["id"]

    # 第二個案件，同樣指派給 bob
    second = await create_project(client, hired["client_headers"], title="Second gig")
    response = await client.post(
        f"/api/projects/{second['id']}/applications",
        json={"coverLetter": "me again", "proposedRate": "$1", "estimatedDuration": "1d"},
        headers=hired["freelancer_headers"],
    )
    await client.put(
        f"/api/applications/{response.json()['id']}", json={"status": "accepted"}, headers=hired["client_headers"]
    )

    await send(client, first_project, bob_id, "one", hired["client_headers"])
    await send(client, second["id"], alice_id, "two", hired["freelancer_headers"])
    latest = (await send(client, first_project, bob_id, "three", hired["client_headers"])).json()

    response = await client.get(f"/api/users/{bob_id}/conversations", headers=hired["freelancer_headers"])
    assert response.status_code == 200
    conversations = response.json()
    assert [c["projectId"] for c in conversations] == [first_project, second["id"]]
    assert conversations[0]["lastMessage"]["id"] == latest["id"]
    assert conversations[0]["project"]["title"] == hired["project"]["title"]
    assert [c["unreadCount"] for c in conversations] == [2, 0]

    marked = await client.put(f"/api/messages/{latest['id']}/read", headers=hired["freelancer_headers"])
    assert marked.status_code == 200
    assert marked.json()["isRead"] is True

    conversations = (await client.get(
        f"/api/users/{bob_id}/conversations", headers=hired["freelancer_headers"]
    )).json()
    assert conversations[0]["unreadCount"] == 1

    response = await client.get(f"/api/users/{bob_id}/conversations", headers=hired["client_headers"])
    assert response.status_code == 403


async def test_only_receiver_marks_read(client, hired):
    message = (await send(
        client, hired["project"]["id"], hired["freelancer"]["id"], "ping", hired["client_headers"]
    )).json()

    response = await client.put(f"/api/messages/{message['id']}/read", headers=hired["client_headers"])
    assert response.status_code == 403

    response = await client.put("/api/messages/99999/read", headers=hired["client_headers"])
    assert response.status_code == 404


async def test_empty_message_rejected(client, hired):
    response = await send(client, hired["project"]["id"], hired["freelancer"]["id"], "", hired["client_headers"])
    assert response.status_code == 400
