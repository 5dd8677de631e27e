import pytest

from messenger.services import CANNED_REPLIES


pytestmark = pytest.mark.asyncio


async def _alice_with_bob(client, register_user, auth_header_factory):
    alice, password = await register_user(name="Alice")
    bob, _ = await register_user(name="Bob")
    headers = await auth_header_factory(alice["user"]["email"], password)
    resp = await client.post("/api/contacts", json={"email": bob["user"]["email"]}, headers=headers)
    return headers, resp.json()


async def _contact(client, headers, contact_id):
    contacts = (await client.get("/api/contacts", headers=headers)).json()
    return next(c for c in contacts if c["id"] == contact_id)


async def test_send_to_contact_triggers_one_reply(client, state, register_user, auth_header_factory):
    headers, bob = await _alice_with_bob(client, register_user, auth_header_factory)

    resp = await client.post("/api/messages", json={"chatId": bob["id"], "text": "Hello Bob"}, headers=headers)
    assert resp.status_code == 201
    sent = resp.json()
    assert sent["sender"] == "user"
    assert sent["type"] == "text"
    assert sent["text"] == "Hello Bob"
    assert "file" not in sent

    log = (await client.get(f"/api/messages/{bob['id']}", headers=headers)).json()
    assert [m["id"] for m in log] == [sent["id"]]
    contact = await _contact(client, headers, bob["id"])
    assert contact["lastMessage"] == "Hello Bob"
    assert contact["unread"] == 0

    await state.replies.wait_idle()

    log = (await client.get(f"/api/messages/{bob['id']}", headers=headers)).json()
    assert len(log) == 2
    reply = log[-1]
    assert reply["sender"] == "contact"
    assert reply["text"] in CANNED_REPLIES
    contact = await _contact(client, headers, bob["id"])
    assert contact["unread"] == 1
    assert contact["lastMessage"] == reply["text"]


async def test_send_to_system_contact_gets_no_reply(client, state, register_user, auth_header_factory):
    alice, password = await register_user(name="Alice")
    headers = await auth_header_factory(alice["user"]["email"], password)
    system = (await client.get("/api/contacts", headers=headers)).json()[0]

    resp = await client.post("/api/messages", json={"chatId": system["id"], "text": "Hi Oleg"}, headers=headers)
    assert resp.status_code == 201
    assert state.replies.pending_count() == 0

    await state.replies.wait_idle()
    log = (await client.get(f"/api/messages/{system['id']}", headers=headers)).json()
    assert len(log) == 2
    assert (await _contact(client, headers, system["id"]))["lastMessage"] == "Hi Oleg"


async def test_send_file_uses_file_preview(client, state, register_user, auth_header_factory):
    headers, bob = await _alice_with_bob(client, register_user, auth_header_factory)
    file = {"name": "report.pdf", "size": 1024}

    resp = await client.post(
        "/api/messages",
        json={"chatId": bob["id"], "type": "file", "file": file},
        headers=headers,
    )
    assert resp.status_code == 201
    sent = resp.json()
    assert sent["type"] == "file"
    assert sent["file"] == file
    assert "text" not in sent
    assert (await _contact(client, headers, bob["id"]))["lastMessage"] == "File: report.pdf"
    await state.replies.wait_idle()


async def test_send_file_keeps_null_attachment_keys(client, state, register_user, auth_header_factory):
    headers, bob = await _alice_with_bob(client, register_user, auth_header_factory)
    file = {"name": "a.png", "thumb": None, "meta": {"w": None, "h": 2}}

    resp = await client.post("/api/messages", json={"chatId": bob["id"], "file": file}, headers=headers)
    assert resp.status_code == 201
    assert resp.json()["file"] == file

    log = (await client.get(f"/api/messages/{bob['id']}", headers=headers)).json()
    assert log[0]["file"] == file
    await state.replies.wait_idle()


async def test_reply_still_lands_after_sent_message_is_deleted(client, state, register_user, auth_header_factory, monkeypatch):
    headers, bob = await _alice_with_bob(client, register_user, auth_header_factory)
    monkeypatch.setattr(state.replies, "next_delay", lambda: 0.2)
    sent = (await client.post("/api/messages", json={"chatId": bob["id"], "text": "never mind"}, headers=headers)).json()

    resp = await client.delete(f"/api/messages/{bob['id']}/{sent['id']}", headers=headers)
    assert resp.status_code == 200
    assert state.replies.pending_count() == 1  # delete does not cancel the reply

    await state.replies.wait_idle()

    log = (await client.get(f"/api/messages/{bob['id']}", headers=headers)).json()
    assert len(log) == 1
    assert log[0]["sender"] == "contact"
    assert (await _contact(client, headers, bob["id"]))["unread"] == 1


async def test_send_accepts_numeric_chat_id_and_null_type(client, register_user, auth_header_factory):
    alice, password = await register_user()
    headers = await auth_header_factory(alice["user"]["email"], password)

    resp = await client.post("/api/messages", json={"chatId": 42, "text": "hi", "type": None}, headers=headers)
    assert resp.status_code == 201
    sent = resp.json()
    assert sent["chatId"] == "42"
    assert sent["type"] == "text"

    log = (await client.get("/api/messages/42", headers=headers)).json()
    assert [m["id"] for m in log] == [sent["id"]]


async def test_send_to_unknown_chat_is_stored_without_reply(client, state, register_user, auth_header_factory):
    alice, password = await register_user(name="Alice")
    headers = await auth_header_factory(alice["user"]["email"], password)

    resp = await client.post("/api/messages", json={"chatId": "free-form", "text": "note"}, headers=headers)
    assert resp.status_code == 201
    assert state.replies.pending_count() == 0
    log = (await client.get("/api/messages/free-form", headers=headers)).json()
    assert len(log) == 1


@pytest.mark.parametrize(
    "payload",
    [
        {"text": "no chat"},
        {"chatId": "abc"},
        {"chatId": "abc", "text": ""},
    ],
)
async def test_send_requires_chat_and_body(client, register_user, auth_header_factory, payload):
    alice, password = await register_user()
    headers = await auth_header_factory(alice["user"]["email"], password)
    resp = await client.post("/api/messages", json=payload, headers=headers)
    assert resp.status_code == 400
    assert resp.json() == {"error": "chatId and text/file are required"}


async def test_unknown_chat_lists_empty(client, register_user, auth_header_factory):
    alice, password = await register_user()
    headers = await auth_header_factory(alice["user"]["email"], password)
    resp = await client.get("/api/messages/does-not-exist", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == []


async def test_chat_logs_are_private_per_user(client, state, register_user, auth_header_factory):
    headers, bob = await _alice_with_bob(client, register_user, auth_header_factory)
    await client.post("/api/messages", json={"chatId": bob["id"], "text": "secret"}, headers=headers)
    await state.replies.wait_idle()

    mallory, password = await register_user(name="Mallory")
    mallory_headers = await auth_header_factory(mallory["user"]["email"], password)
    resp = await client.get(f"/api/messages/{bob['id']}", headers=mallory_headers)
    assert resp.json() == []


async def test_delete_message(client, register_user, auth_header_factory):
    alice, password = await register_user()
    headers = await auth_header_factory(alice["user"]["email"], password)
    system = (await client.get("/api/contacts", headers=headers)).json()[0]
    sent = (await client.post("/api/messages", json={"chatId": system["id"], "text": "oops"}, headers=headers)).json()

    resp = await client.delete(f"/api/messages/{system['id']}/{sent['id']}", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Message deleted"}

    log = (await client.get(f"/api/messages/{system['id']}", headers=headers)).json()
    assert sent["id"] not in [m["id"] for m in log]
    assert len(log) == 1


async def test_delete_missing_message_is_acknowledged(client, register_user, auth_header_factory):
    alice, password = await register_user()
    headers = await auth_header_factory(alice["user"]["email"], password)
    system = (await client.get("/api/contacts", headers=headers)).json()[0]
    before = (await client.get(f"/api/messages/{system['id']}", headers=headers)).json()

    resp = await client.delete(f"/api/messages/{system['id']}/no-such-message", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Message deleted"}

    after = (await client.get(f"/api/messages/{system['id']}", headers=headers)).json()
    assert after == before
