"""Auth routes — registration, login sessions, profile, network account link.

Invariants:
    - Register/login set an HttpOnly session cookie; logout revokes it
    - Protected routes answer 401 without a valid session
    - Password hashes and stored session cookies never appear in responses
"""

from tests.api.helpers import register


async def test_register_returns_user_and_sets_cookie(client):
    res = await client.post(
        "/api/auth/register",
        json={"username": "alex@example.com", "password": "secret123"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["username"] == "alex@example.com"
    assert body["name"] == "alex"
    assert body["jobTitle"] == "Job Seeker"
    assert body["linkedInConnected"] is False
    assert "passwordHash" not in body and "password_hash" not in body
    assert "introflow_session" in res.cookies


async def test_register_creates_empty_preferences(client):
    await register(client)
    res = await client.get("/api/job-preferences")
    assert res.status_code == 200
    assert res.json() == {"titles": [], "locations": [], "industries": []}


async def test_duplicate_username_is_rejected(client, make_client):
    await register(client, "taken@example.com")
    other = make_client()
    res = await other.post(
        "/api/auth/register",
        json={"username": "taken@example.com", "password": "whatever"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "USERNAME_TAKEN"


async def test_register_validates_body(client):
    res = await client.post("/api/auth/register", json={"username": "ab"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    fields = {d["field"] for d in error["details"]}
    assert "body.username" in fields
    assert "body.password" in fields


async def test_me_requires_session(client):
    res = await client.get("/api/auth/me")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHENTICATED"


async def test_login_with_wrong_password_is_401(client, make_client):
    await register(client, "alex@example.com", "secret123")
    fresh = make_client()
    res = await fresh.post(
        "/api/auth/login", json={"username": "alex@example.com", "password": "nope"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_CREDENTIALS"


async def test_login_opens_a_new_session(client, make_client):
    await register(client, "alex@example.com", "secret123")
    fresh = make_client()
    res = await fresh.post(
        "/api/auth/login",
        json={"username": "alex@example.com", "password": "secret123"},
    )
    assert res.status_code == 200
    me = await fresh.get("/api/user")
    assert me.status_code == 200
    assert me.json()["username"] == "alex@example.com"


async def test_logout_revokes_session(client):
    await register(client)
    token = client.cookies.get("introflow_session")
    res = await client.post("/api/auth/logout")
    assert res.status_code == 200

    client.cookies.set("introflow_session", token)
    assert (await client.get("/api/auth/me")).status_code == 401


async def test_logout_without_session_is_harmless(client):
    res = await client.post("/api/auth/logout")
    assert res.status_code == 200


async def test_unknown_session_token_is_401(client):
    client.cookies.set("introflow_session", "not-a-real-token")
    assert (await client.get("/api/auth/me")).status_code == 401


async def test_profile_update_is_partial(client):
    await register(client)
    res = await client.patch(
        "/api/user",
        json={"calendarUrl": "https://cal.example/alex", "jobTitle": "Engineer"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["calendarUrl"] == "https://cal.example/alex"
    assert body["jobTitle"] == "Engineer"
    assert body["name"] == "alex"


async def test_profile_update_rejects_null_name(client):
    await register(client)
    res = await client.patch("/api/user", json={"name": None})
    assert res.status_code == 400


async def test_linkedin_connect_and_disconnect(client):
    await register(client)
    res = await client.post(
        "/api/linkedin/connect", json={"sessionCookie": "li_at=abc"},
    )
    assert res.status_code == 200
    assert res.json()["linkedInConnected"] is True
    assert "li_at" not in res.text

    res = await client.delete("/api/linkedin/disconnect")
    assert res.status_code == 200
    assert res.json()["linkedInConnected"] is False
