"""End-to-end tests of the HTTP surface with a temporary database."""

from fastapi.testclient import TestClient

from packpal_api.app.core import stores
from packpal_api.app.core.config import settings
from packpal_api.app.core.stores import EventStore
from packpal_api.app.main import create_app
from packpal_api.app.models import EventStatus

from _helpers import login, signup


EVENT = {
    "name": "Trip",
    "description": "Weekend away",
    "source": "Pune",
    "destination": "Goa",
    "purpose": "Leisure",
    "startDate": "2025-09-01T06:00:00",
    "endDate": "2025-09-03T20:00:00",
}


# ---------------------------------------------------------------------------
# Sign-up
# ---------------------------------------------------------------------------


def test_signup_success(client):
    resp = signup(client)
    assert resp.status_code == 200
    assert resp.text == "Signup successful"


def test_signup_does_not_log_in(client):
    signup(client)
    assert settings.session_cookie_name not in client.cookies
    assert client.get("/user/me").status_code == 401


def test_signup_duplicate_email(client):
    signup(client)
    resp = signup(client, role="VIEWER", password="other")
    assert resp.status_code == 409
    assert resp.text == "Email is already registered"


def test_signup_invalid_role(client):
    resp = signup(client, role="captain")
    assert resp.status_code == 400
    assert resp.text == "Invalid role. Allowed roles are: OWNER, ADMIN, MEMBER, VIEWER"


def test_signup_missing_field_is_rejected(client):
    resp = client.post("/auth/signup", data={"fName": "Asha", "email": "a@x.com"})
    assert resp.status_code == 422


# ---------------------------------------------------------------------------
# Login / logout
# ---------------------------------------------------------------------------


def test_login_success_sets_session_cookie(client):
    signup(client)
    resp = login(client)
    assert resp.status_code == 200
    assert resp.text == "login success"
    assert client.cookies.get(settings.session_cookie_name)

    me = client.get("/user/me")
    assert me.status_code == 200
    assert me.json() == {"id": 1, "fName": "Asha", "lName": "Patil", "email": "a@x.com", "role": "OWNER"}


def test_login_unknown_user(client):
    resp = login(client, email="ghost@x.com")
    assert resp.status_code == 404
    assert resp.text == "user not found"


def test_login_wrong_password(client):
    signup(client)
    resp = login(client, password="wrong")
    assert resp.status_code == 401
    assert resp.text == "Invalid password"
    assert settings.session_cookie_name not in client.cookies


def test_login_rotates_session_token(client):
    signup(client)
    login(client)
    first = client.cookies.get(settings.session_cookie_name)
    login(client)
    second = client.cookies.get(settings.session_cookie_name)
    assert first != second


def test_logout_ends_session(client):
    signup(client)
    login(client)
    resp = client.post("/auth/logout")
    assert resp.status_code == 200
    assert resp.text == "Logged out successfully."
    assert client.get("/user/me").status_code == 401


def test_logout_without_session(client):
    resp = client.post("/auth/logout")
    assert resp.status_code == 200
    assert resp.text == "Logged out successfully."


def test_second_login_elsewhere_evicts_first_session(client):
    signup(client)
    login(client)
    with TestClient(create_app()) as other_device:
        assert login(other_device).status_code == 200
        assert other_device.get("/user/me").status_code == 200
    assert client.get("/user/me").status_code == 401


# ---------------------------------------------------------------------------
# Event creation
# ---------------------------------------------------------------------------


def test_owner_creates_event(client):
    signup(client, email="a@x.com", role="OWNER")
    login(client, email="a@x.com")
    resp = client.post("/event/create", json=EVENT)
    assert resp.status_code == 200
    assert resp.text == "Event created successfully."

    event = EventStore.get(1)
    assert event.name == "Trip"
    assert event.owner_email == "a@x.com"
    assert event.status is EventStatus.ONGOING


def test_client_cannot_spoof_owner_or_status(client):
    signup(client, email="a@x.com", role="owner")
    login(client, email="a@x.com")
    resp = client.post("/event/create", json={**EVENT, "ownerEmail": "b@x.com", "status": "ENDED"})
    assert resp.status_code == 200
    event = EventStore.get(1)
    assert event.owner_email == "a@x.com"
    assert event.status is EventStatus.ONGOING


def test_viewer_is_forbidden(client):
    signup(client, role="VIEWER")
    login(client)
    resp = client.post("/event/create", json=EVENT)
    assert resp.status_code == 403
    assert resp.text == "Access denied: Only users with OWNER role can create events."
    assert EventStore.count() == 0


def test_create_event_without_login(client):
    resp = client.post("/event/create", json=EVENT)
    assert resp.status_code == 401
    assert resp.text == "You must be logged in to create an event."
    assert EventStore.count() == 0


def test_create_event_after_logout(client):
    signup(client)
    login(client)
    client.post("/auth/logout")
    resp = client.post("/event/create", json=EVENT)
    assert resp.status_code == 401
    assert EventStore.count() == 0


def test_forged_session_cookie_is_unauthenticated(client):
    client.cookies.set(settings.session_cookie_name, "forged-token")
    resp = client.post("/event/create", json=EVENT)
    assert resp.status_code == 401


# ---------------------------------------------------------------------------
# Access control and failures
# ---------------------------------------------------------------------------


def test_protected_route_requires_session(client):
    resp = client.get("/user/me")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Authentication required."


def test_api_docs_require_session(client):
    for path in ("/openapi.json", "/docs", "/redoc"):
        resp = client.get(path)
        assert resp.status_code == 401, path


def test_api_docs_are_served_after_login(client):
    signup(client)
    login(client)
    schema = client.get("/openapi.json")
    assert schema.status_code == 200
    assert "/event/create" in schema.json()["paths"]
    assert "/openapi.json" not in schema.json()["paths"]
    assert client.get("/docs").status_code == 200


def test_store_outage_is_reported_as_503(client, monkeypatch):
    def broken():
        raise stores.sqlite3.OperationalError("unable to open database file")

    monkeypatch.setattr(stores, "get_connection", broken)
    resp = signup(client)
    assert resp.status_code == 503
    assert resp.text == "Service temporarily unavailable."


def test_cors_allows_configured_origin_with_credentials(client):
    resp = client.options(
        "/auth/login",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert resp.headers["access-control-allow-credentials"] == "true"
