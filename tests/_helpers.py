"""Helpers shared across test modules."""

from __future__ import annotations

from packpal_api.app.models import Identity, Role


def make_identity(role: Role = Role.OWNER, email: str = "a@x.com", identity_id: int = 1) -> Identity:
    return Identity(
        id=identity_id,
        first_name="Asha",
        last_name="Patil",
        email=email,
        password_hash="unused",
        role=role,
    )


def signup(client, email="a@x.com", password="pw-123", role="OWNER", first="Asha", last="Patil"):
    return client.post(
        "/auth/signup",
        data={"fName": first, "lName": last, "email": email, "password": password, "role": role},
    )


def login(client, email="a@x.com", password="pw-123"):
    return client.post("/auth/login", data={"username": email, "password": password})
