"""Smoke test: the whole identity flow over HTTP against a real database.

Runs the app in-process through httpx's ASGI transport, on a per-test
SQLite database, with the in-memory mail sender standing in for SMTP.
Secrets are read back out of the captured mail, the way a user would.
"""

import re

import httpx
import pytest
import pytest_asyncio

from review_identity.core.container import get_database, get_db_session, get_email_service
from review_identity.domain.enums import UserRole
from review_identity.infrastructure.persistence.repositories import UserRepository
from review_identity.main import app
from tests.utils.utils import create_test_user

BASE = "/api/v1/auth"


@pytest_asyncio.fixture
async def client(test_database):
    async def session_override():
        async with test_database.get_session() as session:
            yield session

    app.dependency_overrides[get_db_session] = session_override
    app.dependency_overrides[get_database] = lambda: test_database
    outbox = get_email_service().outbox
    outbox.clear()

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    outbox.clear()


def _last_mail_to(address: str):
    messages = get_email_service().messages_to(address)
    assert messages, f"no mail sent to {address}"
    return messages[-1]


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.smoke
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.smoke
async def test_code_registration_and_session_lifecycle(client):
    email = "newreader@example.com"

    # 1. Request a code; the response never contains it
    response = await client.post(f"{BASE}/send-code", json={"email": email})
    assert response.status_code == 202
    code = re.search(r">(\d{6})<", _last_mail_to(email).html_body).group(1)
    assert code not in response.text

    # 2. A wrong code is rejected, the right one registers a verified user
    wrong = "000000" if code != "000000" else "111111"
    response = await client.post(
        f"{BASE}/register",
        json={"email": email, "code": wrong, "password": "SecurePass123!"},
    )
    assert response.status_code == 401

    response = await client.post(
        f"{BASE}/register",
        json={
            "email": "NewReader@Example.com",
            "code": code,
            "password": "SecurePass123!",
            "display_name": "New Reader",
        },
    )
    assert response.status_code == 201
    registered = response.json()
    assert registered["user"]["email"] == email
    assert registered["user"]["email_verified"] is True
    assert registered["user"]["role"] == "user"

    # 3. The code is single use; the email now belongs to an account
    response = await client.post(
        f"{BASE}/register",
        json={"email": email, "code": code, "password": "SecurePass123!"},
    )
    assert response.status_code == 401
    response = await client.post(f"{BASE}/send-code", json={"email": email})
    assert response.status_code == 409

    # 4. Login
    response = await client.post(
        f"{BASE}/login", json={"email": email, "password": "wrong-password"}
    )
    assert response.status_code == 401
    response = await client.post(
        f"{BASE}/login", json={"email": email, "password": "SecurePass123!"}
    )
    assert response.status_code == 200
    session = response.json()

    # 5. Refresh rotates; the old token is dead
    response = await client.post(
        f"{BASE}/refresh", json={"refresh_token": session["refresh_token"]}
    )
    assert response.status_code == 200
    rotated = response.json()
    assert rotated["refresh_token"] != session["refresh_token"]

    response = await client.post(
        f"{BASE}/refresh", json={"refresh_token": session["refresh_token"]}
    )
    assert response.status_code == 401

    # 6. The registration session is unaffected by the rotation
    response = await client.post(
        f"{BASE}/refresh", json={"refresh_token": registered["refresh_token"]}
    )
    assert response.status_code == 200

    # 7. Access token works on a protected route
    response = await client.get(
        f"{BASE}/verification-status", headers=_bearer(rotated["access_token"])
    )
    assert response.status_code == 200
    assert response.json() == {"email_verified": True}

    # 8. Logout once
    response = await client.post(
        f"{BASE}/logout", json={"refresh_token": rotated["refresh_token"]}
    )
    assert response.status_code == 204
    response = await client.post(
        f"{BASE}/logout", json={"refresh_token": rotated["refresh_token"]}
    )
    assert response.status_code == 401


@pytest.mark.smoke
async def test_link_verification_for_unverified_account(client, test_database, password_service):
    email = "legacy@example.com"
    async with test_database.get_session() as session:
        await UserRepository(session=session).create(
            create_test_user(
                email=email,
                password_hash=password_service.hash_password("SecurePass123!"),
                role=UserRole.USER,
            )
        )

    response = await client.post(
        f"{BASE}/login", json={"email": email, "password": "SecurePass123!"}
    )
    assert response.status_code == 200
    headers = _bearer(response.json()["access_token"])

    response = await client.get(f"{BASE}/verification-status", headers=headers)
    assert response.json() == {"email_verified": False}

    # Without a bearer token nothing is sent
    response = await client.post(f"{BASE}/send-verification")
    assert response.status_code == 401

    # Resend replaces the first link
    assert (await client.post(f"{BASE}/send-verification", headers=headers)).status_code == 202
    first = re.search(r"token=([A-Za-z0-9_\-]+)", _last_mail_to(email).html_body).group(1)
    assert (await client.post(f"{BASE}/send-verification", headers=headers)).status_code == 202
    second = re.search(r"token=([A-Za-z0-9_\-]+)", _last_mail_to(email).html_body).group(1)
    assert first != second

    response = await client.post(f"{BASE}/verify-email", json={"token": first})
    assert response.status_code == 401

    response = await client.post(f"{BASE}/verify-email", json={"token": second})
    assert response.status_code == 200

    # Single use
    response = await client.post(f"{BASE}/verify-email", json={"token": second})
    assert response.status_code == 401

    response = await client.get(f"{BASE}/verification-status", headers=headers)
    assert response.json() == {"email_verified": True}

    response = await client.post(f"{BASE}/send-verification", headers=headers)
    assert response.status_code == 409
