"""Integration tests for /chat endpoints."""

import pytest
from httpx import AsyncClient


def _auth(user_id: str, admin: bool = False) -> dict[str, str]:
    token = f"{user_id}:admin" if admin else user_id
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_user_message_goes_to_admin(api_client: AsyncClient) -> None:
    """Test non-admin messages are addressed to the admin regardless of recipient."""
    response = await api_client.post(
        "/chat/messages",
        json={"message": "Is the gondola pet friendly?", "recipient_id": "bob"},
        headers={**_auth("alice"), "X-User-Email": "alice@example.com"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["sender_id"] == "alice"
    assert data["recipient_id"] == "admin"
    assert data["email"] == "alice@example.com"
    assert data["message"] == "Is the gondola pet friendly?"


@pytest.mark.asyncio
async def test_admin_reply_and_conversation(api_client: AsyncClient) -> None:
    """Test an admin reply shows up in the user's conversation in order."""
    await api_client.post("/chat/messages", json={"message": "Hello"}, headers=_auth("alice"))
    reply = await api_client.post(
        "/chat/messages",
        json={"message": "Hi Alice", "recipient_id": "alice"},
        headers=_auth("admin", admin=True),
    )
    assert reply.status_code == 201
    await api_client.post("/chat/messages", json={"message": "Other user"}, headers=_auth("carol"))

    alice_view = await api_client.get("/chat/messages", headers=_auth("alice"))
    admin_view = await api_client.get("/chat/messages", headers=_auth("admin", admin=True))

    assert [m["message"] for m in alice_view.json()["messages"]] == ["Hello", "Hi Alice"]
    assert [m["message"] for m in admin_view.json()["messages"]] == [
        "Hello",
        "Hi Alice",
        "Other user",
    ]


@pytest.mark.asyncio
async def test_admin_message_without_recipient_is_rejected(api_client: AsyncClient) -> None:
    """Test admins must name who they reply to."""
    response = await api_client.post(
        "/chat/messages", json={"message": "To whom?"}, headers=_auth("admin", admin=True)
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_blank_message_is_rejected(api_client: AsyncClient) -> None:
    """Test whitespace-only messages are rejected."""
    response = await api_client.post(
        "/chat/messages", json={"message": "   "}, headers=_auth("alice")
    )

    assert response.status_code == 422
