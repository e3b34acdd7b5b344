"""Helpers for driving the API as different users."""

from uuid import UUID

from fastapi.testclient import TestClient

from stackit.config import Settings
from stackit.util.jwt import create_token


def login_as(client: TestClient, user_id: UUID, handle: str = "user") -> None:
    """Make the client's following requests act as user_id."""
    token = create_token(str(user_id), handle, Settings().auth)
    client.cookies.set("auth_token", token)


def logout(client: TestClient) -> None:
    client.cookies.clear()


def ask_question(client: TestClient, title: str = "How to sort a list?") -> dict:
    response = client.post(
        "/questions",
        json={"title": title, "description": "Ascending, without a loop."},
    )
    assert response.status_code == 201
    return response.json()


def post_answer(client: TestClient, question_id: str) -> dict:
    response = client.post(
        f"/questions/{question_id}/answers", json={"content": "Call sorted()."}
    )
    assert response.status_code == 201
    return response.json()
