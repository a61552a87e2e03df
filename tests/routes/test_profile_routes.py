"""Tests for the profile API routes."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.middleware.sessions import SessionMiddleware

from career_canvas.auth.middleware import current_user_id
from career_canvas.models.profile import Profile
from career_canvas.routes import profile as profile_routes


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()
    app.include_router(profile_routes.router)
    app.state.cosmos = MagicMock()
    app.dependency_overrides[current_user_id] = lambda: "u1"
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


def test_get_profile_returns_document(client: TestClient) -> None:
    stored = Profile(id="u1", user_id="u1", name="Ada", skills=["Python"])
    with patch(
        "career_canvas.routes.profile.get_profile",
        new_callable=AsyncMock,
        return_value=stored,
    ) as get_mock:
        response = client.get("/api/profile")

    assert response.status_code == 200
    assert response.json()["name"] == "Ada"
    assert response.json()["skills"] == ["Python"]
    assert get_mock.await_args.args[0] == "u1"


def test_get_missing_profile_is_404(client: TestClient) -> None:
    with patch(
        "career_canvas.routes.profile.get_profile",
        new_callable=AsyncMock,
        return_value=None,
    ):
        response = client.get("/api/profile")

    assert response.status_code == 404
    assert response.json() == {"detail": "Profile not found for this user"}


def test_post_profile_passes_only_sent_fields(client: TestClient) -> None:
    saved = Profile(id="u1", user_id="u1", summary="Hello")
    with patch(
        "career_canvas.routes.profile.update_profile",
        new_callable=AsyncMock,
        return_value=saved,
    ) as update_mock:
        response = client.post("/api/profile", json={"summary": "Hello"})

    assert response.status_code == 200
    assert response.json()["summary"] == "Hello"
    user_id, update, _repo = update_mock.await_args.args
    assert user_id == "u1"
    assert update.model_fields_set == {"summary"}


def test_post_rejects_invalid_payload(client: TestClient) -> None:
    response = client.post("/api/profile", json={"skills": "not-a-list"})
    assert response.status_code == 422


def test_requires_authenticated_session(app: FastAPI) -> None:
    app.dependency_overrides.clear()
    app.add_middleware(SessionMiddleware, secret_key="test")
    with TestClient(app) as client:
        assert client.get("/api/profile").status_code == 401
        assert client.post("/api/profile", json={}).status_code == 401
