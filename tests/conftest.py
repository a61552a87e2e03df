"""Shared fixtures for the test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import pytest

from career_canvas.editor.history import History
from career_canvas.editor.session import EditorSession
from career_canvas.editor.store import BlockStore
from career_canvas.models.profile import EducationRecord, ExperienceRecord, Profile, ProjectRecord

if TYPE_CHECKING:
    from collections.abc import Callable

AUTOSAVE_DELAY = 0.05


@pytest.fixture
def profile() -> Profile:
    """A fully populated stored profile."""
    return Profile(
        id="user-1",
        user_id="user-1",
        name="Ada Lovelace",
        email="ada@example.com",
        phone="555-0100",
        linkedin="linkedin.com/in/ada",
        github="github.com/ada",
        website="ada.dev",
        summary="Analyst of engines.",
        skills=["Python", "Mathematics"],
        experience=[
            ExperienceRecord(
                title="Analyst",
                company="Babbage & Co",
                location="London",
                start="1842-01-01",
                end="1843-12-31",
                description="Wrote the notes.",
            )
        ],
        education=[EducationRecord(school="Home", degree="Private", field="Mathematics")],
        projects=[ProjectRecord(name="Note G", technologies="Analytical Engine", url="")],
    )


@pytest.fixture
def gateway(profile: Profile) -> MagicMock:
    """A profile collaborator that serves ``profile`` and accepts every update."""
    mock = MagicMock()
    mock.get_profile = AsyncMock(return_value=profile)
    mock.update_profile = AsyncMock(return_value=profile)
    return mock


@pytest.fixture
def notifier() -> MagicMock:
    return MagicMock()


@pytest.fixture
def history() -> History:
    return History()


@pytest.fixture
def store(history: History) -> BlockStore:
    return BlockStore(history)


@pytest.fixture
def make_session(
    gateway: MagicMock, notifier: MagicMock
) -> Callable[..., EditorSession]:
    """Build an editor session with a short autosave delay."""

    def _make(**kwargs: object) -> EditorSession:
        kwargs.setdefault("notifier", notifier)
        kwargs.setdefault("autosave_delay", AUTOSAVE_DELAY)
        return EditorSession(gateway, **kwargs)  # type: ignore[arg-type]

    return _make
