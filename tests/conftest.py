from __future__ import annotations

import random
from collections.abc import Callable
from concurrent.futures import Executor, Future

import pytest

from numerus.core.engine import GameSession
from numerus.core.models.round import CommentaryRequest


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Automatically add markers based on test location.

    - tests/unit/ -> @pytest.mark.unit
    - tests/integration/ -> @pytest.mark.integration
    - tests/e2e/ -> @pytest.mark.e2e
    """
    for item in items:
        path = str(item.fspath)
        existing_markers = {m.name for m in item.iter_markers()}

        if "/unit/" in path and "unit" not in existing_markers:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path and "integration" not in existing_markers:
            item.add_marker(pytest.mark.integration)
        elif "/e2e/" in path and "e2e" not in existing_markers:
            item.add_marker(pytest.mark.e2e)


class InlineExecutor(Executor):
    """Runs submitted work immediately in the calling thread."""

    def submit(self, fn: Callable[..., object], /, *args: object, **kwargs: object) -> Future:
        future: Future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as exc:
            future.set_exception(exc)
        return future


class RecordingCommentator:
    def __init__(self, text: str = "Nice try.") -> None:
        self.text = text
        self.requests: list[CommentaryRequest] = []

    def comment(self, request: CommentaryRequest) -> str:
        self.requests.append(request)
        return self.text


@pytest.fixture
def commentator() -> RecordingCommentator:
    return RecordingCommentator()


@pytest.fixture
def make_session(commentator, monkeypatch):
    """Factory for sessions with inline commentary and a fixed secret."""

    def _make(secret: str = "1234", **kwargs) -> GameSession:
        monkeypatch.setattr(
            "numerus.core.engine.generate_secret", lambda length, rng=None: secret
        )
        kwargs.setdefault("provider", commentator)
        kwargs.setdefault("executor", InlineExecutor())
        return GameSession(**kwargs)

    return _make


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def inline_executor() -> InlineExecutor:
    return InlineExecutor()
