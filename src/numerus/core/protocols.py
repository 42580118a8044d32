from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from numerus.core.models.round import CommentaryRequest
from numerus.core.models.settings import CommentarySettings
from numerus.core.validator import ValidationIssue


@runtime_checkable
class CommentaryProvider(Protocol):
    """Protocol for turning a scored guess into a short remark.

    Implementations may block; GameSession calls them off the game thread.
    """

    def comment(self, request: CommentaryRequest) -> str: ...


@runtime_checkable
class SettingsLoader(Protocol):
    """Protocol for loading commentary settings from a file."""

    def load(self, path: Path) -> CommentarySettings: ...

    def validate(self, path: Path) -> list[ValidationIssue]: ...
