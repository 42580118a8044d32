"""Domain models for numerus."""

from numerus.core.models.enums import RoundStatus, SessionEventKind
from numerus.core.models.round import (
    CommentaryRequest,
    EvaluationResult,
    GuessRecord,
    Round,
    SessionStats,
)
from numerus.core.models.settings import CommentarySettings, SettingsDocument, SettingsError

__all__ = [
    "CommentaryRequest",
    "CommentarySettings",
    "EvaluationResult",
    "GuessRecord",
    "Round",
    "RoundStatus",
    "SessionEventKind",
    "SessionStats",
    "SettingsDocument",
    "SettingsError",
]
