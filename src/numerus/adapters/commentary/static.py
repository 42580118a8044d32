from __future__ import annotations

from numerus.core.constants import UNAVAILABLE_COMMENTARY
from numerus.core.models.round import CommentaryRequest


class StaticCommentator:
    """Answers every guess with the same line; used when no API key is configured."""

    def __init__(self, text: str = UNAVAILABLE_COMMENTARY) -> None:
        self._text = text

    def comment(self, request: CommentaryRequest) -> str:
        return self._text
