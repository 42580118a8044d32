"""Game Master commentary from the Anthropic Messages API."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

import anthropic
import structlog

from numerus.adapters.commentary.prompt import render_prompt
from numerus.adapters.commentary.static import StaticCommentator
from numerus.core.constants import FALLBACK_COMMENTARY, UNAVAILABLE_COMMENTARY
from numerus.core.models.round import CommentaryRequest
from numerus.core.models.settings import CommentarySettings
from numerus.core.protocols import CommentaryProvider

log: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class AnthropicCommentator:
    """One request per guess, no retries; every failure maps to the fallback line."""

    def __init__(
        self,
        settings: CommentarySettings,
        api_key: str | None = None,
        client: Any | None = None,
    ) -> None:
        self._settings = settings
        self._client = client or anthropic.Anthropic(
            api_key=api_key,
            timeout=settings.timeout,
            max_retries=0,
        )

    @property
    def model(self) -> str:
        return self._settings.model

    def _request_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {
            "model": self._settings.model,
            "max_tokens": self._settings.max_tokens,
            "temperature": self._settings.temperature,
        }
        if self._settings.top_p is not None:
            options["top_p"] = self._settings.top_p
        return options

    def comment(self, request: CommentaryRequest) -> str:
        prompt = render_prompt(request)
        try:
            message = self._client.messages.create(
                messages=[{"role": "user", "content": prompt}],
                **self._request_options(),
            )
        except anthropic.APIError as exc:
            log.warning("commentary_request_failed", model=self._settings.model, error=str(exc))
            return FALLBACK_COMMENTARY
        text = _extract_text(message)
        if not text:
            log.warning("commentary_response_empty", model=self._settings.model)
            return FALLBACK_COMMENTARY
        return text


def _extract_text(message: object) -> str:
    blocks = getattr(message, "content", None)
    if not isinstance(blocks, (list, tuple)):
        return ""
    parts = [
        block.text
        for block in blocks
        if getattr(block, "type", None) == "text" and isinstance(getattr(block, "text", None), str)
    ]
    return "".join(parts).strip()


def build_provider(
    settings: CommentarySettings, environ: Mapping[str, str] | None = None
) -> CommentaryProvider:
    """Pick the commentary provider for this run.

    Without a credential the network is never touched: every guess gets the
    fixed "service unavailable" line instead.
    """
    env = os.environ if environ is None else environ
    api_key = env.get(settings.api_key_env, "").strip()
    if not api_key:
        log.info("commentary_offline", reason="missing_api_key", env_var=settings.api_key_env)
        return StaticCommentator(UNAVAILABLE_COMMENTARY)
    log.debug("commentary_online", model=settings.model)
    return AnthropicCommentator(settings, api_key=api_key)
