from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MODEL = "claude-haiku-4-5"
DEFAULT_API_KEY_ENV = "ANTHROPIC_API_KEY"


class SettingsError(ValueError):
    """Raised when a settings file cannot be read or does not validate."""


class CommentarySettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    model: str = DEFAULT_MODEL
    temperature: float = Field(default=0.8, ge=0.0, le=1.0)
    top_p: float | None = Field(default=None, gt=0.0, le=1.0)
    max_tokens: int = Field(default=150, ge=1)
    timeout: float = Field(default=20.0, gt=0.0)
    api_key_env: str = DEFAULT_API_KEY_ENV


class SettingsDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    commentary: CommentarySettings = Field(default_factory=CommentarySettings)

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> "SettingsDocument":
        return cls.model_validate(raw)
