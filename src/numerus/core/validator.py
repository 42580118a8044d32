from __future__ import annotations

from dataclasses import dataclass

import fastjsonschema  # type: ignore[import-untyped]
from fastjsonschema import JsonSchemaException

from numerus.core.constants import DIGITS, SECRET_LENGTH


@dataclass(frozen=True)
class ValidationIssue:
    path: str
    message: str


SETTINGS_SCHEMA: dict[str, object] = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "commentary": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "model": {"type": "string", "minLength": 1},
                "temperature": {"type": "number"},
                "top_p": {"type": ["number", "null"]},
                "max_tokens": {"type": "integer"},
                "timeout": {"type": "number"},
                "api_key_env": {"type": "string", "minLength": 1},
            },
        }
    },
}

_validator = fastjsonschema.compile(SETTINGS_SCHEMA)


def validate_payload(payload: dict[str, object]) -> list[ValidationIssue]:
    try:
        _validator(payload)
    except JsonSchemaException as exc:
        path = ".".join(str(part) for part in exc.path) if exc.path else ""
        return [ValidationIssue(path=path, message=exc.message)]
    return []


def normalize_guess(raw: str) -> str:
    return raw.strip()


def validate_guess(raw: object, length: int = SECRET_LENGTH) -> list[ValidationIssue]:
    """Check that ``raw`` is ``length`` distinct digits. Empty result means valid."""
    if not isinstance(raw, str):
        return [ValidationIssue(path="guess", message="Guess must be a string.")]
    issues: list[ValidationIssue] = []
    if len(raw) != length:
        issues.append(
            ValidationIssue(path="guess", message=f"Guess must be exactly {length} digits.")
        )
    if any(char not in DIGITS for char in raw):
        issues.append(ValidationIssue(path="guess", message="Guess must contain digits 0-9 only."))
    if len(set(raw)) != len(raw):
        issues.append(
            ValidationIssue(
                path="guess", message="All digits must be unique (no repeating digits)."
            )
        )
    return issues


def is_valid_guess(raw: object, length: int = SECRET_LENGTH) -> bool:
    return not validate_guess(raw, length)
