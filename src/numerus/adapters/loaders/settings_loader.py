from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from numerus.core.models.settings import CommentarySettings, SettingsDocument, SettingsError
from numerus.core.protocols import SettingsLoader
from numerus.core.validator import ValidationIssue, validate_payload

MODEL_OVERRIDE_ENV = "NUMERUS_MODEL"


class YamlSettingsLoader:
    def __init__(self) -> None:
        self._yaml = YAML(typ="safe")

    def _parse_bytes(self, data: bytes) -> dict[str, object]:
        text = data.decode("utf-8")
        try:
            parsed = self._yaml.load(text)
        except YAMLError as exc:
            raise SettingsError(f"Settings file is not valid YAML: {exc}") from exc
        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise SettingsError("Settings YAML must be a mapping at the top level.")
        return parsed

    def _validate_raw(self, raw: dict[str, object]) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        issues.extend(validate_payload(raw))
        if issues:
            return issues
        try:
            SettingsDocument.from_raw(raw)
        except ValidationError as exc:
            for error in exc.errors():
                path_str = ".".join(str(part) for part in error.get("loc", ()))
                issues.append(ValidationIssue(path=path_str, message=error.get("msg", "")))
        return issues

    def validate(self, path: Path) -> list[ValidationIssue]:
        raw = self._parse_bytes(path.read_bytes())
        return self._validate_raw(raw)

    def load(self, path: Path) -> CommentarySettings:
        raw = self._parse_bytes(path.read_bytes())
        issues = self._validate_raw(raw)
        if issues:
            formatted = "; ".join(
                f"{issue.path or 'settings'}: {issue.message}" for issue in issues
            )
            raise SettingsError(f"Settings validation failed: {formatted}")
        return SettingsDocument.from_raw(raw).commentary


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
    loader: SettingsLoader | None = None,
) -> CommentarySettings:
    """Resolve commentary settings from an optional file plus the environment."""
    if path:
        settings = (loader or YamlSettingsLoader()).load(path)
    else:
        settings = CommentarySettings()
    env = os.environ if environ is None else environ
    override = env.get(MODEL_OVERRIDE_ENV, "").strip()
    if override:
        settings = settings.model_copy(update={"model": override})
    return settings
