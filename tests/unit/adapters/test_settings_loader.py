from __future__ import annotations

from pathlib import Path

import pytest

from numerus.adapters.loaders.settings_loader import YamlSettingsLoader, load_settings
from numerus.core.models.settings import CommentarySettings, SettingsError


def _write(tmp_path: Path, content: str, name: str = "numerus.yaml") -> Path:
    path = tmp_path / name
    path.write_text(content.strip(), encoding="utf-8")
    return path


def test_loader_reads_commentary_section(tmp_path: Path):
    path = _write(
        tmp_path,
        """
commentary:
  model: "claude-sonnet-4-5"
  temperature: 0.3
  top_p: 0.9
  max_tokens: 80
  timeout: 5
  api_key_env: "GM_KEY"
""",
    )
    settings = YamlSettingsLoader().load(path)
    assert settings.model == "claude-sonnet-4-5"
    assert settings.temperature == 0.3
    assert settings.top_p == 0.9
    assert settings.max_tokens == 80
    assert settings.timeout == 5
    assert settings.api_key_env == "GM_KEY"


def test_loader_empty_file_gives_defaults(tmp_path: Path):
    path = _write(tmp_path, "")
    assert YamlSettingsLoader().load(path) == CommentarySettings()


def test_loader_rejects_non_mapping(tmp_path: Path):
    path = _write(tmp_path, "- item")
    with pytest.raises(SettingsError, match="mapping"):
        YamlSettingsLoader().load(path)


def test_loader_rejects_broken_yaml(tmp_path: Path):
    path = _write(tmp_path, 'commentary:\n  model: "unterminated\n  temperature: 0.2')
    with pytest.raises(SettingsError, match="YAML"):
        YamlSettingsLoader().load(path)


def test_loader_validate_schema_error(tmp_path: Path):
    path = _write(
        tmp_path,
        """
commentary:
  model: 42
""",
    )
    issues = YamlSettingsLoader().validate(path)
    assert len(issues) == 1


def test_loader_validate_model_error(tmp_path: Path):
    path = _write(
        tmp_path,
        """
commentary:
  temperature: 3.5
""",
    )
    issues = YamlSettingsLoader().validate(path)
    assert issues
    assert issues[0].path == "commentary.temperature"


def test_loader_load_raises_with_issue_summary(tmp_path: Path):
    path = _write(
        tmp_path,
        """
commentary:
  max_tokens: 0
""",
    )
    with pytest.raises(SettingsError, match="commentary.max_tokens"):
        YamlSettingsLoader().load(path)


def test_loader_validate_accepts_valid_file(tmp_path: Path):
    path = _write(tmp_path, "commentary:\n  model: claude-haiku-4-5\n")
    assert YamlSettingsLoader().validate(path) == []


def test_load_settings_without_path_uses_defaults():
    assert load_settings(None, environ={}) == CommentarySettings()


def test_load_settings_model_override_from_env(tmp_path: Path):
    path = _write(tmp_path, "commentary:\n  temperature: 0.1\n")
    settings = load_settings(path, environ={"NUMERUS_MODEL": "claude-opus-4-1"})
    assert settings.model == "claude-opus-4-1"
    assert settings.temperature == 0.1


def test_load_settings_uses_given_loader(tmp_path: Path):
    class FixedLoader:
        def load(self, path: Path) -> CommentarySettings:
            return CommentarySettings(max_tokens=12)

        def validate(self, path: Path):
            return []

    settings = load_settings(tmp_path / "unused.yaml", environ={}, loader=FixedLoader())
    assert settings.max_tokens == 12
