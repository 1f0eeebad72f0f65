"""Tests for environment-driven settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from storydoc.config import Settings


def test_defaults():
    settings = Settings.from_env()
    assert settings.packages_dir == Path("packages")
    assert settings.output_dir is None
    assert settings.stories_file == "src/index.stories.tsx"
    assert settings.examples_heading == "Examples"
    assert settings.code_language == "tsx"
    assert settings.log_level == "WARNING"


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("STORYDOC_OUTPUT_DIR", "docs")
    monkeypatch.setenv("STORYDOC_EXAMPLES_HEADING", "示例")
    settings = Settings.from_env()
    assert settings.output_dir == Path("docs")
    assert settings.examples_heading == "示例"


def test_environment_variable_names_are_case_insensitive(monkeypatch):
    monkeypatch.setenv("storydoc_code_language", "jsx")
    assert Settings.from_env().code_language == "jsx"


def test_empty_environment_variable_keeps_default(monkeypatch):
    monkeypatch.setenv("STORYDOC_EXAMPLES_HEADING", "")
    assert Settings.from_env().examples_heading == "Examples"


def test_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("STORYDOC_CODE_LANGUAGE", "jsx")
    settings = Settings.from_env(code_language="vue", packages_dir=None)
    assert settings.code_language == "vue"
    assert settings.packages_dir == Path("packages")


def test_dotenv_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("STORYDOC_STORIES_FILE=stories/index.tsx\n")
    monkeypatch.chdir(tmp_path)
    assert Settings.from_env().stories_file == "stories/index.tsx"


def test_environment_wins_over_dotenv_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("STORYDOC_CODE_LANGUAGE=jsx\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STORYDOC_CODE_LANGUAGE", "vue")
    assert Settings.from_env().code_language == "vue"


def test_log_level_is_upper_cased(monkeypatch):
    monkeypatch.setenv("STORYDOC_LOG_LEVEL", "info")
    assert Settings.from_env().log_level == "INFO"


def test_invalid_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("STORYDOC_LOG_LEVEL", "bogus")
    with pytest.raises(ValidationError):
        Settings.from_env()
