"""Tests for the configuration layer."""

from pathlib import Path

import pytest

from isam_gateway.config import (
    Settings,
    normalize_env_value,
    parse_bool,
    read_first_env_source,
    read_first_env_value,
)


@pytest.fixture
def clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove startup settings from the environment."""
    for key in (
        "APP_NAME",
        "APP_ENV",
        "LOG_LEVEL",
        "LOG_FILE",
        "HOST",
        "PORT",
        "PLESK_DOC_ROOT",
        "APP_ROOT",
        "SITE_URL",
        "VITE_SITE_URL",
    ):
        monkeypatch.delenv(key, raising=False)


def test_settings_defaults(clean_settings_env: None) -> None:
    """Test default startup settings."""
    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.doc_root is None
    assert settings.log_level == "INFO"
    assert settings.site_url == "https://isam-tech.com"
    assert settings.app_root == Path.cwd()


def test_settings_from_env(
    clean_settings_env: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test settings are read from their environment keys."""
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("PLESK_DOC_ROOT", "/srv/site")
    monkeypatch.setenv("VITE_SITE_URL", "https://example.test///")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.doc_root == "/srv/site"
    assert settings.site_url == "https://example.test"
    assert settings.log_level == "DEBUG"


def test_empty_env_values_are_ignored(
    clean_settings_env: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test empty environment values fall back to defaults."""
    monkeypatch.setenv("PORT", "")
    monkeypatch.setenv("PLESK_DOC_ROOT", "")

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.doc_root is None


def test_settings_invalid_log_level(clean_settings_env: None) -> None:
    """Test the validation of an invalid log level."""
    with pytest.raises(ValueError, match="Invalid log level"):
        Settings(_env_file=None, log_level="verbose")


def test_settings_invalid_port(clean_settings_env: None) -> None:
    """Test out-of-range ports are rejected."""
    with pytest.raises(ValueError):
        Settings(_env_file=None, port=70000)


def test_doc_root_candidates(tmp_path: Path, clean_settings_env: None) -> None:
    """Test the explicit override comes before the build output directory."""
    settings = Settings(_env_file=None, doc_root="/srv/site", app_root=tmp_path)

    assert settings.doc_root_candidates() == [
        Path("/srv/site"),
        tmp_path / "frontend" / "dist",
    ]


def test_doc_root_candidates_without_override(
    tmp_path: Path, clean_settings_env: None
) -> None:
    """Test a blank override is skipped."""
    settings = Settings(_env_file=None, doc_root="   ", app_root=tmp_path)

    assert settings.doc_root_candidates() == [tmp_path / "frontend" / "dist"]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1", True),
        ("true", True),
        ("TRUE", True),
        (" yes ", True),
        ("On", True),
        ('"on"', True),
        ("'Yes'", True),
        ("0", False),
        ("false", False),
        ("off", False),
        ("enabled", False),
        ("", False),
        ('"', False),
    ],
)
def test_parse_bool(raw: str, expected: bool) -> None:
    """Test boolean parsing of environment values."""
    assert parse_bool(raw) is expected


def test_normalize_env_value_strips_matching_quotes_only() -> None:
    """Test only a matching pair of quotes is removed."""
    assert normalize_env_value('  " hello "  ') == "hello"
    assert normalize_env_value("'mixed\"") == "'mixed\""


def test_read_first_env_value() -> None:
    """Test the first non-blank key wins and values are trimmed."""
    env = {"A": "   ", "B": "  second  ", "C": "third"}

    assert read_first_env_value(env, ["A", "B", "C"]) == "second"
    assert read_first_env_value(env, ["X", "Y"], "fallback") == "fallback"


def test_read_first_env_source() -> None:
    """Test the source key and raw value are reported."""
    env = {"PRIMARY": "", "SECONDARY": " yes "}

    assert read_first_env_source(env, ["PRIMARY", "SECONDARY"]) == ("SECONDARY", " yes ")
    assert read_first_env_source(env, ["MISSING"]) == (None, "")
