"""Tests for configuration helpers."""

import pytest
from dynaconf import Dynaconf
from idpconfig import config


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Default settings target the public identity toolkit endpoint."""

    monkeypatch.delenv("IDPCONFIG_BASE_URL", raising=False)
    monkeypatch.delenv("IDPCONFIG_PROJECT_ID", raising=False)
    monkeypatch.delenv("IDPCONFIG_TIMEOUT", raising=False)

    settings = config.get_settings(refresh=True)

    assert settings.base_url == config.DEFAULT_BASE_URL
    assert settings.project_id is None
    assert settings.timeout == 30.0


def test_settings_strip_trailing_slash(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IDPCONFIG_BASE_URL", "http://localhost:9099/v2/")

    settings = config.get_settings(refresh=True)

    assert settings.base_url == "http://localhost:9099/v2"


def test_settings_invalid_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    """Non-HTTP base URLs raise a helpful error."""

    monkeypatch.setenv("IDPCONFIG_BASE_URL", "ftp://example.com")

    with pytest.raises(ValueError, match="IDPCONFIG_BASE_URL"):
        config.get_settings(refresh=True)


@pytest.mark.parametrize("timeout", ["0", "-1", "soon"])
def test_settings_invalid_timeout(
    monkeypatch: pytest.MonkeyPatch, timeout: str
) -> None:
    monkeypatch.delenv("IDPCONFIG_BASE_URL", raising=False)
    monkeypatch.setenv("IDPCONFIG_TIMEOUT", timeout)

    with pytest.raises(ValueError, match="IDPCONFIG_TIMEOUT"):
        config.get_settings(refresh=True)


def test_normalize_base_url_none() -> None:
    """Explicit `None` values fall back to defaults."""

    source = Dynaconf(settings_files=[], load_dotenv=False, environments=False)
    source.set("TIMEOUT", 12)
    source.set("BASE_URL", None)

    normalized = config._normalize_settings(source)

    assert normalized.timeout == 12.0
    assert normalized.base_url == config.DEFAULT_BASE_URL


def test_get_settings_refresh(monkeypatch: pytest.MonkeyPatch) -> None:
    """get_settings refresh flag should reload cached values."""

    monkeypatch.setenv("IDPCONFIG_PROJECT_ID", "initial-project")
    settings = config.get_settings(refresh=True)
    assert settings.project_id == "initial-project"

    monkeypatch.setenv("IDPCONFIG_PROJECT_ID", "updated-project")
    refreshed = config.get_settings(refresh=True)
    assert refreshed.project_id == "updated-project"
