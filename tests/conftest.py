"""Configure test environment for idpconfig."""

from collections.abc import Iterator
import pytest
from idpconfig import config


_SETTINGS_ENV = ("IDPCONFIG_BASE_URL", "IDPCONFIG_PROJECT_ID", "IDPCONFIG_TIMEOUT")


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    yield
    config._load_settings.cache_clear()
