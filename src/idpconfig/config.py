"""Runtime configuration helpers for the provider config client."""

from __future__ import annotations
from functools import lru_cache
from dynaconf import Dynaconf


DEFAULT_BASE_URL = "https://identitytoolkit.googleapis.com/v2"

_DEFAULTS: dict[str, object] = {
    "BASE_URL": DEFAULT_BASE_URL,
    "PROJECT_ID": None,
    "TIMEOUT": 30.0,
}


def _build_loader() -> Dynaconf:
    """Create a Dynaconf loader wired to environment variables only."""
    return Dynaconf(
        envvar_prefix="IDPCONFIG",
        settings_files=[],
        load_dotenv=True,
        environments=False,
    )


def _normalize_settings(source: Dynaconf) -> Dynaconf:
    """Validate and fill defaults on the raw Dynaconf settings."""
    normalized = Dynaconf(
        envvar_prefix="IDPCONFIG",
        settings_files=[],
        load_dotenv=False,
        environments=False,
    )

    base_url = str(source.get("BASE_URL") or _DEFAULTS["BASE_URL"]).rstrip("/")
    if not base_url.startswith(("https://", "http://")):
        msg = "IDPCONFIG_BASE_URL must be an http or https URL."
        raise ValueError(msg)
    normalized.set("BASE_URL", base_url)

    project_id = source.get("PROJECT_ID")
    normalized.set("PROJECT_ID", str(project_id) if project_id else None)

    timeout_raw = source.get("TIMEOUT", _DEFAULTS["TIMEOUT"])
    try:
        timeout = float(timeout_raw)
    except (TypeError, ValueError) as exc:
        msg = "IDPCONFIG_TIMEOUT must be a number."
        raise ValueError(msg) from exc
    if timeout <= 0:
        msg = "IDPCONFIG_TIMEOUT must be greater than zero."
        raise ValueError(msg)
    normalized.set("TIMEOUT", timeout)

    return normalized


@lru_cache(maxsize=1)
def _load_settings() -> Dynaconf:
    """Load settings once and cache the normalized Dynaconf instance."""
    return _normalize_settings(_build_loader())


def get_settings(*, refresh: bool = False) -> Dynaconf:
    """Return the cached Dynaconf settings, reloading them if requested."""
    if refresh:
        _load_settings.cache_clear()
    return _load_settings()


__all__ = ["DEFAULT_BASE_URL", "get_settings"]
