"""Argument checks shared by the request builders."""

from __future__ import annotations
from typing import Annotated, Any
from pydantic import AnyUrl, TypeAdapter, UrlConstraints, ValidationError
from idpconfig.errors import InvalidArgumentError


_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(
    Annotated[AnyUrl, UrlConstraints(host_required=True)]
)


def check_argument(condition: bool, message: str) -> None:
    """Raise :class:`InvalidArgumentError` with ``message`` unless ``condition``."""
    if not condition:
        raise InvalidArgumentError(message)


def require_non_empty(value: Any, label: str) -> str:
    """Return ``value`` when it is a non-empty string."""
    if value is None or value == "":
        msg = f"{label} must not be null or empty."
        raise InvalidArgumentError(msg)
    if not isinstance(value, str):
        msg = f"{label} must be a string."
        raise InvalidArgumentError(msg)
    return value


def assert_valid_url(url: str) -> None:
    """Ensure ``url`` parses as an absolute URL with a scheme and a host."""
    try:
        _URL_ADAPTER.validate_python(url)
    except ValidationError as exc:
        msg = f"{url} is a malformed URL."
        raise InvalidArgumentError(msg) from exc


__all__ = ["assert_valid_url", "check_argument", "require_non_empty"]
