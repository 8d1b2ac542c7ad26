"""Description of outgoing HTTP requests, dispatched by the config client."""

from __future__ import annotations
from collections.abc import Callable, Mapping
from typing import Any, Self
import httpx


ResponseInterceptor = Callable[[httpx.Response], None]
"""Callback invoked with every response before its status is checked."""


class HttpRequestInfo:
    """Method, URL, JSON body, headers and interceptor of a pending request."""

    def __init__(self, method: str, url: str | httpx.URL, content: Any = None) -> None:
        """Use the ``build_*_request`` constructors instead."""
        self.method = method
        self.url = httpx.URL(url)
        self.content = content
        self.headers: dict[str, str] = {}
        self.response_interceptor: ResponseInterceptor | None = None

    @classmethod
    def build_get_request(cls, url: str | httpx.URL) -> Self:
        """Describe a ``GET`` request."""
        return cls("GET", url)

    @classmethod
    def build_delete_request(cls, url: str | httpx.URL) -> Self:
        """Describe a ``DELETE`` request."""
        return cls("DELETE", url)

    @classmethod
    def build_post_request(cls, url: str | httpx.URL, content: Any) -> Self:
        """Describe a ``POST`` request with a JSON body."""
        return cls("POST", url, content)

    @classmethod
    def build_patch_request(cls, url: str | httpx.URL, content: Any) -> Self:
        """Describe a ``PATCH`` request with a JSON body."""
        return cls("PATCH", url, content)

    def add_header(self, name: str, value: str) -> Self:
        """Set a single header."""
        self.headers[name] = value
        return self

    def add_all_headers(self, headers: Mapping[str, str]) -> Self:
        """Set every header in ``headers``."""
        self.headers.update(headers)
        return self

    def set_response_interceptor(self, interceptor: ResponseInterceptor | None) -> Self:
        """Install the callback run against the response."""
        self.response_interceptor = interceptor
        return self

    def new_http_request(self, client: httpx.Client) -> httpx.Request:
        """Build the :class:`httpx.Request` using ``client`` defaults."""
        return client.build_request(
            self.method, self.url, json=self.content, headers=self.headers
        )


__all__ = ["HttpRequestInfo", "ResponseInterceptor"]
