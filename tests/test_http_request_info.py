"""Tests for outgoing request descriptions."""

from __future__ import annotations
import json
import httpx
from idpconfig.http import HttpRequestInfo


def test_get_request_has_no_body() -> None:
    info = HttpRequestInfo.build_get_request("https://api.test/configs/saml.one")

    with httpx.Client() as client:
        request = info.new_http_request(client)

    assert request.method == "GET"
    assert str(request.url) == "https://api.test/configs/saml.one"
    assert request.content == b""


def test_post_request_serializes_json_and_headers() -> None:
    info = (
        HttpRequestInfo.build_post_request(
            "https://api.test/configs", {"displayName": "NAME"}
        )
        .add_header("X-One", "1")
        .add_all_headers({"X-Two": "2", "X-One": "override"})
    )

    with httpx.Client(headers={"X-Default": "yes"}) as client:
        request = info.new_http_request(client)

    assert request.method == "POST"
    assert json.loads(request.content) == {"displayName": "NAME"}
    assert request.headers["X-One"] == "override"
    assert request.headers["X-Two"] == "2"
    assert request.headers["X-Default"] == "yes"


def test_patch_and_delete_methods() -> None:
    patch = HttpRequestInfo.build_patch_request("https://api.test/x", {"a": 1})
    delete = HttpRequestInfo.build_delete_request("https://api.test/x")

    assert patch.method == "PATCH"
    assert patch.content == {"a": 1}
    assert delete.method == "DELETE"
    assert delete.content is None


def test_response_interceptor_is_stored() -> None:
    seen: list[httpx.Response] = []
    info = HttpRequestInfo.build_get_request("https://api.test/x")

    assert info.set_response_interceptor(seen.append) is info
    assert info.response_interceptor is not None
    info.response_interceptor(httpx.Response(204))
    assert seen[0].status_code == 204
