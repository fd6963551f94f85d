from __future__ import annotations

import functools

import httpx
import pytest

from jobflow.ats import http_helpers
from jobflow.ats.errors import FetchError, UpstreamParseError, UpstreamTransportError
from jobflow.ats.http_helpers import fetch_json, html_to_text


def _install_transport(monkeypatch, handler):
    real_client = httpx.Client
    monkeypatch.setattr(http_helpers.httpx, "Client", functools.partial(real_client, transport=httpx.MockTransport(handler)))


def test_fetch_json_returns_decoded_body(monkeypatch):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["accept"] = request.headers.get("accept")
        return httpx.Response(200, json={"jobs": []})

    _install_transport(monkeypatch, handler)

    assert fetch_json("https://api.example.test/jobs", "greenhouse") == {"jobs": []}
    assert seen["accept"] == "application/json"


def test_non_2xx_raises_fetch_error(monkeypatch):
    _install_transport(monkeypatch, lambda request: httpx.Response(404, text="nope"))

    with pytest.raises(FetchError) as exc_info:
        fetch_json("https://api.example.test/jobs/1", "lever")

    assert exc_info.value.status_code == 404
    assert exc_info.value.platform == "lever"
    assert str(exc_info.value) == "lever API error: 404"


def test_invalid_json_raises_parse_error(monkeypatch):
    _install_transport(monkeypatch, lambda request: httpx.Response(200, text="<html>maintenance</html>"))

    with pytest.raises(UpstreamParseError):
        fetch_json("https://api.example.test/jobs", "gem")


def test_transport_error_is_wrapped(monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    _install_transport(monkeypatch, handler)

    with pytest.raises(UpstreamTransportError):
        fetch_json("https://api.example.test/jobs", "ashby")


def test_html_to_text_handles_escaped_markup():
    assert html_to_text("&lt;p&gt;Hello&lt;/p&gt;&lt;ul&gt;&lt;li&gt;Python&lt;/li&gt;&lt;/ul&gt;") == "Hello\nPython"
    assert html_to_text("<p>Plain <b>HTML</b></p>") == "Plain\nHTML"
    assert html_to_text("") == ""
