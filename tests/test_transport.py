# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Tests for the urllib transport, with urlopen patched out."""

from __future__ import annotations

import io
import urllib.error
import urllib.request
from email.message import Message

import pytest

from spargo.sparql import transport as transport_module
from spargo.sparql.transport import TransportError, UrllibTransport


class FakeResponse:
    def __init__(self, status: int, body: bytes) -> None:
        self.status = status
        self._body = body
        self.headers = Message()
        self.headers["Content-Type"] = "application/sparql-results+json"

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def calls(monkeypatch):
    """Patch urlopen with a scripted callable; returns the recorded requests."""
    recorded: list[urllib.request.Request] = []
    recorded_timeout: list[float] = []
    outcome: dict = {}

    def fake_urlopen(req, timeout, context):
        recorded.append(req)
        recorded_timeout.append(timeout)
        if "raise" in outcome:
            raise outcome["raise"]
        return outcome["response"]

    monkeypatch.setattr(transport_module.urllib.request, "urlopen", fake_urlopen)
    return recorded, recorded_timeout, outcome


class TestUrllibTransport:
    """HTTP statuses become responses; send failures become TransportError."""

    def test_success(self, calls):
        recorded, timeouts, outcome = calls
        outcome["response"] = FakeResponse(200, b"{}")
        response = UrllibTransport(timeout=7).send(
            "http://example.com/sparql?query=x", {"Accept": "application/sparql-results+json"}
        )
        assert response.status == 200
        assert response.body == b"{}"
        assert response.headers["Content-Type"] == "application/sparql-results+json"
        assert recorded[0].get_method() == "GET"
        assert recorded[0].get_header("Accept") == "application/sparql-results+json"
        assert timeouts == [7]

    def test_http_error_is_a_response(self, calls):
        _, _, outcome = calls
        outcome["raise"] = urllib.error.HTTPError(
            "http://example.com", 418, "I'm a teapot", Message(), io.BytesIO(b"short and stout")
        )
        response = UrllibTransport().send("http://example.com", {})
        assert response.status == 418
        assert response.body == b"short and stout"

    def test_url_error(self, calls):
        _, _, outcome = calls
        outcome["raise"] = urllib.error.URLError("Name or service not known")
        with pytest.raises(TransportError, match="Name or service not known"):
            UrllibTransport().send("http://nowhere.invalid", {})

    def test_timeout(self, calls):
        _, _, outcome = calls
        outcome["raise"] = TimeoutError()
        with pytest.raises(TransportError, match="timeout after 2s"):
            UrllibTransport(timeout=2).send("http://example.com", {})

    def test_empty_url(self):
        with pytest.raises(TransportError):
            UrllibTransport().send("?query=select", {})
