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

"""HTTP transport for SPARQL requests.

The client talks to the network only through a Transport, so tests can
substitute a scripted responder. Non-2xx statuses are returned as
responses; only failures to send or receive raise TransportError.
"""

from __future__ import annotations

import ssl
import urllib.error
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

import certifi

from spargo.config import DEFAULT_TIMEOUT

_ssl_ctx = ssl.create_default_context(cafile=certifi.where())


class TransportError(Exception):
    """Request could not be sent or its response could not be read."""


@dataclass(frozen=True, slots=True)
class HTTPResponse:
    status: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


class Transport(Protocol):
    def send(self, url: str, headers: Mapping[str, str]) -> HTTPResponse:
        """Issue a GET request and return the response, whatever its status."""
        ...


class UrllibTransport:
    """Default transport: urllib GET with certifi CA bundle."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    def send(self, url: str, headers: Mapping[str, str]) -> HTTPResponse:
        try:
            req = urllib.request.Request(url, headers=dict(headers), method="GET")
        except ValueError as exc:
            raise TransportError(f"invalid URL {url!r}: {exc}") from exc

        try:
            with urllib.request.urlopen(req, timeout=self.timeout, context=_ssl_ctx) as resp:
                return HTTPResponse(
                    status=resp.status,
                    body=resp.read(),
                    headers=dict(resp.headers.items()),
                )
        except urllib.error.HTTPError as exc:
            return HTTPResponse(
                status=exc.code,
                body=exc.read() if exc.fp is not None else b"",
                headers=dict(exc.headers.items()) if exc.headers else {},
            )
        except urllib.error.URLError as exc:
            raise TransportError(str(exc.reason)) from exc
        except TimeoutError as exc:
            raise TransportError(f"timeout after {self.timeout}s") from exc
        except (OSError, ValueError) as exc:
            raise TransportError(str(exc)) from exc
