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

"""Shared fixtures: scripted transport and SPARQL JSON bodies."""

from __future__ import annotations

from collections.abc import Mapping

import pytest

from spargo.sparql.transport import HTTPResponse, TransportError

SAMPLE_QUERY = """select distinct ?format ?label where {
    ?format <http://the-fr.org/prop/format-registry/formatType> <http://the-fr.org/def/format-registry/RasterImage> .
    ?format <http://www.w3.org/2000/01/rdf-schema#label> ?label .
} limit 10"""

FORMATS_BODY = (
    '{"head":{"vars":["s","label"]},"results":{"bindings":['
    '{"s":{"type":"uri","value":"http://the-fr.org/id/file-format/25"},'
    '"label":{"type":"literal","value":"OS/2 Bitmap","xml:lang":"en"}},'
    '{"s":{"type":"uri","value":"http://the-fr.org/id/file-format/28"},'
    '"label":{"type":"literal","value":"CALS Compressed Bitmap","xml:lang":"en"}}]}}'
)

TYPED_BODY = """{
   "head": {"vars": ["format", "label"]},
   "results": {
      "bindings": [
         {
            "format": {"type": "uri", "value": "http://the-fr.org/id/file-format/25"},
            "label": {
               "datatype": "http://example.com/DataTypes#unicode",
               "type": "literal",
               "value": "OS/2 Bitmap",
               "xml:lang": "en"
            }
         },
         {
            "format": {"type": "uri", "value": "http://the-fr.org/id/file-format/28"},
            "label": {
               "datatype": "http://example.com/DataTypes#unicode",
               "type": "literal",
               "value": "CALS Compressed Bitmap",
               "xml:lang": "en"
            }
         }
      ]
   }
}"""

EMPTY_BODY = '{"head":null,"results":{"bindings":null}}'

MALFORMED_BODIES = [
    '{"Parsing should fail gracefully',
    "Parsing should fail gracefully",
    '{"No":"Real value"}',
]


class StubTransport:
    """Scripted transport: returns a canned response or raises a canned error."""

    def __init__(self, status: int = 200, body: str | bytes = "", error: str | None = None) -> None:
        self.status = status
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.error = error
        self.requests: list[tuple[str, dict[str, str]]] = []

    def send(self, url: str, headers: Mapping[str, str]) -> HTTPResponse:
        self.requests.append((url, dict(headers)))
        if self.error is not None:
            raise TransportError(self.error)
        return HTTPResponse(status=self.status, body=self.body)


@pytest.fixture
def stub_transport():
    """Factory for StubTransport instances."""
    return StubTransport
