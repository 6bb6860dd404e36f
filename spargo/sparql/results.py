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

"""SPARQL 1.1 JSON results model.

Decodes the wire format into typed terms and rows, and renders it back:

    { "head": { "vars": ["s", "label"] },
      "results": { "bindings": [
          { "s":     { "type": "uri", "value": "http://..." },
            "label": { "type": "literal", "value": "...", "xml:lang": "en" } } ] } }

Rows are read-only mappings and keep the endpoint order. The header is
kept as the endpoint sent it, a plain dict, and is not copied.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from spargo.result import ErrorKind, Fail, Ok, Result

LANG_KEY = "xml:lang"
DATATYPE_KEY = "datatype"

Row = Mapping[str, "Term"]


class ShapeError(ValueError):
    """JSON is well-formed but is not SPARQL JSON results."""


@dataclass(frozen=True, slots=True)
class Term:
    """One RDF term: uri, literal, bnode or any endpoint-defined type."""

    type: str
    value: str
    lang: str | None = None
    datatype: str | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> Term:
        if not isinstance(raw, dict):
            raise ShapeError(f"term must be an object, not {type(raw).__name__}")
        kind = raw.get("type")
        value = raw.get("value")
        if not isinstance(kind, str) or not isinstance(value, str):
            raise ShapeError("term requires string 'type' and 'value'")
        lang = raw.get(LANG_KEY)
        datatype = raw.get(DATATYPE_KEY)
        for key, optional in ((LANG_KEY, lang), (DATATYPE_KEY, datatype)):
            if optional is not None and not isinstance(optional, str):
                raise ShapeError(f"term '{key}' must be a string")
        # "" and absent are treated the same
        return cls(type=kind, value=value, lang=lang or None, datatype=datatype or None)

    def to_dict(self) -> dict[str, str]:
        out = {"type": self.type, "value": self.value}
        if self.lang:
            out[LANG_KEY] = self.lang
        if self.datatype:
            out[DATATYPE_KEY] = self.datatype
        return out


@dataclass(frozen=True, slots=True)
class SPARQLResult:
    """Decoded SPARQL response: header, ordered rows and the human rendering.

    ``SPARQLResult()`` is the empty value handed back on every failure.
    """

    head: dict[str, Any] | None = None
    rows: tuple[Row, ...] = ()
    human: str = ""

    @property
    def vars(self) -> list[str]:
        """Variable names declared in ``head.vars``."""
        if not self.head:
            return []
        declared = self.head.get("vars")
        if not isinstance(declared, list):
            return []
        return [name for name in declared if isinstance(name, str)]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def values(self) -> list[str]:
        """Flat list of every term value, row by row."""
        return [term.value for row in self.rows for term in row.values()]

    def to_dict(self) -> dict[str, Any]:
        return {
            "head": self.head,
            "results": {
                "bindings": [
                    {name: term.to_dict() for name, term in row.items()}
                    for row in self.rows
                ],
            },
        }

    def render(self) -> str:
        """Canonical JSON string of head + bindings."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def __str__(self) -> str:
        return self.render()


def _decode_rows(results: Any) -> tuple[Row, ...]:
    if results is None:
        return ()
    if not isinstance(results, dict):
        raise ShapeError("'results' must be an object")

    bindings = results.get("bindings")
    if bindings is None:
        return ()
    if not isinstance(bindings, list):
        raise ShapeError("'results.bindings' must be a list")

    rows: list[Row] = []
    for raw_row in bindings:
        if not isinstance(raw_row, dict):
            raise ShapeError("each binding must be an object")
        rows.append(MappingProxyType({name: Term.from_dict(raw) for name, raw in raw_row.items()}))
    return tuple(rows)


def decode(raw: Any) -> SPARQLResult:
    """Build a SPARQLResult from an already-parsed JSON value.

    Raises ShapeError when the value is not SPARQL JSON results.
    """
    if not isinstance(raw, dict):
        raise ShapeError(f"top level must be an object, not {type(raw).__name__}")
    if "head" not in raw and "results" not in raw:
        raise ShapeError(f"no 'head' or 'results' key (found: {', '.join(sorted(raw)) or 'none'})")

    head = raw.get("head")
    if head is not None and not isinstance(head, dict):
        raise ShapeError("'head' must be an object")

    result = SPARQLResult(head=head, rows=_decode_rows(raw.get("results")))
    return SPARQLResult(head=result.head, rows=result.rows, human=result.render())


def parse_results(body: bytes | str) -> Result[SPARQLResult]:
    """Decode a SPARQL JSON results body. Never raises on malformed input."""
    try:
        raw = json.loads(body)
        result = decode(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError, ShapeError) as exc:
        excerpt = body[:200] if isinstance(body, str) else body[:200].decode("utf-8", errors="replace")
        return Fail(
            error=f"SPARQL results decode error: {exc}",
            context=excerpt,
            kind=ErrorKind.DECODE,
            data=SPARQLResult(),
        )
    return Ok(data=result)
