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

"""Reader for ``.sparql`` query files.

A query file looks like:

    #!spargo
    ENDPOINT=https://query.wikidata.org/sparql
    select ?item where { ?item ?p ?o } limit 10

The marker line is required; the ENDPOINT line names the endpoint and
every other non-blank line is part of the query.
"""

from __future__ import annotations

from dataclasses import dataclass

from spargo.result import ErrorKind, Fail, Ok, Result

SHEBANGS = ("#!spargo", "#!/usr/bin/spargo")
ENDPOINT = "ENDPOINT"


@dataclass(frozen=True, slots=True)
class SparqlFile:
    endpoint: str
    query: str


def _is_endpoint_line(line: str) -> bool:
    key = line.split("=", 1)[0]
    return key.strip().upper() == ENDPOINT


def read_sparql(text: str) -> Result[SparqlFile]:
    """Split a query file into endpoint and query text."""
    marker = ""
    endpoint = ""
    query_lines: list[str] = []

    for line in text.splitlines():
        stripped = line.rstrip()
        if not stripped.strip():
            continue
        if stripped in SHEBANGS:
            marker = stripped
        elif _is_endpoint_line(stripped):
            if "=" not in stripped:
                return Fail(
                    error=f"incorrect endpoint formatting: {line}",
                    context=line,
                    kind=ErrorKind.INPUT,
                )
            endpoint = stripped.split("=", 1)[1].strip()
        else:
            query_lines.append(line + "\n")

    if not marker:
        return Fail(
            error=f"shebang missing or incorrect, expected one of: {', '.join(SHEBANGS)}",
            kind=ErrorKind.INPUT,
        )

    return Ok(data=SparqlFile(endpoint=endpoint, query="".join(query_lines)))
