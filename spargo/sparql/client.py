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

"""SPARQL query client.

Sends one GET request per execution to a SPARQL endpoint and decodes the
SPARQL JSON results into a SPARQLResult. Every failure comes back as a
Fail tagged with its ErrorKind, carrying an empty SPARQLResult as data.
No retries — that is the caller's decision.
"""

from __future__ import annotations

import urllib.parse

from spargo.config import DEFAULT_ACCEPT, DEFAULT_AGENT, DEFAULT_TIMEOUT, ClientConfig
from spargo.logger import get_logger
from spargo.result import ErrorKind, Fail, Ok, Result
from spargo.sparql.results import SPARQLResult, parse_results
from spargo.sparql.transport import HTTPResponse, Transport, TransportError, UrllibTransport

log = get_logger(__name__)


def build_url(base_url: str, query: str) -> str:
    """Attach the query as the ``query`` parameter of base_url."""
    parts = urllib.parse.urlsplit(base_url)
    encoded = urllib.parse.urlencode({"query": query})
    existing = parts.query.strip("&")
    combined = f"{existing}&{encoded}" if existing else encoded
    return urllib.parse.urlunsplit(parts._replace(query=combined))


class SPARQLClient:
    """One endpoint, one query, one execution at a time.

    Configuration is set with ``configure`` and may be replaced for the
    next, independent query. Agent and accept header are per-instance
    copies of the library defaults and can be overridden freely.
    """

    def __init__(self, transport: Transport | None = None) -> None:
        self.base_url = ""
        self.query = ""
        self.agent = ""
        self.accept = ""
        self.transport = transport

    @classmethod
    def from_config(cls, config: ClientConfig, query: str = "") -> SPARQLClient:
        client = cls(transport=UrllibTransport(timeout=config.timeout))
        client.agent = config.agent
        client.accept = config.accept
        client.configure(config.endpoint, query)
        return client

    def configure(self, base_url: str, query: str) -> None:
        """Store endpoint and query verbatim, fill in defaults. No I/O."""
        self.base_url = base_url
        self.query = query
        if not self.agent:
            self.agent = DEFAULT_AGENT
        if not self.accept:
            self.accept = DEFAULT_ACCEPT
        if self.transport is None:
            self.transport = UrllibTransport()

    @property
    def headers(self) -> dict[str, str]:
        return {"Accept": self.accept, "User-Agent": self.agent}

    def _send(self) -> Result[HTTPResponse]:
        if self.transport is None:
            self.configure(self.base_url, self.query)

        url = build_url(self.base_url, self.query)
        log.debug("SPARQL query → %s (%d chars)", self.base_url, len(self.query))

        try:
            response = self.transport.send(url, self.headers)
        except (TransportError, OSError) as exc:
            return Fail(
                error=f"SPARQL connection error: {exc}",
                context=exc,
                kind=ErrorKind.TRANSPORT,
                data=SPARQLResult(),
            )
        return Ok(data=response)

    def execute(self) -> Result[SPARQLResult]:
        """Send the configured query and decode the response.

        ``.data`` is always a SPARQLResult: decoded on success, empty on
        any Fail. A status other than 200 is a RESPONSE failure whose
        message and context carry the status code.
        """
        sent = self._send()
        if not sent.ok:
            return sent

        response: HTTPResponse = sent.data
        if response.status != 200:
            log.debug("SPARQL endpoint answered HTTP %d", response.status)
            return Fail(
                error=f"unexpected response from server: {response.status}",
                context=response.status,
                kind=ErrorKind.RESPONSE,
                data=SPARQLResult(),
            )

        decoded = parse_results(response.body)
        if decoded.ok:
            log.debug("SPARQL returned %d bindings", len(decoded.data))
        return decoded


def execute_query(
    endpoint: str,
    query: str,
    timeout: int = DEFAULT_TIMEOUT,
) -> Result[SPARQLResult]:
    """Run a single query against endpoint with a fresh default client."""
    client = SPARQLClient.from_config(ClientConfig(endpoint=endpoint, timeout=timeout), query)
    return client.execute()
