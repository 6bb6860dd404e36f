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

"""spargo command line: run a SPARQL query and print the JSON results.

Usage:
    spargo query.sparql
    cat query.sparql | spargo
    spargo --endpoint https://query.wikidata.org/sparql --query "select ..."
    spargo --config spargo.yaml query.sparql
    spargo --version

Results go to stdout; diagnostics (endpoint, query, errors) go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from spargo import __version__
from spargo.config import ClientConfig, load_config
from spargo.logger import get_logger, set_level
from spargo.result import ErrorKind, Fail, Ok, Result
from spargo.sparql.client import SPARQLClient
from spargo.sparqlfile import SparqlFile, read_sparql

log = get_logger("spargo.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spargo",
        description="Send a SPARQL query to an endpoint and print the JSON results",
    )
    parser.add_argument(
        "sparql",
        nargs="?",
        type=Path,
        help="Path to a .sparql file (#!spargo marker + ENDPOINT= line + query)",
    )
    parser.add_argument("--endpoint", help="SPARQL endpoint to query")
    parser.add_argument("--query", help="SPARQL query to run")
    parser.add_argument("--config", type=Path, help="YAML client config (endpoint, agent, accept, timeout)")
    parser.add_argument("--agent", help="User-Agent header to send")
    parser.add_argument("--verbose", action="store_true", help="Log request details")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    return parser


def _stdin_is_piped() -> bool:
    try:
        return not sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def _resolve_input(args: argparse.Namespace) -> Result[SparqlFile] | None:
    """Pick the query source: file, flags, then piped stdin. None if nothing given."""
    if args.sparql is not None:
        try:
            text = args.sparql.read_text(encoding="utf-8")
        except OSError as exc:
            return Fail(error=f"Cannot read {args.sparql}: {exc}", kind=ErrorKind.INPUT)
        return read_sparql(text)

    if args.query is not None or args.endpoint is not None:
        if not args.query:
            return Fail(error="--query is required with --endpoint", kind=ErrorKind.INPUT)
        return Ok(data=SparqlFile(endpoint=args.endpoint or "", query=args.query))

    if _stdin_is_piped():
        return read_sparql(sys.stdin.read())

    return None


def run(config: ClientConfig, source: SparqlFile) -> int:
    """Execute one query and print its human rendering."""
    log.info("Connecting to: %s", config.endpoint)
    log.info("Query: %s", source.query)

    client = SPARQLClient.from_config(config, source.query)
    result = client.execute()
    if not result.ok:
        log.error(result.error)
        return 1

    print(result.data.human)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)

    config = ClientConfig()
    if args.config is not None:
        cfg_result = load_config(args.config)
        if not cfg_result.ok:
            log.error(cfg_result.error)
            return 1
        config = cfg_result.data
    if args.agent:
        config = replace(config, agent=args.agent)

    if args.version:
        print(f"spargo {__version__} ({config.agent})", file=sys.stderr)
        return 0

    source = _resolve_input(args)
    if source is None:
        parser.print_help(sys.stderr)
        return 0
    if not source.ok:
        log.error(source.error)
        return 1

    endpoint = args.endpoint or source.data.endpoint or config.endpoint
    return run(replace(config, endpoint=endpoint), source.data)


if __name__ == "__main__":
    sys.exit(main())
