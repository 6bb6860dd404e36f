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

"""Client configuration: named defaults plus an optional YAML loader.

Pure loader — no network activity. The YAML layout is:

    client:
      endpoint: https://query.wikidata.org/sparql
      agent: my-tool/1.0
      accept: application/sparql-results+json
      timeout: 30
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from spargo import __version__
from spargo.result import ErrorKind, Fail, Ok, Result

DEFAULT_AGENT = f"spargo/{__version__}"
DEFAULT_ACCEPT = "application/sparql-results+json"
DEFAULT_TIMEOUT = 30


@dataclass(frozen=True, slots=True)
class ClientConfig:
    endpoint: str = ""
    agent: str = DEFAULT_AGENT
    accept: str = DEFAULT_ACCEPT
    timeout: int = DEFAULT_TIMEOUT


def _build_client(raw: dict[str, Any]) -> ClientConfig:
    timeout = raw.get("timeout", DEFAULT_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, int | float):
        raise TypeError(f"timeout must be a number, not {type(timeout).__name__}")
    return ClientConfig(
        endpoint=str(raw.get("endpoint") or ""),
        agent=str(raw.get("agent") or DEFAULT_AGENT),
        accept=str(raw.get("accept") or DEFAULT_ACCEPT),
        timeout=int(timeout),
    )


def load_config(path: Path) -> Result[ClientConfig]:
    """Load a YAML client config. Missing keys fall back to the defaults."""
    if not path.exists():
        return Fail(error=f"Config file not found: {path}", kind=ErrorKind.CONFIG)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", context=str(path), kind=ErrorKind.CONFIG)

    if raw is None:
        return Ok(data=ClientConfig())

    try:
        section = raw.get("client", raw)
        if not isinstance(section, dict):
            raise TypeError("'client' must be a mapping")
        config = _build_client(section)
    except (AttributeError, TypeError, ValueError) as exc:
        return Fail(error=f"Config structure error: {exc}", context=str(path), kind=ErrorKind.CONFIG)

    return Ok(data=config)
