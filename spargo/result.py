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

"""Result pattern for error handling without exceptions.

Provides Ok[T] and Fail types as an alternative to raising exceptions.
Every function that can fail returns Result[T] = Ok[T] | Fail.

A Fail is tagged with an ErrorKind so callers can branch on the failure
category without parsing the message text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories surfaced by the client and its front end."""

    TRANSPORT = "transport"
    RESPONSE = "response"
    DECODE = "decode"
    INPUT = "input"
    CONFIG = "config"


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying typed data."""

    data: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class Fail:
    """Failed result carrying error message and optional context.

    ``data`` holds the value handed back alongside the error, e.g. an
    empty SPARQLResult, so callers never have to null-check it.
    """

    error: str
    context: Any = None
    kind: ErrorKind | None = None
    data: Any = None
    ok: bool = field(default=False, init=False)

    def __str__(self) -> str:
        return self.error


Result = Ok[T] | Fail
