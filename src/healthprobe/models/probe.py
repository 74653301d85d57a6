# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe request/result data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import ErrorCategory, UnsupportedProtocolError


class ProbeProtocol(str, Enum):
    HTTP = "http"
    HTTPS = "https"
    TCP = "tcp"
    ICMP = "icmp"

    @property
    def is_http(self) -> bool:
        return self in (ProbeProtocol.HTTP, ProbeProtocol.HTTPS)


def parse_protocol(name: str | ProbeProtocol) -> ProbeProtocol:
    """Resolve a user-supplied probe type, case-insensitively."""
    if isinstance(name, ProbeProtocol):
        return name
    try:
        return ProbeProtocol(str(name or "").strip().lower())
    except ValueError:
        raise UnsupportedProtocolError(str(name)) from None



def to_ms(seconds: float) -> int:
    """Whole milliseconds, halves rounded up."""
    return int(seconds * 1000 + 0.5)

@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a single probe attempt."""

    target: str
    success: bool
    response_time: float
    protocol: ProbeProtocol = ProbeProtocol.TCP
    status_code: int | None = None
    error: str | None = None
    error_category: ErrorCategory | None = None

    @property
    def latency_ms(self) -> int:
        return to_ms(self.response_time)
