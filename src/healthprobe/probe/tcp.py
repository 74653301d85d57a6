# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""TCP connect probe."""

from __future__ import annotations

import socket
import time
from collections.abc import Callable
from typing import Any

from ..errors import ErrorCategory, categorize_exception
from ..http.url import split_tcp_target
from ..models.probe import ProbeProtocol, ProbeResult

Connector = Callable[..., Any]


def probe_tcp(
    target: str,
    timeout: float,
    *,
    connect: Connector | None = None,
    protocol: ProbeProtocol = ProbeProtocol.TCP,
) -> ProbeResult:
    """Open a TCP connection, close it straight away, and time the handshake."""
    connect = connect or socket.create_connection
    try:
        host, port = split_tcp_target(target)
    except ValueError as exc:
        return ProbeResult(
            target=target,
            success=False,
            response_time=0.0,
            protocol=protocol,
            error=str(exc),
            error_category=ErrorCategory.INVALID_TARGET,
        )

    start = time.perf_counter()
    try:
        with connect((host, port), timeout=timeout):
            elapsed = time.perf_counter() - start
    except Exception as exc:  # noqa: BLE001
        elapsed = time.perf_counter() - start
        return ProbeResult(
            target=target,
            success=False,
            response_time=elapsed,
            protocol=protocol,
            error=str(exc) or type(exc).__name__,
            error_category=categorize_exception(exc),
        )

    return ProbeResult(target=target, success=True, response_time=elapsed, protocol=protocol)
