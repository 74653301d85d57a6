# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

import socket
import ssl
from enum import Enum

import httpx


class HealthProbeError(Exception):
    """Base class for errors raised by healthprobe."""


class ConfigurationError(HealthProbeError, ValueError):
    """Invalid run configuration; reported before any probe is sent."""


class UnsupportedProtocolError(ConfigurationError):
    def __init__(self, name: str):
        super().__init__(f"unsupported probe type: {name}")
        self.name = name


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    INVALID_TARGET = "INVALID_TARGET"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def _exception_chain(exc: BaseException):
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.

    httpx wraps socket errors, so the original cause is inspected as well.
    """
    if isinstance(exc, (httpx.TimeoutException, socket.timeout, TimeoutError)):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return ErrorCategory.INVALID_TARGET

    chain = list(_exception_chain(exc))
    if any(isinstance(item, (socket.gaierror, socket.herror)) for item in chain):
        return ErrorCategory.DNS_ERROR

    if any(isinstance(item, ssl.SSLError) for item in chain):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, OSError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


__all__ = [
    "ConfigurationError",
    "ErrorCategory",
    "HealthProbeError",
    "UnsupportedProtocolError",
    "categorize_exception",
]
