# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-attempt probe dispatch by protocol."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..http.client import HttpClient, create_default_http_client
from ..models.probe import ProbeProtocol, ProbeResult, parse_protocol
from .http import probe_http
from .tcp import Connector, probe_tcp

logger = logging.getLogger(__name__)

ICMP_FALLBACK_NOTICE = "Note: ICMP ping requires root privileges, using a TCP connection test instead"


def probe_target(
    target: str,
    protocol: str | ProbeProtocol,
    timeout: float,
    *,
    http_client: HttpClient | None = None,
    connect: Connector | None = None,
    notice: Callable[[str], None] | None = None,
) -> ProbeResult:
    """
    Perform exactly one probe against `target`.

    The timeout is handed to the underlying network call. ICMP is served by
    the TCP probe after emitting a notice. Raises UnsupportedProtocolError for
    unknown protocol names; every network failure is returned as a failed
    ProbeResult instead.
    """
    proto = parse_protocol(protocol)
    logger.debug("probing %s over %s (timeout=%ss)", target, proto.value, timeout)

    if proto.is_http:
        if http_client is None:
            with create_default_http_client() as client:
                return probe_http(target, timeout, client, protocol=proto)
        return probe_http(target, timeout, http_client, protocol=proto)

    if proto is ProbeProtocol.ICMP:
        logger.info("ICMP requested for %s, falling back to TCP", target)
        if notice is not None:
            notice(ICMP_FALLBACK_NOTICE)

    return probe_tcp(target, timeout, connect=connect, protocol=proto)
