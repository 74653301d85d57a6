# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP(S) probe."""

from __future__ import annotations

import time

from ..errors import ErrorCategory
from ..http.client import HttpClient
from ..http.models import HttpRequest
from ..http.url import normalize_http_target
from ..models.probe import ProbeProtocol, ProbeResult

# Anything below this counts as healthy, 4xx included.
SERVER_ERROR_STATUS = 500


def probe_http(
    target: str,
    timeout: float,
    http_client: HttpClient,
    *,
    protocol: ProbeProtocol = ProbeProtocol.HTTP,
) -> ProbeResult:
    """Issue one GET without following redirects and time it."""
    url = normalize_http_target(target, protocol.value)
    request = HttpRequest(url=url, method="GET", timeout=timeout, allow_redirects=False)

    start = time.perf_counter()
    response = http_client.request(request)
    elapsed = time.perf_counter() - start

    if not response.ok or response.status_code is None:
        category = response.error_category or ErrorCategory.UNKNOWN_ERROR.value
        return ProbeResult(
            target=target,
            success=False,
            response_time=elapsed,
            protocol=protocol,
            error=response.error_message or "request failed",
            error_category=ErrorCategory(category),
        )

    return ProbeResult(
        target=target,
        success=response.status_code < SERVER_ERROR_STATUS,
        response_time=elapsed,
        protocol=protocol,
        status_code=response.status_code,
    )
