# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for healthprobe."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .probe import ProbeProtocol, ProbeResult, parse_protocol
from .summary import HealthVerdict, ProbeSummary, classify_health

__all__ = [
    "Headers",
    "HealthVerdict",
    "HttpRequest",
    "HttpResponse",
    "ProbeProtocol",
    "ProbeResult",
    "ProbeSummary",
    "classify_health",
    "parse_protocol",
]
