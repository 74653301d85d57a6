# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
healthprobe package entrypoint.

A small health-check tool: it probes one target over HTTP(S) or TCP a fixed
number of times (or until interrupted), prints each attempt and finishes with
loss, latency and a health verdict. HTTP behavior sits behind an injectable
client interface so probes can be exercised without a network.
"""

from .config import ProbeSettings, load_probe_settings
from .errors import (
    ConfigurationError,
    ErrorCategory,
    HealthProbeError,
    UnsupportedProtocolError,
)
from .http import HttpClient, HttpRequest, HttpResponse, HttpxClient, create_default_http_client
from .log import setup_logging
from .models import (
    HealthVerdict,
    ProbeProtocol,
    ProbeResult,
    ProbeSummary,
    classify_health,
    parse_protocol,
)
from .probe import probe_target
from .report import Reporter
from .runner import ProbeRunner
from .session import ProbeSession
from .version import __version__

__all__ = [
    "__version__",
    "ConfigurationError",
    "ErrorCategory",
    "HealthProbeError",
    "HealthVerdict",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "ProbeProtocol",
    "ProbeResult",
    "ProbeRunner",
    "ProbeSession",
    "ProbeSettings",
    "ProbeSummary",
    "Reporter",
    "UnsupportedProtocolError",
    "classify_health",
    "create_default_http_client",
    "load_probe_settings",
    "parse_protocol",
    "probe_target",
    "setup_logging",
]
