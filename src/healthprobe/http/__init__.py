# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from .client import HttpClient, create_default_http_client
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .url import DEFAULT_TCP_PORT, normalize_http_target, split_tcp_target

__all__ = [
    "DEFAULT_TCP_PORT",
    "Headers",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "create_default_http_client",
    "normalize_http_target",
    "split_tcp_target",
]
