# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used by the HTTP probe."""

from __future__ import annotations

from dataclasses import dataclass

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    timeout: float | None = None
    allow_redirects: bool = False


@dataclass
class HttpResponse:
    """Normalized HTTP response; `ok` means a response arrived, whatever its status."""

    ok: bool
    status_code: int | None = None
    error_category: str | None = None
    error_message: str | None = None
