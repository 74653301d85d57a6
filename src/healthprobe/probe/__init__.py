# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from .executor import ICMP_FALLBACK_NOTICE, probe_target
from .http import SERVER_ERROR_STATUS, probe_http
from .tcp import probe_tcp

__all__ = ["ICMP_FALLBACK_NOTICE", "SERVER_ERROR_STATUS", "probe_http", "probe_target", "probe_tcp"]
