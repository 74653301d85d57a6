# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Drive repeated probes against one target."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from .errors import ConfigurationError
from .http.client import HttpClient
from .models.probe import ProbeProtocol, ProbeResult, parse_protocol
from .probe.executor import probe_target
from .session import ProbeSession

logger = logging.getLogger(__name__)

Executor = Callable[[], ProbeResult]
ResultCallback = Callable[[ProbeResult, int], None]


class ProbeRunner:
    """
    Runs probes sequentially at a fixed interval.

    `run(count)` performs exactly `count` attempts and does not sleep after
    the last one. `run(None)` never returns on its own; it stops only when an
    exception (typically KeyboardInterrupt) escapes an attempt, the callback
    or the sleep. Results gathered so far stay available on `session`.
    """

    def __init__(
        self,
        target: str,
        protocol: str | ProbeProtocol = ProbeProtocol.HTTP,
        *,
        timeout: float = 5.0,
        interval: float = 1.0,
        http_client: HttpClient | None = None,
        executor: Executor | None = None,
        sleep: Callable[[float], None] = time.sleep,
        on_result: ResultCallback | None = None,
        on_notice: Callable[[str], None] | None = None,
    ):
        if not target:
            raise ConfigurationError("a target address is required")
        if timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {timeout}")
        if interval < 0:
            raise ConfigurationError(f"interval must not be negative, got {interval}")

        self.target = target
        self.protocol = parse_protocol(protocol)
        self.timeout = timeout
        self.interval = interval
        self.http_client = http_client
        self.executor = executor or self._probe_once
        self.sleep = sleep
        self.on_result = on_result
        self.on_notice = on_notice
        self.session = ProbeSession()

    def _probe_once(self) -> ProbeResult:
        return probe_target(
            self.target,
            self.protocol,
            self.timeout,
            http_client=self.http_client,
            notice=self.on_notice,
        )

    def step(self) -> ProbeResult:
        """Run one attempt, record it and hand it to the callback."""
        result = self.executor()
        seq = self.session.record(result)
        logger.debug("attempt %d: success=%s time=%.3fs", seq, result.success, result.response_time)
        if self.on_result is not None:
            self.on_result(result, seq)
        return result

    def run(self, count: int | None = None) -> ProbeSession:
        if count is not None and count < 1:
            raise ConfigurationError(f"count must be at least 1, got {count}")

        iteration = 0
        while count is None or iteration < count:
            self.step()
            iteration += 1
            if count is None or iteration < count:
                self.sleep(self.interval)
        return self.session


__all__ = ["ProbeRunner"]
