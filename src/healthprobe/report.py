# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Terminal formatting for probe runs.

The format_* functions are pure and return text; Reporter writes them to a
stream. Colour is plain ANSI escapes and can be switched off.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import TextIO

from .models.probe import ProbeProtocol, ProbeResult, to_ms
from .models.summary import HealthVerdict, ProbeSummary

COLOR_RESET = "\033[0m"
COLOR_RED = "\033[31m"
COLOR_GREEN = "\033[32m"
COLOR_YELLOW = "\033[33m"
COLOR_CYAN = "\033[36m"

VERDICT_COLORS: dict[HealthVerdict, str] = {
    HealthVerdict.EXCELLENT: COLOR_GREEN,
    HealthVerdict.GOOD: COLOR_GREEN,
    HealthVerdict.FAIR: COLOR_YELLOW,
    HealthVerdict.POOR: COLOR_RED,
}


def colorize(text: str, color: str, enabled: bool = True) -> str:
    if not enabled:
        return text
    return f"{color}{text}{COLOR_RESET}"


def format_ms(seconds: float) -> str:
    return f"{to_ms(seconds)}ms"


def format_header(target: str, protocol: ProbeProtocol | str, now: datetime | None = None, *, color: bool = True) -> str:
    proto = protocol.value if isinstance(protocol, ProbeProtocol) else str(protocol)
    when = (now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    lines = [
        "",
        colorize("=== Service Health Check ===", COLOR_CYAN, color),
        f"Target: {target}",
        f"Type: {proto.upper()}",
        f"Time: {when}",
        "",
    ]
    return "\n".join(lines)


def format_result_line(result: ProbeResult, seq: int, *, color: bool = True) -> str:
    prefix = f"[{seq}]"
    if result.success:
        if result.status_code is not None:
            body = f"Reply from {result.target}: status={result.status_code} time={format_ms(result.response_time)}"
        else:
            body = f"Reply from {result.target}: connected time={format_ms(result.response_time)}"
        return f"{prefix} {colorize(body, COLOR_GREEN, color)}"

    if result.error:
        detail = result.error
    elif result.status_code is not None:
        detail = f"status={result.status_code}"
    else:
        detail = "unknown error"
    return f"{prefix} {colorize(f'Request to {result.target} failed: {detail}', COLOR_RED, color)}"


def format_summary(summary: ProbeSummary, *, color: bool = True) -> str:
    lines = [
        "",
        colorize("=== Statistics ===", COLOR_CYAN, color),
        f"Sent: {summary.sent}, Succeeded: {summary.succeeded}, Failed: {summary.failed} "
        f"({summary.loss_percent:.1f}% loss)",
    ]
    if summary.has_latency:
        lines.append(f"Average response time: {format_ms(summary.avg_time)}")
        lines.append(f"Min/Max response time: {format_ms(summary.min_time)} / {format_ms(summary.max_time)}")

    if summary.sent:
        verdict = colorize(summary.verdict.value, VERDICT_COLORS[summary.verdict], color)
        lines.append("")
        lines.append(f"Service health: {verdict}")
    lines.append("")
    return "\n".join(lines)


class Reporter:
    """Writes formatted probe output to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None, *, color: bool = True):
        self.stream = stream or sys.stdout
        self.color = color

    def _write(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()

    def header(self, target: str, protocol: ProbeProtocol | str, now: datetime | None = None) -> None:
        self._write(format_header(target, protocol, now, color=self.color))

    def result(self, result: ProbeResult, seq: int) -> None:
        self._write(format_result_line(result, seq, color=self.color))

    def notice(self, message: str) -> None:
        self._write(colorize(message, COLOR_YELLOW, self.color))

    def summary(self, summary: ProbeSummary) -> None:
        self._write(format_summary(summary, color=self.color))


__all__ = [
    "COLOR_CYAN",
    "COLOR_GREEN",
    "COLOR_RED",
    "COLOR_RESET",
    "COLOR_YELLOW",
    "Reporter",
    "colorize",
    "format_header",
    "format_ms",
    "format_result_line",
    "format_summary",
]
