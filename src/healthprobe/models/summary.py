# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Aggregate statistics for a probe run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HealthVerdict(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


def classify_health(succeeded: int, sent: int) -> HealthVerdict:
    """
    Band the success rate into a verdict.

    Compared on integer counts so 9/10 lands exactly on the 90% boundary.
    """
    if sent <= 0:
        return HealthVerdict.POOR
    if succeeded >= sent:
        return HealthVerdict.EXCELLENT
    if succeeded * 100 >= 90 * sent:
        return HealthVerdict.GOOD
    if succeeded * 100 >= 70 * sent:
        return HealthVerdict.FAIR
    return HealthVerdict.POOR


@dataclass(frozen=True)
class ProbeSummary:
    sent: int
    succeeded: int
    failed: int
    loss_percent: float
    verdict: HealthVerdict
    avg_time: float | None = None
    min_time: float | None = None
    max_time: float | None = None

    @property
    def has_latency(self) -> bool:
        return self.succeeded > 0 and self.avg_time is not None
