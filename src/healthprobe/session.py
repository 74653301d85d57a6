# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Accumulates probe results for one run."""

from __future__ import annotations

from dataclasses import dataclass, field

from .models.probe import ProbeResult
from .models.summary import ProbeSummary, classify_health


@dataclass
class ProbeSession:
    results: list[ProbeResult] = field(default_factory=list)
    success_count: int = 0
    total_time: float = 0.0

    def record(self, result: ProbeResult) -> int:
        """Append a result and return its 1-based sequence number."""
        self.results.append(result)
        if result.success:
            self.success_count += 1
            self.total_time += result.response_time
        return len(self.results)

    @property
    def sent(self) -> int:
        return len(self.results)

    @property
    def failure_count(self) -> int:
        return self.sent - self.success_count

    def summarize(self) -> ProbeSummary:
        sent = self.sent
        loss = (sent - self.success_count) / sent * 100 if sent else 0.0
        summary = ProbeSummary(
            sent=sent,
            succeeded=self.success_count,
            failed=self.failure_count,
            loss_percent=loss,
            verdict=classify_health(self.success_count, sent),
        )
        if not self.success_count:
            return summary

        times = [r.response_time for r in self.results if r.success]
        return ProbeSummary(
            sent=summary.sent,
            succeeded=summary.succeeded,
            failed=summary.failed,
            loss_percent=summary.loss_percent,
            verdict=summary.verdict,
            avg_time=self.total_time / self.success_count,
            min_time=min(times),
            max_time=max(times),
        )


__all__ = ["ProbeSession"]
