# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for healthprobe."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "HEALTHPROBE_LOG_LEVEL"


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use; logs go to stderr."""
    effective_level = (level or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


__all__ = ["LOG_LEVEL_ENV", "setup_logging"]
