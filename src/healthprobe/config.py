# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for healthprobe."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"healthprobe/{__version__}"


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ProbeSettings:
    """Probe run defaults; CLI flags override these."""

    count: int = 4
    timeout: float = 5.0
    interval: float = 1.0
    continuous: bool = False
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True
    color: bool = True

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            user_agent=os.getenv("HEALTHPROBE_USER_AGENT", cls.user_agent),
            verify_ssl=_bool_env("HEALTHPROBE_VERIFY_SSL", cls.verify_ssl),
            color=not os.getenv("NO_COLOR"),
        )


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()
