# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Target normalization helpers."""

from __future__ import annotations

DEFAULT_TCP_PORT = 80


def normalize_http_target(target: str, scheme: str = "http") -> str:
    """
    Turn a probe target into a URL.

    The scheme is prepended only when the target does not already carry
    `http://` or `https://`; an explicit scheme always wins over `scheme`.
    """
    raw = str(target or "").strip()
    if raw.startswith(("http://", "https://")):
        return raw
    return f"{scheme}://{raw}"


def split_tcp_target(target: str, default_port: int = DEFAULT_TCP_PORT) -> tuple[str, int]:
    """
    Split `host[:port]` into a (host, port) pair.

    Raises ValueError when the port is not a number.
    """
    raw = str(target or "").strip()
    if ":" not in raw:
        return raw, default_port

    host, _, port = raw.rpartition(":")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    if not port.isdigit():
        raise ValueError(f"invalid port in target: {raw}")
    return host, int(port)


__all__ = ["DEFAULT_TCP_PORT", "normalize_http_target", "split_tcp_target"]
