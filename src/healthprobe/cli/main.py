# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""healthprobe CLI."""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import nullcontext

from ..config import ProbeSettings, load_probe_settings
from ..errors import ConfigurationError
from ..http import create_default_http_client
from ..log import setup_logging
from ..models.probe import ProbeProtocol, parse_protocol
from ..report import COLOR_RED, Reporter, colorize
from ..runner import ProbeRunner

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="healthprobe",
        description="Probe a service over HTTP(S) or TCP and report latency and health",
        allow_abbrev=False,
    )
    parser.add_argument("-t", "--target", default="", help="Target address (required)")
    parser.add_argument(
        "-type",
        "--type",
        dest="probe_type",
        default=ProbeProtocol.HTTP.value,
        help="Probe type: http, https, tcp, icmp (icmp falls back to tcp)",
    )
    parser.add_argument("-c", "--count", type=int, default=ProbeSettings.count, help="Number of probes")
    parser.add_argument(
        "-timeout", "--timeout", type=float, default=ProbeSettings.timeout, help="Per-probe timeout in seconds"
    )
    parser.add_argument(
        "-i", "--interval", type=float, default=ProbeSettings.interval, help="Delay between probes in seconds"
    )
    parser.add_argument(
        "-continuous",
        "--continuous",
        action="store_true",
        help="Probe until interrupted (Ctrl+C); -c is ignored",
    )
    parser.add_argument(
        "-insecure",
        "--insecure",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument("-no-color", "--no-color", dest="no_color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    return parser


def _settings_from_args(args: argparse.Namespace) -> ProbeSettings:
    settings = load_probe_settings()
    settings.count = args.count
    settings.timeout = args.timeout
    settings.interval = args.interval
    settings.continuous = args.continuous
    if args.insecure:
        settings.verify_ssl = False
    if args.no_color:
        settings.color = False
    return settings


def _fail(message: str, *, color: bool) -> int:
    sys.stderr.write(colorize(f"Error: {message}", COLOR_RED, color) + "\n")
    return EXIT_CONFIG_ERROR


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    settings = _settings_from_args(args)
    if not args.target:
        code = _fail("a target address is required (-t)", color=settings.color)
        parser.print_usage(sys.stderr)
        return code

    try:
        protocol = parse_protocol(args.probe_type)
        if not settings.continuous and settings.count < 1:
            raise ConfigurationError(f"count must be at least 1, got {settings.count}")
        reporter = Reporter(color=settings.color)
        runner = ProbeRunner(
            args.target,
            protocol,
            timeout=settings.timeout,
            interval=settings.interval,
            on_result=reporter.result,
            on_notice=reporter.notice,
        )
    except ConfigurationError as exc:
        return _fail(str(exc), color=settings.color)

    reporter.header(args.target, protocol)
    client_ctx = create_default_http_client(settings) if protocol.is_http else nullcontext()

    interrupted = False
    with client_ctx as client:
        runner.http_client = client
        try:
            runner.run(None if settings.continuous else settings.count)
        except KeyboardInterrupt:
            logger.debug("interrupted after %d probes", runner.session.sent)
            interrupted = True

    reporter.summary(runner.session.summarize())
    return EXIT_INTERRUPTED if interrupted else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
