# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from healthprobe import runner as runner_module
from healthprobe.cli import main as cli_main
from healthprobe.cli.main import EXIT_CONFIG_ERROR, EXIT_INTERRUPTED, EXIT_OK, build_parser
from healthprobe.models import ProbeProtocol, ProbeResult


@pytest.fixture
def probe_calls(monkeypatch):
    calls = []

    def fake_probe_target(target, protocol, timeout, *, http_client=None, notice=None):
        calls.append({"target": target, "protocol": protocol, "timeout": timeout, "http_client": http_client})
        if protocol is ProbeProtocol.ICMP and notice is not None:
            notice("icmp fallback")
        if protocol.is_http:
            return ProbeResult(target=target, success=True, response_time=0.012, protocol=protocol, status_code=200)
        return ProbeResult(target=target, success=True, response_time=0.012, protocol=protocol)

    monkeypatch.setattr(runner_module, "probe_target", fake_probe_target)
    return calls


def test_build_parser_accepts_single_dash_flags():
    args = build_parser().parse_args(
        ["-t", "example.com", "-type", "tcp", "-c", "2", "-timeout", "3", "-i", "0.5", "-continuous"]
    )
    assert args.target == "example.com"
    assert args.probe_type == "tcp"
    assert args.count == 2
    assert args.timeout == 3.0
    assert args.interval == 0.5
    assert args.continuous is True


def test_build_parser_defaults_and_aliases():
    args = build_parser().parse_args(["--target", "example.com"])
    assert args.probe_type == "http"
    assert args.count == 4
    assert args.timeout == 5.0
    assert args.interval == 1.0
    assert args.continuous is False
    assert args.insecure is False
    assert args.no_color is False


def test_missing_target_exits_with_error(capsys, probe_calls):
    assert cli_main.main([]) == EXIT_CONFIG_ERROR
    err = capsys.readouterr().err
    assert "target address is required" in err
    assert "usage:" in err
    assert probe_calls == []


def test_unsupported_protocol_exits_before_probing(capsys, probe_calls):
    assert cli_main.main(["-t", "example.com", "-type", "ftp", "-no-color"]) == EXIT_CONFIG_ERROR
    captured = capsys.readouterr()
    assert "Error: unsupported probe type: ftp" in captured.err
    assert captured.out == ""
    assert probe_calls == []


def test_zero_count_is_rejected(capsys, probe_calls):
    assert cli_main.main(["-t", "example.com", "-c", "0"]) == EXIT_CONFIG_ERROR
    assert "count must be at least 1" in capsys.readouterr().err
    assert probe_calls == []


def test_tcp_run_prints_lines_and_summary(capsys, probe_calls):
    code = cli_main.main(["-t", "example.com", "-type", "tcp", "-c", "3", "-i", "0", "-timeout", "2", "-no-color"])
    assert code == EXIT_OK
    out = capsys.readouterr().out
    assert "Type: TCP" in out
    assert "[1] Reply from example.com: connected time=12ms" in out
    assert "[3] Reply from example.com: connected time=12ms" in out
    assert "Sent: 3, Succeeded: 3, Failed: 0 (0.0% loss)" in out
    assert "Service health: excellent" in out
    assert len(probe_calls) == 3
    assert probe_calls[0]["timeout"] == 2.0
    assert probe_calls[0]["http_client"] is None


def test_http_run_shares_one_client(capsys, probe_calls):
    assert cli_main.main(["-t", "example.com", "-c", "2", "-i", "0", "-no-color"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "[2] Reply from example.com: status=200 time=12ms" in out
    clients = {id(call["http_client"]) for call in probe_calls}
    assert len(clients) == 1
    assert probe_calls[0]["http_client"] is not None


def test_icmp_notice_is_printed(capsys, probe_calls):
    assert cli_main.main(["-t", "example.com", "-type", "ICMP", "-c", "1", "-no-color"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "icmp fallback" in out
    assert probe_calls[0]["protocol"] is ProbeProtocol.ICMP


def test_continuous_run_prints_summary_on_interrupt(monkeypatch, capsys):
    calls = []

    def fake_probe_target(target, protocol, timeout, *, http_client=None, notice=None):  # noqa: ARG001
        calls.append(target)
        if len(calls) == 5:
            raise KeyboardInterrupt
        ok = len(calls) != 2
        return ProbeResult(target=target, success=ok, response_time=0.01, protocol=protocol, error=None if ok else "refused")

    monkeypatch.setattr(runner_module, "probe_target", fake_probe_target)
    code = cli_main.main(["-t", "example.com", "-type", "tcp", "-continuous", "-c", "1", "-i", "0", "-no-color"])
    assert code == EXIT_INTERRUPTED
    out = capsys.readouterr().out
    assert "Sent: 4, Succeeded: 3, Failed: 1 (25.0% loss)" in out
    assert "Service health: fair" in out
