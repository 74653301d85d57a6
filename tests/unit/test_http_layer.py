# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest

from healthprobe.config import ProbeSettings
from healthprobe.http.client import create_default_http_client
from healthprobe.http.httpx_client import HttpxClient
from healthprobe.http.models import HttpRequest
from healthprobe.http.url import normalize_http_target, split_tcp_target
from healthprobe.probe import probe_target


@pytest.mark.parametrize(
    "target, scheme, expected",
    [
        ("example.com", "http", "http://example.com"),
        ("example.com/health", "https", "https://example.com/health"),
        ("http://example.com", "https", "http://example.com"),
        ("https://example.com:8443/x", "http", "https://example.com:8443/x"),
        ("  example.com ", "http", "http://example.com"),
    ],
)
def test_normalize_http_target(target, scheme, expected):
    assert normalize_http_target(target, scheme) == expected


def test_split_tcp_target_defaults_to_port_80():
    assert split_tcp_target("example.com") == ("example.com", 80)
    assert split_tcp_target("example.com:443") == ("example.com", 443)
    assert split_tcp_target("[::1]:8080") == ("::1", 8080)


def test_split_tcp_target_rejects_bad_port():
    with pytest.raises(ValueError):
        split_tcp_target("example.com:http")
    with pytest.raises(ValueError):
        split_tcp_target("example.com:")


def test_httpx_client_disables_redirects_and_reports_status(monkeypatch):
    requests = []

    class FakeHttpxClient:
        def __init__(self, follow_redirects, timeout, verify):
            requests.append({"init": True, "follow_redirects": follow_redirects, "timeout": timeout, "verify": verify})

        def stream(self, method, url, headers=None, timeout=None, follow_redirects=None):
            requests.append({"method": method, "url": url, "headers": headers, "timeout": timeout, "follow_redirects": follow_redirects})

            class Resp:
                status_code = 301
                headers = httpx.Headers({"Location": "https://example/"})

                def __init__(self, response_url: str):
                    self.url = httpx.URL(response_url)

            class _Ctx:
                def __enter__(self):
                    return Resp(url)

                def __exit__(self, exc_type, exc, tb):  # noqa: ARG002
                    return None

            return _Ctx()

        def close(self):
            requests.append({"closed": True})

    monkeypatch.setattr(httpx, "Client", FakeHttpxClient)
    with HttpxClient(ProbeSettings(user_agent="UA/1.0", verify_ssl=False, timeout=3.0)) as client:
        resp = client.request(HttpRequest(url="http://example/path", timeout=1.2))

    assert requests[0] == {"init": True, "follow_redirects": False, "timeout": 3.0, "verify": False}
    assert resp.ok is True
    assert resp.status_code == 301
    assert requests[1]["method"] == "GET"
    assert requests[1]["headers"]["User-Agent"] == "UA/1.0"
    assert requests[1]["timeout"] == 1.2
    assert requests[1]["follow_redirects"] is False
    assert requests[-1] == {"closed": True}


def test_httpx_client_maps_transport_errors(monkeypatch):
    class ErrorClient:
        def __init__(self, **_):
            pass

        def stream(self, *_, **__):
            raise httpx.ConnectTimeout("boom")

        def close(self):
            pass

    monkeypatch.setattr(httpx, "Client", ErrorClient)
    client = create_default_http_client(ProbeSettings())
    resp = client.request(HttpRequest(url="http://example"))
    assert resp.ok is False
    assert resp.status_code is None
    assert resp.error_message == "boom"
    assert resp.error_category == "TIMEOUT"


def test_httpx_client_against_mock_transport():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["user-agent"] == ProbeSettings().user_agent
        return httpx.Response(404, request=request)

    inner = httpx.Client(transport=httpx.MockTransport(handler))
    client = HttpxClient(ProbeSettings(), client=inner)
    resp = client.request(HttpRequest(url="http://example/missing"))
    client.close()
    assert resp.ok is True
    assert resp.status_code == 404


def test_redirect_is_reported_without_following():
    hits = []

    def handler(request: httpx.Request) -> httpx.Response:
        hits.append(str(request.url))
        if request.url.path in ("", "/"):
            return httpx.Response(302, headers={"Location": "http://example/next"}, request=request)
        return httpx.Response(500, request=request)

    inner = httpx.Client(transport=httpx.MockTransport(handler))
    with HttpxClient(ProbeSettings(), client=inner) as client:
        result = probe_target("example", "http", 1.0, http_client=client)

    assert hits == ["http://example"]
    assert result.status_code == 302
    assert result.success is True
