import pytest
import requests

from pixel_gauge.sources import FetchError, HttpFetcher, SimulatedFetcher, make_fetcher
from pixel_gauge.sources import remote


def _response(status: int, body: bytes) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.url = "http://example/data"
    return resp


def test_http_fetch_json(monkeypatch):
    seen = {}

    def fake_get(url, auth=None, timeout=None):
        seen.update(auth=auth, timeout=timeout)
        return _response(200, b'{"value": 3}')

    monkeypatch.setattr(remote.requests, "get", fake_get)
    assert HttpFetcher(timeout_s=4).fetch("http://example/data", ("u", "p")) == {"value": 3}
    assert seen == {"auth": ("u", "p"), "timeout": 4}


@pytest.mark.parametrize("outcome", [
    _response(503, b"busy"),
    _response(200, b"not json"),
    requests.ConnectionError("refused"),
    requests.Timeout("slow"),
])
def test_http_failures_become_fetch_errors(monkeypatch, outcome):
    def fake_get(url, auth=None, timeout=None):
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    monkeypatch.setattr(remote.requests, "get", fake_get)
    with pytest.raises(FetchError):
        HttpFetcher().fetch("http://example/data?token=secret")


def test_error_message_hides_query():
    assert "secret" not in remote._redact("http://example/data?token=secret")


def test_make_fetcher():
    assert isinstance(make_fetcher("sim://demo"), SimulatedFetcher)
    f = make_fetcher("https://example", timeout_s=3)
    assert isinstance(f, HttpFetcher) and f.timeout_s == 3


def test_simulator_stays_in_bounds():
    f = SimulatedFetcher(seed=1, lo=0, hi=20)
    for _ in range(200):
        v = f.fetch("sim://demo")["value"]
        assert 0 <= v <= 20
