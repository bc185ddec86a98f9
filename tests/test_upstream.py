import pytest
import requests

import upstream
from errors import UpstreamError
from upstream import HEADERS, fetch_json

from conftest import FakeResponse, FakeSession


def test_without_session_uses_requests_get(monkeypatch):
    calls = []

    def fake_get(url, headers=None, timeout=None):
        calls.append((url, headers, timeout))
        return FakeResponse({'countryCode': 'AR'})

    monkeypatch.setattr(upstream.requests, 'get', fake_get)

    assert fetch_json(None, 'http://geo.test/ip?1.1.1.1', 3, 'geolocation') == {'countryCode': 'AR'}
    assert calls == [('http://geo.test/ip?1.1.1.1', HEADERS, 3)]


def test_injected_session():
    session = FakeSession({'http://x.test/': {'ok': True}})
    assert fetch_json(session, 'http://x.test/', 1, 'x') == {'ok': True}
    assert session.calls == [('http://x.test/', 1)]


@pytest.mark.parametrize('answer', [
    FakeResponse(status_code=404, text='missing'),
    FakeResponse(text='<html>'),
])
def test_soft_misses(answer):
    session = FakeSession({'http://x.test/': answer})
    assert fetch_json(session, 'http://x.test/', 1, 'x') is None


@pytest.mark.parametrize('answer', [
    FakeResponse(status_code=500, text='boom'),
    requests.exceptions.ConnectionError('refused'),
    requests.exceptions.Timeout('slow'),
])
def test_failures_raise(answer):
    session = FakeSession({'http://x.test/': answer})
    with pytest.raises(UpstreamError) as excinfo:
        fetch_json(session, 'http://x.test/', 1, 'x')
    assert excinfo.value.service == 'x'
