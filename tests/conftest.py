"""
Shared fixtures: fake upstream HTTP session, settings and sample documents
"""
from datetime import datetime, timedelta, timezone

import pytest

from config import Settings
from country_service import CountryInfoService
from currency_service import CurrencyService
from enrichment_service import EnrichmentService
from geoip_service import GeoIPService
from stats_service import StatsService

IP_URL = 'http://geo.test/ip?{ip}'
COUNTRY_URL = 'http://countries.test/alpha/{code}'
CURRENCY_URL = 'http://rates.test/latest?access_key={api_key}&symbols={base},{symbol}'

ARGENTINA = {
    'name': 'Argentina',
    'translations': {'es': 'Argentina', 'de': 'Argentinien'},
    'languages': [{'name': 'Spanish'}, {'name': 'Guaraní'}],
    'timezones': ['UTC-03:00'],
    'latlng': [-34.0, -64.0],
    'currencies': [{'code': 'ARS', 'name': 'Argentine peso'}],
}

SPAIN = {
    'translations': {'es': 'España'},
    'languages': [{'name': 'Spanish'}],
    'timezones': ['UTC', 'UTC+01:00'],
    'latlng': [40.0, -4.0],
    'currencies': [{'code': 'EUR'}],
}


class FakeResponse:

    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text

    def json(self):
        if self.text is not None:
            raise ValueError('Expecting value: line 1 column 1 (char 0)')
        return self.payload


class FakeSession:
    """Stands in for requests.Session; answers by exact URL"""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append((url, timeout))
        answer = self.routes.get(url)
        if answer is None:
            return FakeResponse(status_code=404, text='not found')
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, FakeResponse):
            return answer
        return FakeResponse(answer)


@pytest.fixture
def settings():
    return Settings(
        ip_info_url=IP_URL,
        country_info_url=COUNTRY_URL,
        currency_info_url=CURRENCY_URL,
        currency_api_key='secret',
        request_timeout=2.0,
    )


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def fixed_now():
    return datetime(2024, 1, 15, 12, 30, tzinfo=timezone(timedelta(hours=-3)))


@pytest.fixture
def stats_service():
    return StatsService()


@pytest.fixture
def enrichment_service(settings, session, stats_service, fixed_now):
    return EnrichmentService(
        settings,
        GeoIPService(settings, session=session),
        CountryInfoService(settings, session=session),
        CurrencyService(settings, session=session),
        stats_service,
        clock=lambda: fixed_now,
    )


def add_country(session, ip, code, profile, currency=None, rate=None):
    """Route the three lookups for ip through session"""
    session.routes[IP_URL.format(ip=ip)] = {'countryCode': code}
    session.routes[COUNTRY_URL.format(code=code)] = profile
    if currency is not None:
        url = CURRENCY_URL.format(api_key='secret', base='USD', symbol=currency)
        session.routes[url] = {'success': True, 'rates': {'USD': rate, currency: 1.0}}
