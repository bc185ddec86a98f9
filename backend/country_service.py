#!/usr/bin/env python3
"""
Country Info Service - Country profiles from the country directory API

The profile is kept as the decoded JSON document. The get_country_* helpers
each read one field from it and return an empty value when it is missing.
"""
import logging

from json_path import get_number, get_path
from upstream import fetch_json

logger = logging.getLogger(__name__)


class CountryInfoService:
    """Service class to fetch country profiles by ISO 3166-1 alpha-2 code"""

    def __init__(self, settings, session=None):
        self.api_url = settings.country_info_url
        self.unknown_code = settings.unknown_country_code
        self.timeout = settings.request_timeout
        self.session = session

    def get_country_info(self, country_code):
        """Get the profile document for a country, {} when unavailable"""
        if not country_code or country_code == self.unknown_code:
            return {}

        data = fetch_json(
            self.session,
            self.api_url.format(code=country_code),
            self.timeout,
            'country directory',
        )
        if not isinstance(data, dict):
            logger.warning('No country profile for %s', country_code)
            return {}
        return data


def get_country_name(info, path):
    """Country name, '' if absent"""
    name = get_path(info, path)
    return name if isinstance(name, str) else ''


def _string_list(value):
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def get_country_languages(info, path):
    """Names of the official languages, [] if absent"""
    return _string_list(get_path(info, path))


def get_country_timezones(info, path):
    """UTC offset strings such as 'UTC-03:00', [] if absent"""
    return _string_list(get_path(info, path))


def get_country_latlng(info, lat_path, lng_path):
    """(lat, lng) of the country, None unless both are numbers"""
    lat = get_number(info, lat_path)
    lng = get_number(info, lng_path)
    if lat is None or lng is None:
        return None
    return lat, lng


def get_country_currency(info, path):
    """ISO 4217 code of the first listed currency, '' if absent"""
    code = get_path(info, path)
    return code if isinstance(code, str) else ''
