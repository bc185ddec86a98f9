#!/usr/bin/env python3
"""
Configuration - Service settings read from environment variables

Every value has a default so the service starts with an empty environment.
A .env file is loaded by the application before these settings are read.
"""
import os
from dataclasses import dataclass

from errors import ConfigurationError

ENV_PREFIX = 'WHEREIP_'


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the Where IP service"""

    # Sentinels
    unknown_country_code: str = 'XX'
    unavailable_rate: float = 0.0

    # Base point for distances and exchange rates (Buenos Aires, USD)
    base_currency: str = 'USD'
    base_lat: float = -34.603333
    base_lng: float = -58.381667

    # External service URL templates
    ip_info_url: str = 'https://api.ip2country.info/ip?{ip}'
    country_info_url: str = 'https://restcountries.com/v2/alpha/{code}'
    currency_info_url: str = 'http://data.fixer.io/api/latest?access_key={api_key}&symbols={base},{symbol}'
    currency_api_key: str = ''

    # JSON paths into the upstream responses
    country_code_path: str = 'countryCode'
    country_name_path: str = 'translations.es'
    currency_rate_path: str = 'rates.{base}'
    currency_code_path: str = 'currencies.0.code'
    languages_path: str = 'languages.#.name'
    timezones_path: str = 'timezones'
    lat_path: str = 'latlng.0'
    lng_path: str = 'latlng.1'

    request_timeout: float = 5.0
    log_level: str = 'INFO'
    host: str = '0.0.0.0'
    port: int = 3000
    debug: bool = False

    @classmethod
    def from_env(cls, environ=None):
        """Build settings from WHEREIP_* variables, falling back to defaults"""
        if environ is None:
            environ = os.environ

        def text(name, default):
            value = environ.get(ENV_PREFIX + name)
            if value is None or value.strip() == '':
                return default
            return value.strip()

        def number(name, default, cast=float):
            value = text(name, None)
            if value is None:
                return default
            try:
                return cast(value)
            except ValueError:
                raise ConfigurationError(
                    f'{ENV_PREFIX}{name} must be a number, got {value!r}'
                ) from None

        def flag(name, default):
            value = text(name, None)
            if value is None:
                return default
            return value.lower() in ('1', 'true', 'yes', 'on')

        defaults = cls()
        return cls(
            unknown_country_code=text('UNKNOWN_COUNTRY', defaults.unknown_country_code),
            unavailable_rate=number('UNAVAILABLE_RATE', defaults.unavailable_rate),
            base_currency=text('BASE_CURRENCY', defaults.base_currency),
            base_lat=number('BASE_LAT', defaults.base_lat),
            base_lng=number('BASE_LNG', defaults.base_lng),
            ip_info_url=text('IP_INFO_URL', defaults.ip_info_url),
            country_info_url=text('COUNTRY_INFO_URL', defaults.country_info_url),
            currency_info_url=text('CURRENCY_INFO_URL', defaults.currency_info_url),
            currency_api_key=text('CURRENCY_API_KEY', defaults.currency_api_key),
            country_code_path=text('PATH_COUNTRY_CODE', defaults.country_code_path),
            country_name_path=text('PATH_COUNTRY_NAME', defaults.country_name_path),
            currency_rate_path=text('PATH_CURRENCY_RATE', defaults.currency_rate_path),
            currency_code_path=text('PATH_CURRENCY_CODE', defaults.currency_code_path),
            languages_path=text('PATH_LANGUAGES', defaults.languages_path),
            timezones_path=text('PATH_TIMEZONES', defaults.timezones_path),
            lat_path=text('PATH_LATITUDE', defaults.lat_path),
            lng_path=text('PATH_LONGITUDE', defaults.lng_path),
            request_timeout=number('REQUEST_TIMEOUT', defaults.request_timeout),
            log_level=text('LOG_LEVEL', defaults.log_level),
            host=text('HOST', defaults.host),
            port=number('PORT', defaults.port, cast=int),
            debug=flag('DEBUG', defaults.debug),
        )
