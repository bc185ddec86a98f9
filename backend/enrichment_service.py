#!/usr/bin/env python3
"""
Enrichment Service - Build the full answer for one queried IP address

Resolves the country, reads its profile, derives distance and local times,
looks up the exchange rate and records the query in the stats store.
UpstreamError from any lookup propagates and nothing is recorded.
"""
import logging
from datetime import datetime, timezone

from country_service import (
    get_country_currency,
    get_country_languages,
    get_country_latlng,
    get_country_name,
    get_country_timezones,
)
from geo_calc import distance_km, format_timestamp, localize_timestamps
from models import QueryResult

logger = logging.getLogger(__name__)


def local_now():
    """Current time in the server's local offset"""
    return datetime.now(timezone.utc).astimezone()


class EnrichmentService:
    """Runs the lookups for a single IP address"""

    def __init__(self, settings, geoip_service, country_service, currency_service,
                 stats_service, clock=local_now):
        self.settings = settings
        self.geoip_service = geoip_service
        self.country_service = country_service
        self.currency_service = currency_service
        self.stats_service = stats_service
        self.clock = clock

    def enrich(self, ip):
        """Get country, language, time, distance and currency info for ip"""
        settings = self.settings
        queried_at = self.clock()

        country_code = self.geoip_service.get_country_code(ip)
        info = self.country_service.get_country_info(country_code)

        country_name = get_country_name(info, settings.country_name_path)
        languages = get_country_languages(info, settings.languages_path)
        offsets = get_country_timezones(info, settings.timezones_path)
        currency = get_country_currency(info, settings.currency_code_path)

        latlng = get_country_latlng(info, settings.lat_path, settings.lng_path)
        if latlng is None:
            distance = 0
        else:
            distance = distance_km(latlng[0], latlng[1], settings.base_lat, settings.base_lng)

        exchange_rate = self.currency_service.get_rate(currency)

        result = QueryResult(
            ip=ip,
            when=format_timestamp(queried_at),
            country_code=country_code,
            country_name=country_name,
            languages=tuple(languages),
            timezones=tuple(localize_timestamps(queried_at, offsets)),
            distance=distance,
            currency=currency,
            exchange_rate=exchange_rate,
        )

        self.stats_service.record(country_code, country_name, distance)
        logger.info('Query from %s resolved to %s (%s km)', ip, country_code, distance)
        return result
