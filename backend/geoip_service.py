#!/usr/bin/env python3
"""
GeoIP Service - Get the ISO 3166-1 alpha-2 country code for an IP address
Uses the geolocation API configured in WHEREIP_IP_INFO_URL
"""
import logging

from json_path import get_path
from upstream import fetch_json

logger = logging.getLogger(__name__)


class GeoIPService:
    """Service class to resolve the country an IP address belongs to"""

    def __init__(self, settings, session=None):
        self.api_url = settings.ip_info_url
        self.code_path = settings.country_code_path
        self.unknown_code = settings.unknown_country_code
        self.timeout = settings.request_timeout
        self.session = session

    def get_country_code(self, ip):
        """Get the country code for an IP address, or the unknown sentinel"""
        data = fetch_json(self.session, self.api_url.format(ip=ip), self.timeout, 'geolocation')

        code = get_path(data, self.code_path) if data is not None else None
        if not isinstance(code, str) or not code.strip():
            logger.info('No country found for %s', ip)
            return self.unknown_code

        return code.strip().upper()
