#!/usr/bin/env python3
"""
Currency Service - Exchange rates against the base currency
Uses the exchange rate API configured in WHEREIP_CURRENCY_INFO_URL
"""
import logging

from json_path import get_number
from upstream import fetch_json

logger = logging.getLogger(__name__)


class CurrencyService:
    """Service class to get the exchange rate of a currency"""

    def __init__(self, settings, session=None):
        self.api_url = settings.currency_info_url
        self.api_key = settings.currency_api_key
        self.base_currency = settings.base_currency
        self.rate_path = settings.currency_rate_path.format(base=settings.base_currency)
        self.unavailable_rate = settings.unavailable_rate
        self.timeout = settings.request_timeout
        self.session = session

    def get_rate(self, currency_code):
        """Get the exchange rate for an ISO 4217 code, or the unavailable sentinel"""
        if not currency_code:
            return self.unavailable_rate

        url = self.api_url.format(
            api_key=self.api_key,
            base=self.base_currency,
            symbol=currency_code,
        )
        data = fetch_json(self.session, url, self.timeout, 'currency exchange')

        rate = get_number(data, self.rate_path)
        if rate is None or rate < 0:
            logger.info('No %s rate available for %s', self.base_currency, currency_code)
            return self.unavailable_rate

        return rate
