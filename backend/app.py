#!/usr/bin/env python3
"""
Where IP - Flask Application
"""
import logging

from flask import Flask, current_app, jsonify, render_template
from dotenv import load_dotenv

from config import Settings
from country_service import CountryInfoService
from currency_service import CurrencyService
from enrichment_service import EnrichmentService
from errors import UpstreamError
from geoip_service import GeoIPService
from logging_config import setup_logging
from stats_service import StatsService

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "There isn't any query recorded."
CLEARED_MESSAGE = 'Stats cleared!'

# Sample queries shown on the landing page
SAMPLE_IPS = [
    ('AU', '1.1.1.1'),
    ('US', '2606:4700:4700::1111'),
    ('BR', '200.223.129.162'),
    ('ES', '195.53.69.132'),
    ('IN', '203.115.71.66'),
]


def create_app(settings=None, stats_service=None, enrichment_service=None):
    """Build the application with its services"""
    if settings is None:
        settings = Settings.from_env()
    if stats_service is None:
        stats_service = StatsService()
    if enrichment_service is None:
        enrichment_service = EnrichmentService(
            settings,
            GeoIPService(settings),
            CountryInfoService(settings),
            CurrencyService(settings),
            stats_service,
        )

    app = Flask(__name__,
                template_folder='../templates')
    app.url_map.strict_slashes = False
    app.extensions['whereip'] = {
        'settings': settings,
        'stats': stats_service,
        'enrichment': enrichment_service,
    }
    _register_routes(app)
    return app


def _services():
    return current_app.extensions['whereip']


def _message(text, status=200):
    return jsonify({'message': text}), status


def _register_routes(app):

    @app.route('/')
    def index():
        """Usage page"""
        return render_template('index.html', samples=SAMPLE_IPS)

    @app.route('/whereip/<ip>', methods=['GET'])
    def where_ip(ip):
        """Country, languages, local times, distance and exchange rate for an IP"""
        try:
            result = _services()['enrichment'].enrich(ip)
            return jsonify(result.to_dict())
        except UpstreamError as e:
            logger.error('Lookup for %s failed: %s', ip, e.message)
            return _message(e.message, 502)
        except Exception:
            logger.exception('Unexpected error while looking up %s', ip)
            return _message('Internal server error', 500)

    @app.route('/stats/', methods=['GET'])
    def stats():
        """Closest, furthest and average distance of all queries"""
        summary = _services()['stats'].summarize()
        if summary is None:
            return _message(NO_DATA_MESSAGE)
        return jsonify(summary.to_dict())

    @app.route('/fullstats/', methods=['GET'])
    def full_stats():
        """Every country seen with its query count"""
        entries = _services()['stats'].list_all()
        if entries is None:
            return _message(NO_DATA_MESSAGE)
        return jsonify([entry.to_dict() for entry in entries])

    @app.route('/clearstats/', methods=['GET'])
    def clear_stats():
        """Forget all recorded queries"""
        _services()['stats'].clear()
        return _message(CLEARED_MESSAGE)


def main():
    load_dotenv()
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    app = create_app(settings)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == '__main__':
    main()
