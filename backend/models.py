#!/usr/bin/env python3
"""
Models - Query results and statistics records
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class QueryResult:
    """Everything known about one queried IP address"""
    ip: str
    when: str
    country_code: str
    country_name: str
    languages: tuple
    timezones: tuple
    distance: int
    currency: str
    exchange_rate: float

    def to_dict(self):
        return {
            'from': self.ip,
            'when': self.when,
            'countryCode': self.country_code,
            'countryName': self.country_name,
            'languages': list(self.languages),
            'timezones': list(self.timezones),
            'distance': self.distance,
            'currency': self.currency,
            'exRate': self.exchange_rate,
        }


@dataclass
class CountryStat:
    """Queries received from one country"""
    country_code: str
    country_name: str
    distance: int
    queries: int

    def to_dict(self):
        return {
            'countryCode': self.country_code,
            'countryName': self.country_name,
            'distance': self.distance,
            'queries': self.queries,
        }


@dataclass(frozen=True)
class StatsSummary:
    closest_distance: int
    furthest_distance: int
    average_distance: int

    def to_dict(self):
        return {
            'furthestDistance': self.furthest_distance,
            'closestDistance': self.closest_distance,
            'averageDistance': self.average_distance,
        }
