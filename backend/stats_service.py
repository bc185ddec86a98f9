#!/usr/bin/env python3
"""
Stats Service - Query counts grouped by country

One StatsService is owned by the application and shared by all requests.
Every operation holds the same lock, so a record() is never interleaved with
another record(), a clear() or a summarize().
"""
import threading
from dataclasses import replace

from geo_calc import round_half_up
from models import CountryStat, StatsSummary


class StatsService:
    """In-memory aggregate of queries per country code"""

    def __init__(self):
        self._lock = threading.Lock()
        self._stats = {}

    def __len__(self):
        with self._lock:
            return len(self._stats)

    def record(self, country_code, country_name, distance, queries=1):
        """Add queries to a country, creating its entry on first sighting"""
        if queries < 1:
            raise ValueError(f'queries must be positive, got {queries}')

        with self._lock:
            stat = self._stats.get(country_code)
            if stat is None:
                stat = CountryStat(country_code, country_name, distance, queries)
                self._stats[country_code] = stat
            else:
                stat.queries += queries
            return replace(stat)

    def summarize(self):
        """Closest, furthest and query-weighted average distance, None if empty"""
        with self._lock:
            stats = list(self._stats.values())
            if not stats:
                return None
            # sorted() is stable: equal distances keep insertion order
            by_distance = sorted(stats, key=lambda s: s.distance)
            total_queries = sum(s.queries for s in stats)
            total_distance = sum(s.queries * s.distance for s in stats)

        return StatsSummary(
            closest_distance=by_distance[0].distance,
            furthest_distance=by_distance[-1].distance,
            average_distance=round_half_up(total_distance / total_queries),
        )

    def list_all(self):
        """Copies of every entry in insertion order, None if empty"""
        with self._lock:
            if not self._stats:
                return None
            return [replace(stat) for stat in self._stats.values()]

    def total_queries(self):
        with self._lock:
            return sum(s.queries for s in self._stats.values())

    def clear(self):
        with self._lock:
            self._stats = {}
