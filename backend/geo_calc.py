#!/usr/bin/env python3
"""
Geo Calculations - Distances, UTC offsets and timestamp formatting

Pure functions, no I/O.
"""
import logging
import math
import re
from datetime import timedelta, timezone

from errors import TimezoneOffsetError

logger = logging.getLogger(__name__)

EARTH_RADIUS_M = 6378100
TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%S%z'

# "UTC", "UTC-03:00", "UTC+5:45"
UTC_OFFSET_RE = re.compile(r'^UTC(?:([+-])(\d{1,2}):(\d{2}))?$')


def round_half_up(value):
    """Round to the nearest integer, halves away from zero"""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _hsin(theta):
    return math.sin(theta / 2) ** 2


def haversine_distance(lat1, lon1, lat2, lon2):
    """Great-circle distance in meters between two points given in degrees

    See https://en.wikipedia.org/wiki/Haversine_formula
    """
    la1, lo1, la2, lo2 = map(math.radians, (lat1, lon1, lat2, lon2))
    h = _hsin(la2 - la1) + math.cos(la1) * math.cos(la2) * _hsin(lo2 - lo1)
    # float error can push h slightly outside asin's domain for antipodes
    h = min(max(h, 0.0), 1.0)
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(h))


def distance_km(lat1, lon1, lat2, lon2):
    """Great-circle distance rounded to whole kilometers"""
    return round_half_up(haversine_distance(lat1, lon1, lat2, lon2) / 1000)


def parse_utc_offset(text):
    """Parse 'UTC' or 'UTC+HH:MM' into a signed offset in seconds"""
    match = UTC_OFFSET_RE.match(text.strip()) if isinstance(text, str) else None
    if not match:
        raise TimezoneOffsetError(f'Malformed UTC offset: {text!r}')

    sign, hours, minutes = match.groups()
    if sign is None:
        return 0

    hours, minutes = int(hours), int(minutes)
    if hours > 23 or minutes > 59:
        raise TimezoneOffsetError(f'UTC offset out of range: {text!r}')

    seconds = hours * 3600 + minutes * 60
    return -seconds if sign == '-' else seconds


def format_timestamp(moment):
    """Format an aware datetime as 2024-01-15T09:30:00+0200"""
    return moment.strftime(TIMESTAMP_FORMAT)


def localize_timestamps(base, offsets):
    """Format base in each fixed UTC offset, skipping malformed entries"""
    timestamps = []
    for offset in offsets:
        try:
            seconds = parse_utc_offset(offset)
        except TimezoneOffsetError as e:
            logger.warning('Skipping timezone: %s', e)
            continue
        zone = timezone(timedelta(seconds=seconds))
        timestamps.append(format_timestamp(base.astimezone(zone)))
    return timestamps
