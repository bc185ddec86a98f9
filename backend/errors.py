#!/usr/bin/env python3
"""
Errors - Exception types shared by the Where IP services
"""


class WhereIPError(Exception):
    """Base class for Where IP errors"""

    def __init__(self, message, service=None):
        self.message = message
        self.service = service
        super().__init__(self.message)


class UpstreamError(WhereIPError):
    """An external lookup service could not be reached or failed"""
    pass


class TimezoneOffsetError(WhereIPError, ValueError):
    """A UTC offset string does not have the UTC or UTC+HH:MM shape"""
    pass


class ConfigurationError(WhereIPError):
    pass
