#!/usr/bin/env python3
"""
Upstream - Shared GET + JSON decoding for the external lookup services
"""
import logging

import requests

from errors import UpstreamError

logger = logging.getLogger(__name__)

USER_AGENT = 'WhereIP/1.0'
HEADERS = {'User-Agent': USER_AGENT, 'Accept': 'application/json'}


def fetch_json(session, url, timeout, service):
    """GET url and decode its JSON body

    session is any object with a requests-style get(). None calls
    requests.get directly, one connection per call.

    Returns None for 4xx responses and bodies that are not JSON.
    Raises UpstreamError when the service is unreachable, times out or
    answers with a 5xx status.
    """
    try:
        response = (session or requests).get(url, headers=HEADERS, timeout=timeout)
    except requests.exceptions.Timeout:
        raise UpstreamError(f'{service} timed out after {timeout}s', service) from None
    except requests.exceptions.RequestException as e:
        raise UpstreamError(f'{service} unreachable: {e.__class__.__name__}', service) from e

    if response.status_code >= 500:
        raise UpstreamError(f'{service} answered {response.status_code}', service)

    if response.status_code >= 400:
        logger.warning('%s answered %s', service, response.status_code)
        return None

    try:
        return response.json()
    except ValueError:
        logger.warning('%s returned a body that is not JSON', service)
        return None
