"""Helper utilities shared by the registry and its handlers.

Functions:
    utcnow() -> datetime
        Current time as an aware UTC datetime.
    generate_id() -> str
        Opaque unique identifier for records and click events.
    base_url(event) -> str
        Public base URL for a handler invocation.
    get_short_url(shortcode, event) -> str
        String representation of the short URL for a shortcode.
"""

import uuid
from datetime import datetime, UTC
from typing import Any

from linkshortener.constants import Defaults


def utcnow() -> datetime:
    return datetime.now(UTC)


def generate_id() -> str:
    return uuid.uuid4().hex


def base_url(event: dict[str, Any]) -> str:
    """Extract public base URL from a handler event

    Falls back to the local development address when the event carries none.

    Example:
        >>> base_url({'requestContext': {'baseUrl': 'https://sho.rt/'}})
        'https://sho.rt'
        >>> base_url({})
        'http://localhost:3000'
    """
    url = event.get('requestContext', {}).get('baseUrl') or Defaults.BASE_URL
    return url.rstrip('/')


def get_short_url(shortcode: str, event: dict[str, Any]) -> str:
    return f'{base_url(event)}/{shortcode}'
