"""Input validation for shorten requests

Functions:
    is_valid_url(url) -> bool
        True for syntactically valid absolute URLs (scheme and host present).
    is_valid_shortcode(shortcode) -> bool
        True for 3-12 ASCII alphanumeric characters.
    is_positive_int(value) -> bool
        True for integers greater than zero (booleans excluded).

Example:
    >>> is_valid_url('https://example.com/page?id=1')
    True
    >>> is_valid_url('example.com')
    False
    >>> is_valid_shortcode('abc123')
    True
    >>> is_valid_shortcode('ab')
    False
"""

import re
from typing import Any
from urllib.parse import urlsplit

from linkshortener.constants import SHORTCODE_MIN_LENGTH, SHORTCODE_MAX_LENGTH


SHORTCODE_PATTERN = re.compile(rf'[A-Za-z0-9]{{{SHORTCODE_MIN_LENGTH},{SHORTCODE_MAX_LENGTH}}}')
SCHEME_PATTERN = re.compile(r'[A-Za-z][A-Za-z0-9+.\-]*')


def is_valid_url(url: Any) -> bool:
    if not isinstance(url, str) or not url or url != url.strip():
        return False
    if any(ch.isspace() for ch in url):
        return False

    try:
        components = urlsplit(url)
        # Accessing the port validates it (raises ValueError when out of range)
        _ = components.port
    except ValueError:
        return False

    if not SCHEME_PATTERN.fullmatch(components.scheme):
        return False
    return bool(components.hostname)


def is_valid_shortcode(shortcode: Any) -> bool:
    return isinstance(shortcode, str) and SHORTCODE_PATTERN.fullmatch(shortcode) is not None


def is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
