import logging
from typing import Any

from linkshortener.constants import DEFAULT_CLICK_SOURCE, LogSource
from linkshortener.services import UrlShortenerService
from linkshortener.handlers.constants import (
    MISSING_SHORTCODE,
    SHORT_URL_NOT_FOUND,
    SHORT_URL_EXPIRED,
    REDIRECT_SUCCESS,
)
from linkshortener.handlers.responses import response_302, response_400, response_404, response_410


logger = logging.getLogger(__name__)


def _header(event: dict[str, Any], name: str) -> str | None:
    headers = event.get('headers') or {}
    for key, value in headers.items():
        if key.lower() == name.lower():
            return value
    return None


def redirect_url(event: dict[str, Any], service: UrlShortenerService) -> dict:
    """Resolve a shortcode, record the visit and redirect

    Procedure:
    - Step 1: Extract shortcode from the path parameters
    - Step 2: Look up the record (unknown -> 404, expired -> 410)
    - Step 3: Record the click with its source and user agent
    - Step 4: Redirect client to the original URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: original URL
        400: missing shortcode in path parameters
        404: shortcode unknown
        410: short URL expired

    Example:
        >>> event = {'pathParameters': {'shortcode': 'abc123'}, 'headers': {'User-Agent': 'curl/8.0'}}
        >>> response = redirect_url(event, service)
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 1- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if not shortcode or not isinstance(shortcode, str):
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'source': LogSource.REDIRECT, 'event': MISSING_SHORTCODE})
        return response_400(message="missing 'shortcode' in path", error_code=MISSING_SHORTCODE)
    logger.info('Redirect request received.', extra={'source': LogSource.REDIRECT, 'shortcode': shortcode})

    # 2- Look up the short URL record
    record = service.resolve(shortcode)
    if record is None:
        logger.warning(
            'Short URL not found for redirect. Responding with 404.',
            extra={'source': LogSource.REDIRECT, 'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404(message=f"short code '{shortcode}' doesn't exist", error_code=SHORT_URL_NOT_FOUND)

    if record.expired:
        logger.warning(
            'Expired URL access attempt. Responding with 410.',
            extra={'source': LogSource.REDIRECT, 'shortcode': shortcode, 'expiresAt': record.expires_at, 'event': SHORT_URL_EXPIRED},
        )
        return response_410(message=f"short code '{shortcode}' has expired", error_code=SHORT_URL_EXPIRED)

    # 3- Record the click
    source = (event.get('queryStringParameters') or {}).get('source') or DEFAULT_CLICK_SOURCE
    if not service.record_click(shortcode, source=source, user_agent=_header(event, 'User-Agent')):
        # Only reachable when the record expired between lookup and click
        logger.error('Failed to record click for redirect.', extra={'source': LogSource.REDIRECT, 'shortcode': shortcode})
        return response_410(message=f"short code '{shortcode}' has expired", error_code=SHORT_URL_EXPIRED)

    # 4- Redirect client to the original URL
    logger.info(
        'Redirecting client to original URL. Responding with 302.',
        extra={'source': LogSource.REDIRECT, 'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=record.original_url)
