import json
import logging
from typing import Any

from linkshortener.constants import Defaults, LogSource
from linkshortener.exceptions import LinkShortenerError
from linkshortener.services import UrlShortenerService
from linkshortener.utils.helpers import get_short_url
from linkshortener.handlers.constants import INVALID_REQUEST_BODY, TOO_MANY_URLS
from linkshortener.handlers.responses import response_200, response_400


logger = logging.getLogger(__name__)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _parse_validity(value: Any) -> Any:
    value = _blank_to_none(value)
    # Form fields arrive as text; anything non-numeric is left for the registry to reject
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    return value


def shorten_urls(event: dict[str, Any], service: UrlShortenerService) -> dict:
    """Handle a shorten form submission with up to five URLs

    Every entry is shortened independently: a rejected entry is reported in
    `errors` and the remaining entries are still processed.

    Request body:
        {"urls": [{"originalUrl": str, "validityMinutes"?: int | str, "customShortCode"?: str}, ...]}

    HTTP responses:
        200: Submission processed
            results: one item per created short URL (index, shortCode, shortUrl, originalUrl, expiresAt)
            errors: one item per rejected entry (index, message, errorCode)
        400: Bad client request
            message: invalid JSON, missing/empty `urls` or more than five entries

    Example:
        >>> event = {'body': '{"urls": [{"originalUrl": "https://example.com"}]}'}
        >>> response = shorten_urls(event, service)
        >>> response['statusCode']
        200
    """
    try:
        request_body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError:
        return response_400(message='invalid JSON body', error_code=INVALID_REQUEST_BODY)

    entries = request_body.get('urls') if isinstance(request_body, dict) else None
    if not isinstance(entries, list) or not entries:
        return response_400(message="missing 'urls' in JSON body", error_code=INVALID_REQUEST_BODY)
    if len(entries) > Defaults.MAX_BATCH_SIZE:
        return response_400(
            message=f'at most {Defaults.MAX_BATCH_SIZE} URLs per submission',
            error_code=TOO_MANY_URLS,
        )

    results, errors = [], []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            errors.append({'index': index, 'message': 'entry must be an object', 'errorCode': INVALID_REQUEST_BODY})
            continue

        try:
            record = service.shorten(
                _blank_to_none(entry.get('originalUrl')),
                validity_minutes=_parse_validity(entry.get('validityMinutes')),
                custom_shortcode=_blank_to_none(entry.get('customShortCode')),
            )
        except LinkShortenerError as e:
            logger.info(
                'Failed to shorten URL in form.',
                extra={'source': LogSource.URL_FORM, 'formIndex': index, 'error': str(e)},
            )
            errors.append({'index': index, 'message': str(e), 'errorCode': e.error_code})
        else:
            logger.info(
                'URL shortened successfully in form.',
                extra={'source': LogSource.URL_FORM, 'formIndex': index, 'shortcode': record.shortcode},
            )
            results.append(
                {
                    'index': index,
                    'shortCode': record.shortcode,
                    'shortUrl': get_short_url(record.shortcode, event),
                    'originalUrl': record.original_url,
                    'expiresAt': record.expires_at.isoformat(),
                }
            )

    return response_200({'results': results, 'errors': errors})
