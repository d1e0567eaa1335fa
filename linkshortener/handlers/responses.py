"""Response builders and record serializers shared by the handlers.

Every handler answers with a dict shaped like an HTTP response:
    {'statusCode': int, 'headers': dict, 'body': '<JSON string>'}
"""

import json
from typing import Any

from linkshortener.dao.codec import encode_record
from linkshortener.models import RegistryStatsModel, UrlRecordModel
from linkshortener.utils.helpers import get_short_url


JSON_HEADERS = {'Content-Type': 'application/json'}


def json_response(status_code: int, body: dict[str, Any], headers: dict[str, str] | None = None) -> dict:
    return {
        'statusCode': status_code,
        'headers': {**JSON_HEADERS, **(headers or {})},
        'body': json.dumps(body),
    }


def response_200(body: dict[str, Any]) -> dict:
    return json_response(200, body)


def response_302(*, location: str) -> dict:
    return json_response(302, {}, headers={'Location': location})


def _error_response(status_code: int, base: str, message: str | None, error_code: str | None) -> dict:
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return json_response(status_code, body)


def response_400(message: str | None = None, error_code: str | None = None) -> dict:
    return _error_response(400, 'Bad Request', message, error_code)


def response_404(message: str | None = None, error_code: str | None = None) -> dict:
    return _error_response(404, 'Not Found', message, error_code)


def response_410(message: str | None = None, error_code: str | None = None) -> dict:
    return _error_response(410, 'Gone', message, error_code)


def serialize_record(record: UrlRecordModel, event: dict[str, Any]) -> dict[str, Any]:
    body = encode_record(record)
    body['shortUrl'] = get_short_url(record.shortcode, event)
    body['clickCount'] = record.click_count
    return body


def serialize_stats(stats: RegistryStatsModel) -> dict[str, int]:
    return {
        'total': stats.total,
        'active': stats.active,
        'expired': stats.expired,
        'totalClicks': stats.total_clicks,
    }
