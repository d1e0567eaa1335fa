"""JSON codec for registry snapshots

A snapshot is a JSON array of records. Keys are camelCase and timestamps are
ISO-8601 strings with a UTC offset:

    [
        {
            "id": "9b2f0c...",
            "originalUrl": "https://example.com",
            "shortCode": "abc123",
            "isCustom": false,
            "createdAt": "2025-10-15T12:00:00+00:00",
            "expiresAt": "2025-10-15T12:30:00+00:00",
            "validityMinutes": 30,
            "isExpired": false,
            "clicks": [
                {
                    "id": "41ac7e...",
                    "timestamp": "2025-10-15T12:01:00+00:00",
                    "source": "direct",
                    "location": "Tokyo, JP",
                    "userAgent": "Mozilla/5.0"
                }
            ]
        }
    ]

Functions:
    dump_records(records) -> str
    load_records(payload) -> list[UrlRecordModel]

`load_records()` returns the stored expiry flags as-is; refreshing them against
the current time is the registry's job.
"""

import json
from collections.abc import Iterable
from datetime import datetime, UTC
from typing import Any

from linkshortener.models import ClickEventModel, UrlRecordModel
from linkshortener.dao.exceptions import SnapshotDecodeError


def _encode_datetime(value: datetime) -> str:
    return value.isoformat()


def _decode_datetime(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    # Naive timestamps are assumed to be UTC
    return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)


def encode_click(click: ClickEventModel) -> dict[str, Any]:
    return {
        'id': click.id,
        'timestamp': _encode_datetime(click.timestamp),
        'source': click.source,
        'location': click.location,
        'userAgent': click.user_agent,
    }


def encode_record(record: UrlRecordModel) -> dict[str, Any]:
    return {
        'id': record.id,
        'originalUrl': record.original_url,
        'shortCode': record.shortcode,
        'isCustom': record.is_custom,
        'createdAt': _encode_datetime(record.created_at),
        'expiresAt': _encode_datetime(record.expires_at),
        'validityMinutes': record.validity_minutes,
        'isExpired': record.expired,
        'clicks': [encode_click(click) for click in record.clicks],
    }


def decode_click(data: dict[str, Any]) -> ClickEventModel:
    return ClickEventModel(
        id=str(data['id']),
        timestamp=_decode_datetime(data['timestamp']),
        source=data.get('source', ''),
        location=data.get('location', ''),
        user_agent=data.get('userAgent', ''),
    )


def decode_record(data: dict[str, Any]) -> UrlRecordModel:
    # Older snapshots carried the custom code itself instead of a flag
    is_custom = data['isCustom'] if 'isCustom' in data else bool(data.get('customShortCode'))

    return UrlRecordModel(
        id=str(data['id']),
        original_url=data['originalUrl'],
        shortcode=data['shortCode'],
        is_custom=bool(is_custom),
        created_at=_decode_datetime(data['createdAt']),
        validity_minutes=int(data['validityMinutes']),
        expires_at=_decode_datetime(data['expiresAt']),
        expired=bool(data.get('isExpired', False)),
        clicks=tuple(decode_click(click) for click in data.get('clicks', [])),
    )


def dump_records(records: Iterable[UrlRecordModel]) -> str:
    return json.dumps([encode_record(record) for record in records])


def load_records(payload: str | bytes) -> list[UrlRecordModel]:
    """Decode a registry snapshot

    Args:
        payload (str | bytes): JSON document produced by `dump_records()`.

    Returns:
        list[UrlRecordModel]: decoded records, in snapshot order.

    Raises:
        SnapshotDecodeError:
            If the payload is not JSON, is not an array, or any record is
            missing fields or carries values of the wrong shape.
    """
    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise SnapshotDecodeError(f'Registry snapshot is not valid JSON: {e}') from e

    if not isinstance(data, list):
        raise SnapshotDecodeError(f'Registry snapshot must be a JSON array (given type: {type(data).__name__}).')

    try:
        return [decode_record(item) for item in data]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise SnapshotDecodeError(f'Registry snapshot contains a malformed record: {e!r}') from e
