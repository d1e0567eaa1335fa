import logging
from typing import Any

from linkshortener.constants import LogSource
from linkshortener.services import UrlShortenerService
from linkshortener.handlers.constants import MISSING_SHORTCODE, SHORT_URL_NOT_FOUND, SHORT_URL_DELETED
from linkshortener.handlers.responses import (
    response_200,
    response_400,
    response_404,
    serialize_record,
    serialize_stats,
)


logger = logging.getLogger(__name__)


def statistics(event: dict[str, Any], service: UrlShortenerService) -> dict:
    """Render the statistics dashboard data

    Meant to be polled on a refresh cadence: expiry flags are only brought up
    to date when the registry is read.

    HTTP responses:
        200:
            stats: {total, active, expired, totalClicks}
            urls: every record, newest first, including click history
    """
    records = service.list_urls()
    stats = service.stats()
    logger.info(
        'Statistics data refreshed.',
        extra={'source': LogSource.STATISTICS, 'urlCount': len(records), 'totalClicks': stats.total_clicks},
    )
    return response_200(
        {
            'stats': serialize_stats(stats),
            'urls': [serialize_record(record, event) for record in records],
        }
    )


def delete_url(event: dict[str, Any], service: UrlShortenerService) -> dict:
    """Delete a short URL from the statistics view

    HTTP responses:
        200: deleted
        400: missing shortcode in path parameters
        404: shortcode unknown
    """
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if not shortcode or not isinstance(shortcode, str):
        return response_400(message="missing 'shortcode' in path", error_code=MISSING_SHORTCODE)

    if not service.remove(shortcode):
        return response_404(message=f"short code '{shortcode}' doesn't exist", error_code=SHORT_URL_NOT_FOUND)

    logger.info('URL deleted from statistics.', extra={'source': LogSource.STATISTICS, 'shortcode': shortcode})
    return response_200({'message': f"Deleted short code '{shortcode}'", 'shortCode': shortcode, 'event': SHORT_URL_DELETED})
