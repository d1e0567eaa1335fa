"""Composition root

Builds the durable mirror selected by configuration and the registry engine
on top of it. Callers own the returned service and pass it to the handlers
explicitly; there is no module-level registry instance.

Example:
    >>> from linkshortener.app import create_service
    >>> service = create_service()
    >>> service.stats().total
    0
"""

import logging
import random
from typing import Any

from linkshortener.dao.base import RegistryBaseDAO
from linkshortener.dao.file import RegistryFileDAO
from linkshortener.dao.redis import RegistryRedisDAO
from linkshortener.services import UrlShortenerService
from linkshortener.utils.config import app_prefix, load_config


logger = logging.getLogger(__name__)


def create_dao(config: dict[str, Any]) -> RegistryBaseDAO:
    """Instantiate the registry mirror named by `active_backend`.

    Raises:
        DataStoreError: if the Redis backend is selected and unreachable.
    """
    backend = config['active_backend']
    logger.debug('Creating registry mirror.', extra={'backend': backend})

    if backend == 'redis':
        redis_config = {f'redis_{k}': v for k, v in config['redis'].items()}
        return RegistryRedisDAO(**redis_config, prefix=app_prefix())
    return RegistryFileDAO(config['file']['path'])


def create_service(
    config: dict[str, Any] | None = None,
    dao: RegistryBaseDAO | None = None,
    rng: random.Random | None = None,
) -> UrlShortenerService:
    config = config or load_config()
    settings = config['shortener']

    return UrlShortenerService(
        dao or create_dao(config),
        default_validity_minutes=settings['default_validity_minutes'],
        shortcode_length=settings['shortcode_length'],
        max_attempts=settings['max_attempts'],
        rng=rng,
    )
