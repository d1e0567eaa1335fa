"""Unit tests for the composition root in app.py

Test coverage includes:

1. Mirror selection
   - The file backend builds a RegistryFileDAO on the configured path.
   - The redis backend builds a RegistryRedisDAO with prefixed connection
     parameters and the application key prefix.

2. Service creation
   - Shortener tunables from the config reach the service.
   - An explicit DAO bypasses mirror creation.
"""

import copy
from unittest.mock import MagicMock

import pytest

from linkshortener import app
from linkshortener.dao.base import RegistryBaseDAO
from linkshortener.dao.file import RegistryFileDAO
from linkshortener.utils.config import DEFAULT_CONFIG


@pytest.fixture
def config(registry_path):
    config = copy.deepcopy(DEFAULT_CONFIG)
    config['file']['path'] = str(registry_path)
    return config


# -------------------------------
# 1. Mirror selection
# -------------------------------


def test_create_dao_file(config, registry_path):
    dao = app.create_dao(config)

    assert isinstance(dao, RegistryFileDAO)
    assert dao.path == registry_path


def test_create_dao_redis(monkeypatch, config):
    monkeypatch.setenv('APP_NAME', 'linkshortener')
    monkeypatch.setenv('APP_ENV', 'dev')
    redis_dao = MagicMock()
    monkeypatch.setattr(app, 'RegistryRedisDAO', redis_dao)
    config['active_backend'] = 'redis'
    config['redis'] = {'host': 'cache.local', 'port': 6380, 'db': 2}

    dao = app.create_dao(config)

    assert dao is redis_dao.return_value
    redis_dao.assert_called_once_with(redis_host='cache.local', redis_port=6380, redis_db=2, prefix='linkshortener:dev')


# -------------------------------
# 2. Service creation
# -------------------------------


def test_create_service(config):
    config['shortener'] = {'default_validity_minutes': 15, 'shortcode_length': 8, 'max_attempts': 10}

    service = app.create_service(config)

    assert service.default_validity_minutes == 15
    assert service.shortcode_length == 8
    assert service.max_attempts == 10
    assert len(service.shorten('https://example.com').shortcode) == 8


def test_create_service_with_dao(monkeypatch, config):
    create_dao = MagicMock()
    monkeypatch.setattr(app, 'create_dao', create_dao)
    dao = MagicMock(spec=RegistryBaseDAO)
    dao.load.return_value = []

    service = app.create_service(config, dao=dao)

    create_dao.assert_not_called()
    dao.load.assert_called_once()
    assert service.stats().total == 0
