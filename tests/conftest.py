"""Shared fixtures for the link shortener test suite."""

import random
import logging
from datetime import datetime, timedelta, UTC

import pytest

from linkshortener.dao.file import RegistryFileDAO
from linkshortener.models import ClickEventModel, UrlRecordModel
from linkshortener.services import UrlShortenerService


@pytest.fixture
def registry_path(tmp_path):
    """Location of the JSON registry snapshot."""
    return tmp_path / 'registry.json'


@pytest.fixture
def file_dao(registry_path):
    """File-backed registry mirror living in a temporary directory."""
    return RegistryFileDAO(registry_path)


@pytest.fixture
def service_logger():
    return logging.getLogger('tests.linkshortener.service')


@pytest.fixture
def service(file_dao, service_logger):
    """Registry engine with a seeded random generator."""
    return UrlShortenerService(file_dao, rng=random.Random(1234), logger=service_logger)


@pytest.fixture
def created_at():
    return datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def click(created_at):
    return ClickEventModel(
        id='click-1',
        timestamp=created_at + timedelta(minutes=1),
        source='direct',
        location='Tokyo, JP',
        user_agent='Mozilla/5.0',
    )


@pytest.fixture
def record(created_at, click):
    """A 30 minute record created at 2025-10-15 12:00 UTC with one click."""
    return UrlRecordModel(
        id='record-1',
        original_url='https://example.com/article/123',
        shortcode='abc123',
        is_custom=True,
        created_at=created_at,
        validity_minutes=30,
        expires_at=created_at + timedelta(minutes=30),
        clicks=(click,),
    )
