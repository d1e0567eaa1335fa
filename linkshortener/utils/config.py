"""Utility functions for application configuration management.

Configuration is a single YAML document. Built-in defaults are deep-merged
with the document and a few environment overrides, so every key below is
always present in the result of `load_config()`:

    active_backend: file            # durable mirror backend: file | redis
    base_url: http://localhost:3000 # public prefix of rendered short URLs
    log_level: INFO
    shortener:
        default_validity_minutes: 30
        shortcode_length: 6
        max_attempts: 100
    file:
        path: ~/.linkshortener/registry.json
    redis:
        host: localhost
        port: 6379
        db: 0

The document is looked up in this order:
    1. the `path` argument of `load_config()`;
    2. the `LINKSHORTENER_CONFIG` environment variable;
    3. `<project root>/config/<app env>.yml`, when that file exists.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return application prefix for DAOs, or None if `APP_NAME` is not set.

    project_root() -> Path
        Return the project root directory, using `PROJECT_ROOT` when available.

    load_config(path: str | Path | None = None) -> dict
        Load, merge and validate the application configuration.

Example:
    >>> from linkshortener.utils.config import load_config
    >>> config = load_config()
    >>> config['shortener']['default_validity_minutes']
    30
"""

import os
import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from linkshortener.constants import ENV, SHORTCODE_MAX_LENGTH, SHORTCODE_MIN_LENGTH, Defaults
from linkshortener.exceptions import BadConfigurationError
from linkshortener.utils.validators import is_positive_int


logger = logging.getLogger(__name__)

BACKENDS = frozenset({'file', 'redis'})

DEFAULT_CONFIG: dict[str, Any] = {
    'active_backend': 'file',
    'base_url': Defaults.BASE_URL,
    'log_level': 'INFO',
    'shortener': {
        'default_validity_minutes': Defaults.VALIDITY_MINUTES,
        'shortcode_length': Defaults.SHORTCODE_LENGTH,
        'max_attempts': Defaults.MAX_SHORTCODE_ATTEMPTS,
    },
    'file': {
        'path': Defaults.FILE_PATH,
    },
    'redis': {
        'host': 'localhost',
        'port': 6379,
        'db': 0,
    },
}


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def project_root() -> Path:
    """Return the project root directory

    Reads PROJECT_ROOT, falling back to the current working directory.
    """
    return Path(os.environ.get(ENV.App.PROJECT_ROOT, os.getcwd()))


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'linkshortener'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'linkshortener:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _config_path(path: str | Path | None) -> Path | None:
    if path is not None:
        return Path(path)
    if os.environ.get(ENV.App.CONFIG_PATH):
        return Path(os.environ[ENV.App.CONFIG_PATH])

    candidate = project_root() / 'config' / f'{app_env()}.yml'
    return candidate if candidate.is_file() else None


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise FileNotFoundError(f'Config file not found: {path}')
    with path.open('r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    data = data or {}
    if not isinstance(data, dict):
        raise BadConfigurationError(f'Config document must be a mapping (file: {path}).')
    return data


def _validate(config: dict[str, Any]) -> dict[str, Any]:
    backend = config['active_backend']
    if backend not in BACKENDS:
        raise BadConfigurationError(f"Unknown backend '{backend}' (expected one of: {', '.join(sorted(BACKENDS))}).")

    for key, value in config['shortener'].items():
        if not is_positive_int(value):
            raise BadConfigurationError(f"'shortener.{key}' must be a positive integer (given value: {value!r}).")

    length = config['shortener']['shortcode_length']
    if not SHORTCODE_MIN_LENGTH <= length <= SHORTCODE_MAX_LENGTH:
        raise BadConfigurationError(
            f"'shortener.shortcode_length' must be between {SHORTCODE_MIN_LENGTH} and {SHORTCODE_MAX_LENGTH} (given value: {length!r})."
        )
    return config


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load the application configuration

    Args:
        path (str | Path | None):
            Explicit YAML config file. See the module docstring for the
            lookup order when omitted.

    Returns:
        dict: merged and validated configuration.

    Raises:
        FileNotFoundError:
            If an explicitly requested config file does not exist.
        BadConfigurationError:
            If the document is not a mapping, names an unknown backend,
            carries non-positive shortener tunables or a shortcode length
            outside 3..12.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    config_path = _config_path(path)
    if config_path is not None:
        logger.debug('Loading config from YAML file.', extra={'configPath': str(config_path)})
        config = _deep_merge(config, _load_yaml(config_path))

    if os.environ.get(ENV.App.LOG_LEVEL):
        config['log_level'] = os.environ[ENV.App.LOG_LEVEL]

    return _validate(config)
