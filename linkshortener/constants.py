import string
from enum import StrEnum


class Defaults:
    """Default registry tunables."""

    VALIDITY_MINUTES = 30
    SHORTCODE_LENGTH = 6
    # Upper bound on random shortcode draws before giving up
    MAX_SHORTCODE_ATTEMPTS = 100
    # Maximum number of URLs accepted by one shorten form submission
    MAX_BATCH_SIZE = 5
    BASE_URL = 'http://localhost:3000'
    FILE_PATH = '~/.linkshortener/registry.json'


class LogSource(StrEnum):
    """Source tags attached to structured log lines."""

    URL_SERVICE = 'URL_SERVICE'
    URL_FORM = 'URL_FORM'
    REDIRECT = 'REDIRECT'
    STATISTICS = 'STATISTICS'
    APP = 'APP'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        PROJECT_ROOT = 'PROJECT_ROOT'
        LOG_LEVEL = 'LOG_LEVEL'
        CONFIG_PATH = 'LINKSHORTENER_CONFIG'


SHORTCODE_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits

SHORTCODE_MIN_LENGTH = 3
SHORTCODE_MAX_LENGTH = 12

DEFAULT_CLICK_SOURCE = 'direct'
UNKNOWN_USER_AGENT = 'Unknown'

# Simulated click origins (no real IP geolocation is performed)
CLICK_LOCATIONS = ('New York, US', 'London, UK', 'Tokyo, JP', 'Sydney, AU', 'Berlin, DE')

# Name of the key holding the registry snapshot in the durable mirror
REGISTRY_KEY = 'shortened_urls'

MAX_RECENT_LOGS = 1000
