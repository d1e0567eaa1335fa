from linkshortener.utils.config import app_env, app_name, project_root, app_prefix, load_config
from linkshortener.utils.helpers import utcnow, generate_id, base_url, get_short_url
from linkshortener.utils.shortener import generate_shortcode
from linkshortener.utils.validators import is_valid_url, is_valid_shortcode, is_positive_int
from linkshortener.utils.logging import initialize_logging, RecentLogsHandler, recent_logs


__all__ = [
    'generate_shortcode',
    'app_env',
    'app_name',
    'app_prefix',
    'project_root',
    'load_config',
    'utcnow',
    'generate_id',
    'base_url',
    'get_short_url',
    'is_valid_url',
    'is_valid_shortcode',
    'is_positive_int',
    'initialize_logging',
    'RecentLogsHandler',
    'recent_logs',
]
