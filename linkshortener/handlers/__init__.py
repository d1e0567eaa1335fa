from linkshortener.handlers.shorten_urls import shorten_urls
from linkshortener.handlers.redirect_url import redirect_url
from linkshortener.handlers.statistics import statistics, delete_url


__all__ = [
    'shorten_urls',
    'redirect_url',
    'statistics',
    'delete_url',
]
