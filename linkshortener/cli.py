"""Command line front-end for the link shortener.

Each command builds a handler event, runs the matching handler against a
registry restored from the configured mirror, and prints the response body.

Usage:
    linkshortener shorten https://example.com https://python.org --validity 60
    linkshortener shorten https://example.com --code mylink
    linkshortener open mylink --source newsletter
    linkshortener list
    linkshortener stats
    linkshortener delete mylink

Exit status is 0 for 2xx/3xx responses and 1 otherwise.
"""

import sys
import json
import argparse
from typing import Any

from linkshortener.constants import DEFAULT_CLICK_SOURCE, Defaults
from linkshortener.exceptions import ConfigurationError
from linkshortener.dao.exceptions import DAOError
from linkshortener.app import create_service
from linkshortener.handlers import shorten_urls, redirect_url, statistics, delete_url
from linkshortener.handlers.responses import response_200, serialize_stats
from linkshortener.utils.config import load_config
from linkshortener.utils.logging import initialize_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='linkshortener',
        description='Shorten URLs, follow short links and inspect click statistics',
    )
    parser.add_argument(
        '--config',
        default=None,
        help='YAML config file (default: $LINKSHORTENER_CONFIG or config/<APP_ENV>.yml)',
    )
    commands = parser.add_subparsers(dest='command', required=True)

    shorten = commands.add_parser('shorten', help=f'Shorten up to {Defaults.MAX_BATCH_SIZE} URLs at once')
    shorten.add_argument('urls', nargs='+', help='Absolute URLs to shorten')
    shorten.add_argument('--validity', default=None, help='Validity in minutes (default: 30)')
    shorten.add_argument('--code', default=None, help='Custom short code (only with a single URL)')

    open_ = commands.add_parser('open', help='Follow a short link and record a click')
    open_.add_argument('shortcode')
    open_.add_argument('--source', default=DEFAULT_CLICK_SOURCE, help='Click source tag (default: direct)')
    open_.add_argument('--user-agent', default=None, help='User agent recorded with the click')

    commands.add_parser('list', help='List all short URLs with their click history')
    commands.add_parser('stats', help='Show aggregate registry statistics')

    delete = commands.add_parser('delete', help='Delete a short URL')
    delete.add_argument('shortcode')

    return parser


def build_event(args: argparse.Namespace, config: dict[str, Any]) -> dict[str, Any]:
    event: dict[str, Any] = {'requestContext': {'baseUrl': config['base_url']}}

    if args.command == 'shorten':
        entries = [{'originalUrl': url, 'validityMinutes': args.validity} for url in args.urls]
        if args.code:
            entries[0]['customShortCode'] = args.code
        event['body'] = json.dumps({'urls': entries})
    elif args.command in ('open', 'delete'):
        event['pathParameters'] = {'shortcode': args.shortcode}
    if args.command == 'open':
        event['queryStringParameters'] = {'source': args.source}
        event['headers'] = {'User-Agent': args.user_agent} if args.user_agent else {}

    return event


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Raises:
        FileNotFoundError: when --config names a missing file.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == 'shorten' and args.code and len(args.urls) > 1:
        parser.error('--code can only be used with a single URL')

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        parser.error(str(e))

    initialize_logging(config['log_level'])

    try:
        service = create_service(config)
    except DAOError as e:
        print(json.dumps({'message': str(e)}), file=sys.stderr)
        return 1

    event = build_event(args, config)
    if args.command == 'shorten':
        response = shorten_urls(event, service)
    elif args.command == 'open':
        response = redirect_url(event, service)
    elif args.command == 'delete':
        response = delete_url(event, service)
    elif args.command == 'stats':
        response = response_200({'stats': serialize_stats(service.stats())})
    else:
        response = statistics(event, service)

    body = json.loads(response['body'])
    if response['statusCode'] == 302:
        body = {'location': response['headers']['Location']}
    print(json.dumps(body, indent=2))

    return 0 if response['statusCode'] < 400 else 1


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
