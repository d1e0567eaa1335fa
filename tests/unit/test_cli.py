"""Unit tests for the command line front-end in cli.py

Test coverage includes:

1. Shortening
   - Generated and custom codes are printed with their short URLs.
   - --code is refused with several URLs.

2. Following links
   - `open` prints the redirect location and records the click.
   - Unknown codes exit with status 1.

3. Inspection and deletion
   - `list`, `stats` and `delete` read the same durable registry.

4. Configuration errors
   - Bad configuration documents are reported as usage errors.
"""

import json

import pytest
import yaml

from linkshortener import cli


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture(autouse=True)
def _env(monkeypatch, tmp_path):
    for name in ('APP_ENV', 'APP_NAME', 'LOG_LEVEL', 'LINKSHORTENER_CONFIG'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv('PROJECT_ROOT', str(tmp_path))
    monkeypatch.setattr(cli, 'initialize_logging', lambda *args, **kwargs: None)


@pytest.fixture
def config_path(tmp_path, registry_path):
    path = tmp_path / 'config.yml'
    path.write_text(
        yaml.safe_dump({'base_url': 'https://sho.rt', 'file': {'path': str(registry_path)}}),
        encoding='utf-8',
    )
    return path


@pytest.fixture
def run(config_path, capsys):
    """Run the CLI and return (exit status, decoded stdout)."""

    def _run(*argv):
        status = cli.main(['--config', str(config_path), *argv])
        return status, json.loads(capsys.readouterr().out)

    return _run


# -------------------------------
# 1. Shortening
# -------------------------------


def test_shorten_generated(run):
    status, output = run('shorten', 'https://example.com', 'https://python.org', '--validity', '60')

    assert status == 0
    assert output['errors'] == []
    assert [r['originalUrl'] for r in output['results']] == ['https://example.com', 'https://python.org']
    assert all(r['shortUrl'] == f"https://sho.rt/{r['shortCode']}" for r in output['results'])


def test_shorten_custom_code(run):
    status, output = run('shorten', 'https://example.com', '--code', 'mylink')

    assert status == 0
    assert output['results'][0]['shortUrl'] == 'https://sho.rt/mylink'


def test_shorten_reports_entry_errors(run):
    status, output = run('shorten', 'not-a-url')

    assert status == 0
    assert output['results'] == []
    assert output['errors'][0]['errorCode'] == 'request:validation_error'


def test_shorten_code_with_many_urls(config_path):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(['--config', str(config_path), 'shorten', 'https://a.com', 'https://b.com', '--code', 'mylink'])
    assert exc_info.value.code == 2


# -------------------------------
# 2. Following links
# -------------------------------


def test_open(run):
    run('shorten', 'https://example.com/page', '--code', 'mylink')

    status, output = run('open', 'mylink', '--source', 'newsletter', '--user-agent', 'curl/8.0')

    assert status == 0
    assert output == {'location': 'https://example.com/page'}

    _, listing = run('list')
    click = listing['urls'][0]['clicks'][0]
    assert click['source'] == 'newsletter'
    assert click['userAgent'] == 'curl/8.0'


def test_open_unknown(run):
    status, output = run('open', 'nope')

    assert status == 1
    assert output['errorCode'] == 'SHORT_URL_NOT_FOUND'


# -------------------------------
# 3. Inspection and deletion
# -------------------------------


def test_list_and_stats(run):
    run('shorten', 'https://a.com', '--code', 'first')
    run('shorten', 'https://b.com', '--code', 'second')
    run('open', 'second')

    _, listing = run('list')
    status, stats = run('stats')

    assert [url['shortCode'] for url in listing['urls']] == ['second', 'first']
    assert status == 0
    assert stats == {'stats': {'total': 2, 'active': 2, 'expired': 0, 'totalClicks': 1}}


def test_delete(run):
    run('shorten', 'https://a.com', '--code', 'first')

    assert run('delete', 'first')[0] == 0
    assert run('delete', 'first')[0] == 1
    assert run('stats')[1]['stats']['total'] == 0


# -------------------------------
# 4. Configuration errors
# -------------------------------


def test_bad_config(tmp_path, capsys):
    path = tmp_path / 'bad.yml'
    path.write_text(yaml.safe_dump({'active_backend': 'sqlite'}), encoding='utf-8')

    with pytest.raises(SystemExit) as exc_info:
        cli.main(['--config', str(path), 'stats'])

    assert exc_info.value.code == 2
    assert "Unknown backend 'sqlite'" in capsys.readouterr().err
