"""Unit tests for the RegistryFileDAO

Test coverage includes:

1. Save behavior
   - Writes the snapshot, creating parent directories, without leaving a temp file.
   - Overwrites the previous snapshot.
   - Translates OSError into DataStoreError.

2. Load behavior
   - Missing file yields an empty list.
   - Saved records round-trip.
   - Malformed or non-UTF-8 snapshots raise SnapshotDecodeError.
"""

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from linkshortener.dao.codec import dump_records
from linkshortener.dao.exceptions import DataStoreError, SnapshotDecodeError
from linkshortener.dao.file import RegistryFileDAO


# -------------------------------
# 1. Save behavior
# -------------------------------


def test_save_creates_file(tmp_path, record):
    path = tmp_path / 'nested' / 'dir' / 'registry.json'
    dao = RegistryFileDAO(path)

    assert dao.save([record]) is dao
    assert path.read_text(encoding='utf-8') == dump_records([record])
    assert [p.name for p in path.parent.iterdir()] == ['registry.json']


def test_save_overwrites(file_dao, registry_path, record):
    file_dao.save([record])
    file_dao.save([])
    assert registry_path.read_text(encoding='utf-8') == '[]'


def test_save_expands_user(monkeypatch, tmp_path):
    monkeypatch.setenv('HOME', str(tmp_path))
    dao = RegistryFileDAO('~/registry.json')
    assert dao.path == tmp_path / 'registry.json'


def test_save_with_invalid_type(file_dao):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        file_dao.save(42)


def test_save_unwritable_location(tmp_path, record):
    blocker = tmp_path / 'blocker'
    blocker.write_text('not a directory')
    dao = RegistryFileDAO(blocker / 'registry.json')

    with pytest.raises(DataStoreError, match="Can't access registry file"):
        dao.save([record])


# -------------------------------
# 2. Load behavior
# -------------------------------


def test_load_missing_file(file_dao):
    assert file_dao.load() == []


def test_load_round_trip(file_dao, record):
    file_dao.save([record])
    assert file_dao.load() == [record]


def test_load_malformed(file_dao, registry_path):
    registry_path.write_text('{"broken": ', encoding='utf-8')
    with pytest.raises(SnapshotDecodeError):
        file_dao.load()


@pytest.mark.parametrize('payload', [b'\xff\xfe\x00garbage', b'\x80\x81\x82', b'["caf\xe9"]'])
def test_load_undecodable_bytes(file_dao, registry_path, payload):
    registry_path.write_bytes(payload)
    with pytest.raises(SnapshotDecodeError):
        file_dao.load()


def test_load_directory_raises_data_store_error(tmp_path):
    dao = RegistryFileDAO(tmp_path)
    with pytest.raises(DataStoreError):
        dao.load()
