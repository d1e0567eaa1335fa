"""Registry mirror stored in a local JSON file

Each save writes the snapshot to a sibling temporary file and renames it over
the target, so a crash mid-write never leaves a truncated snapshot behind.

Classes:
    RegistryFileDAO:
        DAO for mirroring UrlRecordModel collections into a JSON file.

Example:
    >>> dao = RegistryFileDAO('~/.linkshortener/registry.json')
    >>> dao.save([record]).load()[0].shortcode
    'abc123'
"""

import os
from pathlib import Path
from collections.abc import Iterable

from beartype import beartype

from linkshortener.models import UrlRecordModel
from linkshortener.dao.base import RegistryBaseDAO
from linkshortener.dao.codec import dump_records, load_records
from linkshortener.dao.file.helpers import handle_file_system_error


class RegistryFileDAO(RegistryBaseDAO):
    """File-based registry mirror

    Attributes:
        path (Path):
            Location of the JSON snapshot (`~` is expanded).
    """

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    @handle_file_system_error
    @beartype
    def save(self, records: Iterable[UrlRecordModel], **kwargs) -> 'RegistryFileDAO':
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f'.{self.path.name}.tmp')
        tmp_path.write_text(dump_records(records), encoding='utf-8')
        os.replace(tmp_path, self.path)
        return self

    @handle_file_system_error
    @beartype
    def load(self, **kwargs) -> list[UrlRecordModel]:
        if not self.path.exists():
            return []
        # Undecodable bytes surface as SnapshotDecodeError
        return load_records(self.path.read_bytes())
