"""Abstract base class for registry mirror data access objects (DAOs).

The registry keeps its records in memory and mirrors the complete record set
into a durable store after every mutation. This class establishes the contract
every mirror backend implements, regardless of the storage mechanism
(e.g., Redis, a local JSON file).

Responsibilities:
    - Replace the persisted snapshot with the current record set.
    - Read the persisted snapshot back once at startup.
    - Translate backend failures into DAO exceptions.

Example:
    >>> from linkshortener.dao.file import RegistryFileDAO
    >>> dao = RegistryFileDAO('/tmp/registry.json')
    >>> dao.save([record])
    <RegistryFileDAO>
    >>> [r.shortcode for r in dao.load()]
    ['abc123']
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from linkshortener.models import UrlRecordModel


class RegistryBaseDAO(ABC):
    """Interface for registry mirror DAOs.

    Methods:
        save(records: Iterable[UrlRecordModel], **kwargs) -> RegistryBaseDAO:
            Overwrite the persisted snapshot with `records`.
            Raises DataStoreError on connection or write failure.

        load(**kwargs) -> list[UrlRecordModel]:
            Return the persisted records ([] when nothing was saved yet).
            Raises SnapshotDecodeError on malformed data.
            Raises DataStoreError on connection or read failure.
    """

    @abstractmethod
    def save(self, records: Iterable[UrlRecordModel], **kwargs) -> 'RegistryBaseDAO':
        """Overwrite the persisted snapshot.

        Args:
            records (Iterable[UrlRecordModel]):
                The complete record set held by the registry.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            RegistryBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def load(self, **kwargs) -> list[UrlRecordModel]:
        """Read the persisted snapshot.

        Returns:
            list[UrlRecordModel]: persisted records, [] if none were saved.

        Raises:
            SnapshotDecodeError:
                If the persisted data cannot be decoded.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
