"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, disk I/O, etc.).

    SnapshotDecodeError:
        Raised when a persisted registry snapshot cannot be decoded.

Example:
    >>> from linkshortener.dao.exceptions import SnapshotDecodeError
    >>> raise SnapshotDecodeError("Registry snapshot must be a JSON array.")
    Traceback (most recent call last):
        ...
    linkshortener.dao.exceptions.SnapshotDecodeError: Registry snapshot must be a JSON array.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, unwritable files, etc.
    """

    pass


class SnapshotDecodeError(DAOError):
    """Exception raised when a persisted registry snapshot is malformed."""

    pass
