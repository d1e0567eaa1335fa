import functools
from typing import TypeVar, Any
from collections.abc import Callable

from linkshortener.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def handle_file_system_error(method: F) -> F:
    """Wrap file-backed DAO methods to translate OSError into DataStoreError

    Example:
        >>> @handle_file_system_error
        ... def load(self):
        ...     return self.path.read_text()
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except OSError as e:
            raise DataStoreError(f"Can't access registry file at {self.path}: {e.strerror or e}.") from e

    return wrapper
