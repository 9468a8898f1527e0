"""DirectoryAdapter abstraction for getallfiles.

The adapter is the filesystem capability the traversal consumes. Keeping
it behind an interface lets the walker run against the real filesystem,
an in-memory tree in tests, or any other directory-shaped source.
"""

from abc import ABC, abstractmethod
from collections import namedtuple
from typing import List


# A discovered child: bare name plus a file/directory tag
DirectoryEntry = namedtuple('DirectoryEntry', ['name', 'is_dir'])


class DirectoryAdapter(ABC):
    """Abstract adapter for listing directories synchronously.

    Failures must surface as ``OSError`` (or a subclass); the traversal
    never retries and propagates them unchanged.
    """

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Check whether ``path`` is a directory (without following links).

        Args:
            path: Path to inspect

        Returns:
            True if the path is a directory

        Raises:
            OSError: If the path cannot be inspected
        """
        pass

    @abstractmethod
    def list_entries(self, path: str) -> List[DirectoryEntry]:
        """List the children of a directory in the order reported.

        Args:
            path: Directory to list

        Returns:
            List of DirectoryEntry tuples

        Raises:
            OSError: If the directory cannot be read
        """
        pass
