"""Async directory adapter abstraction.

The async walker only needs two awaitable operations; whatever runs
them (a thread pool, a network client, an in-memory fake) stays behind
this interface.
"""

from abc import ABC, abstractmethod
from typing import List

from ...sync.core.adapter import DirectoryEntry


class AsyncDirectoryAdapter(ABC):
    """Abstract base class for async directory adapters.

    Failures must surface as ``OSError`` (or a subclass) from the awaited
    call; the walker hands them to the consumer unchanged.
    """

    @abstractmethod
    async def is_directory(self, path: str) -> bool:
        """Check whether ``path`` is a directory (without following links).

        Args:
            path: Path to inspect

        Returns:
            True if the path is a directory
        """
        pass

    @abstractmethod
    async def list_entries(self, path: str) -> List[DirectoryEntry]:
        """List the children of a directory in the order reported.

        Args:
            path: Directory to list

        Returns:
            List of DirectoryEntry tuples
        """
        pass
