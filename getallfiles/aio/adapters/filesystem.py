"""Async filesystem adapter.

Blocking scandir/lstat calls run in the default thread pool through
asyncio.to_thread, so many directory reads can be in flight while the
event loop stays responsive.
"""

import asyncio
from typing import List, Optional

from ...sync.adapters.filesystem import FileSystemAdapter
from ...sync.core.adapter import DirectoryEntry
from ..core.adapter import AsyncDirectoryAdapter


class AsyncFileSystemAdapter(AsyncDirectoryAdapter):
    """Async adapter for the local filesystem.

    Delegates every call to a synchronous FileSystemAdapter on a worker
    thread, so both modes classify entries identically.
    """

    def __init__(self, base_adapter: Optional[FileSystemAdapter] = None):
        """Initialize filesystem adapter.

        Args:
            base_adapter: Sync adapter doing the actual I/O
        """
        self._base_adapter = base_adapter if base_adapter is not None else FileSystemAdapter()

    async def is_directory(self, path: str) -> bool:
        return await asyncio.to_thread(self._base_adapter.is_directory, path)

    async def list_entries(self, path: str) -> List[DirectoryEntry]:
        return await asyncio.to_thread(self._base_adapter.list_entries, path)

    def __repr__(self) -> str:
        return f"AsyncFileSystemAdapter({self._base_adapter!r})"
