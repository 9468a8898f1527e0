"""High-level async API for getallfiles.

Example:
    >>> from getallfiles.aio import list_async
    >>> async for filename in list_async('path/to/dir/or/file'):
    ...     print(filename)
    >>> files = await list_async('path/to/dir', max_concurrent=8).collect_all()
"""

from typing import AsyncGenerator, List, Optional

from ..config import PathLike, TraversalConfig, build_config
from .core.adapter import AsyncDirectoryAdapter
from .core.traverser import AsyncFileTraverser, create_traverser


class AsyncFileSequence:
    """Single-pass lazy async sequence of file paths.

    Nothing is read until the first item is pulled. The instance never
    replays; use ``collect_all()`` for a reusable list. Leaving an
    ``async with`` block (or calling ``aclose()``) cancels every pending
    directory read. A plain ``break`` only pauses the reads once unread
    paths are buffered; close the sequence to release them.
    """

    def __init__(self, root: PathLike, traverser: AsyncFileTraverser):
        self.root = root
        self._traverser = traverser
        # Async generators do no work until the first __anext__()
        self._iterator: AsyncGenerator[str, None] = traverser.traverse(root)

    def __aiter__(self) -> 'AsyncFileSequence':
        return self

    async def __anext__(self) -> str:
        return await self._iterator.__anext__()

    async def collect_all(self) -> List[str]:
        """Drain the remaining paths into a list."""
        return [filename async for filename in self]

    async def aclose(self) -> None:
        """Stop the traversal and cancel outstanding reads."""
        await self._iterator.aclose()

    async def __aenter__(self) -> 'AsyncFileSequence':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return None

    def __repr__(self) -> str:
        return f"AsyncFileSequence(root={self.root!r}, traverser={self._traverser.__class__.__name__})"


def list_async(path: PathLike,
               config: Optional[TraversalConfig] = None,
               *,
               adapter: Optional[AsyncDirectoryAdapter] = None,
               **options) -> AsyncFileSequence:
    """List every file beneath ``path`` with concurrent directory reads.

    Args:
        path: Root directory (or a single file, which is yielded alone)
        config: Traversal configuration
        adapter: Optional custom adapter (AsyncFileSystemAdapter if None)
        **options: TraversalConfig field overrides, e.g. ``excluded_dirs``,
            ``resolve``, ``max_concurrent`` or ``strategy``

    Returns:
        AsyncFileSequence over the file paths, in no particular order
    """
    config = build_config(config, **options)
    return AsyncFileSequence(path, create_traverser(config.strategy, adapter, config))
