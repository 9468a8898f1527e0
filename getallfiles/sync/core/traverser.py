"""Synchronous depth-first file traversal.

The walker keeps an explicit stack of open directory listings instead of
recursing, so tree depth is not limited by the interpreter's recursion
limit and abandoning the generator simply drops the stack.
"""

import logging
import os
from typing import Iterator, List, Optional, Tuple

from ..._common import is_excluded, resolve_root
from ...config import PathLike, TraversalConfig
from ..adapters.filesystem import FileSystemAdapter
from .adapter import DirectoryAdapter, DirectoryEntry

logger = logging.getLogger(__name__)


class DepthFirstFileTraverser:
    """Depth-first pre-order file traversal.

    Files are yielded in the order the adapter lists them, and each
    subdirectory is exhausted before the walk moves on to the next
    sibling entry.
    """

    def __init__(self,
                 adapter: Optional[DirectoryAdapter] = None,
                 config: Optional[TraversalConfig] = None):
        """Initialize traverser.

        Args:
            adapter: Directory adapter (FileSystemAdapter if None)
            config: Traversal configuration (defaults if None)
        """
        self.adapter = adapter if adapter is not None else FileSystemAdapter()
        self.config = config or TraversalConfig()

    def traverse(self, root: PathLike) -> Iterator[str]:
        """Yield every file path beneath ``root``.

        A root that is not a directory is yielded alone, as given.

        Raises:
            OSError: From the adapter; the generator ends at that point
        """
        if not self.adapter.is_directory(os.fspath(root)):
            yield os.fspath(root)
            return

        top = resolve_root(root, self.config)
        logger.debug("Sync traversal of %s started", top)

        if is_excluded(top, self.config):
            return

        count = 0
        stack: List[Tuple[str, Iterator[DirectoryEntry]]] = [
            (top, iter(self.adapter.list_entries(top)))
        ]

        while stack:
            dirname, entries = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            path = os.path.join(dirname, entry.name)
            if not entry.is_dir:
                count += 1
                yield path
            elif not is_excluded(path, self.config):
                stack.append((path, iter(self.adapter.list_entries(path))))

        logger.debug("Sync traversal of %s finished: %d files", top, count)
