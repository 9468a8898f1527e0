"""High-level synchronous API for getallfiles.

Example:
    >>> from getallfiles.sync import list_sync
    >>> for filename in list_sync('path/to/dir/or/file'):
    ...     # Breaking early never lists the rest of the tree
    ...     print(filename)
    >>> files = list_sync('path/to/dir', excluded_dirs=['path/to/dir/build']).collect_all()
"""

from typing import Generator, List, Optional

from ..config import PathLike, TraversalConfig, build_config
from .core.adapter import DirectoryAdapter
from .core.traverser import DepthFirstFileTraverser


class FileSequence:
    """Single-pass lazy sequence of file paths.

    Nothing is read until the first item is pulled. Once exhausted (or
    abandoned part way) the same instance never replays; call
    ``collect_all()`` for a reusable list, or start a new listing.
    """

    def __init__(self, root: PathLike, traverser: DepthFirstFileTraverser):
        self.root = root
        self._traverser = traverser
        # Generators do no work until the first next()
        self._iterator: Generator[str, None, None] = traverser.traverse(root)

    def __iter__(self) -> 'FileSequence':
        return self

    def __next__(self) -> str:
        return next(self._iterator)

    def collect_all(self) -> List[str]:
        """Drain the remaining paths into a list, in traversal order."""
        return list(self)

    def close(self) -> None:
        """Stop the traversal; later pulls yield nothing."""
        self._iterator.close()

    def __enter__(self) -> 'FileSequence':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return None

    def __repr__(self) -> str:
        return f"FileSequence(root={self.root!r})"


def list_sync(path: PathLike,
              config: Optional[TraversalConfig] = None,
              *,
              adapter: Optional[DirectoryAdapter] = None,
              **options) -> FileSequence:
    """List every file beneath ``path`` lazily, depth-first.

    Args:
        path: Root directory (or a single file, which is yielded alone)
        config: Traversal configuration
        adapter: Optional custom adapter (FileSystemAdapter if None)
        **options: TraversalConfig field overrides, e.g. ``excluded_dirs``,
            ``is_excluded_dir`` or ``resolve``

    Returns:
        FileSequence over the file paths

    Example:
        >>> list_sync('root', excluded_dirs=['root/sub']).collect_all()
        ['root/a.txt']
    """
    config = build_config(config, **options)
    return FileSequence(path, DepthFirstFileTraverser(adapter, config))
