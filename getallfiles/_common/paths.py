"""Path string helpers shared by the sync and aio walkers."""

import os

from ..config import PathLike, TraversalConfig


def normalize_path(path: PathLike) -> str:
    """Canonicalize a path string for equality comparison.

    Backslashes become forward slashes and a single trailing separator is
    removed. The result is only ever compared, never used for I/O.

    Example:
        >>> normalize_path('root\\\\sub\\\\')
        'root/sub'
    """
    normalized = os.fspath(path).replace('\\', '/')
    if normalized.endswith('/'):
        normalized = normalized[:-1]
    return normalized


def resolve_root(path: PathLike, config: TraversalConfig) -> str:
    """Return the root in the form the traversal builds paths from."""
    if config.resolve:
        return os.path.abspath(path)
    return os.fspath(path)
