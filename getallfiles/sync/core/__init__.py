"""Core abstractions for synchronous file traversal."""

from .adapter import DirectoryAdapter, DirectoryEntry
from .traverser import DepthFirstFileTraverser

__all__ = [
    'DirectoryAdapter',
    'DirectoryEntry',
    'DepthFirstFileTraverser',
]
