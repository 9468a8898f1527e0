"""Synchronous implementation of getallfiles.

All components here operate in a blocking, single-threaded manner.
"""

# Core components
from .core.adapter import DirectoryAdapter, DirectoryEntry
from .core.traverser import DepthFirstFileTraverser

# Adapters
from .adapters.filesystem import FileSystemAdapter

# High-level API
from .api import FileSequence, list_sync

__all__ = [
    # Core
    'DirectoryAdapter',
    'DirectoryEntry',
    'DepthFirstFileTraverser',
    # Adapters
    'FileSystemAdapter',
    # API
    'FileSequence',
    'list_sync',
]
