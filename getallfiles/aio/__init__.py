"""Asynchronous implementation of getallfiles.

This package contains native async/await implementations that keep many
directory reads in flight and stream file paths as they are found.
"""

# Core abstractions
from .core import (
    AsyncDirectoryAdapter,
    Coordinator,
    CoordinatorState,
    AsyncFileTraverser,
    AsyncWorkerPoolTraverser,
    AsyncLevelTraverser,
    create_traverser,
)

# Adapters
from .adapters import AsyncFileSystemAdapter

# High-level API
from .api import AsyncFileSequence, list_async

__all__ = [
    # Core abstractions
    'AsyncDirectoryAdapter',
    'Coordinator',
    'CoordinatorState',
    # Traversers
    'AsyncFileTraverser',
    'AsyncWorkerPoolTraverser',
    'AsyncLevelTraverser',
    'create_traverser',
    # Adapters
    'AsyncFileSystemAdapter',
    # High-level API
    'AsyncFileSequence',
    'list_async',
]
