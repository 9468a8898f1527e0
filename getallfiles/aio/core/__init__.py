"""Core abstractions for async file traversal."""

from .adapter import AsyncDirectoryAdapter
from .coordinator import Coordinator, CoordinatorState
from .traverser import (
    AsyncFileTraverser,
    AsyncWorkerPoolTraverser,
    AsyncLevelTraverser,
    create_traverser,
)

__all__ = [
    # Adapter
    'AsyncDirectoryAdapter',
    # Coordination
    'Coordinator',
    'CoordinatorState',
    # Traversers
    'AsyncFileTraverser',
    'AsyncWorkerPoolTraverser',
    'AsyncLevelTraverser',
    'create_traverser',
]
