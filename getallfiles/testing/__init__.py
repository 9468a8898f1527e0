"""Testing utilities for getallfiles consumers."""

from .fixtures import (
    AsyncInMemoryDirectoryAdapter,
    InMemoryDirectoryAdapter,
    build_tree,
    expected_files,
)

__all__ = [
    'AsyncInMemoryDirectoryAdapter',
    'InMemoryDirectoryAdapter',
    'build_tree',
    'expected_files',
]
