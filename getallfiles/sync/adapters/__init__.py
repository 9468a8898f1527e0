"""Adapters for synchronous directory listing."""

from .filesystem import FileSystemAdapter

__all__ = [
    'FileSystemAdapter',
]
