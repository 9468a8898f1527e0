"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .paths import normalize_path, resolve_root
from .exclusion import is_excluded

__all__ = [
    'normalize_path',
    'resolve_root',
    'is_excluded',
]
