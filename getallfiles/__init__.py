"""getallfiles - lazy recursive file listing.

Enumerates every file beneath a root path, skipping excluded directories,
either synchronously (depth-first) or asynchronously with concurrent
directory reads.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from getallfiles.sync import list_sync

Asynchronous:
    from getallfiles.aio import list_async
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .config import (
    TraversalConfig,
    TraversalStrategy,
    ConfigurationError,
    DEFAULT_MAX_CONCURRENT,
    build_config,
)

# Re-export submodules for convenient access
from . import sync
from . import aio

from .sync import list_sync, FileSequence, DirectoryEntry
from .aio import list_async, AsyncFileSequence

__all__ = [
    "__version__",
    "sync",
    "aio",
    "TraversalConfig",
    "TraversalStrategy",
    "ConfigurationError",
    "DEFAULT_MAX_CONCURRENT",
    "build_config",
    "DirectoryEntry",
    "list_sync",
    "list_async",
    "FileSequence",
    "AsyncFileSequence",
]
