"""Test fixtures for getallfiles consumers.

Layouts are nested dicts: a dict value is a directory, anything else is
a file (``None`` or the text content to write). For example::

    {'a.txt': 'hello', 'sub': {'b.txt': None, 'c.txt': None}}
"""

import asyncio
import errno
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .._common.paths import normalize_path
from ..aio.core.adapter import AsyncDirectoryAdapter
from ..sync.core.adapter import DirectoryAdapter, DirectoryEntry


Layout = Mapping[str, Any]


def build_tree(root: Union[str, Path], layout: Layout) -> Path:
    """Create a directory tree on disk.

    Args:
        root: Directory to create the layout in (created if missing)
        layout: Nested dict describing the tree

    Returns:
        The root as a Path
    """
    root = Path(root)
    root.mkdir(parents=True, exist_ok=True)

    pending = [(root, layout)]
    while pending:
        dirname, children = pending.pop()
        for name, child in children.items():
            path = dirname / name
            if isinstance(child, Mapping):
                path.mkdir(exist_ok=True)
                pending.append((path, child))
            else:
                path.write_text(child or "")
    return root


def expected_files(root: str, layout: Layout) -> List[str]:
    """All file paths of a layout, joined onto ``root`` (unordered)."""
    files = []
    pending = [(root, layout)]
    while pending:
        dirname, children = pending.pop()
        for name, child in children.items():
            path = os.path.join(dirname, name)
            if isinstance(child, Mapping):
                pending.append((path, child))
            else:
                files.append(path)
    return files


class InMemoryDirectoryAdapter(DirectoryAdapter):
    """Directory adapter serving a layout from memory.

    Listing order is the dict insertion order, which makes depth-first
    output fully deterministic. Every listed directory is recorded in
    ``listed``; paths in ``fail_on`` raise instead of listing.
    """

    def __init__(self,
                 root: str,
                 layout: Layout,
                 fail_on: Union[Iterable[str], Mapping[str, OSError]] = ()):
        """Initialize in-memory adapter.

        Args:
            root: Root path the layout hangs from
            layout: Nested dict describing the tree
            fail_on: Directory paths whose listing fails, either as an
                iterable (PermissionError) or a mapping to the error to raise
        """
        self.root = root
        self.listed: List[str] = []
        self._directories: Dict[str, List[DirectoryEntry]] = {}
        self._files = set()

        if isinstance(fail_on, Mapping):
            self._failures = {normalize_path(p): e for p, e in fail_on.items()}
        else:
            self._failures = {
                normalize_path(p): PermissionError(errno.EACCES, "Permission denied", p)
                for p in fail_on
            }

        pending = [(root, layout)]
        while pending:
            dirname, children = pending.pop()
            entries = []
            for name, child in children.items():
                path = os.path.join(dirname, name)
                if isinstance(child, Mapping):
                    entries.append(DirectoryEntry(name, True))
                    pending.append((path, child))
                else:
                    entries.append(DirectoryEntry(name, False))
                    self._files.add(normalize_path(path))
            self._directories[normalize_path(dirname)] = entries

    def is_directory(self, path: str) -> bool:
        key = normalize_path(path)
        if key in self._directories:
            return True
        if key in self._files:
            return False
        raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)

    def list_entries(self, path: str) -> List[DirectoryEntry]:
        key = normalize_path(path)
        self.listed.append(path)
        if key in self._failures:
            raise self._failures[key]
        if key in self._directories:
            return list(self._directories[key])
        if key in self._files:
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", path)
        raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)


class AsyncInMemoryDirectoryAdapter(AsyncDirectoryAdapter):
    """Async wrapper over InMemoryDirectoryAdapter with simulated latency.

    Tracks how many listings are in flight at once (``max_in_flight``).
    """

    def __init__(self,
                 root: str,
                 layout: Layout,
                 fail_on: Union[Iterable[str], Mapping[str, OSError]] = (),
                 delay: float = 0.0,
                 delays: Optional[Mapping[str, float]] = None):
        """Initialize async in-memory adapter.

        Args:
            root: Root path the layout hangs from
            layout: Nested dict describing the tree
            fail_on: See InMemoryDirectoryAdapter
            delay: Seconds every listing takes
            delays: Per-directory overrides of ``delay``
        """
        self.base_adapter = InMemoryDirectoryAdapter(root, layout, fail_on)
        self.delay = delay
        self.delays = {normalize_path(p): d for p, d in (delays or {}).items()}
        self.in_flight = 0
        self.max_in_flight = 0

    @property
    def listed(self) -> List[str]:
        return self.base_adapter.listed

    async def is_directory(self, path: str) -> bool:
        await asyncio.sleep(0)
        return self.base_adapter.is_directory(path)

    async def list_entries(self, path: str) -> List[DirectoryEntry]:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(normalize_path(path), self.delay))
            return self.base_adapter.list_entries(path)
        finally:
            self.in_flight -= 1
