"""Filesystem adapter for getallfiles.

Uses os.scandir so the file/directory tag comes from the cached
DirEntry type instead of one extra stat call per child.
"""

import os
import stat
from typing import List

from ..core.adapter import DirectoryAdapter, DirectoryEntry


class FileSystemAdapter(DirectoryAdapter):
    """Adapter for the local filesystem.

    Symbolic links are never followed: a link to a directory is reported
    as a plain entry and yielded like a file.
    """

    def is_directory(self, path: str) -> bool:
        """Check the root with lstat semantics."""
        return stat.S_ISDIR(os.lstat(path).st_mode)

    def list_entries(self, path: str) -> List[DirectoryEntry]:
        """List a directory, preserving the order scandir reports."""
        with os.scandir(path) as iterator:
            return [
                DirectoryEntry(entry.name, entry.is_dir(follow_symlinks=False))
                for entry in iterator
            ]

    def __repr__(self) -> str:
        return "FileSystemAdapter()"
