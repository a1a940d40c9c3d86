"""Filesystem storage backend for materialized objects.

Each content hash owns one directory ``<root>/<prefix><hash>`` holding a
single file. Writes go through a temporary file and an atomic rename, so
concurrent writers of the same hash never expose a partial file.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterator

from git_link.core.utils import cache_dirname, is_safe_key

logger = logging.getLogger(__name__)


class FileSystemStore:
    """Content-addressed directory store.

    Entries are never overwritten once present and never evicted
    automatically; ``delete`` and ``clear`` exist for manual cleanup.
    """

    def __init__(self, root: str | os.PathLike[str], prefix: str = "git-link-") -> None:
        self._root = Path(root)
        self._prefix = prefix

    @property
    def root(self) -> Path:
        return self._root

    def entry_dir(self, key: str) -> Path:
        """Directory of ``key``, always a direct child of the root.

        Raises:
            ValueError: If ``key`` could not name a single directory
        """
        if not is_safe_key(key):
            raise ValueError(f"Invalid cache key {key!r}")
        return self._root / cache_dirname(key, self._prefix)

    def path_for(self, key: str, filename: str) -> Path:
        return self.entry_dir(key) / filename

    def get(self, key: str, filename: str) -> Path | None:
        """Path of the stored file if it exists and is readable."""
        path = self.path_for(key, filename)
        if path.is_file() and os.access(path, os.R_OK):
            return path
        return None

    def set(self, key: str, filename: str, data: bytes) -> Path:
        """Write ``data`` for a key that is not cached yet.

        Callers check ``get`` first. An existing entry directory is reused, and
        if a concurrent writer got there first its file is replaced with the
        same content.
        """
        directory = self.entry_dir(key)
        directory.mkdir(parents=True, exist_ok=True)
        target = directory / filename

        fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=".tmp-")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, target)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise
        return target

    def files(self, key: str) -> list[Path]:
        directory = self.entry_dir(key)
        if not directory.is_dir():
            return []
        return sorted(p for p in directory.iterdir() if not p.name.startswith(".tmp-"))

    def keys(self) -> Iterator[str]:
        if not self._root.is_dir():
            return
        for child in sorted(self._root.iterdir()):
            if child.is_dir() and child.name.startswith(self._prefix):
                yield child.name[len(self._prefix):]

    def delete(self, key: str) -> bool:
        directory = self.entry_dir(key)
        if not directory.is_dir():
            return False
        shutil.rmtree(directory)
        return True

    def clear(self) -> int:
        removed = 0
        for key in list(self.keys()):
            if self.delete(key):
                removed += 1
        return removed

    def size(self) -> int:
        return sum(1 for _ in self.keys())

    def close(self) -> None:
        pass
