"""Content-addressed cache of materialized git objects."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from git_link.core.config import GitLinkConfig
from git_link.core.errors import VcsError
from git_link.core.executor import CommandExecutor
from git_link.core.models import AccessPoint, CacheEntry
from git_link.core.revision import RevisionResolver
from git_link.core.storage.filesystem import FileSystemStore
from git_link.core.utils import derive_filename, is_safe_key

logger = logging.getLogger(__name__)


class ObjectCache:
    """On-disk cache of object contents keyed by their canonical hash.

    Materializing an object expression first resolves it to a hash with
    ``git rev-parse``. The hash names the cache directory, so two expressions
    that denote the same content share one entry. Only on a miss is
    ``git show`` run and its output written to disk.

    Example:
        cache = ObjectCache()
        path = cache.materialize(Local(), "/src/proj/.git", "master:README.md")

        # With custom config
        config = GitLinkConfig(cache_root="/var/cache/git-link", remote_timeout=30)
        cache = ObjectCache(config=config)
        path = cache.materialize(Remote("build-host"), "/srv/repo.git", "v1.2:setup.cfg")
    """

    def __init__(
        self,
        config: GitLinkConfig | None = None,
        executor: CommandExecutor | None = None,
        resolver: RevisionResolver | None = None,
        storage: FileSystemStore | None = None,
    ) -> None:
        self.config = config or GitLinkConfig()
        self._executor = executor or CommandExecutor(self.config)
        self._resolver = resolver or RevisionResolver(self._executor)

        if storage is not None:
            self._storage = storage
        else:
            self._storage = FileSystemStore(
                self.config.cache_path, prefix=self.config.cache_prefix
            )

    @property
    def storage(self) -> FileSystemStore:
        return self._storage

    @property
    def resolver(self) -> RevisionResolver:
        return self._resolver

    def materialize(
        self,
        access_point: AccessPoint,
        metadata_path: str | os.PathLike[str],
        object_expression: str,
    ) -> Path:
        """Return a local file holding the content of ``object_expression``.

        Raises:
            VcsError: If resolving or showing the object fails, or the resolved
                id cannot name a cache directory. Nothing is written to the
                cache in that case.
        """
        content_hash = self._resolver.resolve(access_point, metadata_path, object_expression)
        if not is_safe_key(content_hash):
            raise VcsError(
                f"{object_expression!r} did not resolve to a single object id: {content_hash!r}"
            )
        filename = derive_filename(object_expression)

        cached = self._storage.get(content_hash, filename)
        if cached is not None:
            logger.debug("Cache hit for %s at %s", content_hash, cached)
            return cached

        result = self._executor.run(
            access_point, ["show", "--end-of-options", object_expression], metadata_path
        )
        if not result.ok:
            raise VcsError(result.output, result.returncode, result.argv)

        path = self._storage.set(content_hash, filename, result.stdout)
        logger.info("Materialized %r (%s) at %s", object_expression, content_hash, path)
        return path

    def lookup(self, content_hash: str, filename: str) -> CacheEntry | None:
        """Find an already materialized entry without invoking anything."""
        path = self._storage.get(content_hash, filename)
        if path is None:
            return None
        return CacheEntry(hash=content_hash, file_path=path)

    def entries(self) -> list[CacheEntry]:
        """All cached entries."""
        result: list[CacheEntry] = []
        for key in self._storage.keys():
            for path in self._storage.files(key):
                result.append(CacheEntry(hash=key, file_path=path))
        return result

    def clear(self) -> int:
        """Remove every cached entry. Returns the number of entries removed."""
        removed = self._storage.clear()
        logger.info("Cleared %d cache entries from %s", removed, self._storage.root)
        return removed

    def stats(self) -> dict[str, Any]:
        """Get cache statistics."""
        entries = self.entries()
        total_bytes = 0
        for entry in entries:
            try:
                total_bytes += entry.file_path.stat().st_size
            except FileNotFoundError:
                continue
        return {
            "cache_root": str(self._storage.root),
            "total_entries": len(entries),
            "total_bytes": total_bytes,
        }

    def close(self) -> None:
        """Clean up resources."""
        self._storage.close()

    def __enter__(self) -> "ObjectCache":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
        return None
