"""Storage backends for materialized objects.

- FileSystemStore: one directory per content hash under a cache root
"""

from git_link.core.storage.filesystem import FileSystemStore

__all__ = [
    "FileSystemStore",
]
