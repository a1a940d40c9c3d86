"""Data models for references, repositories and cached objects."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

LOCALHOST = "localhost"


@dataclass(frozen=True)
class Local:
    """Run the version-control program on this machine."""

    def __str__(self) -> str:
        return LOCALHOST


@dataclass(frozen=True)
class Remote:
    """Run the version-control program on ``host`` through the remote program."""

    host: str

    def __str__(self) -> str:
        return self.host


AccessPoint = Union[Local, Remote]


def access_point_from_string(value: str) -> AccessPoint:
    """Map an access point identifier to its variant."""
    if value == LOCALHOST:
        return Local()
    return Remote(host=value)


@dataclass(frozen=True)
class Reference:
    """A parsed compact link string.

    Attributes:
        access_point: "localhost" or the identifier of a remote host
        location: Path interpreted on the access point
        object_expression: Git revision expression, possibly empty
    """

    access_point: str
    location: str
    object_expression: str = ""

    @property
    def target(self) -> AccessPoint:
        return access_point_from_string(self.access_point)

    @property
    def is_local(self) -> bool:
        return isinstance(self.target, Local)

    def to_dict(self) -> dict[str, Any]:
        return {
            "access_point": self.access_point,
            "location": self.location,
            "object_expression": self.object_expression,
        }


@dataclass(frozen=True)
class RepositoryLocation:
    """Where a file sits inside a repository.

    ``root`` is the metadata directory itself (e.g. ``/src/proj/.git``) and
    ``relative_path`` is relative to the worktree, so
    ``root.parent / relative_path`` is the original path.
    """

    root: Path
    relative_path: str

    @property
    def worktree(self) -> Path:
        return self.root.parent

    def to_dict(self) -> dict[str, Any]:
        return {"root": str(self.root), "relative_path": self.relative_path}


@dataclass(frozen=True)
class ResolvedObject:
    """Canonical identifier of a content object."""

    content_hash: str


@dataclass(frozen=True)
class CacheEntry:
    """A materialized object on disk."""

    hash: str
    file_path: Path

    @property
    def filename(self) -> str:
        return self.file_path.name

    def to_dict(self) -> dict[str, Any]:
        return {"hash": self.hash, "file_path": str(self.file_path)}


@dataclass
class CommandResult:
    """Outcome of a single external program invocation."""

    argv: list[str]
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Captured text: stdout on success, stdout and stderr combined on failure."""
        data = self.stdout if self.ok else self.stdout + self.stderr
        return data.decode("utf-8", errors="replace")
