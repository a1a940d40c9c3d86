"""Core components for resolving and caching file-at-revision links."""

from git_link.core.cache import ObjectCache
from git_link.core.config import GitLinkConfig
from git_link.core.errors import (
    FormatError,
    GitLinkError,
    RepositoryNotFoundError,
    UnsupportedAccessPointError,
    VcsError,
)
from git_link.core.executor import CommandExecutor
from git_link.core.locator import find_repository, is_inside_repository
from git_link.core.models import (
    AccessPoint,
    CacheEntry,
    CommandResult,
    Local,
    Reference,
    Remote,
    RepositoryLocation,
    ResolvedObject,
)
from git_link.core.reference import format_reference, parse_reference
from git_link.core.revision import RevisionResolver
from git_link.core.utils import derive_filename

__all__ = [
    "ObjectCache",
    "GitLinkConfig",
    "FormatError",
    "GitLinkError",
    "RepositoryNotFoundError",
    "UnsupportedAccessPointError",
    "VcsError",
    "CommandExecutor",
    "find_repository",
    "is_inside_repository",
    "AccessPoint",
    "CacheEntry",
    "CommandResult",
    "Local",
    "Reference",
    "Remote",
    "RepositoryLocation",
    "ResolvedObject",
    "format_reference",
    "parse_reference",
    "RevisionResolver",
    "derive_filename",
]
