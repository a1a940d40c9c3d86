"""
git-link

Resolve compact "file as of revision" links to local files.

Features:
- Reference syntax: [access_point:]location[::object_expression]
- Repository discovery by walking up from any file path
- Local or remote (ssh) git invocation
- Content-addressed on-disk cache keyed by git object hash
"""

from git_link.core.cache import ObjectCache
from git_link.core.config import GitLinkConfig
from git_link.core.errors import (
    FormatError,
    GitLinkError,
    RepositoryNotFoundError,
    UnsupportedAccessPointError,
    VcsError,
)
from git_link.core.models import Local, Reference, Remote
from git_link.core.reference import format_reference, parse_reference
from git_link.handler.links import LinkHandler

__version__ = "0.1.0"
__all__ = [
    "ObjectCache",
    "GitLinkConfig",
    "FormatError",
    "GitLinkError",
    "RepositoryNotFoundError",
    "UnsupportedAccessPointError",
    "VcsError",
    "Local",
    "Reference",
    "Remote",
    "format_reference",
    "parse_reference",
    "LinkHandler",
]
