"""Utility functions for naming cache entries and setting up logging.

These helpers hold no state and do not touch the filesystem, so the cache
and the HTTP layer can share them.
"""

from __future__ import annotations

import logging
import os
import re

DEFAULT_FILENAME = "object"

_TRAILING_SEGMENT = re.compile(r"[^:]*\Z")


def derive_filename(object_expression: str) -> str:
    """Derive a display filename from a git object expression.

    Takes the longest suffix without a ``:`` and keeps its final path segment.
    Falls back to ``DEFAULT_FILENAME`` when nothing usable is left.

    Args:
        object_expression: Revision expression such as ``master:dir/file.txt``

    Returns:
        A non-empty base filename

    Example:
        >>> derive_filename("master:dir/sub/file.txt")
        'file.txt'
        >>> derive_filename("docs/readme.md")
        'readme.md'
        >>> derive_filename("")
        'object'
    """
    match = _TRAILING_SEGMENT.search(object_expression)
    suffix = match.group(0) if match else ""
    name = suffix.rsplit("/", 1)[-1]
    if name in ("", ".", ".."):
        return DEFAULT_FILENAME
    return name


def cache_dirname(content_hash: str, prefix: str = "git-link-") -> str:
    """Name of the cache directory for a content hash.

    Example:
        >>> cache_dirname("3b18e512dba79e4c8300dd08aeb37f8e728b8dad")
        'git-link-3b18e512dba79e4c8300dd08aeb37f8e728b8dad'
    """
    return f"{prefix}{content_hash}"


def is_safe_key(key: str) -> bool:
    """Whether ``key`` can name a single directory directly under the cache root.

    Example:
        >>> is_safe_key("3b18e512dba79e4c8300dd08aeb37f8e728b8dad")
        True
        >>> is_safe_key("../x")
        False
    """
    if key in ("", ".", ".."):
        return False
    forbidden = {"/", "\0", "\n", "\r"}
    if os.altsep:
        forbidden.add(os.altsep)
    forbidden.add(os.sep)
    return not any(ch in key for ch in forbidden)


def strip_line_terminator(text: str) -> str:
    """Remove exactly one trailing line terminator, if present."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def configure_logging(level: str = "INFO") -> None:
    """Attach a basic stderr handler to the package logger."""
    logger = logging.getLogger("git_link")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(level)
