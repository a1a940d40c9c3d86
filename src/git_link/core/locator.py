"""Locate the repository enclosing a file path."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from git_link.core.errors import RepositoryNotFoundError
from git_link.core.models import RepositoryLocation

logger = logging.getLogger(__name__)


def find_repository(
    path: str | os.PathLike[str],
    metadata_dirname: str = ".git",
) -> RepositoryLocation:
    """Walk up from ``path`` to the nearest directory holding repository metadata.

    The path does not have to exist. The walk stops at the filesystem root.

    Raises:
        RepositoryNotFoundError: If no ancestor holds ``metadata_dirname``
    """
    target = Path(os.path.abspath(os.path.expanduser(os.fspath(path))))
    directory = target.parent
    relative = target.name

    while not (directory / metadata_dirname).exists():
        parent = directory.parent
        if parent == directory:
            raise RepositoryNotFoundError(str(target))
        relative = f"{directory.name}/{relative}"
        directory = parent

    location = RepositoryLocation(root=directory / metadata_dirname, relative_path=relative)
    logger.debug("Located %s in %s as %s", target, location.root, relative)
    return location


def is_inside_repository(
    path: str | os.PathLike[str],
    metadata_dirname: str = ".git",
) -> bool:
    """Check whether any ancestor of ``path`` holds repository metadata."""
    try:
        find_repository(path, metadata_dirname)
    except RepositoryNotFoundError:
        return False
    return True
