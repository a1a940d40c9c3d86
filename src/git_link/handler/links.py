"""Link handling operations consumed by editor integrations."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from datetime import date
from pathlib import Path

from git_link.core.cache import ObjectCache
from git_link.core.config import GitLinkConfig
from git_link.core.errors import UnsupportedAccessPointError
from git_link.core.locator import find_repository, is_inside_repository
from git_link.core.models import (
    LOCALHOST,
    AccessPoint,
    Local,
    Reference,
    access_point_from_string,
)
from git_link.core.reference import format_reference, parse_reference
from git_link.core.revision import RevisionResolver

logger = logging.getLogger(__name__)


class LinkHandler:
    """
    Entry point for editors embedding "this file as of this commit" links.

    Two link forms are understood:
    - bare: ``host:/path/to/.git::rev:path/in/repo``, where the location is
      the repository metadata directory and the expression names a blob
    - friendly: ``localhost:/path/to/file::rev``, where the repository is
      found by walking up from the file and the expression names a revision

    The friendly form only works on local files.
    """

    def __init__(
        self,
        cache: ObjectCache | None = None,
        config: GitLinkConfig | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.config = config or (cache.config if cache is not None else GitLinkConfig())
        self.cache = cache or ObjectCache(config=self.config)
        self._today = today

    @property
    def resolver(self) -> RevisionResolver:
        return self.cache.resolver

    def resolve_and_open(self, reference: str | Reference) -> Path:
        """Materialize a bare-form reference and return the local file path."""
        if isinstance(reference, str):
            reference = parse_reference(reference)
        logger.debug("Opening bare reference %s", format_reference(reference))
        return self.cache.materialize(
            reference.target, reference.location, reference.object_expression
        )

    def resolve_from_file_path(
        self,
        path: str | os.PathLike[str],
        object_expression: str,
        access_point: AccessPoint | str = LOCALHOST,
    ) -> Path:
        """Materialize ``path`` as of ``object_expression``.

        Raises:
            UnsupportedAccessPointError: If ``access_point`` is not local
            RepositoryNotFoundError: If ``path`` is not inside a repository
        """
        if isinstance(access_point, str):
            access_point = access_point_from_string(access_point)
        if not isinstance(access_point, Local):
            raise UnsupportedAccessPointError(str(access_point))

        location = find_repository(path, self.config.metadata_dirname)
        expression = f"{object_expression}:{location.relative_path}"
        return self.cache.materialize(access_point, location.root, expression)

    def open_file_link(self, reference: str | Reference) -> Path:
        """Materialize a friendly-form reference."""
        if isinstance(reference, str):
            reference = parse_reference(reference)
        return self.resolve_from_file_path(
            reference.location, reference.object_expression, reference.access_point
        )

    def current_branch_name(self, metadata_path: str | os.PathLike[str]) -> str | None:
        """Branch checked out in the repository, or None when HEAD is detached."""
        return self.resolver.current_branch(Local(), metadata_path)

    def is_inside_repository(self, path: str | os.PathLike[str]) -> bool:
        return is_inside_repository(path, self.config.metadata_dirname)

    def create_link(self, path: str | os.PathLike[str], when: date | None = None) -> str:
        """Author a friendly-form link to ``path`` on its current branch as of ``when``.

        Detached checkouts fall back to ``HEAD``.
        """
        location = find_repository(path, self.config.metadata_dirname)
        branch = self.current_branch_name(location.root) or "HEAD"
        when = when or self._today()
        reference = Reference(
            access_point=LOCALHOST,
            location=str(location.worktree / location.relative_path),
            object_expression=f"{branch}@{{{when.isoformat()}}}",
        )
        return format_reference(reference)

    def store_link(self, path: str | os.PathLike[str]) -> str | None:
        """Link for ``path`` if storing links is enabled and it is in a repository."""
        if not self.config.store_links:
            return None
        if not self.is_inside_repository(path):
            return None
        return self.create_link(path)
