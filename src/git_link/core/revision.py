"""Resolve revision expressions to canonical object identifiers."""

from __future__ import annotations

import logging
import os

from git_link.core.errors import FormatError, VcsError
from git_link.core.executor import CommandExecutor
from git_link.core.models import AccessPoint, ResolvedObject
from git_link.core.utils import strip_line_terminator

logger = logging.getLogger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"


class RevisionResolver:
    """Ask the version-control program what an object expression points at."""

    def __init__(self, executor: CommandExecutor | None = None) -> None:
        self.executor = executor or CommandExecutor()

    def resolve(
        self,
        access_point: AccessPoint,
        metadata_path: str | os.PathLike[str],
        object_expression: str,
    ) -> str:
        """Return the canonical identifier for ``object_expression``.

        The identifier is the program output minus one trailing line
        terminator, with no further validation.

        Raises:
            FormatError: If the expression starts with "-" and would be read as an option
            VcsError: If the program exits with a nonzero status
        """
        if object_expression.startswith("-"):
            raise FormatError(f"Object expression {object_expression!r} must not start with '-'")
        result = self.executor.run(
            access_point, ["rev-parse", object_expression], metadata_path
        )
        if not result.ok:
            raise VcsError(result.output, result.returncode, result.argv)
        content_hash = strip_line_terminator(result.stdout.decode("utf-8", errors="replace"))
        logger.debug("Resolved %r to %s", object_expression, content_hash)
        return content_hash

    def resolve_object(
        self,
        access_point: AccessPoint,
        metadata_path: str | os.PathLike[str],
        object_expression: str,
    ) -> ResolvedObject:
        return ResolvedObject(
            content_hash=self.resolve(access_point, metadata_path, object_expression)
        )

    def current_branch(
        self,
        access_point: AccessPoint,
        metadata_path: str | os.PathLike[str],
    ) -> str | None:
        """Short name of the branch HEAD points to, or None when detached."""
        result = self.executor.run(access_point, ["symbolic-ref", "HEAD"], metadata_path)
        if not result.ok:
            return None
        ref = strip_line_terminator(result.stdout.decode("utf-8", errors="replace"))
        if ref.startswith(BRANCH_REF_PREFIX):
            ref = ref[len(BRANCH_REF_PREFIX):]
        return ref or None
