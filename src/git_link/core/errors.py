"""Error types raised by the link resolution core."""

from __future__ import annotations

from typing import Sequence


class GitLinkError(Exception):
    """Base class for all git-link failures."""


class FormatError(GitLinkError, ValueError):
    """A reference string could not be parsed."""


class RepositoryNotFoundError(GitLinkError):
    """No ancestor directory of a path holds repository metadata."""

    def __init__(self, path: str) -> None:
        super().__init__(f"No repository found above {path}")
        self.path = path


class UnsupportedAccessPointError(GitLinkError):
    """An operation restricted to local access was given a remote one."""

    def __init__(self, access_point: str) -> None:
        super().__init__(
            f"Access point {access_point!r} is not supported here, only 'localhost' is"
        )
        self.access_point = access_point


class VcsError(GitLinkError):
    """The version-control or remote-execution program exited with an error.

    Attributes:
        output: Captured program output, verbatim
        returncode: Exit status of the program
        argv: Command line that was executed
    """

    def __init__(
        self,
        output: str,
        returncode: int | None = None,
        argv: Sequence[str] = (),
    ) -> None:
        super().__init__(output)
        self.output = output
        self.returncode = returncode
        self.argv = list(argv)
