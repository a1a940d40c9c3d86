"""Run the version-control program locally or through a remote-execution program."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from typing import Sequence

from git_link.core.config import GitLinkConfig
from git_link.core.models import AccessPoint, CommandResult, Local

logger = logging.getLogger(__name__)

NOT_FOUND_STATUS = 127
TIMEOUT_STATUS = 124


class CommandExecutor:
    """Blocking runner for version-control commands.

    Local access points run the program directly. Remote access points run
    ``<remote_program> <host> '<vcs command line>'`` so the command executes in
    the remote host's default shell.

    A nonzero exit status is reported in the returned ``CommandResult``, never
    raised; callers decide what a failure means.
    """

    def __init__(self, config: GitLinkConfig | None = None) -> None:
        self.config = config or GitLinkConfig()

    def vcs_argv(
        self,
        args: Sequence[str],
        metadata_path: str | os.PathLike[str] | None = None,
    ) -> list[str]:
        """Command line for the version-control program."""
        argv = [self.config.vcs_program, "--no-pager"]
        if metadata_path is not None:
            argv.append(f"--git-dir={os.fspath(metadata_path)}")
        argv.extend(args)
        return argv

    def build_argv(
        self,
        access_point: AccessPoint,
        args: Sequence[str],
        metadata_path: str | os.PathLike[str] | None = None,
    ) -> list[str]:
        """Full command line for ``access_point``."""
        argv = self.vcs_argv(args, metadata_path)
        if isinstance(access_point, Local):
            return argv
        return [self.config.remote_program, access_point.host, shlex.join(argv)]

    def run(
        self,
        access_point: AccessPoint,
        args: Sequence[str],
        metadata_path: str | os.PathLike[str] | None = None,
    ) -> CommandResult:
        """Run a version-control command and capture all of its output."""
        argv = self.build_argv(access_point, args, metadata_path)
        timeout = None if isinstance(access_point, Local) else self.config.remote_timeout
        logger.debug("Running %s", shlex.join(argv))

        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            message = f"{argv[0]}: timed out after {e.timeout} seconds\n"
            return CommandResult(
                argv=argv,
                returncode=TIMEOUT_STATUS,
                stdout=_as_bytes(e.stdout),
                stderr=_as_bytes(e.stderr) + message.encode(),
            )
        except OSError as e:
            return CommandResult(
                argv=argv,
                returncode=NOT_FOUND_STATUS,
                stderr=f"{argv[0]}: {e.strerror or e}\n".encode(),
            )

        result = CommandResult(
            argv=argv,
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
        if not result.ok:
            logger.warning(
                "Command %s exited with status %d", shlex.join(argv), result.returncode
            )
        return result


def _as_bytes(data: bytes | str | None) -> bytes:
    if data is None:
        return b""
    if isinstance(data, str):
        return data.encode()
    return data
