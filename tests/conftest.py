"""Shared test fixtures."""

from pathlib import Path
from typing import Sequence

import pytest

import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from git_link.core.config import GitLinkConfig  # noqa: E402
from git_link.core.executor import CommandExecutor  # noqa: E402
from git_link.core.models import CommandResult  # noqa: E402


class FakeExecutor(CommandExecutor):
    """Executor answering from in-memory tables and recording every call."""

    def __init__(
        self,
        config: GitLinkConfig | None = None,
        hashes: dict[str, str] | None = None,
        contents: dict[str, bytes] | None = None,
        head: str | None = "refs/heads/master",
    ) -> None:
        super().__init__(config)
        self.hashes = hashes if hashes is not None else {}
        self.contents = contents if contents is not None else {}
        self.head = head
        self.calls: list[tuple] = []

    def run(self, access_point, args: Sequence[str], metadata_path=None) -> CommandResult:
        argv = self.build_argv(access_point, args, metadata_path)
        self.calls.append((access_point, list(args), metadata_path))
        command, expression = args[0], args[-1]

        if command == "rev-parse":
            if expression in self.hashes:
                return CommandResult(argv, 0, f"{self.hashes[expression]}\n".encode())
            return CommandResult(
                argv, 128, b"", f"fatal: ambiguous argument '{expression}'\n".encode()
            )
        if command == "show":
            if expression in self.contents:
                return CommandResult(argv, 0, self.contents[expression])
            return CommandResult(
                argv, 128, b"", f"fatal: path '{expression}' does not exist\n".encode()
            )
        if command == "symbolic-ref":
            if self.head is None:
                return CommandResult(argv, 128, b"", b"fatal: ref HEAD is not a symbolic ref\n")
            return CommandResult(argv, 0, f"{self.head}\n".encode())
        return CommandResult(argv, 1, b"", b"unknown command\n")

    def count(self, command: str) -> int:
        return sum(1 for _, args, _ in self.calls if args[0] == command)


@pytest.fixture
def config(tmp_path: Path) -> GitLinkConfig:
    return GitLinkConfig(cache_root=str(tmp_path / "cache"))


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Worktree root with a metadata directory; files need not exist."""
    root = tmp_path / "proj"
    (root / ".git").mkdir(parents=True)
    return root
