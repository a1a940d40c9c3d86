"""End-to-end tests against a real git repository."""

import shutil
import subprocess
from pathlib import Path

import pytest

from git_link.core.cache import ObjectCache
from git_link.core.config import GitLinkConfig
from git_link.core.errors import FormatError, VcsError
from git_link.core.executor import CommandExecutor
from git_link.handler.links import LinkHandler

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


class CountingExecutor(CommandExecutor):
    def __init__(self, config: GitLinkConfig) -> None:
        super().__init__(config)
        self.commands: list[str] = []

    def run(self, access_point, args, metadata_path=None):
        self.commands.append(args[0])
        return super().run(access_point, args, metadata_path)


def git(cwd: Path, *args: str) -> str:
    completed = subprocess.run(
        ["git", *args], cwd=cwd, check=True, capture_output=True, text=True
    )
    return completed.stdout.strip()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    root = tmp_path / "work"
    root.mkdir()
    git(root, "init", "-q", "-b", "main")
    git(root, "config", "user.email", "dev@example.org")
    git(root, "config", "user.name", "Dev")
    (root / "pkg").mkdir()
    (root / "pkg" / "mod.py").write_text("VERSION = 1\n")
    git(root, "add", ".")
    git(root, "commit", "-q", "-m", "first")
    git(root, "tag", "v1")
    (root / "pkg" / "mod.py").write_text("VERSION = 2\n")
    git(root, "commit", "-q", "-am", "second")
    return root


@pytest.fixture
def handler(tmp_path: Path) -> tuple[LinkHandler, CountingExecutor]:
    config = GitLinkConfig(cache_root=str(tmp_path / "cache"))
    executor = CountingExecutor(config)
    return LinkHandler(cache=ObjectCache(config=config, executor=executor)), executor


class TestRealGit:
    def test_file_as_of_tag(self, git_repo: Path, handler) -> None:
        link_handler, _ = handler
        path = link_handler.resolve_from_file_path(git_repo / "pkg" / "mod.py", "v1")
        assert path.read_text() == "VERSION = 1\n"
        assert path.name == "mod.py"

    def test_cache_hit_skips_show(self, git_repo: Path, handler) -> None:
        link_handler, executor = handler
        reference = f"localhost:{git_repo / '.git'}::main:pkg/mod.py"
        first = link_handler.resolve_and_open(reference)
        second = link_handler.resolve_and_open(reference)
        assert first == second
        assert first.read_text() == "VERSION = 2\n"
        assert executor.commands.count("show") == 1

    def test_hash_names_cache_directory(self, git_repo: Path, handler) -> None:
        link_handler, _ = handler
        blob = git(git_repo, "rev-parse", "v1:pkg/mod.py")
        path = link_handler.resolve_and_open(f"{git_repo / '.git'}::v1:pkg/mod.py")
        assert path.parent.name == f"git-link-{blob}"

    def test_current_branch(self, git_repo: Path, handler) -> None:
        link_handler, _ = handler
        assert link_handler.current_branch_name(git_repo / ".git") == "main"
        git(git_repo, "checkout", "-q", "--detach")
        assert link_handler.current_branch_name(git_repo / ".git") is None

    def test_unknown_revision(self, git_repo: Path, handler) -> None:
        link_handler, _ = handler
        with pytest.raises(VcsError) as exc_info:
            link_handler.resolve_from_file_path(git_repo / "pkg" / "mod.py", "nosuch")
        assert exc_info.value.output

    def test_option_like_expression_touches_nothing(
        self, git_repo: Path, handler, tmp_path: Path
    ) -> None:
        link_handler, executor = handler
        victim = tmp_path / "victim.txt"
        victim.write_text("precious\n")
        with pytest.raises(FormatError):
            link_handler.resolve_and_open(f"localhost:{git_repo / '.git'}::--output={victim}")
        assert victim.read_text() == "precious\n"
        assert executor.commands == []
        assert not (tmp_path / "cache").exists()
