"""Source control capability and its git adapter."""

from pathlib import Path
from typing import Optional, Protocol

from azaan_installer.models.results import ExecutionResult
from azaan_installer.services.command_runner import Runner


class SourceControl(Protocol):
    """Clone and checkout operations the repository fetcher needs."""

    def clone(self, url: str, dest: Path, user: Optional[str] = None) -> ExecutionResult: ...

    def checkout(self, repo: Path, ref: str, user: Optional[str] = None) -> ExecutionResult: ...


class GitSourceControl:
    """Thin adapter over the git CLI."""

    def __init__(self, runner: Runner):
        self.runner = runner

    def clone(self, url: str, dest: Path, user: Optional[str] = None) -> ExecutionResult:
        return self.runner.run(
            ["git", "clone", url, str(dest)],
            description="Cloning repository",
            user=user,
        )

    def checkout(self, repo: Path, ref: str, user: Optional[str] = None) -> ExecutionResult:
        return self.runner.run(
            ["git", "-C", str(repo), "checkout", ref],
            description=f"Checking out {ref}",
            user=user,
        )
