"""
Repository fetcher with operator-assisted retry.

The clone runs as an explicit state machine:

    ATTEMPT -> SUCCESS
    ATTEMPT -> FAILURE -> PROMPT_OPERATOR -> ATTEMPT

There is no retry limit. The operator fixes the deploy key (or interrupts
the installer) between attempts.
"""

import shutil
from enum import Enum
from pathlib import Path
from typing import Callable

from azaan_installer.constants import CLONE_FAILED_HINT
from azaan_installer.logger import InstallLogger
from azaan_installer.models.context import Identity
from azaan_installer.models.results import ExecutionResult, WorkingCopy
from azaan_installer.services.source_control import SourceControl


class FetchState(Enum):
    """States of the clone-with-retry loop."""

    ATTEMPT = "attempt"
    SUCCESS = "success"
    FAILURE = "failure"
    PROMPT_OPERATOR = "prompt_operator"


class RepositoryFetcher:
    """Produces a fresh working copy, asking the operator for help on failure."""

    def __init__(
        self,
        source_control: SourceControl,
        dest: Path,
        logger: InstallLogger,
        confirm: Callable[[], None],
        show_deploy_key: Callable[[], None],
    ):
        """
        Initialize repository fetcher.

        Args:
            source_control: Git (or fake) clone/checkout capability
            dest: Working copy path, replaced on every attempt
            logger: Install logger
            confirm: Blocks until the operator says to retry
            show_deploy_key: Displays the public key to add on the remote
        """
        self.source_control = source_control
        self.dest = Path(dest)
        self.logger = logger
        self.confirm = confirm
        self.show_deploy_key = show_deploy_key

    def fetch(self, url: str, ref: str, identity: Identity) -> WorkingCopy:
        """
        Clone the repository, retrying until it succeeds.

        Args:
            url: Repository URL
            ref: Branch, tag or commit to check out after cloning
            identity: User the clone runs as

        Returns:
            WorkingCopy of the fresh clone
        """
        state = FetchState.ATTEMPT
        attempts = 0
        result = None

        while state is not FetchState.SUCCESS:
            if state is FetchState.ATTEMPT:
                attempts += 1
                result = self._attempt(url, identity)
                state = FetchState.SUCCESS if result.is_success else FetchState.FAILURE

            elif state is FetchState.FAILURE:
                self.logger.warning(f"Clone failed (attempt {attempts})")
                if result.stderr.strip():
                    self.logger.log(result.stderr.strip(), "ERROR")
                self.logger.warning(CLONE_FAILED_HINT)
                state = FetchState.PROMPT_OPERATOR

            elif state is FetchState.PROMPT_OPERATOR:
                self.show_deploy_key()
                self.confirm()
                self.logger.log("Retrying clone...")
                state = FetchState.ATTEMPT

        self.logger.success(f"Clone succeeded after {attempts} attempt(s)")
        checked_out = self._checkout(ref, identity)

        return WorkingCopy(
            path=self.dest,
            ref=ref,
            checked_out=checked_out,
            attempts=attempts,
        )

    def _attempt(self, url: str, identity: Identity) -> ExecutionResult:
        # Never clone on top of leftovers from a previous attempt.
        if self.dest.exists() or self.dest.is_symlink():
            if self.dest.is_dir() and not self.dest.is_symlink():
                shutil.rmtree(self.dest)
            else:
                self.dest.unlink()
        return self.source_control.clone(url, self.dest, user=identity.username)

    def _checkout(self, ref: str, identity: Identity) -> bool:
        """Check out ref; a failure keeps the clone's default branch."""
        result = self.source_control.checkout(self.dest, ref, user=identity.username)
        if result.is_failure:
            self.logger.warning(
                f"Could not check out '{ref}'; staying on the default branch"
            )
            return False
        self.logger.log(f"Checked out {ref}")
        return True
