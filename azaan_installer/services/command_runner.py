"""Command runner for executing local commands as root or as the install user."""

import os
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from azaan_installer.logger import InstallLogger, run_with_progress
from azaan_installer.models.results import ExecutionResult


class Runner(Protocol):
    """Anything that can run a command and report its result."""

    def run(
        self,
        args: List[str],
        description: str = "",
        user: Optional[str] = None,
        cwd: Optional[Path] = None,
        env: Optional[Dict[str, str]] = None,
    ) -> ExecutionResult: ...


class CommandRunner:
    """Runs commands through the install logger, optionally via sudo."""

    def __init__(self, logger: InstallLogger):
        """
        Initialize command runner.

        Args:
            logger: Logger that records every command and its output
        """
        self.logger = logger

    def run(
        self,
        args: List[str],
        description: str = "",
        user: Optional[str] = None,
        cwd: Optional[Path] = None,
        env: Optional[Dict[str, str]] = None,
    ) -> ExecutionResult:
        """
        Run a command and capture its result.

        Args:
            args: Command and arguments
            description: Spinner text (defaults to the program name)
            user: Run as this user through sudo
            cwd: Working directory
            env: Extra environment variables for the child

        Returns:
            ExecutionResult (never raises on non-zero exit)
        """
        description = description or Path(args[0]).name
        if user:
            args = ["sudo", "-u", user, "-H", "--"] + list(args)

        child_env = None
        if env:
            child_env = {**os.environ, **env}

        return run_with_progress(
            self.logger,
            list(args),
            description,
            cwd=cwd,
            env=child_env,
        )
