"""
Result Models

Dataclass models for operation results and command outputs.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


@dataclass
class ExecutionResult:
    """Result of a command execution (subprocess, sudo, etc.)."""

    returncode: int
    stdout: str = ""
    stderr: str = ""
    command: str = ""

    @property
    def is_success(self) -> bool:
        """Check if execution succeeded."""
        return self.returncode == 0

    @property
    def is_failure(self) -> bool:
        """Check if execution failed."""
        return self.returncode != 0

    @property
    def output(self) -> str:
        """Get combined output (stdout + stderr)."""
        return f"{self.stdout}\n{self.stderr}".strip()

    def __repr__(self) -> str:
        return f"ExecutionResult(returncode={self.returncode}, command='{self.command[:50]}...')"


class SeedOutcome(Enum):
    """What the config seeder did on this run."""

    SEEDED = "seeded"
    KEPT_EXISTING = "kept_existing"
    NO_TEMPLATE = "no_template"


@dataclass(frozen=True)
class WorkingCopy:
    """A fresh clone of the application repository."""

    path: Path
    ref: str
    checked_out: bool = True
    attempts: int = 1

    def file(self, name: str) -> Path:
        """Path of a file at the repository root."""
        return self.path / name

    def __repr__(self) -> str:
        return f"WorkingCopy(path={self.path}, ref={self.ref}, attempts={self.attempts})"


@dataclass(frozen=True)
class RuntimeEnv:
    """Virtual environment built inside a working copy."""

    venv_path: Path

    @property
    def python(self) -> Path:
        return self.venv_path / "bin" / "python"

    @property
    def pip(self) -> Path:
        return self.venv_path / "bin" / "pip"


@dataclass(frozen=True)
class HostnameResult:
    """Hostname chosen by the operator and whether it was persisted."""

    name: str
    persisted: bool
    applied_immediately: bool = False


@dataclass
class HealthReport:
    """Point-in-time health of the installed service."""

    service_name: str
    healthy: bool
    status: str = ""
    journal: str = ""

    @property
    def diagnostics(self) -> str:
        """Status and journal output joined for display."""
        return f"{self.status}\n\n{self.journal}".strip()

    def __repr__(self) -> str:
        return f"HealthReport(service={self.service_name}, healthy={self.healthy})"


@dataclass(frozen=True)
class DeviceInfo:
    """Reachability details shown at the end of an install."""

    hostname: str
    ip_address: Optional[str] = None
