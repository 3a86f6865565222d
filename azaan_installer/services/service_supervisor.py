"""Process supervisor capability and its systemd adapter."""

from typing import Protocol

from azaan_installer.models.results import ExecutionResult
from azaan_installer.services.command_runner import Runner


class ServiceSupervisor(Protocol):
    """Unit operations the installer needs from the supervisor."""

    def daemon_reload(self) -> ExecutionResult: ...

    def enable(self, name: str) -> ExecutionResult: ...

    def restart(self, name: str) -> ExecutionResult: ...

    def is_active(self, name: str) -> bool: ...

    def status(self, name: str) -> ExecutionResult: ...

    def journal(self, name: str, lines: int) -> ExecutionResult: ...


class SystemdSupervisor:
    """Thin adapter over systemctl and journalctl."""

    def __init__(self, runner: Runner):
        self.runner = runner

    def daemon_reload(self) -> ExecutionResult:
        return self.runner.run(
            ["systemctl", "daemon-reload"], description="Reloading systemd"
        )

    def enable(self, name: str) -> ExecutionResult:
        return self.runner.run(
            ["systemctl", "enable", name], description=f"Enabling {name}"
        )

    def restart(self, name: str) -> ExecutionResult:
        return self.runner.run(
            ["systemctl", "restart", name], description=f"Restarting {name}"
        )

    def is_active(self, name: str) -> bool:
        result = self.runner.run(
            ["systemctl", "is-active", "--quiet", name],
            description=f"Checking {name}",
        )
        return result.is_success

    def status(self, name: str) -> ExecutionResult:
        return self.runner.run(
            ["systemctl", "status", name, "--no-pager"],
            description=f"Collecting status of {name}",
        )

    def journal(self, name: str, lines: int) -> ExecutionResult:
        return self.runner.run(
            ["journalctl", "-u", name, "-n", str(lines), "--no-pager"],
            description=f"Collecting last {lines} log lines",
        )
