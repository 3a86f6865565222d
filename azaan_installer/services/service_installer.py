"""Render, register and start the systemd unit for the application."""

from pathlib import Path

from azaan_installer.exceptions import ServiceError
from azaan_installer.logger import InstallLogger
from azaan_installer.models.service import ServiceDefinition
from azaan_installer.services.service_supervisor import ServiceSupervisor
from azaan_installer.utils import render_stub


def render_unit(definition: ServiceDefinition) -> str:
    """Render the unit file text for a service definition."""
    return render_stub("systemd/service.j2", service=definition)


class ServiceInstaller:
    """
    Writes the unit file on every run, then reloads and enables it.

    The unit is owned by the installer; unlike the seeded config it is not
    meant to be edited by the operator.
    """

    def __init__(
        self, supervisor: ServiceSupervisor, unit_dir: Path, logger: InstallLogger
    ):
        self.supervisor = supervisor
        self.unit_dir = Path(unit_dir)
        self.logger = logger

    def install(self, definition: ServiceDefinition) -> Path:
        """
        Install (or overwrite) the unit and enable it.

        Args:
            definition: Service definition to render

        Returns:
            Path of the written unit file

        Raises:
            ServiceError: If daemon-reload or enable fails
        """
        unit_path = self.unit_dir / definition.name
        unit_path.parent.mkdir(parents=True, exist_ok=True)
        unit_path.write_text(render_unit(definition))
        self.logger.log(f"Wrote unit file: {unit_path}")

        result = self.supervisor.daemon_reload()
        if result.is_failure:
            raise ServiceError(definition.name, "reload", result.stderr.strip())

        result = self.supervisor.enable(definition.name)
        if result.is_failure:
            raise ServiceError(definition.name, "enable", result.stderr.strip())

        self.logger.success(f"Service {definition.name} installed and enabled")
        return unit_path

    def start(self, name: str) -> None:
        """
        Restart the service so it picks up the new code.

        Raises:
            ServiceError: If systemctl restart fails
        """
        result = self.supervisor.restart(name)
        if result.is_failure:
            raise ServiceError(name, "restart", result.stderr.strip())
        self.logger.success(f"Service {name} restarted")
