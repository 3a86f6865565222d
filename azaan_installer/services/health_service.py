"""Post-install health check for the supervised service."""

from azaan_installer.logger import InstallLogger
from azaan_installer.models.results import HealthReport
from azaan_installer.services.service_supervisor import ServiceSupervisor


class HealthReporter:
    """Single point-in-time check; diagnostics are advisory only."""

    def __init__(
        self, supervisor: ServiceSupervisor, logger: InstallLogger, journal_lines: int
    ):
        self.supervisor = supervisor
        self.logger = logger
        self.journal_lines = journal_lines

    def check(self, service_name: str) -> HealthReport:
        """
        Check whether the service is running.

        Args:
            service_name: Unit name

        Returns:
            HealthReport, with status and journal output when unhealthy
        """
        if self.supervisor.is_active(service_name):
            self.logger.success("Service is running.")
            return HealthReport(service_name=service_name, healthy=True)

        self.logger.warning("Service is not running. Collecting diagnostics.")
        status = self.supervisor.status(service_name)
        journal = self.supervisor.journal(service_name, self.journal_lines)

        return HealthReport(
            service_name=service_name,
            healthy=False,
            status=status.output,
            journal=journal.output,
        )
