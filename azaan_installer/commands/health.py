"""
Health Command

Check the installed service and show diagnostics when it is down.
"""

from pathlib import Path
from typing import Optional

import click

from azaan_installer.base import ContextCommand
from azaan_installer.models import HealthReport
from azaan_installer.services import HealthReporter


class HealthCommand(ContextCommand):
    """Single point-in-time health check of the supervised service."""

    def execute(self) -> HealthReport:
        """Execute health command."""
        context = self.load_context()
        settings = context.settings
        logger = self.init_logger("health", settings.log_dir)

        self.show_header(
            title="Health Check", details={"Service": settings.service_name}
        )

        runner = self.make_runner(logger)
        supervisor = self.build_adapters(runner, logger).supervisor

        logger.step("Checking service status")
        report = HealthReporter(supervisor, logger, settings.journal_lines).check(
            settings.service_name
        )

        if report.healthy:
            self.print_success(f"{settings.service_name} is running")
        else:
            self.print_warning(f"{settings.service_name} is not running")
            self.console.print(report.diagnostics, markup=False)

        return report


@click.command()
@click.option(
    "--config",
    "settings_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file overriding installer settings",
)
@click.option("--verbose", "-v", is_flag=True, help="Show all command output")
def health(settings_path: Optional[Path], verbose: bool):
    """
    Check whether the Mini Azaan service is running

    Shows systemctl status and recent journal lines when it is not.
    The exit code is 0 either way.
    """
    cmd = HealthCommand(settings_path=settings_path, verbose=verbose)
    cmd.run()
