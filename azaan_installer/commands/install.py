"""
Install Command

Provision the device: packages, deploy key, clone, venv, config, service,
hostname and a final health check.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click

from azaan_installer.base import ContextCommand
from azaan_installer.constants import DEPLOY_KEY_INSTRUCTIONS, WAIT_FOR_DEPLOY_KEY
from azaan_installer.exceptions import ServiceError, ValidationError
from azaan_installer.logger import InstallLogger
from azaan_installer.models import (
    DeviceInfo,
    HealthReport,
    HostnameResult,
    KeypairRef,
    ProvisioningContext,
    SeedOutcome,
    WorkingCopy,
)
from azaan_installer.services import (
    ConfigSeeder,
    CredentialService,
    EnvironmentBuilder,
    HealthReporter,
    HostnameConfigurator,
    RepositoryFetcher,
    ServiceInstaller,
    SystemService,
)
from azaan_installer.ui_components import show_boxed


@dataclass
class InstallReport:
    """What an install run produced."""

    keypair: KeypairRef
    working_copy: WorkingCopy
    hostname: HostnameResult
    seed_outcome: SeedOutcome
    unit_path: Path
    health: HealthReport
    device: DeviceInfo


class InstallCommand(ContextCommand):
    """
    Run every provisioning step once, in order.

    Features:
    - Idempotent deploy key and config seeding
    - Clone retry loop driven by the operator
    - Advisory health check (never changes the exit code)
    """

    def execute(self) -> InstallReport:
        """Execute install command."""
        context = self.load_context()
        settings = context.settings
        identity = context.identity

        logger = self.init_logger("install", settings.log_dir)

        self.show_header(
            title="Install Mini Azaan",
            details={
                "User": identity.username,
                "Repository": settings.repo_url,
                "Ref": settings.git_ref,
            },
        )

        runner = self.make_runner(logger)
        adapters = self.build_adapters(runner, logger)
        credentials = CredentialService(context, runner, logger)
        system = SystemService(context, runner, adapters.supervisor, logger)
        service_installer = ServiceInstaller(adapters.supervisor, settings.unit_dir, logger)

        logger.step("Installing OS packages")
        adapters.package_installer.install(settings.packages)

        logger.step("Ensuring SSH deploy key")
        keypair = credentials.ensure_credential(identity)

        logger.step("Preparing directories")
        system.prepare_directories()

        # Deliberately narrower than always pausing: an existing key is assumed
        # to be registered already, and a failed clone falls into the retry
        # prompt below.
        if keypair.created:
            self.show_deploy_key(credentials)
            self.prompter.wait(WAIT_FOR_DEPLOY_KEY)

        logger.step("Cloning private repository")
        fetcher = RepositoryFetcher(
            adapters.source_control,
            settings.app_dir,
            logger,
            confirm=lambda: self.prompter.wait(WAIT_FOR_DEPLOY_KEY),
            show_deploy_key=lambda: self.show_deploy_key(credentials),
        )
        working_copy = fetcher.fetch(settings.repo_url, settings.git_ref, identity)

        logger.step("Configuring hostname")
        hostname = self.configure_hostname(context, logger)

        logger.step("Setting up virtual environment")
        EnvironmentBuilder(runner, identity, logger).build(working_copy)

        logger.step("Seeding configuration")
        seed_outcome = ConfigSeeder(logger).seed(working_copy, settings.etc_config)

        logger.step("Installing systemd service")
        unit_path = service_installer.install(context.service_definition())

        logger.step("Installing CLI shortcut")
        system.install_cli_link(working_copy)

        logger.step("Starting service")
        try:
            service_installer.start(settings.service_name)
        except ServiceError as e:
            # The health check below shows why.
            logger.warning(e.format_message())

        logger.step("Refreshing mDNS announcement")
        system.refresh_mdns()

        logger.step("Checking service status")
        health = HealthReporter(
            adapters.supervisor, logger, settings.journal_lines
        ).check(settings.service_name)
        if not health.healthy:
            self.show_diagnostics(health)

        device = system.device_info(hostname.name)
        self.print_summary(context, device)
        self.offer_reboot(system)

        return InstallReport(
            keypair=keypair,
            working_copy=working_copy,
            hostname=hostname,
            seed_outcome=seed_outcome,
            unit_path=unit_path,
            health=health,
            device=device,
        )

    def show_deploy_key(self, credentials: CredentialService) -> None:
        """Show the public key the operator must add as a deploy key."""
        try:
            key = credentials.public_key_text()
        except FileNotFoundError:
            self.print_warning(
                f"Public key not found: {credentials.keypair().public_key}"
            )
            return

        self.console.print()
        for line in DEPLOY_KEY_INSTRUCTIONS:
            self.console.print(line)
        self.console.print()
        show_boxed([key], title="Deploy key", console=self.console)
        self.console.print()

    def configure_hostname(
        self, context: ProvisioningContext, logger: InstallLogger
    ) -> HostnameResult:
        """Ask for a hostname until a valid one is given, then persist it."""
        settings = context.settings
        configurator = HostnameConfigurator(settings.firmware_user_data, logger)

        self.console.print("Hostname helps you identify this device on the network.")
        while True:
            answer = self.prompter.ask(
                "Enter device hostname", default=settings.default_hostname
            )
            try:
                result = configurator.set_hostname(answer)
                break
            except ValidationError as e:
                self.print_error(e.format_message())

        show_boxed(
            [
                "Device hostname configured as:",
                f"  {result.name}",
                "",
                "After reboot you can SSH using:",
                f"  ssh {context.identity.username}@{result.name}.local",
            ],
            console=self.console,
        )
        return result

    def show_diagnostics(self, report: HealthReport) -> None:
        self.print_warning("Service is not running. Showing status:")
        self.console.print(report.status or "(no status output)", markup=False)
        self.console.print()
        self.print_warning("Showing last log lines:")
        self.console.print(report.journal or "(no journal output)", markup=False)

    def print_summary(self, context: ProvisioningContext, device: DeviceInfo) -> None:
        """Print install summary."""
        user = context.identity.username
        service = context.settings.service_name

        lines = [
            "Install complete",
            "",
            f"Hostname: {device.hostname}",
            f"IP Address: {device.ip_address or '(unknown)'}",
            "",
            "SSH:",
            f"  ssh {user}@{device.hostname}.local",
        ]
        if device.ip_address:
            lines.append(f"  ssh {user}@{device.ip_address}")
        lines += [
            "",
            "Service:",
            f"  systemctl status {service}",
            "Logs:",
            f"  journalctl -u {service} -f",
        ]
        self.console.print()
        show_boxed(lines, border_color="green", console=self.console)
        if self.logger:
            self.console.print(f"\n[dim]Install log:[/dim] {self.logger.log_path}\n")

    def offer_reboot(self, system: SystemService) -> None:
        self.console.print("A reboot is recommended to apply the new hostname everywhere.")
        self.console.print("You can reboot later manually with: sudo reboot\n")
        if self.prompter.confirm("Reboot now?", default=False):
            self.console.print("Rebooting...")
            system.reboot()
        else:
            self.print_dim("Skipping reboot. Remember to reboot manually.")


@click.command()
@click.option(
    "--config",
    "settings_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file overriding installer settings",
)
@click.option("--verbose", "-v", is_flag=True, help="Show all command output")
def install(settings_path: Optional[Path], verbose: bool):
    """
    Install or redeploy Mini Azaan on this device

    Must be run as root (via sudo). Safe to re-run: the deploy key and the
    system config are kept, the application is re-cloned and the service
    unit is rewritten.

    Examples:
        sudo mini-azaan-install

        sudo mini-azaan-install install --config ./installer.yml -v
    """
    cmd = InstallCommand(settings_path=settings_path, verbose=verbose)
    cmd.run()
