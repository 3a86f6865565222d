"""Install layout, CLI shortcut, mDNS refresh and device information."""

import os
import socket
from typing import Callable, Optional

from azaan_installer.constants import MANAGE_SCRIPT, MDNS_SERVICE
from azaan_installer.logger import InstallLogger
from azaan_installer.models.context import ProvisioningContext
from azaan_installer.models.results import DeviceInfo, WorkingCopy
from azaan_installer.services.command_runner import Runner
from azaan_installer.services.service_supervisor import ServiceSupervisor
from azaan_installer.utils import give_tree_to


class SystemService:
    """Filesystem and host-level steps around the core install."""

    def __init__(
        self,
        context: ProvisioningContext,
        runner: Runner,
        supervisor: ServiceSupervisor,
        logger: InstallLogger,
        current_hostname: Callable[[], str] = socket.gethostname,
    ):
        self.context = context
        self.runner = runner
        self.supervisor = supervisor
        self.logger = logger
        self.current_hostname = current_hostname

    def prepare_directories(self) -> None:
        """Create the application root and config dir; hand the root to the user."""
        settings = self.context.settings
        settings.app_root.mkdir(parents=True, exist_ok=True)
        settings.etc_dir.mkdir(parents=True, exist_ok=True)
        give_tree_to(settings.app_root, self.context.identity)
        self.logger.success(f"Prepared {settings.app_root} and {settings.etc_dir}")

    def install_cli_link(self, working_copy: WorkingCopy) -> None:
        """Point the CLI shortcut at the repository's manage script."""
        script = working_copy.file(MANAGE_SCRIPT)
        link = self.context.settings.bin_link

        if script.exists():
            os.chmod(script, script.stat().st_mode | 0o111)
        else:
            self.logger.warning(f"{MANAGE_SCRIPT} not found in repository")

        link.parent.mkdir(parents=True, exist_ok=True)
        if link.is_symlink() or link.exists():
            link.unlink()
        link.symlink_to(script)
        self.logger.success(f"CLI shortcut: {link} -> {script}")

    def refresh_mdns(self) -> None:
        """Re-announce the device over mDNS. Never fatal."""
        refreshed = True
        for action in (self.supervisor.enable, self.supervisor.restart):
            result = action(MDNS_SERVICE)
            if result.is_failure:
                refreshed = False
                self.logger.warning(
                    f"Could not refresh {MDNS_SERVICE}: {result.stderr.strip() or result.command}"
                )
        if refreshed:
            self.logger.success(f"{MDNS_SERVICE} refreshed")

    def primary_ip(self) -> Optional[str]:
        """First address reported by `hostname -I`, if any."""
        try:
            result = self.runner.run(["hostname", "-I"], description="Reading IP address")
        except OSError:
            return None
        if result.is_failure:
            return None
        addresses = result.stdout.split()
        return addresses[0] if addresses else None

    def device_info(self, configured_hostname: Optional[str] = None) -> DeviceInfo:
        return DeviceInfo(
            hostname=configured_hostname or self.current_hostname(),
            ip_address=self.primary_ip(),
        )

    def reboot(self) -> None:
        self.logger.log("Rebooting...")
        self.runner.run(["reboot"], description="Rebooting")
