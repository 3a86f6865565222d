"""
Context Command Base Class

Base class for commands that act on the device install.
Resolves privilege, identity and settings into a ProvisioningContext.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from rich.console import Console

from azaan_installer.logger import InstallLogger
from azaan_installer.models.context import (
    Identity,
    InstallSettings,
    ProvisioningContext,
)
from azaan_installer.services import (
    AptPackageInstaller,
    CommandRunner,
    GitSourceControl,
    PackageInstaller,
    Prompter,
    Runner,
    ServiceSupervisor,
    SourceControl,
    SystemdSupervisor,
    TtyPrompter,
    require_root,
    resolve_identity,
)

from .base_command import BaseCommand


@dataclass
class Adapters:
    """External collaborators the installer drives."""

    package_installer: PackageInstaller
    source_control: SourceControl
    supervisor: ServiceSupervisor


class ContextCommand(BaseCommand):
    """
    Base class for device commands.

    Provides:
    - Root check and install-user resolution
    - Settings loading (defaults + optional YAML overrides)
    - Factories for the runner and the apt/git/systemd adapters
    """

    def __init__(
        self,
        settings_path: Optional[Path] = None,
        verbose: bool = False,
        console: Optional[Console] = None,
        prompter: Optional[Prompter] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        super().__init__(verbose=verbose, console=console)
        self.settings_path = settings_path
        self.prompter = prompter or TtyPrompter(console=self.console)
        self.environ = os.environ if environ is None else environ

    def load_settings(self) -> InstallSettings:
        return InstallSettings.load(self.settings_path)

    def resolve_identity(self, settings: InstallSettings) -> Identity:
        """
        Gate on root and find the user to install for.

        Raises:
            PrivilegeError: If not running as root
            IdentityError: If the user cannot be resolved
        """
        require_root()
        return resolve_identity(self.environ, default_user=settings.default_run_user)

    def load_context(self) -> ProvisioningContext:
        """Build the immutable context for this run."""
        settings = self.load_settings()
        identity = self.resolve_identity(settings)
        return ProvisioningContext.build(identity, settings)

    def make_runner(self, logger: InstallLogger) -> Runner:
        return CommandRunner(logger)

    def build_adapters(self, runner: Runner, logger: InstallLogger) -> Adapters:
        return Adapters(
            package_installer=AptPackageInstaller(runner, logger),
            source_control=GitSourceControl(runner),
            supervisor=SystemdSupervisor(runner),
        )
