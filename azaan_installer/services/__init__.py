"""
Installer Services Layer

Installer components and the thin adapters over apt, git and systemd.
"""

from .command_runner import CommandRunner, Runner
from .identity_service import require_root, resolve_identity
from .credential_service import CredentialService
from .source_control import SourceControl, GitSourceControl
from .repository_fetcher import FetchState, RepositoryFetcher
from .environment_builder import EnvironmentBuilder
from .config_seeder import ConfigSeeder
from .service_supervisor import ServiceSupervisor, SystemdSupervisor
from .service_installer import ServiceInstaller, render_unit
from .hostname_service import HostnameConfigurator, validate_hostname
from .health_service import HealthReporter
from .package_service import PackageInstaller, AptPackageInstaller
from .prompt_service import Prompter, TtyPrompter
from .system_service import SystemService

__all__ = [
    "CommandRunner",
    "Runner",
    "require_root",
    "resolve_identity",
    "CredentialService",
    "SourceControl",
    "GitSourceControl",
    "FetchState",
    "RepositoryFetcher",
    "EnvironmentBuilder",
    "ConfigSeeder",
    "ServiceSupervisor",
    "SystemdSupervisor",
    "ServiceInstaller",
    "render_unit",
    "HostnameConfigurator",
    "validate_hostname",
    "HealthReporter",
    "PackageInstaller",
    "AptPackageInstaller",
    "Prompter",
    "TtyPrompter",
    "SystemService",
]
