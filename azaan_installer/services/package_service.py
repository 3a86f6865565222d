"""Package installer capability and its apt adapter."""

from typing import Protocol, Sequence

from azaan_installer.exceptions import PackageInstallError
from azaan_installer.logger import InstallLogger
from azaan_installer.services.command_runner import Runner


class PackageInstaller(Protocol):
    """Installs OS packages or raises PackageInstallError."""

    def install(self, packages: Sequence[str]) -> None: ...


class AptPackageInstaller:
    """Thin adapter over apt-get."""

    ENV = {"DEBIAN_FRONTEND": "noninteractive"}

    def __init__(self, runner: Runner, logger: InstallLogger):
        self.runner = runner
        self.logger = logger

    def install(self, packages: Sequence[str]) -> None:
        """
        Refresh the package index and install packages.

        Raises:
            PackageInstallError: If apt-get update or install fails
        """
        result = self.runner.run(
            ["apt-get", "update"], description="Updating package index", env=self.ENV
        )
        if result.is_failure:
            raise PackageInstallError(
                "apt-get update failed", context=result.stderr.strip()
            )

        result = self.runner.run(
            ["apt-get", "install", "-y"] + list(packages),
            description=f"Installing {len(packages)} OS packages",
            env=self.ENV,
        )
        if result.is_failure:
            raise PackageInstallError(
                "apt-get install failed", context=result.stderr.strip()
            )

        self.logger.success(f"Installed: {', '.join(packages)}")
