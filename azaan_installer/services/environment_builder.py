"""Build the application's virtual environment inside the working copy."""

from azaan_installer.constants import REQUIREMENTS_FILE, VENV_DIR
from azaan_installer.exceptions import EnvironmentBuildError
from azaan_installer.logger import InstallLogger
from azaan_installer.models.context import Identity
from azaan_installer.models.results import RuntimeEnv, WorkingCopy
from azaan_installer.services.command_runner import Runner


class EnvironmentBuilder:
    """Creates .venv and installs requirements.txt. Any failure is fatal."""

    def __init__(self, runner: Runner, identity: Identity, logger: InstallLogger):
        self.runner = runner
        self.identity = identity
        self.logger = logger

    def build(self, working_copy: WorkingCopy) -> RuntimeEnv:
        """
        Create the virtual environment and install dependencies.

        Args:
            working_copy: Fresh clone of the application

        Returns:
            RuntimeEnv pointing at the new venv

        Raises:
            EnvironmentBuildError: If the manifest is missing or a command fails
        """
        manifest = working_copy.file(REQUIREMENTS_FILE)
        if not manifest.exists():
            raise EnvironmentBuildError(
                f"Dependency manifest not found: {manifest}",
                context="The application repository must ship requirements.txt",
            )

        env = RuntimeEnv(venv_path=working_copy.path / VENV_DIR)

        result = self.runner.run(
            ["python3", "-m", "venv", VENV_DIR],
            description="Creating virtual environment",
            user=self.identity.username,
            cwd=working_copy.path,
        )
        if result.is_failure:
            raise EnvironmentBuildError(
                "Failed to create virtual environment", context=result.stderr.strip()
            )

        result = self.runner.run(
            [str(env.pip), "install", "-r", REQUIREMENTS_FILE],
            description="Installing Python dependencies",
            user=self.identity.username,
            cwd=working_copy.path,
        )
        if result.is_failure:
            raise EnvironmentBuildError(
                "Failed to install Python dependencies", context=result.stderr.strip()
            )

        self.logger.success(f"Virtual environment ready: {env.venv_path}")
        return env
