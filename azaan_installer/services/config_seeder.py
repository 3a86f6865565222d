"""Seed the system-wide config from the repository template, exactly once."""

import os
import shutil
from pathlib import Path

import yaml

from azaan_installer.constants import CONFIG_TEMPLATE, SEEDED_CONFIG_MODE
from azaan_installer.logger import InstallLogger
from azaan_installer.models.results import SeedOutcome, WorkingCopy


class ConfigSeeder:
    """
    Copies config.yml into place on first install only.

    An existing system config is never read, rewritten or replaced, so
    operator edits survive every redeploy.
    """

    def __init__(self, logger: InstallLogger):
        self.logger = logger

    def seed(self, working_copy: WorkingCopy, system_config_path: Path) -> SeedOutcome:
        """
        Seed the system config if it does not exist yet.

        Args:
            working_copy: Fresh clone holding the default config
            system_config_path: Where the live config lives

        Returns:
            SeedOutcome describing what happened
        """
        system_config_path = Path(system_config_path)

        if system_config_path.exists():
            self.logger.log(f"Keeping existing config: {system_config_path}")
            return SeedOutcome.KEPT_EXISTING

        template = working_copy.file(CONFIG_TEMPLATE)
        if not template.exists():
            self.logger.warning(
                f"No {CONFIG_TEMPLATE} in repository; the service will use its defaults"
            )
            return SeedOutcome.NO_TEMPLATE

        self._check_yaml(template)

        system_config_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(template, system_config_path)
        os.chmod(system_config_path, SEEDED_CONFIG_MODE)
        self.logger.success(f"Seeded config: {system_config_path}")
        return SeedOutcome.SEEDED

    def _check_yaml(self, template: Path) -> None:
        """Warn (but still seed) when the template does not parse."""
        try:
            with open(template) as f:
                yaml.safe_load(f)
        except yaml.YAMLError as e:
            self.logger.warning(f"{template.name} is not valid YAML: {e}")
