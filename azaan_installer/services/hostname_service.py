"""Persist the device hostname into the cloud-init first-boot file."""

import re
from pathlib import Path

from azaan_installer.exceptions import ValidationError
from azaan_installer.logger import InstallLogger
from azaan_installer.models.results import HostnameResult

HOSTNAME_DIRECTIVE = re.compile(r"^[ \t]*hostname:.*$", re.MULTILINE)
HOSTNAME_LABEL = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")


def validate_hostname(name: str) -> str:
    """
    Validate a single-label hostname (RFC 1123).

    Returns:
        The stripped hostname

    Raises:
        ValidationError: If the name is not a valid label
    """
    name = name.strip()
    if not HOSTNAME_LABEL.match(name):
        raise ValidationError(
            f"Invalid hostname: '{name}'",
            context="Use letters, digits and hyphens (max 63, no leading/trailing hyphen)",
        )
    return name


class HostnameConfigurator:
    """
    Writes `hostname: <name>` into the firmware user-data file.

    The new name only takes effect after a reboot, when cloud-init applies
    it. Devices without the file are left untouched.
    """

    def __init__(self, user_data_path: Path, logger: InstallLogger):
        self.user_data_path = Path(user_data_path)
        self.logger = logger

    def set_hostname(self, new_name: str) -> HostnameResult:
        """
        Persist a new hostname for the next boot.

        Args:
            new_name: Requested hostname

        Returns:
            HostnameResult (applied_immediately is always False)

        Raises:
            ValidationError: If new_name is not a valid hostname
        """
        name = validate_hostname(new_name)

        if not self.user_data_path.exists():
            self.logger.warning(
                f"{self.user_data_path} not found. Hostname will not be persisted via cloud-init."
            )
            return HostnameResult(name=name, persisted=False)

        content = self.user_data_path.read_text()
        directive = f"hostname: {name}"

        if HOSTNAME_DIRECTIVE.search(content):
            content = HOSTNAME_DIRECTIVE.sub(lambda _: directive, content)
        else:
            content = f"{content}\n{directive}\n"

        self.user_data_path.write_text(content)
        self.logger.success(f"Hostname '{name}' written to {self.user_data_path}")
        return HostnameResult(name=name, persisted=True)
