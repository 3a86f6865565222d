"""
Provisioning Context Models

Identity, installer settings and the immutable context handed to every
installer component.
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from azaan_installer import constants
from azaan_installer.exceptions import ConfigurationError
from azaan_installer.models.service import ServiceDefinition


@dataclass(frozen=True)
class Identity:
    """The non-root user the application is installed for."""

    username: str
    home: Path
    uid: int
    gid: int

    @property
    def ssh_dir(self) -> Path:
        return self.home / ".ssh"

    def __repr__(self) -> str:
        return f"Identity(user={self.username}, home={self.home})"


@dataclass(frozen=True)
class InstallSettings:
    """Installer constants, overridable from a YAML file."""

    service_name: str = constants.SERVICE_NAME
    service_description: str = constants.SERVICE_DESCRIPTION
    restart_sec: int = constants.SERVICE_RESTART_SEC
    repo_url: str = constants.REPO_URL
    git_ref: str = constants.GIT_REF
    remote_host: str = constants.REMOTE_HOST
    default_run_user: str = constants.DEFAULT_RUN_USER
    default_hostname: str = constants.DEFAULT_HOSTNAME
    journal_lines: int = constants.JOURNAL_LINES
    packages: Tuple[str, ...] = tuple(constants.OS_PACKAGES)
    app_root: Path = Path(constants.APP_ROOT)
    app_dir: Path = Path(constants.APP_DIR)
    etc_dir: Path = Path(constants.ETC_DIR)
    etc_config: Path = Path(constants.ETC_CONFIG)
    bin_link: Path = Path(constants.BIN_LINK)
    unit_dir: Path = Path(constants.SYSTEMD_UNIT_DIR)
    firmware_user_data: Path = Path(constants.FIRMWARE_USER_DATA)
    log_dir: Path = Path(constants.LOG_DIR)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "InstallSettings":
        """
        Load settings, applying overrides from a YAML file.

        Args:
            path: Optional YAML file whose keys are settings field names

        Returns:
            InstallSettings with defaults for every key not overridden

        Raises:
            ConfigurationError: If the file is unreadable, not a mapping,
                or names an unknown setting
        """
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Settings file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}", context=str(e))

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Settings file must contain a mapping: {path}",
                context=f"Got {type(data).__name__}",
            )

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InstallSettings":
        """Build settings from a plain mapping of overrides."""
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigurationError(
                f"Unknown setting(s): {', '.join(unknown)}",
                context=f"Valid settings: {', '.join(sorted(known))}",
            )

        defaults = cls()
        overrides: Dict[str, Any] = {}
        for key, value in data.items():
            current = getattr(defaults, key)
            if isinstance(current, Path):
                if not isinstance(value, str):
                    raise ConfigurationError(f"Setting '{key}' must be a path")
                value = Path(value)
            elif isinstance(current, tuple):
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise ConfigurationError(f"Setting '{key}' must be a list of strings")
                value = tuple(value)
            elif isinstance(current, int):
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ConfigurationError(f"Setting '{key}' must be an integer")
            elif not isinstance(value, str):
                raise ConfigurationError(f"Setting '{key}' must be a string")
            overrides[key] = value

        return replace(defaults, **overrides)


@dataclass(frozen=True)
class ProvisioningContext:
    """
    Everything the installer components need, resolved once at startup.

    The context never changes during a run. Values produced by a step (the
    configured hostname, the working copy) are returned by that step.
    """

    identity: Identity
    settings: InstallSettings

    @classmethod
    def build(cls, identity: Identity, settings: InstallSettings) -> "ProvisioningContext":
        return cls(identity=identity, settings=settings)

    @property
    def private_key(self) -> Path:
        return self.identity.ssh_dir / constants.SSH_KEY_NAME

    @property
    def public_key(self) -> Path:
        return self.identity.ssh_dir / f"{constants.SSH_KEY_NAME}.pub"

    @property
    def known_hosts(self) -> Path:
        return self.identity.ssh_dir / "known_hosts"

    @property
    def ssh_config(self) -> Path:
        return self.identity.ssh_dir / "config"

    @property
    def unit_path(self) -> Path:
        return self.settings.unit_dir / self.settings.service_name

    def service_definition(self) -> ServiceDefinition:
        """Unit definition for the deployed application."""
        app_dir = self.settings.app_dir
        python = app_dir / constants.VENV_DIR / "bin" / "python"
        return ServiceDefinition(
            name=self.settings.service_name,
            description=self.settings.service_description,
            user=self.identity.username,
            working_directory=str(app_dir),
            exec_start=f"{python} {app_dir / constants.ENTRY_POINT}",
            restart_sec=self.settings.restart_sec,
        )

    def __repr__(self) -> str:
        return f"ProvisioningContext(user={self.identity.username}, app_dir={self.settings.app_dir})"
