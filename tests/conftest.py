from __future__ import annotations

import io
import os
from pathlib import Path

import pytest
from rich.console import Console

from azaan_installer.logger import InstallLogger
from azaan_installer.models import Identity, InstallSettings, ProvisioningContext
from tests.fakes import FakeRunner, fake_keygen


@pytest.fixture
def identity(tmp_path: Path) -> Identity:
    home = tmp_path / "home" / "pi"
    home.mkdir(parents=True)
    return Identity(username="pi", home=home, uid=os.getuid(), gid=os.getgid())


@pytest.fixture
def settings(tmp_path: Path) -> InstallSettings:
    return InstallSettings(
        app_root=tmp_path / "opt" / "mini-azaan",
        app_dir=tmp_path / "opt" / "mini-azaan" / "app",
        etc_dir=tmp_path / "etc" / "mini-azaan",
        etc_config=tmp_path / "etc" / "mini-azaan" / "config.yml",
        bin_link=tmp_path / "usr" / "local" / "bin" / "mini-azaan",
        unit_dir=tmp_path / "etc" / "systemd" / "system",
        firmware_user_data=tmp_path / "boot" / "firmware" / "user-data",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def context(identity: Identity, settings: InstallSettings) -> ProvisioningContext:
    return ProvisioningContext.build(identity, settings)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def logger(tmp_path: Path, console: Console):
    install_logger = InstallLogger("test", tmp_path / "logs", console=console)
    yield install_logger
    install_logger.close()


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner().on("ssh-keygen", "-t", handler=fake_keygen)
