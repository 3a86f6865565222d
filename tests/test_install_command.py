from __future__ import annotations

import io

import pytest
from rich.console import Console

from azaan_installer.base import Adapters
from azaan_installer.commands.install import InstallCommand
from azaan_installer.constants import WAIT_FOR_DEPLOY_KEY
from azaan_installer.exceptions import PackageInstallError, PrivilegeError
from azaan_installer.models import SeedOutcome
from azaan_installer.services import TtyPrompter
from tests.fakes import (
    FakePackageInstaller,
    FakeRunner,
    FakeSourceControl,
    FakeSupervisor,
    ScriptedPrompter,
    fake_keygen,
    ok,
)


class FakeInstall(InstallCommand):
    """InstallCommand wired to in-memory adapters instead of the real host."""

    def __init__(
        self,
        identity,
        settings,
        prompter,
        source_control=None,
        supervisor=None,
        package_installer=None,
        identity_error=None,
    ):
        super().__init__(
            console=Console(file=io.StringIO(), width=120), prompter=prompter
        )
        self.identity = identity
        self.settings = settings
        self.identity_error = identity_error
        self.runner = (
            FakeRunner()
            .on("ssh-keygen", "-t", handler=fake_keygen)
            .on("hostname", "-I", result=ok(stdout="192.168.1.20 fe80::1\n"))
        )
        self.source_control = source_control or FakeSourceControl()
        self.supervisor = supervisor or FakeSupervisor()
        self.package_installer = package_installer or FakePackageInstaller()

    def load_settings(self):
        return self.settings

    def resolve_identity(self, settings):
        if self.identity_error:
            raise self.identity_error
        return self.identity

    def make_runner(self, logger):
        return self.runner

    def build_adapters(self, runner, logger):
        return Adapters(
            package_installer=self.package_installer,
            source_control=self.source_control,
            supervisor=self.supervisor,
        )

    @property
    def output(self) -> str:
        return self.console.file.getvalue()


def pre_existing_key(identity):
    identity.ssh_dir.mkdir()
    (identity.ssh_dir / "id_ed25519").write_text("PRIVATE\n")
    (identity.ssh_dir / "id_ed25519.pub").write_text("ssh-ed25519 AAAAold mini-azaan-pi@old\n")


def test_full_install_without_firmware_file(identity, settings):
    command = FakeInstall(identity, settings, ScriptedPrompter())

    report = command.run()

    assert report.keypair.created is True
    assert report.working_copy.path == settings.app_dir
    assert report.hostname.name == "mini-azaan"
    assert report.hostname.persisted is False
    assert not settings.firmware_user_data.exists()
    assert report.seed_outcome is SeedOutcome.SEEDED
    assert settings.etc_config.read_text() == "volume: 5\n"
    assert report.unit_path == settings.unit_dir / "mini-azaan.service"
    assert report.health.healthy is True
    assert report.device.hostname == "mini-azaan"
    assert report.device.ip_address == "192.168.1.20"

    assert command.package_installer.installed == list(settings.packages)
    assert settings.bin_link.is_symlink()
    assert "ssh pi@mini-azaan.local" in command.output
    assert "ssh pi@192.168.1.20" in command.output


def test_steps_run_in_order(identity, settings):
    command = FakeInstall(identity, settings, ScriptedPrompter())

    command.run()

    assert command.supervisor.actions[:4] == [
        ("daemon-reload", None),
        ("enable", "mini-azaan.service"),
        ("restart", "mini-azaan.service"),
        ("enable", "avahi-daemon"),
    ]
    commands = command.runner.commands()
    keygen = commands.index(next(c for c in commands if c[:2] == ["ssh-keygen", "-t"]))
    venv = commands.index(next(c for c in commands if c[1:3] == ["-m", "venv"]))
    assert keygen < venv


def test_new_key_waits_for_operator_before_first_clone(identity, settings):
    prompter = ScriptedPrompter()
    command = FakeInstall(identity, settings, prompter)

    report = command.run()

    assert prompter.waits == [WAIT_FOR_DEPLOY_KEY]
    assert report.working_copy.attempts == 1
    assert "ssh-ed25519 AAAA" in command.output


def test_two_failed_clones_prompt_twice(identity, settings):
    pre_existing_key(identity)
    prompter = ScriptedPrompter()
    source_control = FakeSourceControl(outcomes=[False, False, True])
    command = FakeInstall(identity, settings, prompter, source_control=source_control)

    report = command.run()

    assert len(prompter.waits) == 2
    assert source_control.clone_count == 3
    assert report.working_copy.attempts == 3
    assert report.keypair.created is False
    assert not (settings.app_dir / ".partial").exists()


def test_rerun_keeps_key_and_operator_config(identity, settings):
    FakeInstall(identity, settings, ScriptedPrompter()).run()
    key_before = (identity.ssh_dir / "id_ed25519").read_text()
    settings.etc_config.write_text("volume: 9\n")

    prompter = ScriptedPrompter()
    report = FakeInstall(identity, settings, prompter).run()

    assert prompter.waits == []
    assert report.keypair.created is False
    assert (identity.ssh_dir / "id_ed25519").read_text() == key_before
    assert report.seed_outcome is SeedOutcome.KEPT_EXISTING
    assert settings.etc_config.read_text() == "volume: 9\n"


def test_invalid_hostname_is_asked_again(identity, settings):
    settings.firmware_user_data.parent.mkdir(parents=True)
    settings.firmware_user_data.write_text("#cloud-config\nhostname: raspberrypi\n")
    prompter = ScriptedPrompter(answers=["bad_name!", "kitchen"])

    report = FakeInstall(identity, settings, prompter).run()

    assert len(prompter.asked) == 2
    assert report.hostname.name == "kitchen"
    assert report.hostname.persisted is True
    assert settings.firmware_user_data.read_text() == "#cloud-config\nhostname: kitchen\n"


def test_unhealthy_service_is_advisory(identity, settings):
    supervisor = FakeSupervisor(active=False, fail=("restart",))
    command = FakeInstall(identity, settings, ScriptedPrompter(), supervisor=supervisor)

    report = command.run()

    assert report.health.healthy is False
    assert report.health.journal == "last 60 lines of mini-azaan.service"
    assert "Showing last log lines" in command.output


def test_reboot_only_when_confirmed(identity, settings):
    declined = FakeInstall(identity, settings, ScriptedPrompter(reboot=False))
    declined.run()
    assert declined.runner.ran("reboot") == []

    accepted = FakeInstall(identity, settings, ScriptedPrompter(reboot=True))
    accepted.run()
    assert len(accepted.runner.ran("reboot")) == 1


def test_not_root_exits_with_code_1(identity, settings):
    command = FakeInstall(
        identity,
        settings,
        ScriptedPrompter(),
        identity_error=PrivilegeError("Please run as root."),
    )

    with pytest.raises(SystemExit) as exc:
        command.run()

    assert exc.value.code == 1
    assert "Please run as root." in command.output
    assert command.runner.calls == []


def test_package_failure_stops_the_run(identity, settings):
    command = FakeInstall(
        identity,
        settings,
        ScriptedPrompter(),
        package_installer=FakePackageInstaller(error=PackageInstallError("apt-get install failed")),
    )

    with pytest.raises(SystemExit) as exc:
        command.run()

    assert exc.value.code == 1
    assert command.source_control.clone_count == 0
    assert not (identity.ssh_dir / "id_ed25519").exists()


def test_missing_requirements_exits_with_code_1(identity, settings):
    files = {"config.yml": "volume: 5\n", "manage.sh": "#!/bin/sh\n"}
    command = FakeInstall(
        identity,
        settings,
        ScriptedPrompter(),
        source_control=FakeSourceControl(files=files),
    )

    with pytest.raises(SystemExit) as exc:
        command.run()

    assert exc.value.code == 1
    assert not settings.etc_config.exists()
    assert command.supervisor.actions == []


def test_interrupt_at_prompt_exits_with_code_130(identity, settings):
    def interrupt(_count):
        raise KeyboardInterrupt

    command = FakeInstall(identity, settings, ScriptedPrompter(on_wait=interrupt))

    with pytest.raises(SystemExit) as exc:
        command.run()

    assert exc.value.code == 130
    assert command.source_control.clone_count == 0


def test_no_terminal_exits_with_code_1_after_one_clone(identity, settings, tmp_path):
    pre_existing_key(identity)
    source_control = FakeSourceControl(outcomes=[False, False, False])
    command = FakeInstall(
        identity,
        settings,
        TtyPrompter(tty_path=str(tmp_path / "no-tty")),
        source_control=source_control,
    )

    with pytest.raises(SystemExit) as exc:
        command.run()

    assert exc.value.code == 1
    assert source_control.clone_count == 1
