from __future__ import annotations

import pytest

from azaan_installer.exceptions import EnvironmentBuildError
from azaan_installer.models import WorkingCopy
from azaan_installer.services import EnvironmentBuilder
from tests.fakes import FakeRunner, failed


@pytest.fixture
def working_copy(tmp_path):
    path = tmp_path / "app"
    path.mkdir()
    (path / "requirements.txt").write_text("PyYAML\n")
    return WorkingCopy(path=path, ref="main")


def test_builds_venv_and_installs_requirements(working_copy, identity, logger):
    runner = FakeRunner()

    env = EnvironmentBuilder(runner, identity, logger).build(working_copy)

    assert env.venv_path == working_copy.path / ".venv"
    assert env.python == working_copy.path / ".venv" / "bin" / "python"
    assert runner.commands() == [
        ["python3", "-m", "venv", ".venv"],
        [str(working_copy.path / ".venv" / "bin" / "pip"), "install", "-r", "requirements.txt"],
    ]
    assert all(call.user == "pi" for call in runner.calls)
    assert all(call.cwd == working_copy.path for call in runner.calls)


def test_missing_manifest_is_fatal(working_copy, identity, logger):
    (working_copy.path / "requirements.txt").unlink()
    runner = FakeRunner()

    with pytest.raises(EnvironmentBuildError) as exc:
        EnvironmentBuilder(runner, identity, logger).build(working_copy)

    assert "requirements.txt" in exc.value.message
    assert runner.calls == []


def test_venv_failure_is_fatal(working_copy, identity, logger):
    runner = FakeRunner().on("python3", result=failed("ensurepip is not available"))

    with pytest.raises(EnvironmentBuildError) as exc:
        EnvironmentBuilder(runner, identity, logger).build(working_copy)

    assert exc.value.context == "ensurepip is not available"
    assert len(runner.calls) == 1


def test_dependency_failure_is_fatal(working_copy, identity, logger):
    pip = str(working_copy.path / ".venv" / "bin" / "pip")
    runner = FakeRunner().on(pip, result=failed("No matching distribution found"))

    with pytest.raises(EnvironmentBuildError) as exc:
        EnvironmentBuilder(runner, identity, logger).build(working_copy)

    assert "dependencies" in exc.value.message
