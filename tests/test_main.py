from click.testing import CliRunner

from azaan_installer import __version__
from azaan_installer.main import cli


def test_help_lists_commands():
    result = CliRunner().invoke(cli, ["--help"])

    assert result.exit_code == 0
    for name in ("install", "health", "show-key"):
        assert name in result.output


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_missing_config_file_is_a_usage_error(tmp_path):
    result = CliRunner().invoke(cli, ["install", "--config", str(tmp_path / "nope.yml")])

    assert result.exit_code == 2
