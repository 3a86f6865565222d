from __future__ import annotations

import pytest

from azaan_installer.exceptions import ValidationError
from azaan_installer.services import HostnameConfigurator, validate_hostname
from tests.fakes import log_text


@pytest.fixture
def user_data(settings):
    settings.firmware_user_data.parent.mkdir(parents=True)
    return settings.firmware_user_data


def test_replaces_existing_directive(user_data, logger):
    user_data.write_text("#cloud-config\nhostname: raspberrypi\nmanage_etc_hosts: true\n")

    result = HostnameConfigurator(user_data, logger).set_hostname("kitchen-azaan")

    assert result.persisted is True
    assert result.applied_immediately is False
    assert user_data.read_text() == (
        "#cloud-config\nhostname: kitchen-azaan\nmanage_etc_hosts: true\n"
    )


def test_replaces_indented_directive(user_data, logger):
    user_data.write_text("#cloud-config\n  hostname: raspberrypi\n")

    HostnameConfigurator(user_data, logger).set_hostname("mini-azaan")

    assert user_data.read_text() == "#cloud-config\nhostname: mini-azaan\n"


def test_appends_when_absent(user_data, logger):
    user_data.write_text("#cloud-config\nusers: []\n")

    HostnameConfigurator(user_data, logger).set_hostname("mini-azaan")

    assert user_data.read_text() == "#cloud-config\nusers: []\n\nhostname: mini-azaan\n"


def test_missing_firmware_file_warns_and_does_not_create(settings, logger):
    result = HostnameConfigurator(settings.firmware_user_data, logger).set_hostname(
        "mini-azaan"
    )

    assert result.name == "mini-azaan"
    assert result.persisted is False
    assert not settings.firmware_user_data.exists()
    assert "Hostname will not be persisted" in log_text(logger)


@pytest.mark.parametrize("name", ["", "-azaan", "azaan-", "mini_azaan", "a" * 64, "mini.azaan"])
def test_invalid_hostnames_rejected(name):
    with pytest.raises(ValidationError):
        validate_hostname(name)


def test_valid_hostname_is_stripped():
    assert validate_hostname("  Azaan-2 ") == "Azaan-2"
