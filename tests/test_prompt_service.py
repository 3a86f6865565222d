from __future__ import annotations

import io

import pytest

from azaan_installer.exceptions import TerminalError
from azaan_installer.services import RepositoryFetcher, TtyPrompter
from tests.fakes import FakeSourceControl


def terminal(tmp_path, text):
    tty = tmp_path / "tty"
    tty.write_text(text)
    return str(tty)


def test_reads_answers_from_the_terminal_device(tmp_path, console):
    answer = TtyPrompter(console=console, tty_path=terminal(tmp_path, "kitchen\n")).ask(
        "Enter device hostname", default="mini-azaan"
    )

    assert answer == "kitchen"


def test_empty_answer_takes_the_default(tmp_path, console):
    answer = TtyPrompter(console=console, tty_path=terminal(tmp_path, "\n")).ask(
        "Enter device hostname", default="mini-azaan"
    )

    assert answer == "mini-azaan"


def test_confirm_reads_yes(tmp_path, console):
    prompter = TtyPrompter(console=console, tty_path=terminal(tmp_path, "y\n"))

    assert prompter.confirm("Reboot now?") is True


def test_wait_returns_on_enter(tmp_path, console):
    TtyPrompter(console=console, tty_path=terminal(tmp_path, "\n")).wait(
        "Press Enter to continue"
    )

    assert "Press Enter to continue" in console.file.getvalue()


def test_missing_terminal_is_an_error(tmp_path, console, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    prompter = TtyPrompter(console=console, tty_path=str(tmp_path / "missing"))

    with pytest.raises(TerminalError):
        prompter.wait("Press Enter to continue")


def test_closed_terminal_interrupts(tmp_path, console):
    prompter = TtyPrompter(console=console, tty_path=terminal(tmp_path, ""))

    with pytest.raises(KeyboardInterrupt):
        prompter.wait("Press Enter to continue")


def test_clone_retry_stops_without_a_terminal(tmp_path, console, identity, logger):
    prompter = TtyPrompter(console=console, tty_path=str(tmp_path / "missing"))
    source_control = FakeSourceControl(outcomes=[False] * 5)
    fetcher = RepositoryFetcher(
        source_control,
        tmp_path / "app",
        logger,
        confirm=lambda: prompter.wait("Press Enter to retry"),
        show_deploy_key=lambda: None,
    )

    with pytest.raises(TerminalError):
        fetcher.fetch("git@github.com:zukkybaig/mini-azaan.git", "main", identity)

    assert source_control.clone_count == 1


def test_clone_retry_stops_when_terminal_closes(tmp_path, console, identity, logger):
    prompter = TtyPrompter(console=console, tty_path=terminal(tmp_path, ""))
    source_control = FakeSourceControl(outcomes=[False] * 5)
    fetcher = RepositoryFetcher(
        source_control,
        tmp_path / "app",
        logger,
        confirm=lambda: prompter.wait("Press Enter to retry"),
        show_deploy_key=lambda: None,
    )

    with pytest.raises(KeyboardInterrupt):
        fetcher.fetch("git@github.com:zukkybaig/mini-azaan.git", "main", identity)

    assert source_control.clone_count == 1
