"""Operator prompts read from the controlling terminal."""

from contextlib import contextmanager
from typing import Iterator, Optional, Protocol, TextIO

from rich.console import Console
from rich.prompt import Confirm, Prompt

from azaan_installer.exceptions import TerminalError

TTY_PATH = "/dev/tty"


class Prompter(Protocol):
    """Interactive questions the installer asks the operator."""

    def wait(self, message: str) -> None: ...

    def ask(self, question: str, default: str) -> str: ...

    def confirm(self, question: str, default: bool = False) -> bool: ...


class _TerminalReader:
    """Line reader that treats end-of-file as the operator hanging up."""

    def __init__(self, tty: TextIO):
        self.tty = tty

    def readline(self) -> str:
        line = self.tty.readline()
        if not line:
            raise EOFError("terminal closed")
        return line


class TtyPrompter:
    """
    Reads answers from /dev/tty so prompts work when the installer itself is
    piped (curl ... | sudo bash style). Redirected stdin is never read: without
    a terminal there is no operator, and the run stops.
    """

    def __init__(self, console: Optional[Console] = None, tty_path: str = TTY_PATH):
        self.console = console or Console()
        self.tty_path = tty_path

    @contextmanager
    def _stream(self) -> Iterator[_TerminalReader]:
        try:
            tty = open(self.tty_path)
        except OSError as e:
            raise TerminalError(
                f"Cannot read operator input from {self.tty_path}",
                context=f"{e.strerror or e}. Run the installer from an interactive terminal.",
            ) from e

        with tty:
            try:
                yield _TerminalReader(tty)
            except EOFError:
                raise KeyboardInterrupt from None

    def wait(self, message: str) -> None:
        """Block until the operator presses Enter."""
        with self._stream() as stream:
            Prompt.ask(
                f"[bold]{message}[/bold]",
                console=self.console,
                default="",
                show_default=False,
                stream=stream,
            )

    def ask(self, question: str, default: str) -> str:
        with self._stream() as stream:
            answer = Prompt.ask(
                question, console=self.console, default=default, stream=stream
            )
        return answer.strip() or default

    def confirm(self, question: str, default: bool = False) -> bool:
        with self._stream() as stream:
            return Confirm.ask(
                question, console=self.console, default=default, stream=stream
            )
