"""
Base Command Class

Abstract base for all installer commands.
Provides common functionality and structure.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from rich.console import Console

from azaan_installer.exceptions import InstallerError
from azaan_installer.logger import InstallLogger
from azaan_installer.ui_components import show_header


class BaseCommand(ABC):
    """
    Abstract base command class.

    Provides:
    - Logger initialization
    - Header display
    - Error handling and exit codes
    - Consistent structure
    """

    def __init__(self, verbose: bool = False, console: Optional[Console] = None):
        self.verbose = verbose
        self.console = console or Console()
        self.logger: Optional[InstallLogger] = None

    def init_logger(self, command_name: str, log_dir: Path) -> InstallLogger:
        """
        Initialize command logger.

        Args:
            command_name: Command name (used in the log file name)
            log_dir: Root directory for log files

        Returns:
            InstallLogger instance
        """
        self.logger = InstallLogger(
            command_name, log_dir, verbose=self.verbose, console=self.console
        )
        return self.logger

    def show_header(
        self,
        title: str,
        subtitle: Optional[str] = None,
        details: Optional[dict] = None,
    ) -> None:
        """Show command header (skip in verbose mode)."""
        if not self.verbose:
            show_header(
                title=title,
                subtitle=subtitle,
                details=details,
                console=self.console,
            )

    def print_success(self, message: str) -> None:
        self.console.print(f"[green]✓ {message}[/green]")

    def print_error(self, message: str) -> None:
        self.console.print(f"[red]✗ {message}[/red]")

    def print_warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠ {message}[/yellow]")

    def print_dim(self, message: str) -> None:
        self.console.print(f"[dim]{message}[/dim]")

    def handle_error(self, error: Exception, context: Optional[str] = None) -> None:
        """
        Handle error with consistent formatting.

        Args:
            error: Exception object
            context: Optional context message
        """
        if isinstance(error, InstallerError):
            message, context = error.message, context or error.context
        else:
            message = f"{type(error).__name__}: {error}"

        if self.logger:
            self.logger.log_error(message, context=context)
        else:
            self.console.print(f"\n[bold red]✗ {message}[/bold red]")
            if context:
                self.print_dim(f"Context: {context}")

    def exit_with_error(self, message: str, code: int = 1) -> None:
        """
        Print error and exit.

        Args:
            message: Error message
            code: Exit code
        """
        self.print_error(message)
        raise SystemExit(code)

    def _print_log_location(self) -> None:
        if self.logger:
            self.console.print(f"\n[dim]Logs saved to:[/dim] {self.logger.log_path}\n")

    @abstractmethod
    def execute(self, **kwargs) -> Any:
        """
        Execute command logic.

        Must be implemented by subclasses.
        """
        pass

    def run(self, **kwargs) -> Any:
        """
        Run command with error handling.

        Args:
            **kwargs: Command arguments

        Returns:
            Whatever execute() returns
        """
        try:
            return self.execute(**kwargs)
        except KeyboardInterrupt:
            self.console.print("\n[yellow]⚠️  Operation cancelled by user[/yellow]")
            self._print_log_location()
            raise SystemExit(130)
        except SystemExit:
            raise
        except InstallerError as e:
            self.handle_error(e)
            self._print_log_location()
            raise SystemExit(1)
        except PermissionError as e:
            self.handle_error(e, context="Try running with sudo")
            self._print_log_location()
            raise SystemExit(1)
        except Exception as e:
            self.handle_error(e)
            self._print_log_location()
            raise SystemExit(1)
        finally:
            if self.logger:
                self.logger.close()
