"""
Installer UI Components & Branding
Standardized headers and panels
"""

from rich.console import Console
from rich.panel import Panel

LOGO = "mini-azaan"

# Color scheme
BRAND_COLOR = "cyan"
SUCCESS_COLOR = "green"
WARNING_COLOR = "yellow"
ERROR_COLOR = "red"


def show_header(
    title: str,
    subtitle: str = None,
    details: dict = None,
    console: Console = None,
):
    """
    Display a standardized installer header.

    Args:
        title: Main title (e.g., "Install", "Health Check")
        subtitle: Optional subtitle line
        details: Additional key-value pairs to display
        console: Rich Console instance (creates new if None)

    Example:
        show_header(
            title="Install",
            details={"User": "pi", "Ref": "main"}
        )
    """
    if console is None:
        console = Console()

    prefix = f" [bold color(214)]{LOGO}[/bold color(214)] [dim]›[/dim]"

    console.print(f"{prefix} [bold white]{title}[/bold white]")

    if subtitle:
        console.print(f"{prefix} [dim]{subtitle}[/dim]")

    if details:
        for key, value in details.items():
            console.print(f"{prefix} {key}: [cyan]{value}[/cyan]")

    console.print()


def show_boxed(lines: list, title: str = None, border_color: str = BRAND_COLOR, console: Console = None):
    """Print lines inside a bordered panel."""
    if console is None:
        console = Console()
    console.print(
        Panel(
            "\n".join(lines),
            title=title,
            title_align="left",
            border_style=border_color,
            expand=False,
        )
    )
