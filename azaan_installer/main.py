#!/usr/bin/env python3
"""Mini Azaan installer - Main entry point"""

import rich_click as click
from rich.console import Console

from azaan_installer import __version__
from azaan_installer.commands.health import health
from azaan_installer.commands.install import install
from azaan_installer.commands.show_key import show_key

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.MAX_WIDTH = 100

click.rich_click.STYLE_COMMAND = "bold cyan"
click.rich_click.STYLE_OPTION = "bold magenta"
click.rich_click.STYLE_SWITCH = "bold green"
click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_USAGE = "bold yellow"
click.rich_click.STYLE_OPTION_DEFAULT = "dim cyan"
click.rich_click.STYLE_OPTIONS_PANEL_BORDER = "cyan"
click.rich_click.STYLE_COMMANDS_PANEL_BORDER = "cyan"

console = Console()

BANNER = """
[bold cyan]╔═══════════════════════════════════════════════╗[/bold cyan]
[bold cyan]║[/bold cyan]  [bold white]Mini Azaan[/bold white] - Raspberry Pi installer         [bold cyan]║[/bold cyan]
[bold cyan]╚═══════════════════════════════════════════════╝[/bold cyan]
"""


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """
    Mini Azaan installer - provision this Raspberry Pi with the azaan service.

    \b
    Quick Start:
      sudo mini-azaan-install            # Full install (same as 'install')
      sudo mini-azaan-install health     # Is the service running?
      sudo mini-azaan-install show-key   # Print the deploy key
    """
    if ctx.invoked_subcommand is None:
        console.print(BANNER)
        ctx.invoke(install)


cli.add_command(install)
cli.add_command(health)
cli.add_command(show_key)


def main():
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
