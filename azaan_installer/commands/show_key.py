"""
Show Key Command

Print the deploy key for the install user.
"""

from pathlib import Path
from typing import Optional

import click

from azaan_installer.base import ContextCommand
from azaan_installer.constants import DEPLOY_KEY_INSTRUCTIONS
from azaan_installer.models import ProvisioningContext
from azaan_installer.ui_components import show_boxed


class ShowKeyCommand(ContextCommand):
    """Display the public half of the deploy key."""

    def execute(self) -> str:
        """Execute show-key command."""
        context: ProvisioningContext = self.load_context()
        public_key = context.public_key

        if not public_key.exists():
            self.exit_with_error(
                f"No deploy key at {public_key}. Run the installer first."
            )

        key = public_key.read_text().strip()
        for line in DEPLOY_KEY_INSTRUCTIONS:
            self.console.print(line)
        self.console.print()
        show_boxed([key], title=str(public_key), console=self.console)
        return key


@click.command("show-key")
@click.option(
    "--config",
    "settings_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file overriding installer settings",
)
def show_key(settings_path: Optional[Path]):
    """
    Print the SSH deploy key to add to the repository
    """
    cmd = ShowKeyCommand(settings_path=settings_path)
    cmd.run()
