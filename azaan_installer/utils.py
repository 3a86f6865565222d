"""
Installer Utilities

Stub rendering and filesystem ownership helpers shared by the services.
"""

import os
from pathlib import Path
from typing import Any

from jinja2 import Template

from azaan_installer.models.context import Identity

STUBS_DIR = Path(__file__).parent / "stubs"


def load_stub(relative_path: str) -> str:
    """
    Load a template stub shipped with the installer.

    Args:
        relative_path: Path below the stubs directory (e.g. "ssh/config.j2")

    Returns:
        Template file contents

    Raises:
        FileNotFoundError: If stub doesn't exist
    """
    stub_file = STUBS_DIR / relative_path
    if not stub_file.exists():
        raise FileNotFoundError(f"Template stub not found: {stub_file}")
    return stub_file.read_text(encoding="utf-8")


def render_stub(relative_path: str, **variables: Any) -> str:
    """Render a stub with jinja2."""
    return Template(load_stub(relative_path), keep_trailing_newline=True).render(
        **variables
    )


def give_to(path: Path, identity: Identity, mode: int = None) -> None:
    """Chown a path to the install user and optionally chmod it."""
    os.chown(path, identity.uid, identity.gid)
    if mode is not None:
        os.chmod(path, mode)


def give_tree_to(root: Path, identity: Identity) -> None:
    """Recursively chown a directory tree to the install user (chown -R)."""
    give_to(root, identity)
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            os.chown(
                os.path.join(dirpath, name),
                identity.uid,
                identity.gid,
                follow_symlinks=False,
            )
