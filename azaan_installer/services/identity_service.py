"""Resolve the privileged invocation and the user the app is installed for."""

import os
import pwd
from pathlib import Path
from typing import Callable, Mapping, Optional

from azaan_installer.constants import DEFAULT_RUN_USER
from azaan_installer.exceptions import IdentityError, PrivilegeError
from azaan_installer.models.context import Identity


def require_root(geteuid: Callable[[], int] = os.geteuid) -> None:
    """
    Abort unless running with root privileges.

    Raises:
        PrivilegeError: If effective uid is not 0
    """
    if geteuid() != 0:
        raise PrivilegeError(
            "Please run as root.", context="Try: sudo mini-azaan-install"
        )


def resolve_identity(
    environ: Optional[Mapping[str, str]] = None,
    default_user: str = DEFAULT_RUN_USER,
    getpwnam: Callable[[str], pwd.struct_passwd] = pwd.getpwnam,
) -> Identity:
    """
    Determine the non-root user who invoked the installer.

    Args:
        environ: Environment to read SUDO_USER from (os.environ if None)
        default_user: User assumed when not invoked through sudo
        getpwnam: Password database lookup

    Returns:
        Identity with home directory and numeric ids

    Raises:
        IdentityError: If the user is unknown or has no home directory
    """
    if environ is None:
        environ = os.environ

    username = environ.get("SUDO_USER") or default_user

    try:
        entry = getpwnam(username)
    except KeyError:
        raise IdentityError(username, reason="user not found in password database")

    if not entry.pw_dir:
        raise IdentityError(username)

    return Identity(
        username=username,
        home=Path(entry.pw_dir),
        uid=entry.pw_uid,
        gid=entry.pw_gid,
    )
