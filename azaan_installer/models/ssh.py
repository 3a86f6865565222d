"""
SSH Credential Models

Dataclass models for the deploy keypair and the client host alias.
"""

from dataclasses import dataclass
from pathlib import Path

from azaan_installer.constants import SSH_KEY_ALGORITHM


@dataclass(frozen=True)
class KeypairRef:
    """Location of the deploy keypair for the install user."""

    private_key: Path
    public_key: Path
    algorithm: str = SSH_KEY_ALGORITHM
    created: bool = False

    @property
    def key_exists(self) -> bool:
        """Check if private key file exists."""
        return self.private_key.exists()

    @property
    def public_key_exists(self) -> bool:
        """Check if public key file exists."""
        return self.public_key.exists()

    def __repr__(self) -> str:
        return f"KeypairRef(key={self.private_key}, created={self.created})"


@dataclass(frozen=True)
class SSHHostAlias:
    """Client config entry binding a remote host to one identity file."""

    host: str
    identity_file: Path
    user: str = "git"
    identities_only: bool = True
