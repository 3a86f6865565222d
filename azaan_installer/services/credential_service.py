"""Credential service for the SSH deploy key, host trust and client alias."""

import socket
from typing import Callable

from azaan_installer.constants import (
    KEY_COMMENT_PREFIX,
    KNOWN_HOSTS_MODE,
    SSH_CONFIG_MODE,
    SSH_DIR_MODE,
    SSH_KEY_ALGORITHM,
)
from azaan_installer.exceptions import CredentialError
from azaan_installer.logger import InstallLogger
from azaan_installer.models.context import Identity, ProvisioningContext
from azaan_installer.models.ssh import KeypairRef, SSHHostAlias
from azaan_installer.services.command_runner import Runner
from azaan_installer.utils import give_to, render_stub


class CredentialService:
    """
    Ensures the install user has a deploy key GitHub can be told about.

    - Generates an ed25519 keypair once, never regenerates it
    - Records the remote host key in known_hosts (upsert)
    - Pins the remote host to the deploy key in ~/.ssh/config
    """

    def __init__(
        self,
        context: ProvisioningContext,
        runner: Runner,
        logger: InstallLogger,
        device_hostname: Callable[[], str] = socket.gethostname,
    ):
        """
        Initialize credential service.

        Args:
            context: Provisioning context
            runner: Command runner for ssh-keygen / ssh-keyscan
            logger: Install logger
            device_hostname: Returns the current device hostname
        """
        self.context = context
        self.runner = runner
        self.logger = logger
        self.device_hostname = device_hostname

    def keypair(self) -> KeypairRef:
        """Reference to the canonical keypair, without touching it."""
        return KeypairRef(
            private_key=self.context.private_key,
            public_key=self.context.public_key,
        )

    def ensure_credential(self, identity: Identity) -> KeypairRef:
        """
        Make sure the deploy keypair, host trust and client alias exist.

        Args:
            identity: The install user

        Returns:
            KeypairRef (created=True if generated on this run)
        """
        ssh_dir = identity.ssh_dir
        ssh_dir.mkdir(parents=True, exist_ok=True)
        give_to(ssh_dir, identity, SSH_DIR_MODE)

        keypair = self.keypair()
        created = False

        # Private key presence is the only existence check.
        if not keypair.key_exists:
            self._generate_keypair(identity, keypair)
            created = True
        else:
            self.logger.log(f"Keypair already present: {keypair.private_key}")
            if not keypair.public_key_exists:
                self.logger.warning(
                    f"Public key missing next to existing private key: {keypair.public_key}"
                )

        self._trust_remote_host(identity)
        self._write_host_alias(identity, keypair)

        return KeypairRef(
            private_key=keypair.private_key,
            public_key=keypair.public_key,
            algorithm=keypair.algorithm,
            created=created,
        )

    def public_key_text(self) -> str:
        """Public key contents for the operator to paste into GitHub."""
        return self.context.public_key.read_text().strip()

    def _generate_keypair(self, identity: Identity, keypair: KeypairRef) -> None:
        comment = f"{KEY_COMMENT_PREFIX}-{identity.username}@{self.device_hostname()}"
        result = self.runner.run(
            [
                "ssh-keygen",
                "-t",
                SSH_KEY_ALGORITHM,
                "-N",
                "",
                "-f",
                str(keypair.private_key),
                "-C",
                comment,
            ],
            description="Generating deploy key",
            user=identity.username,
        )
        if result.is_failure:
            raise CredentialError(
                "ssh-keygen failed to generate the deploy key",
                context=result.stderr.strip() or str(keypair.private_key),
            )
        self.logger.success(f"Generated {SSH_KEY_ALGORITHM} deploy key ({comment})")

    def _is_trusted(self, host: str) -> bool:
        known_hosts = self.context.known_hosts
        if not known_hosts.exists():
            return False
        result = self.runner.run(
            ["ssh-keygen", "-F", host, "-f", str(known_hosts)],
            description=f"Looking up {host} in known_hosts",
        )
        return result.is_success and bool(result.stdout.strip())

    def _trust_remote_host(self, identity: Identity) -> None:
        """Append the remote host key unless already trusted. Never fatal."""
        host = self.context.settings.remote_host
        known_hosts = self.context.known_hosts

        try:
            if self._is_trusted(host):
                self.logger.log(f"{host} already in {known_hosts}")
            else:
                result = self.runner.run(
                    ["ssh-keyscan", "-H", host],
                    description=f"Scanning {host} host key",
                    user=identity.username,
                )
                if result.is_success and result.stdout.strip():
                    with open(known_hosts, "a") as f:
                        f.write(result.stdout.rstrip("\n") + "\n")
                    self.logger.success(f"Trusted host key for {host}")
                else:
                    self.logger.warning(
                        f"Could not scan host key for {host}; continuing"
                    )

            if known_hosts.exists():
                give_to(known_hosts, identity, KNOWN_HOSTS_MODE)
        except OSError as e:
            self.logger.warning(f"Could not update {known_hosts}: {e}")

    def _write_host_alias(self, identity: Identity, keypair: KeypairRef) -> None:
        alias = SSHHostAlias(
            host=self.context.settings.remote_host,
            identity_file=keypair.private_key,
        )
        ssh_config = self.context.ssh_config
        ssh_config.write_text(render_stub("ssh/config.j2", alias=alias))
        give_to(ssh_config, identity, SSH_CONFIG_MODE)
        self.logger.log(f"Wrote SSH host alias for {alias.host} to {ssh_config}")
