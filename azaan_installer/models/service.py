"""
Service Definition Model

Declarative description of the supervised background service.
"""

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class ServiceDefinition:
    """Everything needed to render the systemd unit."""

    name: str
    description: str
    user: str
    working_directory: str
    exec_start: str
    restart: str = "always"
    restart_sec: int = 5
    after: str = "network-online.target"
    wanted_by: str = "multi-user.target"
    environment: Dict[str, str] = field(
        default_factory=lambda: {"PYTHONUNBUFFERED": "1"}
    )
