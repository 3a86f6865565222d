"""
Installer Domain Models

Clean dataclass-based models for type-safe data handling.
"""

from .results import (
    ExecutionResult,
    SeedOutcome,
    WorkingCopy,
    RuntimeEnv,
    HostnameResult,
    HealthReport,
    DeviceInfo,
)
from .ssh import (
    KeypairRef,
    SSHHostAlias,
)
from .service import ServiceDefinition
from .context import (
    Identity,
    InstallSettings,
    ProvisioningContext,
)

__all__ = [
    # Results
    "ExecutionResult",
    "SeedOutcome",
    "WorkingCopy",
    "RuntimeEnv",
    "HostnameResult",
    "HealthReport",
    "DeviceInfo",
    # SSH
    "KeypairRef",
    "SSHHostAlias",
    # Service
    "ServiceDefinition",
    # Context
    "Identity",
    "InstallSettings",
    "ProvisioningContext",
]
