"""
Installer Exception Hierarchy

Clean exception hierarchy for consistent error handling across the installer.
"""

from typing import Optional


class InstallerError(Exception):
    """Base exception for all installer errors."""

    def __init__(self, message: str, context: Optional[str] = None):
        self.message = message
        self.context = context
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with optional context."""
        if self.context:
            return f"{self.message}\nContext: {self.context}"
        return self.message


class PrivilegeError(InstallerError):
    """Raised when the installer is not running as root."""

    pass


class IdentityError(InstallerError):
    """Raised when the invoking user or its home directory cannot be resolved."""

    def __init__(self, username: str, reason: str = "no home directory"):
        self.username = username
        message = f"Could not resolve home directory for user: {username}"
        super().__init__(message, context=reason)


class ConfigurationError(InstallerError):
    """Raised when installer settings are invalid or missing."""

    pass


class ValidationError(InstallerError):
    """Raised when operator input fails validation."""

    pass


class PackageInstallError(InstallerError):
    """Raised when OS package installation fails."""

    pass


class EnvironmentBuildError(InstallerError):
    """Raised when the virtual environment cannot be built."""

    pass


class ServiceError(InstallerError):
    """Raised when the supervisor rejects a unit operation."""

    def __init__(self, service_name: str, action: str, detail: Optional[str] = None):
        self.service_name = service_name
        self.action = action
        message = f"Failed to {action} service '{service_name}'"
        super().__init__(message, context=detail or None)


class CredentialError(InstallerError):
    """Raised when the deploy keypair cannot be generated."""

    pass


class TerminalError(InstallerError):
    """Raised when no controlling terminal is available for operator input."""

    pass
