"""
Installer Base Command Classes

Abstract base classes for consistent command structure.
"""

from .base_command import BaseCommand
from .context_command import Adapters, ContextCommand

__all__ = [
    "BaseCommand",
    "ContextCommand",
    "Adapters",
]
