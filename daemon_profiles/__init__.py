"""
Daemon Profiles Package

This package resolves user-configured download daemon server profiles into
display identities, network-dependent endpoints and daemon adapters.

Architecture:
- Value Object Pattern for immutable profiles and settings
- Strategy Pattern for daemon adapters
- Factory Pattern for creating adapters
"""

from .models import ServerProfile, DaemonSettings, Daemon, OS, DEFAULT_NAME
from .adapters import DaemonAdapter
from .repositories import AdapterFactory
from .formatters import ProfileFormatter

__all__ = [
    # Models
    "ServerProfile",
    "DaemonSettings",
    "Daemon",
    "OS",
    "DEFAULT_NAME",
    # Adapters
    "DaemonAdapter",
    # Factory
    "AdapterFactory",
    # Formatters
    "ProfileFormatter",
]
