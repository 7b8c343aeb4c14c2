"""
Data models and value objects.
Immutable profile and connection settings plus the enumerations they use.
"""

from .daemon_type import Daemon, OS
from .daemon_settings import DaemonSettings
from .server_profile import ServerProfile, DEFAULT_NAME

__all__ = ['Daemon', 'OS', 'DaemonSettings', 'ServerProfile', 'DEFAULT_NAME']
