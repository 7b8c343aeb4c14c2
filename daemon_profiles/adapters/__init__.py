"""
Daemon adapters - Strategy Pattern.
Each daemon type is served by a DaemonAdapter subclass registered with the AdapterFactory.
"""

from .base_adapter import DaemonAdapter, FingerprintAdapter

__all__ = [
    'DaemonAdapter',
    'FingerprintAdapter',
]
