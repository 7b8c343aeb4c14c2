"""
Repository layer - Factory and Registry patterns.
"""

from .adapter_factory import AdapterFactory

__all__ = ['AdapterFactory']
