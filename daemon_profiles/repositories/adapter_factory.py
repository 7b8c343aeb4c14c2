"""
Adapter Factory - Factory Pattern implementation.
Creates daemon adapter instances based on daemon type.
"""

import logging
from typing import Dict, List, Optional, Type

from ..adapters import DaemonAdapter
from ..models import Daemon, DaemonSettings

logger = logging.getLogger(__name__)


class AdapterFactory:
    """
    Factory for creating daemon adapter instances.

    Design Pattern: Factory Pattern + Registry Pattern
    Keeps a daemon type -> adapter class registry and creates adapters on demand.
    A ServerProfile hands its resolved DaemonSettings to create_adapter().
    """

    def __init__(self, adapters: Optional[Dict[Daemon, Type[DaemonAdapter]]] = None):
        """
        Initialize factory.

        Args:
            adapters: Optional initial registry of adapter classes
        """
        self._adapters: Dict[Daemon, Type[DaemonAdapter]] = dict(adapters or {})

    def create_adapter(self, daemon_type: Daemon, settings: DaemonSettings) -> DaemonAdapter:
        """
        Create a daemon adapter instance.

        Args:
            daemon_type: Type of daemon
            settings: Resolved connection parameters

        Returns:
            Adapter instance bound to the settings

        Raises:
            ValueError: If no adapter is registered for the daemon type
        """
        adapter_class = self._adapters.get(daemon_type)

        if not adapter_class:
            raise ValueError(f"No adapter registered for daemon type: {daemon_type}")

        logger.debug(f"Creating adapter for daemon: {daemon_type}")
        return adapter_class(settings)

    def is_supported(self, daemon_type: Daemon) -> bool:
        return daemon_type in self._adapters

    def get_supported_daemons(self) -> List[Daemon]:
        """
        Get list of daemons with a registered adapter.

        Returns:
            List of Daemon values
        """
        return list(self._adapters.keys())

    def register_adapter(self, daemon_type: Daemon, adapter_class: Type[DaemonAdapter]):
        """
        Register an adapter class (replacing any previous one for the type).

        Args:
            daemon_type: Daemon type
            adapter_class: Adapter class to register
        """
        self._adapters[daemon_type] = adapter_class
        logger.info(f"Registered adapter for daemon: {daemon_type}")
