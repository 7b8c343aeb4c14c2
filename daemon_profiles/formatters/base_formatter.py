"""
Base output formatter - Abstract base class for formatters.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import ServerProfile


class OutputFormatter(ABC):
    """
    Abstract base class for output formatters.

    Design Pattern: Strategy Pattern
    Different formatters for different output styles (list, JSON).
    """

    @abstractmethod
    def format(self, profile: ServerProfile, current_network: Optional[str] = None) -> str:
        """
        Format a profile resolved against a network for output.

        Args:
            profile: Server profile to format
            current_network: Network the profile is resolved against

        Returns:
            Formatted string for output
        """
        pass
