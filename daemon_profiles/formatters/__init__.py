"""
Output formatters - Strategy Pattern for different output formats.
"""

from .base_formatter import OutputFormatter
from .profile_formatter import ProfileFormatter

__all__ = ['OutputFormatter', 'ProfileFormatter']
