"""
Utilities package for the sportsbook services.

Exports shared helpers for logging and one-time initialization.
Keep this package lightweight and free of domain-specific logic.
"""

from sportsbook.utils.logging import configure_logging, get_logger
from sportsbook.utils.once import Once

__all__ = [
    "configure_logging",
    "get_logger",
    "Once",
]
