"""
Infrastructure package for the sportsbook services.

Centralizes SQLite connectivity concerns (connection factory, shared
connections, timestamp encoding). Keep this layer focused on I/O and resource
management, decoupled from service logic.
"""

from sportsbook.infrastructure.db_factory import (
    ConnectionManager,
    from_db_timestamp,
    get_connection,
    to_db_timestamp,
)

__all__ = [
    "ConnectionManager",
    "from_db_timestamp",
    "get_connection",
    "to_db_timestamp",
]
