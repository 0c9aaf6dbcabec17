"""Database adapter for the identity wallet."""

from .manager import (
    DatabaseManager,
    close_database,
    get_database_manager,
    initialize_database,
)

__all__ = [
    "DatabaseManager",
    "initialize_database",
    "get_database_manager",
    "close_database",
]
