"""In-memory persistence for the identity wallet."""

from .store import InMemoryRecordStore

__all__ = ["InMemoryRecordStore"]
