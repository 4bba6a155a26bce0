"""Adapters - implementations of ports."""

from .memory_store import InMemoryTaskStore

__all__ = [
    "InMemoryTaskStore",
]
