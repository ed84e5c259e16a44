"""Context storage for tool call results."""

from .base import ContextRecord, ContextStore
from .memory import InMemoryContextStore
from .file_store import FileContextStore

__all__ = [
    "ContextRecord",
    "ContextStore",
    "InMemoryContextStore",
    "FileContextStore",
]
