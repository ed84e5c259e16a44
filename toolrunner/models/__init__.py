"""Data models for tasks and tool calls."""

from .state import (
    ToolCallState,
    ToolCallStatus,
    Task,
    Entity,
    Understanding,
)

__all__ = [
    "ToolCallState",
    "ToolCallStatus",
    "Task",
    "Entity",
    "Understanding",
]
