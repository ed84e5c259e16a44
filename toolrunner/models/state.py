"""Task and tool call state models."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..errors import InvalidTransitionError


class ToolCallState(str, Enum):
    """Lifecycle state of a single tool call."""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (ToolCallState.COMPLETED, ToolCallState.FAILED)


_ALLOWED_TRANSITIONS = {
    ToolCallState.PENDING: {ToolCallState.RUNNING},
    ToolCallState.RUNNING: {ToolCallState.COMPLETED, ToolCallState.FAILED},
    ToolCallState.COMPLETED: set(),
    ToolCallState.FAILED: set(),
}


class ToolCallStatus(BaseModel):
    """A proposed capability call and its lifecycle state."""
    tool: str
    args: Dict[str, Any] = Field(default_factory=dict)
    status: ToolCallState = ToolCallState.PENDING

    def transition(self, new_state: ToolCallState) -> None:
        """Move to ``new_state``.

        Raises:
            InvalidTransitionError: If the state machine forbids the move
        """
        new_state = ToolCallState(new_state)
        if new_state not in _ALLOWED_TRANSITIONS[self.status]:
            raise InvalidTransitionError(self.status.value, new_state.value)
        self.status = new_state


class Task(BaseModel):
    """A unit of work with an ordered list of proposed tool calls.

    ``tool_calls`` stays None until selection has run. Positions in the
    list identify calls in every later status update.
    """
    id: str
    description: str
    tool_calls: Optional[List[ToolCallStatus]] = None


class Entity(BaseModel):
    """A typed fact extracted from the user's query."""
    type: str
    value: str


class Understanding(BaseModel):
    """Structured hints about a query, used to steer tool selection."""
    intent: Optional[str] = None
    entities: List[Entity] = Field(default_factory=list)

    def values_of(self, entity_type: str) -> List[str]:
        """Return the values tagged ``entity_type``, first occurrence order."""
        seen: List[str] = []
        for entity in self.entities:
            if entity.type == entity_type and entity.value not in seen:
                seen.append(entity.value)
        return seen
