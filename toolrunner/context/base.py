"""Context storage interface for tool call results."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field
import time


class ContextRecord(BaseModel):
    """One stored tool call outcome."""
    tool_name: str
    args: Dict[str, Any] = Field(default_factory=dict)
    result: Any = None
    error: Optional[str] = None
    correlation_id: str
    timestamp: float = Field(default_factory=time.time)


class ContextStore(ABC):
    """Append-only sink for tool call results.

    Implementations must accept concurrent saves for distinct calls under
    one correlation id.
    """

    @abstractmethod
    def save(
        self,
        tool_name: str,
        args: Dict[str, Any],
        result: Any,
        error: Optional[BaseException],
        correlation_id: str
    ) -> None:
        """Persist the outcome of one tool call."""
        pass
