"""Reasoning backend interface and result types."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Literal, Sequence, Union

from pydantic import BaseModel, Field

from ..capabilities.base import Capability


class ProposedCall(BaseModel):
    """One capability call proposed by the reasoning backend."""
    name: str
    args: Dict[str, Any] = Field(default_factory=dict)


class Answer(BaseModel):
    """The backend answered directly without proposing calls."""
    kind: Literal["answer"] = "answer"
    text: str = ""


class ProposedCalls(BaseModel):
    """The backend proposed capability calls, in execution order."""
    kind: Literal["proposed_calls"] = "proposed_calls"
    calls: List[ProposedCall] = Field(default_factory=list)


SelectionResult = Union[Answer, ProposedCalls]


class ReasoningBackend(ABC):
    """Backend that decides which capabilities a task needs."""

    @abstractmethod
    async def select(
        self,
        system_prompt: str,
        prompt: str,
        capabilities: Sequence[Capability]
    ) -> SelectionResult:
        """
        Ask the backend to answer directly or propose capability calls.

        Args:
            system_prompt: Instruction including the capability catalogue
            prompt: Task-specific prompt
            capabilities: Capabilities the backend may call

        Returns:
            Answer or ProposedCalls

        Raises:
            SelectionBackendError: Backend failures (network, timeout,
                malformed response)
        """
        pass


class ScriptedReasoningBackend(ReasoningBackend):
    """Backend returning prepared results in order.

    Used for tests and for replaying a fixed plan.
    """

    def __init__(self, results: Sequence[SelectionResult]):
        self._results = list(results)
        self.requests: List[Dict[str, Any]] = []

    async def select(
        self,
        system_prompt: str,
        prompt: str,
        capabilities: Sequence[Capability]
    ) -> SelectionResult:
        self.requests.append({
            "system_prompt": system_prompt,
            "prompt": prompt,
            "capabilities": [c.name for c in capabilities],
        })
        if not self._results:
            raise IndexError("ScriptedReasoningBackend has no results left")
        return self._results.pop(0)
