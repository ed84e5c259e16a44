"""Tool selection.

Turns a task description plus typed facts into an ordered list of pending
tool calls by asking a reasoning backend bound to every registered
capability.
"""

from typing import List

from .backend import Answer, ProposedCalls, ReasoningBackend
from .prompts import (
    build_tool_selection_prompt,
    format_tool_descriptions,
    get_tool_selection_system_prompt,
)
from ..capabilities.registry import CapabilityRegistry
from ..models.state import Task, ToolCallState, ToolCallStatus, Understanding
from ..observability.logging import ToolLogger

logger = ToolLogger("selector")


class ToolSelector:
    """Selects tool calls for a task with a single backend round-trip."""

    def __init__(self, registry: CapabilityRegistry, backend: ReasoningBackend):
        self.registry = registry
        self.backend = backend

    async def select_tools(self, task: Task, understanding: Understanding) -> List[ToolCallStatus]:
        """
        Select tool calls for a task.

        Backend errors propagate unchanged and are not retried. The task
        itself is not modified.

        Args:
            task: Task to select tools for
            understanding: Typed facts extracted from the query

        Returns:
            Tool calls in the backend's proposed order, all pending. Empty
            when the backend answered directly.
        """
        tickers = understanding.values_of("ticker")
        periods = understanding.values_of("period")

        capabilities = list(self.registry)
        prompt = build_tool_selection_prompt(task.description, tickers, periods)
        system_prompt = get_tool_selection_system_prompt(format_tool_descriptions(capabilities))

        with logger.track_call("select", task_id=task.id):
            result = await self.backend.select(system_prompt, prompt, capabilities)

        if isinstance(result, Answer):
            logger.info("Backend answered without tool calls", task_id=task.id)
            return []

        if isinstance(result, ProposedCalls):
            tool_calls = [
                ToolCallStatus(tool=call.name, args=dict(call.args), status=ToolCallState.PENDING)
                for call in result.calls
            ]
            unknown = [tc.tool for tc in tool_calls if not self.registry.has(tc.tool)]
            if unknown:
                # Kept in the plan; the executor fails them as not found
                logger.warning("Backend proposed unregistered capabilities", task_id=task.id, tools=",".join(unknown))
            logger.info(
                "Selected tool calls",
                task_id=task.id,
                count=len(tool_calls),
                tools=",".join(tc.tool for tc in tool_calls) or None
            )
            return tool_calls

        raise TypeError(f"Unsupported selection result: {type(result).__name__}")
