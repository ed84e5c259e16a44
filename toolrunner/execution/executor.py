"""Tool execution.

Runs a task's selected tool calls through a bounded pool of asyncio
workers. Each call is retried on transient throttling, its result saved to
the context store, and its lifecycle reported through callbacks. Individual
failures never raise; they surface as call status, callbacks and the
aggregate return value.
"""

import asyncio
import itertools
import time
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional

from .callbacks import CallbackDispatcher, ToolExecutorCallbacks
from .options import ExecutorOptions
from ..capabilities.registry import CapabilityRegistry
from ..context.base import ContextStore
from ..errors import CapabilityNotFoundError
from ..models.state import Task, ToolCallState
from ..observability.logging import ToolLogger
from ..reliability.retry import RetryManager, RetryState

logger = ToolLogger("executor")


@dataclass
class ToolCallResult:
    """Outcome of one tool call."""
    index: int
    tool: str
    status: ToolCallState
    attempts: int = 0
    duration_ms: int = 0
    error: Optional[BaseException] = None


@dataclass
class ExecutionSummary:
    """Outcome of executing one task's tool calls."""
    task_id: str
    succeeded: bool = True
    results: List[ToolCallResult] = field(default_factory=list)

    @property
    def failed_indices(self) -> List[int]:
        return [r.index for r in self.results if r.status is ToolCallState.FAILED]


class ClaimCounter:
    """Hands out each index in ``range(total)`` exactly once.

    Claiming has no await point, so workers on one event loop can never
    observe the same value.
    """

    def __init__(self, total: int):
        self.total = total
        self._counter = itertools.count()

    def claim(self) -> Optional[int]:
        index = next(self._counter)
        if index >= self.total:
            return None
        return index


class ToolExecutor:
    """Executes selected tool calls with bounded concurrency and retry."""

    def __init__(
        self,
        registry: CapabilityRegistry,
        context_store: ContextStore,
        options: Optional[ExecutorOptions] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep
    ):
        self.registry = registry
        self.context_store = context_store
        self.options = options or ExecutorOptions()
        self.retry_manager = RetryManager(self.options.retry_policy, sleep=sleep)

    async def execute_tools(
        self,
        task: Task,
        correlation_id: str,
        callbacks: Optional[ToolExecutorCallbacks] = None
    ) -> bool:
        """
        Execute the task's tool calls and save results to context.

        Returns:
            True if every tool call succeeded, False if any failed
        """
        summary = await self.execute_tools_with_summary(task, correlation_id, callbacks)
        return summary.succeeded

    async def execute_tools_with_summary(
        self,
        task: Task,
        correlation_id: str,
        callbacks: Optional[ToolExecutorCallbacks] = None
    ) -> ExecutionSummary:
        """Execute the task's tool calls and report per-call outcomes."""
        summary = ExecutionSummary(task_id=task.id)
        tool_calls = task.tool_calls
        if not tool_calls:
            return summary

        total = len(tool_calls)
        pool_size = max(1, min(self.options.max_concurrent_tool_calls, total))
        claims = ClaimCounter(total)
        dispatcher = CallbackDispatcher(callbacks, task.id)
        results: List[Optional[ToolCallResult]] = [None] * total

        logger.info(
            "Executing tool calls",
            task_id=task.id,
            correlation_id=correlation_id,
            calls=total,
            workers=pool_size
        )

        async def worker() -> None:
            while True:
                index = claims.claim()
                if index is None:
                    return
                result = await self._run_call(task, index, correlation_id, dispatcher)
                results[index] = result
                if result.status is ToolCallState.FAILED:
                    summary.succeeded = False

        await asyncio.gather(*(worker() for _ in range(pool_size)))

        summary.results = [r for r in results if r is not None]
        logger.info(
            "Finished tool calls",
            task_id=task.id,
            correlation_id=correlation_id,
            succeeded=summary.succeeded,
            failed=len(summary.failed_indices)
        )
        return summary

    async def _run_call(
        self,
        task: Task,
        index: int,
        correlation_id: str,
        dispatcher: CallbackDispatcher
    ) -> ToolCallResult:
        tool_call = task.tool_calls[index]
        log_fields: Dict[str, Any] = {"task_id": task.id, "index": index, "tool": tool_call.tool}

        if tool_call.status is not ToolCallState.PENDING:
            # Terminal calls from an earlier run are reported, not re-run
            logger.warning("Skipping tool call that is not pending", status=tool_call.status.value, **log_fields)
            return ToolCallResult(index=index, tool=tool_call.tool, status=tool_call.status)

        tool_call.transition(ToolCallState.RUNNING)
        await dispatcher.emit_update(index, ToolCallState.RUNNING)

        state = RetryState()
        start_time = time.time()
        try:
            capability = self.registry.get(tool_call.tool)
            if capability is None:
                raise CapabilityNotFoundError(tool_call.tool)

            result = await self.retry_manager.execute_with_retry(
                lambda: capability.invoke(tool_call.args),
                state,
                **log_fields
            )

            # Stores may block on file I/O
            await asyncio.to_thread(
                self.context_store.save, tool_call.tool, tool_call.args, result, None, correlation_id
            )
        except Exception as e:  # noqa: BLE001
            duration_ms = int((time.time() - start_time) * 1000)
            logger.error(
                "Tool call failed",
                error=e,
                attempts=state.attempts,
                duration_ms=duration_ms,
                **log_fields
            )
            tool_call.transition(ToolCallState.FAILED)
            await dispatcher.emit_update(index, ToolCallState.FAILED)
            await dispatcher.emit_error(index, tool_call.tool, tool_call.args, e)
            return ToolCallResult(
                index=index,
                tool=tool_call.tool,
                status=ToolCallState.FAILED,
                attempts=state.attempts,
                duration_ms=duration_ms,
                error=e
            )

        duration_ms = int((time.time() - start_time) * 1000)
        tool_call.transition(ToolCallState.COMPLETED)
        logger.debug("Tool call completed", attempts=state.attempts, duration_ms=duration_ms, **log_fields)
        await dispatcher.emit_update(index, ToolCallState.COMPLETED)
        return ToolCallResult(
            index=index,
            tool=tool_call.tool,
            status=ToolCallState.COMPLETED,
            attempts=state.attempts,
            duration_ms=duration_ms
        )
