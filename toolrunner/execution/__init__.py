"""Tool execution: worker pool, retry and lifecycle callbacks."""

from .callbacks import CallbackDispatcher, ToolExecutorCallbacks
from .executor import ClaimCounter, ExecutionSummary, ToolCallResult, ToolExecutor
from .options import ExecutorOptions

__all__ = [
    "CallbackDispatcher",
    "ToolExecutorCallbacks",
    "ClaimCounter",
    "ExecutionSummary",
    "ToolCallResult",
    "ToolExecutor",
    "ExecutorOptions",
]
