"""
toolrunner - tool-call orchestration for research agents.

A reasoning backend picks which data-retrieval capabilities a task needs;
toolrunner runs those calls and records their results:
- Tool selection from a task description and typed facts
- Bounded-concurrency execution with per-call retry on throttling
- Per-call status tracking and lifecycle callbacks
- Partial-failure aggregation
"""

__version__ = "0.1.0"

from .capabilities import (
    Capability,
    CapabilityRegistry,
    FunctionCapability,
    capability,
    get_global_registry,
)
from .context import ContextRecord, ContextStore, FileContextStore, InMemoryContextStore
from .errors import (
    CapabilityInvocationError,
    CapabilityNotFoundError,
    InvalidTransitionError,
    SelectionBackendError,
    ToolRunnerError,
)
from .execution import ExecutionSummary, ExecutorOptions, ToolExecutor, ToolExecutorCallbacks
from .models import Entity, Task, ToolCallState, ToolCallStatus, Understanding
from .reliability import RetryPolicy
from .runner import ToolRunner
from .selection import (
    Answer,
    OpenAIReasoningBackend,
    ProposedCall,
    ProposedCalls,
    ReasoningBackend,
    ScriptedReasoningBackend,
    ToolSelector,
)

__all__ = [
    # Capabilities
    "Capability",
    "CapabilityRegistry",
    "FunctionCapability",
    "capability",
    "get_global_registry",

    # Context storage
    "ContextRecord",
    "ContextStore",
    "FileContextStore",
    "InMemoryContextStore",

    # Errors
    "CapabilityInvocationError",
    "CapabilityNotFoundError",
    "InvalidTransitionError",
    "SelectionBackendError",
    "ToolRunnerError",

    # Execution
    "ExecutionSummary",
    "ExecutorOptions",
    "ToolExecutor",
    "ToolExecutorCallbacks",
    "RetryPolicy",

    # Models
    "Entity",
    "Task",
    "ToolCallState",
    "ToolCallStatus",
    "Understanding",

    # Selection
    "Answer",
    "OpenAIReasoningBackend",
    "ProposedCall",
    "ProposedCalls",
    "ReasoningBackend",
    "ScriptedReasoningBackend",
    "ToolSelector",

    "ToolRunner",
]
