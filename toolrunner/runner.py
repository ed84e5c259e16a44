"""Facade wiring tool selection and execution for one task."""

from typing import Optional

from .capabilities.registry import CapabilityRegistry
from .config.settings import ToolRunnerSettings, load_settings
from .context.base import ContextStore
from .context.file_store import FileContextStore
from .execution.callbacks import ToolExecutorCallbacks
from .execution.executor import ToolExecutor
from .execution.options import ExecutorOptions
from .models.state import Task, Understanding
from .selection.backend import ReasoningBackend
from .selection.openai_backend import OpenAIReasoningBackend
from .selection.selector import ToolSelector


class ToolRunner:
    """Selects and executes the tool calls a task needs."""

    def __init__(
        self,
        registry: CapabilityRegistry,
        backend: ReasoningBackend,
        context_store: ContextStore,
        options: Optional[ExecutorOptions] = None
    ):
        self.selector = ToolSelector(registry, backend)
        self.executor = ToolExecutor(registry, context_store, options)

    @classmethod
    def from_settings(
        cls,
        registry: CapabilityRegistry,
        settings: Optional[ToolRunnerSettings] = None
    ) -> "ToolRunner":
        """Build a runner with the OpenAI backend and a file context store."""
        settings = settings or load_settings()
        backend = OpenAIReasoningBackend(
            model=settings.selection_model,
            api_key=settings.openai_api_key,
            timeout=settings.openai_timeout
        )
        return cls(
            registry,
            backend,
            FileContextStore(settings.context_dir),
            ExecutorOptions.from_settings(settings)
        )

    async def run(
        self,
        task: Task,
        understanding: Understanding,
        correlation_id: str,
        callbacks: Optional[ToolExecutorCallbacks] = None
    ) -> bool:
        """Select tools for ``task``, store the list on it, then execute.

        Selection errors propagate; execution failures are reported by the
        return value.
        """
        task.tool_calls = await self.selector.select_tools(task, understanding)
        return await self.executor.execute_tools(task, correlation_id, callbacks)
