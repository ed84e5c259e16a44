"""Observer callbacks for tool call lifecycle events."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, Union

from ..models.state import ToolCallState
from ..observability.logging import ToolLogger

logger = ToolLogger("callbacks")

UpdateCallback = Callable[[str, int, str], Union[None, Awaitable[None]]]
ErrorCallback = Callable[[str, int, str, Dict[str, Any], BaseException], Union[None, Awaitable[None]]]


@dataclass
class ToolExecutorCallbacks:
    """Optional lifecycle callbacks. Sync and async callables are both accepted.

    on_tool_call_update(task_id, index, status)
    on_tool_call_error(task_id, index, tool_name, args, error)
    """
    on_tool_call_update: Optional[UpdateCallback] = None
    on_tool_call_error: Optional[ErrorCallback] = None


class CallbackDispatcher:
    """Delivers callbacks for one task; observer failures are logged, never raised."""

    def __init__(self, callbacks: Optional[ToolExecutorCallbacks], task_id: str):
        self.callbacks = callbacks
        self.task_id = task_id

    async def emit_update(self, index: int, status: ToolCallState) -> None:
        if self.callbacks is None or self.callbacks.on_tool_call_update is None:
            return
        await self._deliver(
            "on_tool_call_update",
            self.callbacks.on_tool_call_update,
            self.task_id, index, ToolCallState(status).value
        )

    async def emit_error(
        self,
        index: int,
        tool_name: str,
        args: Dict[str, Any],
        error: BaseException
    ) -> None:
        if self.callbacks is None or self.callbacks.on_tool_call_error is None:
            return
        await self._deliver(
            "on_tool_call_error",
            self.callbacks.on_tool_call_error,
            self.task_id, index, tool_name, args, error
        )

    async def _deliver(self, event: str, callback: Callable[..., Any], *args: Any) -> None:
        try:
            result = callback(*args)
            if inspect.isawaitable(result):
                await result
        except Exception as e:  # noqa: BLE001
            logger.warning(
                "Callback raised; ignoring",
                error=e,
                event=event,
                task_id=self.task_id,
                index=args[1]
            )
