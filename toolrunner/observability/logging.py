"""
Structured logging utility for tool selection and execution.

Every component logs through a ToolLogger so log lines carry the same
``[component=... key=value]`` prefix, which keeps per-task and per-call
records greppable by task_id, correlation_id and tool.
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional


class ToolLogger:
    """Structured logger scoped to one toolrunner component."""

    def __init__(self, component: str):
        """
        Initialize logger for a component.

        Args:
            component: Component name (e.g., "executor", "selector")
        """
        self.component = component
        self.logger = logging.getLogger(f"toolrunner.{component}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"component={self.component}"]

        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")

        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, **kwargs):
        self.logger.debug(self._format_message(message, **kwargs))

    def info(self, message: str, **kwargs):
        self.logger.info(self._format_message(message, **kwargs))

    def warning(self, message: str, error: Optional[BaseException] = None, **kwargs):
        if error is not None:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)
        self.logger.warning(self._format_message(message, **kwargs))

    def error(self, message: str, error: Optional[BaseException] = None, **kwargs):
        """Log error message with structured fields."""
        if error is not None:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)
        self.logger.error(self._format_message(message, **kwargs))

    @contextmanager
    def track_call(self, operation: str, **fields: Any) -> Iterator[Dict[str, Any]]:
        """
        Context manager that logs start, completion and failure of an operation.

        Args:
            operation: Operation name (e.g., "invoke", "select")
            **fields: Structured fields attached to every line

        Yields:
            Dict with the operation metadata, including start_time
        """
        start_time = time.time()
        self.debug(f"Starting {operation}", operation=operation, **fields)

        metadata = dict(fields, operation=operation, start_time=start_time)

        try:
            yield metadata
            duration = time.time() - start_time
            self.info(
                f"Completed {operation}",
                operation=operation,
                duration_ms=int(duration * 1000),
                **fields
            )
        except Exception as e:
            duration = time.time() - start_time
            self.error(
                f"Failed {operation}",
                operation=operation,
                duration_ms=int(duration * 1000),
                error=e,
                **fields
            )
            raise
