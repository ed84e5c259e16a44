"""Configuration options for tool execution."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..config.settings import DEFAULT_MAX_CONCURRENT_TOOL_CALLS, ToolRunnerSettings
from ..reliability.retry import RetryPolicy


class ExecutorOptions(BaseModel):
    """Options for the tool executor."""

    # Concurrency control
    max_concurrent_tool_calls: int = Field(
        default=DEFAULT_MAX_CONCURRENT_TOOL_CALLS,
        description="Maximum number of tool calls running at once (at least 1)"
    )

    # Retry configuration
    retry_policy: RetryPolicy = Field(
        default_factory=RetryPolicy,
        description="Per-call retry policy for transient throttling"
    )

    @field_validator('max_concurrent_tool_calls', mode='before')
    @classmethod
    def clamp_max_concurrent(cls, v: Any) -> int:
        """Unset means the default; anything below 1 is clamped to 1."""
        if v is None:
            return DEFAULT_MAX_CONCURRENT_TOOL_CALLS
        return max(1, int(v))

    @classmethod
    def from_settings(cls, settings: ToolRunnerSettings) -> "ExecutorOptions":
        return cls(max_concurrent_tool_calls=settings.max_concurrent_tool_calls)
