"""Tests for executor options and callback dispatch."""

import pytest
from pydantic import ValidationError

from toolrunner.config.settings import ToolRunnerSettings
from toolrunner.execution.callbacks import CallbackDispatcher, ToolExecutorCallbacks
from toolrunner.execution.options import ExecutorOptions
from toolrunner.models.state import ToolCallState
from toolrunner.reliability.retry import RetryPolicy


class TestExecutorOptions:
    """Test ExecutorOptions validation."""

    def test_defaults(self):
        options = ExecutorOptions()
        assert options.max_concurrent_tool_calls == 3
        assert options.retry_policy.max_attempts == 3

    def test_none_means_default(self):
        assert ExecutorOptions(max_concurrent_tool_calls=None).max_concurrent_tool_calls == 3

    @pytest.mark.parametrize("value,expected", [(0, 1), (-4, 1), (1, 1), (8, 8)])
    def test_clamped_to_at_least_one(self, value, expected):
        assert ExecutorOptions(max_concurrent_tool_calls=value).max_concurrent_tool_calls == expected

    def test_from_settings(self):
        settings = ToolRunnerSettings(max_concurrent_tool_calls=5)
        assert ExecutorOptions.from_settings(settings).max_concurrent_tool_calls == 5

    def test_retry_policy_rejects_zero_attempts(self):
        with pytest.raises(ValidationError):
            ExecutorOptions(retry_policy=RetryPolicy(max_attempts=0))


class TestCallbackDispatcher:
    """Test callback delivery."""

    @pytest.mark.asyncio
    async def test_no_callbacks_is_noop(self):
        dispatcher = CallbackDispatcher(None, "t")
        await dispatcher.emit_update(0, ToolCallState.RUNNING)
        await dispatcher.emit_error(0, "tool", {}, RuntimeError("x"))

    @pytest.mark.asyncio
    async def test_status_delivered_as_string(self):
        seen = []
        dispatcher = CallbackDispatcher(
            ToolExecutorCallbacks(on_tool_call_update=lambda *a: seen.append(a)),
            "t"
        )

        await dispatcher.emit_update(2, ToolCallState.COMPLETED)

        assert seen == [("t", 2, "completed")]

    @pytest.mark.asyncio
    async def test_async_error_callback_exception_swallowed(self):
        async def on_error(*args):
            raise ValueError("observer failed")

        dispatcher = CallbackDispatcher(ToolExecutorCallbacks(on_tool_call_error=on_error), "t")

        await dispatcher.emit_error(1, "tool", {"a": 1}, RuntimeError("boom"))
