"""Tests for task and tool call state models."""

import pytest

from toolrunner.errors import InvalidTransitionError
from toolrunner.models.state import Entity, Task, ToolCallState, ToolCallStatus, Understanding


class TestToolCallStatus:
    """Test the per-call state machine."""

    def test_defaults_to_pending(self):
        call = ToolCallStatus(tool="get_prices")
        assert call.status is ToolCallState.PENDING
        assert call.args == {}

    @pytest.mark.parametrize("terminal", [ToolCallState.COMPLETED, ToolCallState.FAILED])
    def test_happy_path(self, terminal):
        call = ToolCallStatus(tool="get_prices")
        call.transition(ToolCallState.RUNNING)
        call.transition(terminal)
        assert call.status is terminal
        assert call.status.is_terminal

    def test_accepts_string_states(self):
        call = ToolCallStatus(tool="get_prices")
        call.transition("running")
        assert call.status is ToolCallState.RUNNING

    def test_pending_cannot_complete_directly(self):
        call = ToolCallStatus(tool="get_prices")
        with pytest.raises(InvalidTransitionError):
            call.transition(ToolCallState.COMPLETED)

    @pytest.mark.parametrize("terminal", [ToolCallState.COMPLETED, ToolCallState.FAILED])
    @pytest.mark.parametrize("target", list(ToolCallState))
    def test_terminal_states_are_final(self, terminal, target):
        call = ToolCallStatus(tool="get_prices", status=terminal)
        with pytest.raises(InvalidTransitionError) as exc_info:
            call.transition(target)
        assert exc_info.value.current == terminal.value
        assert call.status is terminal


class TestTask:

    def test_tool_calls_unset_until_selection(self):
        task = Task(id="1", description="Get Apple revenue")
        assert task.tool_calls is None


class TestUnderstanding:
    """Test typed fact lookup."""

    def test_values_of_filters_and_dedupes(self):
        understanding = Understanding(entities=[
            Entity(type="ticker", value="AAPL"),
            Entity(type="period", value="2023"),
            Entity(type="ticker", value="MSFT"),
            Entity(type="ticker", value="AAPL"),
        ])
        assert understanding.values_of("ticker") == ["AAPL", "MSFT"]
        assert understanding.values_of("period") == ["2023"]
        assert understanding.values_of("sector") == []
