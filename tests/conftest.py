"""Shared pytest fixtures for toolrunner tests."""

import pytest

from toolrunner.capabilities.registry import CapabilityRegistry
from toolrunner.context.memory import InMemoryContextStore
from toolrunner.execution.callbacks import ToolExecutorCallbacks
from toolrunner.execution.executor import ToolExecutor
from toolrunner.models.state import Entity, Task, ToolCallStatus, Understanding
from tests.helpers.fake_capabilities import FakeCapability, RecordingCallbacks, RecordingSleep


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: selection and execution wired together")


INCOME_SCHEMA = {
    "type": "object",
    "properties": {
        "ticker": {"type": "string", "description": "The stock ticker symbol, e.g. 'AAPL'."},
        "period": {"type": "string", "description": "'annual', 'quarterly' or 'ttm'."},
    },
    "required": ["ticker"],
}

PRICE_SCHEMA = {
    "type": "object",
    "properties": {
        "ticker": {"type": "string", "description": "The stock ticker symbol."},
    },
    "required": ["ticker"],
}


@pytest.fixture
def income_capability():
    return FakeCapability(
        "get_income_statements",
        description="Fetches income statements for a company.",
        args_schema=INCOME_SCHEMA,
    )


@pytest.fixture
def price_capability():
    return FakeCapability(
        "get_price_snapshot",
        description="Fetches the most recent price snapshot for a stock.",
        args_schema=PRICE_SCHEMA,
    )


@pytest.fixture
def registry(income_capability, price_capability):
    return CapabilityRegistry([income_capability, price_capability])


@pytest.fixture
def context_store():
    return InMemoryContextStore()


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def recorder():
    return RecordingCallbacks()


@pytest.fixture
def callbacks(recorder):
    return ToolExecutorCallbacks(
        on_tool_call_update=recorder.on_tool_call_update,
        on_tool_call_error=recorder.on_tool_call_error,
    )


@pytest.fixture
def executor(registry, context_store, recording_sleep):
    return ToolExecutor(registry, context_store, sleep=recording_sleep)


@pytest.fixture
def make_task():
    """Build a task from (tool, args) pairs."""
    def _make(*calls, task_id="task-1"):
        return Task(
            id=task_id,
            description="test task",
            tool_calls=[ToolCallStatus(tool=tool, args=args) for tool, args in calls],
        )
    return _make


@pytest.fixture
def aapl_understanding():
    return Understanding(
        intent="fundamentals",
        entities=[
            Entity(type="ticker", value="AAPL"),
            Entity(type="period", value="annual"),
        ],
    )
