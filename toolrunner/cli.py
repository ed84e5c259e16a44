"""CLI entry point for toolrunner."""

import argparse
import asyncio
import importlib
import json
import sys
import uuid
from typing import Any, Dict, List, Optional

from .capabilities.base import Capability
from .capabilities.registry import CapabilityRegistry
from .config.settings import load_settings
from .context.file_store import FileContextStore
from .execution.callbacks import ToolExecutorCallbacks
from .execution.executor import ToolExecutor
from .execution.options import ExecutorOptions
from .models.state import Entity, Task, ToolCallStatus, Understanding
from .selection.openai_backend import OpenAIReasoningBackend
from .selection.selector import ToolSelector


def load_registry(spec: str) -> CapabilityRegistry:
    """Load a registry from ``module:attribute``.

    The attribute may be a CapabilityRegistry or an iterable of capabilities.
    """
    module_name, _, attr = spec.partition(":")
    if not module_name or not attr:
        raise ValueError(f"Registry must be given as module:attribute, got {spec!r}")
    target = getattr(importlib.import_module(module_name), attr)
    if isinstance(target, CapabilityRegistry):
        return target
    if isinstance(target, Capability):
        return CapabilityRegistry([target])
    return CapabilityRegistry(list(target))


def load_plan(path: str) -> List[ToolCallStatus]:
    """Read a JSON list of ``{"tool": ..., "args": {...}}`` entries."""
    with open(path, "r", encoding="utf-8") as fh:
        entries = json.load(fh)
    if not isinstance(entries, list):
        raise ValueError("Plan file must contain a JSON list")
    return [ToolCallStatus(tool=e["tool"], args=e.get("args") or {}) for e in entries]


def _print_update(task_id: str, index: int, status: str) -> None:
    print(f"[{task_id}] #{index} {status}")


def _print_error(task_id: str, index: int, tool: str, args: Dict[str, Any], error: BaseException) -> None:
    print(f"[{task_id}] #{index} {tool}({json.dumps(args, default=str)}) error: {error}", file=sys.stderr)


async def list_capabilities(registry: CapabilityRegistry) -> None:
    """Print every registered capability and its arguments."""
    print("Registered capabilities:")
    print("-" * 50)
    for capability in registry:
        print(f"{capability.name}")
        if capability.description:
            print(f"   {capability.description}")
        for arg_name, description in capability.argument_descriptions():
            print(f"   - {arg_name}: {description}")
        print()


async def run_plan(
    registry: CapabilityRegistry,
    plan: List[ToolCallStatus],
    correlation_id: str,
    context_dir: str,
    max_concurrent: Optional[int]
) -> bool:
    """Execute a prepared plan and print lifecycle events."""
    task = Task(id="cli", description="plan", tool_calls=plan)
    executor = ToolExecutor(
        registry,
        FileContextStore(context_dir),
        ExecutorOptions(max_concurrent_tool_calls=max_concurrent)
    )
    callbacks = ToolExecutorCallbacks(
        on_tool_call_update=_print_update,
        on_tool_call_error=_print_error
    )
    succeeded = await executor.execute_tools(task, correlation_id, callbacks)
    print(f"Results saved under {context_dir}/{correlation_id}")
    return succeeded


async def select_plan(
    registry: CapabilityRegistry,
    description: str,
    tickers: List[str],
    periods: List[str],
    model: str,
    api_key: Optional[str],
    timeout: float
) -> List[ToolCallStatus]:
    """Ask the OpenAI backend for a plan and print it as JSON."""
    selector = ToolSelector(
        registry,
        OpenAIReasoningBackend(model=model, api_key=api_key, timeout=timeout)
    )
    understanding = Understanding(
        entities=[Entity(type="ticker", value=t) for t in tickers]
        + [Entity(type="period", value=p) for p in periods]
    )
    tool_calls = await selector.select_tools(Task(id="cli", description=description), understanding)
    print(json.dumps([{"tool": tc.tool, "args": tc.args} for tc in tool_calls], indent=2, default=str))
    return tool_calls


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function."""
    parser = argparse.ArgumentParser(description="toolrunner CLI")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    caps_parser = subparsers.add_parser('capabilities', help='List registered capabilities')
    caps_parser.add_argument('--registry', required=True, help='module:attribute of the capability registry')

    run_parser = subparsers.add_parser('run', help='Execute a JSON plan of tool calls')
    run_parser.add_argument('--registry', required=True, help='module:attribute of the capability registry')
    run_parser.add_argument('--plan', required=True, help='Path to a JSON list of {"tool", "args"} entries')
    run_parser.add_argument('--correlation-id', default=None, help='Correlation id for stored results')
    run_parser.add_argument('--context-dir', default=None,
                            help='Directory for stored results (default: TOOLRUNNER_CONTEXT_DIR)')
    run_parser.add_argument('--max-concurrent', type=int, default=None,
                            help='Maximum concurrent tool calls (default: TOOLRUNNER_MAX_CONCURRENT_TOOL_CALLS)')

    select_parser = subparsers.add_parser('select', help='Select tool calls for a task description')
    select_parser.add_argument('--registry', required=True, help='module:attribute of the capability registry')
    select_parser.add_argument('description', help='Task description')
    select_parser.add_argument('--ticker', action='append', default=[], help='Ticker fact (repeatable)')
    select_parser.add_argument('--period', action='append', default=[], help='Period fact (repeatable)')
    select_parser.add_argument('--model', default=None, help='Selection model (default: TOOLRUNNER_SELECTION_MODEL)')

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 2

    settings = load_settings()
    registry = load_registry(args.registry)

    if args.command == 'capabilities':
        asyncio.run(list_capabilities(registry))
        return 0

    if args.command == 'run':
        plan = load_plan(args.plan)
        correlation_id = args.correlation_id or uuid.uuid4().hex[:12]
        succeeded = asyncio.run(
            run_plan(
                registry,
                plan,
                correlation_id,
                args.context_dir or settings.context_dir,
                args.max_concurrent if args.max_concurrent is not None else settings.max_concurrent_tool_calls
            )
        )
        return 0 if succeeded else 1

    if args.command == 'select':
        asyncio.run(select_plan(
            registry,
            args.description,
            args.ticker,
            args.period,
            args.model or settings.selection_model,
            settings.openai_api_key,
            settings.openai_timeout
        ))
        return 0

    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
