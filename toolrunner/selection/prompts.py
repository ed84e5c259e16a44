"""Prompt builders for tool selection.

Prompts are kept short and explicit; selection runs on a small, fast model.
"""

from typing import Iterable, List, Sequence

from ..capabilities.base import Capability


TOOL_SELECTION_SYSTEM_PROMPT = """You select the data-retrieval tools needed to complete one research task.

Available tools:
{tool_descriptions}

Rules:
- Call only the tools listed above, with arguments matching their descriptions.
- Call one tool per ticker when a tool accepts a single ticker.
- Prefer the most specific tool for the data the task asks for.
- Use the reporting period given in the task context when a tool accepts one.
- If the task needs no external data, answer directly and call no tools."""


def format_tool_descriptions(capabilities: Iterable[Capability]) -> str:
    """Render the capability catalogue, one block per capability."""
    blocks: List[str] = []
    for capability in capabilities:
        block = f"- {capability.name}: {capability.description}"
        arguments = capability.argument_descriptions()
        if arguments:
            lines = "\n".join(f"  - {name}: {desc}" for name, desc in arguments)
            block += f"\n  Arguments:\n{lines}"
        blocks.append(block)
    return "\n\n".join(blocks)


def get_tool_selection_system_prompt(tool_descriptions: str) -> str:
    return TOOL_SELECTION_SYSTEM_PROMPT.format(tool_descriptions=tool_descriptions)


def build_tool_selection_prompt(
    task_description: str,
    tickers: Sequence[str],
    periods: Sequence[str]
) -> str:
    """Build the task-specific selection prompt."""
    lines = [f"Task: {task_description}"]
    if tickers:
        lines.append(f"Tickers: {', '.join(tickers)}")
    if periods:
        lines.append(f"Periods: {', '.join(periods)}")
    lines.append("")
    lines.append("Select the tool calls needed to complete this task.")
    return "\n".join(lines)
