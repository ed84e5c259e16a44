"""Tool selection: prompts, reasoning backends and the selector."""

from .backend import (
    Answer,
    ProposedCall,
    ProposedCalls,
    ReasoningBackend,
    ScriptedReasoningBackend,
    SelectionResult,
)
from .openai_backend import OpenAIReasoningBackend
from .prompts import (
    build_tool_selection_prompt,
    format_tool_descriptions,
    get_tool_selection_system_prompt,
)
from .selector import ToolSelector

__all__ = [
    "Answer",
    "ProposedCall",
    "ProposedCalls",
    "ReasoningBackend",
    "ScriptedReasoningBackend",
    "SelectionResult",
    "OpenAIReasoningBackend",
    "build_tool_selection_prompt",
    "format_tool_descriptions",
    "get_tool_selection_system_prompt",
    "ToolSelector",
]
