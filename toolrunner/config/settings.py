"""Environment-driven settings.

Values come from the process environment, with a ``.env`` file loaded
first when present.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_SELECTION_MODEL = "gpt-5-mini"
DEFAULT_MAX_CONCURRENT_TOOL_CALLS = 3
DEFAULT_OPENAI_TIMEOUT = 60.0

ENV_MAX_CONCURRENT_TOOL_CALLS = "TOOLRUNNER_MAX_CONCURRENT_TOOL_CALLS"
ENV_SELECTION_MODEL = "TOOLRUNNER_SELECTION_MODEL"
ENV_CONTEXT_DIR = "TOOLRUNNER_CONTEXT_DIR"


class ToolRunnerSettings(BaseModel):
    """Process-level settings for selection and execution."""

    max_concurrent_tool_calls: int = Field(
        default=DEFAULT_MAX_CONCURRENT_TOOL_CALLS,
        description="Upper bound on concurrently running tool calls"
    )

    selection_model: str = Field(
        default=DEFAULT_SELECTION_MODEL,
        description="Model used by the OpenAI reasoning backend"
    )

    context_dir: str = Field(
        default=".toolrunner/context",
        description="Base directory for the file context store"
    )

    openai_api_key: Optional[str] = Field(default=None, repr=False)

    openai_timeout: float = Field(default=DEFAULT_OPENAI_TIMEOUT, gt=0)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def load_settings(dotenv: bool = True) -> ToolRunnerSettings:
    """Build settings from the environment.

    Args:
        dotenv: Load a ``.env`` file before reading variables
    """
    if dotenv:
        load_dotenv()

    return ToolRunnerSettings(
        max_concurrent_tool_calls=_int_env(
            ENV_MAX_CONCURRENT_TOOL_CALLS, DEFAULT_MAX_CONCURRENT_TOOL_CALLS
        ),
        selection_model=os.getenv(ENV_SELECTION_MODEL) or DEFAULT_SELECTION_MODEL,
        context_dir=os.getenv(ENV_CONTEXT_DIR) or ".toolrunner/context",
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        openai_timeout=_float_env("OPENAI_TIMEOUT", DEFAULT_OPENAI_TIMEOUT),
    )
