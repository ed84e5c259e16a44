"""Configuration for toolrunner."""

from .settings import (
    ToolRunnerSettings,
    load_settings,
    DEFAULT_SELECTION_MODEL,
    DEFAULT_MAX_CONCURRENT_TOOL_CALLS,
    ENV_MAX_CONCURRENT_TOOL_CALLS,
    ENV_SELECTION_MODEL,
    ENV_CONTEXT_DIR,
)

__all__ = [
    "ToolRunnerSettings",
    "load_settings",
    "DEFAULT_SELECTION_MODEL",
    "DEFAULT_MAX_CONCURRENT_TOOL_CALLS",
    "ENV_MAX_CONCURRENT_TOOL_CALLS",
    "ENV_SELECTION_MODEL",
    "ENV_CONTEXT_DIR",
]
