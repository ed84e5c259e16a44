"""Observability helpers."""

from .logging import ToolLogger

__all__ = ["ToolLogger"]
