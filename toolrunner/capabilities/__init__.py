"""Capability interface, function wrapper and registry."""

from .base import Capability, FunctionCapability, capability
from .registry import CapabilityRegistry, get_global_registry
from .schema_utils import schema_from_callable

__all__ = [
    "Capability",
    "FunctionCapability",
    "capability",
    "CapabilityRegistry",
    "get_global_registry",
    "schema_from_callable",
]
