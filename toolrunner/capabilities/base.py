"""Capability interface.

A capability is an external data-retrieval operation the reasoning backend
can propose and the executor can invoke. Host applications implement
Capability directly or wrap a plain function in FunctionCapability.
"""

import asyncio
import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Tuple

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from .schema_utils import schema_from_callable
from ..errors import CapabilityInvocationError
from ..reliability.error_classifier import ErrorClassifier


class Capability(ABC):
    """Base class for all capabilities."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this capability."""
        pass

    @property
    def description(self) -> str:
        """Human-readable description, shown to the reasoning backend."""
        return ""

    @property
    def args_schema(self) -> Dict[str, Any]:
        """JSON schema (type object) describing the named arguments."""
        return {"type": "object", "properties": {}}

    @abstractmethod
    async def invoke(self, args: Dict[str, Any]) -> Any:
        """Invoke the capability.

        Args:
            args: Mapping of argument name to value

        Returns:
            Capability-specific result

        Raises:
            CapabilityInvocationError: If the invocation fails
        """
        pass

    def argument_descriptions(self) -> List[Tuple[str, str]]:
        """Ordered (argument, description) pairs taken from the schema."""
        properties = (self.args_schema or {}).get("properties") or {}
        return [
            (arg_name, (spec or {}).get("description") or "No description")
            for arg_name, spec in properties.items()
        ]


class FunctionCapability(Capability):
    """Capability backed by a plain Python function.

    Sync functions run in a worker thread so they never block the event
    loop. Arguments are validated against the schema before the call.
    """

    def __init__(
        self,
        name: str,
        description: str,
        func: Callable[..., Any],
        args_schema: Optional[Dict[str, Any]] = None,
        arg_descriptions: Optional[Dict[str, str]] = None
    ):
        self._name = name
        self._description = description
        self._func = func
        self._schema = args_schema or schema_from_callable(func, arg_descriptions)
        self._validator = Draft202012Validator(self._schema)

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def args_schema(self) -> Dict[str, Any]:
        return self._schema

    async def invoke(self, args: Dict[str, Any]) -> Any:
        try:
            self._validator.validate(args)
        except ValidationError as e:
            raise CapabilityInvocationError(
                f"Invalid arguments for '{self._name}': {e.message}",
                capability_name=self._name,
                transient=False,
                original_error=e
            ) from e

        try:
            if inspect.iscoroutinefunction(self._func):
                return await self._func(**args)
            return await asyncio.to_thread(self._func, **args)
        except CapabilityInvocationError:
            raise
        except Exception as e:
            # Message-based matching is left to the caller's retry policy
            throttled = ErrorClassifier.is_throttle(e, match_legacy_signatures=False)
            raise CapabilityInvocationError(
                f"Capability '{self._name}' failed: {e}",
                capability_name=self._name,
                transient=True if throttled else None,
                original_error=e,
                status_code=getattr(e, 'status_code', None),
                retry_after=ErrorClassifier.get_retry_after(e)
            ) from e


def capability(
    name: Optional[str] = None,
    description: Optional[str] = None,
    arg_descriptions: Optional[Dict[str, str]] = None
) -> Callable[[Callable[..., Any]], FunctionCapability]:
    """Decorator turning a function into a FunctionCapability.

    The function's docstring is used when no description is given.
    """
    def decorator(func: Callable[..., Any]) -> FunctionCapability:
        return FunctionCapability(
            name=name or func.__name__,
            description=description or inspect.getdoc(func) or "",
            func=func,
            arg_descriptions=arg_descriptions
        )
    return decorator
