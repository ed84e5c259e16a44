"""OpenAI chat-completions reasoning backend.

Capabilities are offered as function tools; a reply with ``tool_calls``
becomes ProposedCalls and a plain reply becomes an Answer.
"""

import json
from typing import Any, Dict, List, Optional, Sequence

import httpx
import openai
from openai import AsyncOpenAI

from .backend import Answer, ProposedCall, ProposedCalls, ReasoningBackend, SelectionResult
from ..capabilities.base import Capability
from ..config.settings import DEFAULT_OPENAI_TIMEOUT, DEFAULT_SELECTION_MODEL
from ..errors import SelectionBackendError
from ..observability.logging import ToolLogger

logger = ToolLogger("openai_backend")

RETRYABLE_OPENAI_ERRORS = (
    openai.RateLimitError,
    openai.APITimeoutError,
    openai.APIConnectionError,
    openai.InternalServerError,
)


def to_openai_tool(capability: Capability) -> Dict[str, Any]:
    """Describe a capability in the chat-completions ``tools`` format."""
    parameters = dict(capability.args_schema or {})
    parameters.setdefault("type", "object")
    parameters.setdefault("properties", {})
    return {
        "type": "function",
        "function": {
            "name": capability.name,
            "description": capability.description,
            "parameters": parameters,
        },
    }


class OpenAIReasoningBackend(ReasoningBackend):
    """Reasoning backend using OpenAI chat-completions tool calling."""

    def __init__(
        self,
        model: str = DEFAULT_SELECTION_MODEL,
        client: Optional[AsyncOpenAI] = None,
        api_key: Optional[str] = None,
        timeout: float = DEFAULT_OPENAI_TIMEOUT
    ):
        self.model = model
        self._client = client
        self._api_key = api_key
        self._timeout = timeout

    @property
    def client(self) -> AsyncOpenAI:
        """Lazy initialization of the OpenAI client."""
        if self._client is None:
            if self._api_key:
                self._client = AsyncOpenAI(api_key=self._api_key, timeout=self._timeout)
            else:
                self._client = AsyncOpenAI(timeout=self._timeout)
        return self._client

    async def select(
        self,
        system_prompt: str,
        prompt: str,
        capabilities: Sequence[Capability]
    ) -> SelectionResult:
        request: Dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
        }
        if capabilities:
            request["tools"] = [to_openai_tool(c) for c in capabilities]
            request["tool_choice"] = "auto"

        try:
            response = await self.client.chat.completions.create(**request)
        except (openai.OpenAIError, httpx.HTTPError) as e:
            raise SelectionBackendError(
                f"OpenAI tool selection failed: {e}",
                backend="openai",
                original_error=e,
                is_retryable=isinstance(e, RETRYABLE_OPENAI_ERRORS)
            ) from e

        return self._parse_response(response)

    def _parse_response(self, response: Any) -> SelectionResult:
        try:
            message = response.choices[0].message
        except (AttributeError, IndexError, TypeError) as e:
            raise SelectionBackendError(
                "Malformed OpenAI response: no message",
                backend="openai",
                original_error=e
            ) from e

        tool_calls = getattr(message, "tool_calls", None) or []
        if not tool_calls:
            return Answer(text=getattr(message, "content", None) or "")

        calls: List[ProposedCall] = []
        for tool_call in tool_calls:
            function = tool_call.function
            try:
                args = json.loads(function.arguments) if function.arguments else {}
            except json.JSONDecodeError as e:
                raise SelectionBackendError(
                    f"Malformed arguments for tool call '{function.name}': {e}",
                    backend="openai",
                    original_error=e
                ) from e
            if not isinstance(args, dict):
                raise SelectionBackendError(
                    f"Arguments for tool call '{function.name}' are not an object",
                    backend="openai"
                )
            calls.append(ProposedCall(name=function.name, args=args))

        logger.debug("Parsed proposed calls", model=self.model, count=len(calls))
        return ProposedCalls(calls=calls)
