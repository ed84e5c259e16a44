"""Retry with exponential backoff for transient capability failures."""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional

from pydantic import BaseModel, Field

from .error_classifier import ErrorClassifier
from ..observability.logging import ToolLogger

logger = ToolLogger("retry")


class RetryPolicy(BaseModel):
    """Retry policy for a single capability call."""

    max_attempts: int = Field(
        default=3,
        ge=1,
        description="Total attempts, including the first one"
    )

    base_delay: float = Field(
        default=2.0,
        gt=0,
        description="Delay before retry n is base_delay ** n seconds"
    )

    max_jitter: float = Field(
        default=0.5,
        ge=0,
        description="Exclusive upper bound of the random jitter added to each delay"
    )

    match_legacy_signatures: bool = Field(
        default=True,
        description="Classify foreign exceptions as throttling by message text"
    )


@dataclass
class RetryState:
    """Attempt bookkeeping for one call."""
    attempts: int = 0
    delays: List[float] = field(default_factory=list)
    last_error: Optional[BaseException] = None


class RetryManager:
    """
    Runs a capability invocation with retry on transient throttling.

    Only errors the ErrorClassifier marks retryable are retried, and only
    while attempts remain. Everything else propagates on first failure.
    """

    def __init__(
        self,
        policy: Optional[RetryPolicy] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep
    ):
        self.policy = policy or RetryPolicy()
        self._sleep = sleep

    async def execute_with_retry(
        self,
        func: Callable[[], Awaitable[Any]],
        state: Optional[RetryState] = None,
        **log_fields: Any
    ) -> Any:
        """
        Execute ``func`` with retry logic.

        Args:
            func: Async callable performing one attempt
            state: Optional RetryState updated with attempts and delays
            **log_fields: Structured fields for retry log lines

        Returns:
            Result of the first successful attempt

        Raises:
            The last exception if it is not retryable or attempts are exhausted
        """
        state = state if state is not None else RetryState()

        while True:
            state.attempts += 1
            try:
                return await func()
            except Exception as e:  # noqa: BLE001
                state.last_error = e
                classification = ErrorClassifier.classify_error(
                    e, self.policy.match_legacy_signatures
                )
                if not classification.is_retryable or state.attempts >= self.policy.max_attempts:
                    raise

                delay = self.calculate_delay(state.attempts)
                state.delays.append(delay)
                logger.warning(
                    "Transient failure, backing off",
                    error=e,
                    attempt=state.attempts,
                    max_attempts=self.policy.max_attempts,
                    delay_ms=int(delay * 1000),
                    retry_after=classification.suggested_delay,
                    **log_fields
                )
                await self._sleep(delay)

    def calculate_delay(self, attempt: int) -> float:
        """Exponential backoff plus jitter in [0, max_jitter).

        Retry-After hints are logged but never change the delay.
        """
        return self.policy.base_delay ** attempt + random.random() * self.policy.max_jitter
