"""Error definitions for tool selection and execution."""

from typing import Optional


class ToolRunnerError(Exception):
    """Base exception for toolrunner errors."""
    pass


class CapabilityInvocationError(ToolRunnerError):
    """Exception raised when a capability invocation fails.

    Capability implementations set ``transient`` when they know the failure
    is rate-limit shaped (HTTP 429, provider session negotiation failures).
    The executor retries only transient failures. ``None`` leaves the
    decision to the retry policy, which then classifies ``original_error``.

    Attributes:
        capability_name: Name of the failing capability
        transient: Whether the failure may succeed after backing off, or
            None when undecided
        original_error: The wrapped exception, if any
        status_code: HTTP status code if applicable
        retry_after: Seconds the remote side asked us to wait, if known
    """

    def __init__(
        self,
        message: str,
        capability_name: Optional[str] = None,
        transient: Optional[bool] = False,
        original_error: Optional[BaseException] = None,
        status_code: Optional[int] = None,
        retry_after: Optional[float] = None
    ):
        super().__init__(message)
        self.capability_name = capability_name
        self.transient = transient
        self.original_error = original_error
        self.status_code = status_code
        self.retry_after = retry_after


class CapabilityNotFoundError(ToolRunnerError):
    """Exception raised when a proposed call names an unregistered capability."""

    def __init__(self, capability_name: str):
        self.capability_name = capability_name
        super().__init__(f"Capability not found: {capability_name}")


class SelectionBackendError(ToolRunnerError):
    """Exception raised when the reasoning backend fails during selection."""

    def __init__(
        self,
        message: str,
        backend: str,
        original_error: Optional[BaseException] = None,
        is_retryable: bool = False
    ):
        super().__init__(message)
        self.backend = backend
        self.original_error = original_error
        self.is_retryable = is_retryable


class InvalidTransitionError(ToolRunnerError):
    """Exception raised for a tool call status change the state machine forbids."""

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Invalid tool call transition: {current} -> {requested}")
