"""
Error classification for capability invocations.

Decides whether a failed capability call is a transient throttle (worth
backing off and retrying) or a permanent failure. The ``transient`` flag on
CapabilityInvocationError is authoritative when set; an undecided wrapper
and other exception types are classified by type and HTTP status, then
optionally by message text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import httpx
import openai

from ..errors import CapabilityInvocationError, CapabilityNotFoundError


class ErrorKind(Enum):
    """Error kinds the executor distinguishes."""
    TRANSIENT_THROTTLE = "transient_throttle"
    PERMANENT = "permanent"
    NOT_FOUND = "not_found"


@dataclass
class ErrorClassification:
    """Classification result for one error."""
    kind: ErrorKind
    is_retryable: bool
    suggested_delay: Optional[float] = None


# Message fragments that identify throttling in wrappers that do not
# set the transient flag themselves. "Failed to get crumb" is Yahoo
# Finance's session negotiation failure.
LEGACY_THROTTLE_SIGNATURES: Tuple[str, ...] = (
    "429",
    "Too Many Requests",
    "Failed to get crumb",
)

THROTTLE_STATUS_CODES = {429}


class ErrorClassifier:
    """Classifies capability errors for retry decisions."""

    @staticmethod
    def classify_error(
        error: BaseException,
        match_legacy_signatures: bool = True
    ) -> ErrorClassification:
        """
        Classify an error raised while invoking a capability.

        Args:
            error: The exception to classify
            match_legacy_signatures: Whether foreign exceptions may be
                classified by message text

        Returns:
            ErrorClassification
        """
        if isinstance(error, CapabilityNotFoundError):
            return ErrorClassification(kind=ErrorKind.NOT_FOUND, is_retryable=False)

        if isinstance(error, CapabilityInvocationError):
            if error.transient is None and error.original_error is not None:
                return ErrorClassifier.classify_error(error.original_error, match_legacy_signatures)
            if error.transient:
                return ErrorClassification(
                    kind=ErrorKind.TRANSIENT_THROTTLE,
                    is_retryable=True,
                    suggested_delay=error.retry_after
                )
            return ErrorClassification(kind=ErrorKind.PERMANENT, is_retryable=False)

        if ErrorClassifier.is_throttle(error, match_legacy_signatures):
            return ErrorClassification(
                kind=ErrorKind.TRANSIENT_THROTTLE,
                is_retryable=True,
                suggested_delay=ErrorClassifier.get_retry_after(error)
            )

        return ErrorClassification(kind=ErrorKind.PERMANENT, is_retryable=False)

    @staticmethod
    def is_throttle(error: BaseException, match_legacy_signatures: bool = True) -> bool:
        """Check whether a foreign exception looks like rate limiting."""
        if isinstance(error, openai.RateLimitError):
            return True

        if isinstance(error, httpx.HTTPStatusError):
            return error.response.status_code in THROTTLE_STATUS_CODES

        status_code = getattr(error, 'status_code', None)
        if isinstance(status_code, int) and status_code in THROTTLE_STATUS_CODES:
            return True

        if match_legacy_signatures:
            message = str(error)
            return any(signature in message for signature in LEGACY_THROTTLE_SIGNATURES)

        return False

    @staticmethod
    def get_retry_after(error: BaseException) -> Optional[float]:
        """Extract a Retry-After value in seconds, if the error carries one."""
        response = getattr(error, 'response', None)
        headers = getattr(response, 'headers', None)
        if headers is not None:
            retry_after = headers.get('Retry-After')
            if retry_after:
                try:
                    return float(retry_after)
                except ValueError:
                    return None
        return None
