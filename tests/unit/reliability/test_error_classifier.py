"""Tests for capability error classification."""

import httpx
import pytest

from toolrunner.errors import CapabilityInvocationError, CapabilityNotFoundError
from toolrunner.reliability.error_classifier import ErrorClassifier, ErrorKind
from tests.helpers.mock_exceptions import (
    MockAuthenticationError,
    MockInternalServerError,
    MockRateLimitError,
)


def _http_status_error(status_code: int, headers=None) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://query1.finance.yahoo.com/v7/finance/quote")
    response = httpx.Response(status_code, headers=headers or {}, request=request)
    return httpx.HTTPStatusError(f"HTTP {status_code}", request=request, response=response)


class TestErrorClassifier:
    """Test ErrorClassifier.classify_error."""

    def test_transient_flag_is_authoritative(self):
        error = CapabilityInvocationError("slow down", transient=True, retry_after=7.0)
        classification = ErrorClassifier.classify_error(error)
        assert classification.kind is ErrorKind.TRANSIENT_THROTTLE
        assert classification.is_retryable is True
        assert classification.suggested_delay == 7.0

    def test_flag_wins_over_message_text(self):
        error = CapabilityInvocationError("429 Too Many Requests", transient=False)
        classification = ErrorClassifier.classify_error(error)
        assert classification.kind is ErrorKind.PERMANENT
        assert classification.is_retryable is False

    def test_explicit_flag_ignores_wrapped_error(self):
        error = CapabilityInvocationError(
            "wrapped", transient=False, original_error=RuntimeError("Too Many Requests")
        )
        assert ErrorClassifier.classify_error(error).is_retryable is False

    def test_undecided_flag_classifies_wrapped_error(self):
        error = CapabilityInvocationError(
            "wrapped", transient=None, original_error=RuntimeError("Too Many Requests")
        )
        assert ErrorClassifier.classify_error(error).is_retryable is True
        assert ErrorClassifier.classify_error(error, match_legacy_signatures=False).is_retryable is False
        bare = CapabilityInvocationError("no cause", transient=None)
        assert ErrorClassifier.classify_error(bare).kind is ErrorKind.PERMANENT

    def test_not_found(self):
        classification = ErrorClassifier.classify_error(CapabilityNotFoundError("x"))
        assert classification.kind is ErrorKind.NOT_FOUND
        assert classification.is_retryable is False

    def test_httpx_429_is_throttle(self):
        error = _http_status_error(429, {"Retry-After": "12"})
        classification = ErrorClassifier.classify_error(error)
        assert classification.is_retryable is True
        assert classification.suggested_delay == 12.0

    def test_httpx_404_is_permanent(self):
        assert ErrorClassifier.classify_error(_http_status_error(404)).is_retryable is False

    def test_status_code_attribute(self):
        assert ErrorClassifier.classify_error(MockRateLimitError()).is_retryable is True
        assert ErrorClassifier.classify_error(MockAuthenticationError()).is_retryable is False
        assert ErrorClassifier.classify_error(MockInternalServerError()).is_retryable is False

    @pytest.mark.parametrize("message", [
        "Request failed with status 429",
        "Too Many Requests",
        "Failed to get crumb, status 401",
    ])
    def test_legacy_signatures(self, message):
        assert ErrorClassifier.classify_error(RuntimeError(message)).is_retryable is True

    def test_legacy_signatures_can_be_disabled(self):
        error = RuntimeError("Too Many Requests")
        classification = ErrorClassifier.classify_error(error, match_legacy_signatures=False)
        assert classification.kind is ErrorKind.PERMANENT

    def test_plain_error_is_permanent(self):
        assert ErrorClassifier.classify_error(ValueError("bad ticker")).is_retryable is False
