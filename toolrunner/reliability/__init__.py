"""Reliability layer: error classification and retry with backoff."""

from .error_classifier import (
    ErrorClassifier,
    ErrorClassification,
    ErrorKind,
    LEGACY_THROTTLE_SIGNATURES,
)
from .retry import RetryManager, RetryPolicy, RetryState

__all__ = [
    "ErrorClassifier",
    "ErrorClassification",
    "ErrorKind",
    "LEGACY_THROTTLE_SIGNATURES",
    "RetryManager",
    "RetryPolicy",
    "RetryState",
]
