"""
Retry Exceptions
================
Exception classes raised by the retry executor itself.

Errors raised by the wrapped operation are never wrapped: the last one is
re-raised as-is once retries are exhausted.
"""

from typing import Optional


class RetryError(Exception):
    """Base class for failures originating in the executor."""
    pass


class AttemptTimeout(RetryError, TimeoutError):
    """Raised when a single attempt exceeds the configured timeout."""
    
    def __init__(self, timeout_ms: int, attempt: Optional[int] = None):
        self.timeout_ms = timeout_ms
        self.attempt = attempt
        if attempt is None:
            message = f"Attempt timed out after {timeout_ms}ms"
        else:
            message = f"Attempt {attempt} timed out after {timeout_ms}ms"
        super().__init__(message)


class RetryLoopExit(RetryError):
    """Raised if the attempt loop ends without a result or an error."""
    pass
