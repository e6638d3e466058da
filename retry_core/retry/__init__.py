"""
Retry Logic with Exponential Backoff
=====================================
Retries an async operation with exponential backoff and an optional
per-attempt timeout.
"""

from .exceptions import RetryError, AttemptTimeout, RetryLoopExit
from .config import RetryConfig, OnRetry
from .backoff import next_delay, backoff_schedule
from .executor import RetryExecutor, retry
from .decorators import with_retry

__all__ = [
    # Exceptions
    "RetryError",
    "AttemptTimeout",
    "RetryLoopExit",
    # Config
    "RetryConfig",
    "OnRetry",
    # Backoff
    "next_delay",
    "backoff_schedule",
    # Executor
    "RetryExecutor",
    "retry",
    # Decorator
    "with_retry",
]
