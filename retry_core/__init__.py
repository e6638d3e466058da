"""
Retry Core Library
==================
Async retries with exponential backoff and per-attempt timeouts.
"""

__version__ = "0.1.0"

# Retry
from retry_core.retry import (
    RetryConfig,
    RetryExecutor,
    retry,
    with_retry,
    backoff_schedule,
    next_delay,
    RetryError,
    AttemptTimeout,
    RetryLoopExit,
)

# Logging
from retry_core.logging import setup_logging, get_logger

__all__ = [
    # Retry
    "RetryConfig",
    "RetryExecutor",
    "retry",
    "with_retry",
    "backoff_schedule",
    "next_delay",
    "RetryError",
    "AttemptTimeout",
    "RetryLoopExit",
    # Logging
    "setup_logging",
    "get_logger",
]
