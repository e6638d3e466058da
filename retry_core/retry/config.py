"""
Retry Configuration
===================
Immutable settings read once per retried call.
"""

import os
from dataclasses import dataclass, replace as dataclass_replace
from typing import Any, Awaitable, Callable, Optional, Union

# Observer invoked with (error, attempt) after each non-final failure.
OnRetry = Callable[[Exception, int], Union[None, Awaitable[None]]]


@dataclass(frozen=True)
class RetryConfig:
    """
    Configuration for a retried call.
    
    Attributes:
        retries: Retries after the first attempt (total attempts = retries + 1)
        initial_delay_ms: Delay before the first retry
        factor: Delay multiplier applied after each failed attempt
        on_retry: Optional observer called as ``on_retry(error, attempt)``
        timeout_ms: Per-attempt bound; ``None`` or ``0`` means unbounded
        cancel_on_timeout: Cancel an attempt that lost the timeout race; set
            to False to leave it running and discard its late outcome
        name: Label used for the operation in log events
    
    A ``factor`` below 1 shrinks the delay after every failure and a
    ``factor`` of 0 makes every delay after the first one zero.
    
    Timed-out attempts are cancelled by default. Leaving them running, with
    their eventual outcome ignored, is opt-in through ``cancel_on_timeout``.
    """
    retries: int = 3
    initial_delay_ms: int = 100
    factor: float = 2.0
    on_retry: Optional[OnRetry] = None
    timeout_ms: Optional[int] = None
    cancel_on_timeout: bool = True
    name: Optional[str] = None
    
    def __post_init__(self):
        if (
            not isinstance(self.retries, int)
            or isinstance(self.retries, bool)
            or self.retries < 0
        ):
            raise ValueError(f"retries must be an integer >= 0, got {self.retries!r}")
        if self.initial_delay_ms < 0:
            raise ValueError(
                f"initial_delay_ms must be >= 0, got {self.initial_delay_ms}"
            )
        if self.factor < 0:
            raise ValueError(f"factor must be >= 0, got {self.factor}")
        if self.timeout_ms is not None and self.timeout_ms < 0:
            raise ValueError(f"timeout_ms must be >= 0, got {self.timeout_ms}")
    
    @property
    def max_attempts(self) -> int:
        return self.retries + 1
    
    @property
    def attempt_timeout(self) -> Optional[float]:
        """Per-attempt bound in seconds, or None when disabled."""
        if not self.timeout_ms:
            return None
        return self.timeout_ms / 1000
    
    def replace(self, **changes: Any) -> "RetryConfig":
        """Return a copy with the given fields changed."""
        return dataclass_replace(self, **changes)
    
    @classmethod
    def from_env(cls, prefix: str = "RETRY_", **overrides: Any) -> "RetryConfig":
        """
        Build a config from environment variables.
        
        Reads ``<prefix>RETRIES``, ``<prefix>INITIAL_DELAY_MS``,
        ``<prefix>FACTOR`` and ``<prefix>TIMEOUT_MS``. Unset variables keep
        their defaults; keyword overrides win over the environment.
        """
        values: dict = {}
        
        retries = os.environ.get(f"{prefix}RETRIES")
        if retries:
            values["retries"] = int(retries)
        
        initial_delay = os.environ.get(f"{prefix}INITIAL_DELAY_MS")
        if initial_delay:
            values["initial_delay_ms"] = int(initial_delay)
        
        factor = os.environ.get(f"{prefix}FACTOR")
        if factor:
            values["factor"] = float(factor)
        
        timeout = os.environ.get(f"{prefix}TIMEOUT_MS")
        if timeout:
            values["timeout_ms"] = int(timeout)
        
        values.update(overrides)
        return cls(**values)
