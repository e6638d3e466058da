"""
Retry Decorator
===============
Decorator for wrapping async functions with retries.
"""

from functools import wraps
from typing import Any, Awaitable, Callable, Optional, TypeVar

from .config import RetryConfig
from .executor import retry

T = TypeVar('T')


def with_retry(config: Optional[RetryConfig] = None, **options: Any):
    """
    Decorator for retry with exponential backoff.
    
    The wrapped function is called again with the same arguments on every
    attempt.
    
    Usage:
        @with_retry(retries=5, timeout_ms=2000)
        async def fetch_data():
            ...
    """
    if config is None:
        config = RetryConfig(**options)
    elif options:
        config = config.replace(**options)
    
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        func_config = config if config.name else config.replace(name=func.__qualname__)
        
        @wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            return await retry(lambda: func(*args, **kwargs), func_config)
        return wrapper
    return decorator
