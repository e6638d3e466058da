"""
Retry Executor
==============
Re-runs an async operation with exponential backoff and an optional
per-attempt timeout.

Usage:
    from retry_core.retry import RetryConfig, RetryExecutor
    
    executor = RetryExecutor()
    result = await executor.execute(
        lambda: client.get("/v1/status"),
        RetryConfig(retries=2, initial_delay_ms=10, timeout_ms=500),
    )
"""

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Optional, TypeVar
import structlog

from .backoff import next_delay
from .config import RetryConfig
from .exceptions import AttemptTimeout, RetryLoopExit

logger = structlog.get_logger(__name__)

T = TypeVar('T')

OperationFactory = Callable[[], Awaitable[T]]


def _describe(operation_factory: Callable[..., Any], config: RetryConfig) -> str:
    if config.name:
        return config.name
    return getattr(operation_factory, "__qualname__", None) or repr(operation_factory)


def _discard_outcome(task: "asyncio.Future[Any]") -> None:
    """Consume the result of an attempt that lost its timeout race."""
    if not task.cancelled():
        task.exception()


class RetryExecutor:
    """
    Runs an operation factory until it succeeds or retries run out.
    
    Each call to ``execute`` owns its own attempt counter and delay, so one
    executor can serve any number of concurrent calls.
    
    Example:
        executor = RetryExecutor()
        
        try:
            data = await executor.execute(fetch_data, RetryConfig(retries=5))
        except AttemptTimeout:
            ...
    """
    
    def __init__(self, sleep: Optional[Callable[[float], Awaitable[Any]]] = None):
        self._sleep = sleep or asyncio.sleep
    
    async def execute(
        self,
        operation_factory: OperationFactory[T],
        config: Optional[RetryConfig] = None,
    ) -> T:
        """
        Execute ``operation_factory()`` with retries.
        
        Args:
            operation_factory: Zero-argument callable returning a fresh
                awaitable for every attempt
            config: Retry settings, defaults to ``RetryConfig()``
            
        Returns:
            Result of the first successful attempt
            
        Raises:
            AttemptTimeout: If the last attempt timed out
            Exception: The last attempt's own error, unmodified
        """
        config = config or RetryConfig()
        attempt = 0
        delay = config.initial_delay_ms
        
        while attempt <= config.retries:
            try:
                return await self._run_attempt(operation_factory, config, attempt + 1)
            except Exception as e:
                if attempt >= config.retries:
                    logger.error(
                        "Retry exhausted",
                        operation=_describe(operation_factory, config),
                        attempts=attempt + 1,
                        error=str(e),
                    )
                    raise
                
                # Failures raised by the observer abort the loop.
                if config.on_retry is not None:
                    outcome = config.on_retry(e, attempt + 1)
                    if inspect.isawaitable(outcome):
                        await outcome
                
                logger.warning(
                    "Retrying after failure",
                    operation=_describe(operation_factory, config),
                    attempt=attempt + 1,
                    delay_ms=delay,
                    error=str(e),
                )
                
                await self._sleep(delay / 1000)
                delay = next_delay(delay, config.factor)
                attempt += 1
        
        raise RetryLoopExit(f"Retry loop ended after {attempt} attempts without a result")
    
    async def _run_attempt(
        self,
        operation_factory: OperationFactory[T],
        config: RetryConfig,
        attempt: int,
    ) -> T:
        """Run one attempt, bounded by the configured timeout if any."""
        timeout = config.attempt_timeout
        if timeout is None:
            return await operation_factory()
        
        task = asyncio.ensure_future(operation_factory())
        try:
            done, _ = await asyncio.wait({task}, timeout=timeout)
        except asyncio.CancelledError:
            task.cancel()
            raise
        
        if task in done:
            return task.result()
        
        task.add_done_callback(_discard_outcome)
        if config.cancel_on_timeout:
            task.cancel()
        
        logger.warning(
            "Attempt timed out",
            operation=_describe(operation_factory, config),
            attempt=attempt,
            timeout_ms=config.timeout_ms,
        )
        raise AttemptTimeout(config.timeout_ms, attempt)


async def retry(
    operation_factory: OperationFactory[T],
    config: Optional[RetryConfig] = None,
    **options: Any,
) -> T:
    """
    Execute an operation factory with retries using a default executor.
    
    Keyword options are ``RetryConfig`` fields and are applied on top of
    ``config`` when one is given.
    
    Usage:
        result = await retry(lambda: fetch(url), retries=2, timeout_ms=250)
    """
    if config is None:
        config = RetryConfig(**options)
    elif options:
        config = config.replace(**options)
    return await RetryExecutor().execute(operation_factory, config)
