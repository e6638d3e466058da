"""
Retry Backoff
=============
Exponential backoff delay computation.
"""

import math
from typing import List


def next_delay(delay_ms: int, factor: float) -> int:
    """Grow a delay by ``factor``, rounded down to whole milliseconds."""
    return max(0, math.floor(delay_ms * factor))


def backoff_schedule(initial_delay_ms: int, factor: float, retries: int) -> List[int]:
    """
    Delays slept before each retry, in milliseconds.
    
    Args:
        initial_delay_ms: Delay before the first retry
        factor: Multiplier applied after each failed attempt
        retries: Number of retries (one delay per retry)
        
    Returns:
        List of ``retries`` delays; entry ``i`` precedes retry ``i + 1``
    
    Example:
        >>> backoff_schedule(10, 2, 4)
        [10, 20, 40, 80]
    """
    delays = []
    delay = initial_delay_ms
    for _ in range(retries):
        delays.append(delay)
        delay = next_delay(delay, factor)
    return delays
