"""
Execution Timing

Wall-clock measurement of a single call using the monotonic
performance counter.
"""

import time
from typing import Any, Callable, Tuple, TypeVar

T = TypeVar("T")


def timed(func: Callable[..., T], *args: Any, **kwargs: Any) -> Tuple[T, float]:
    """
    Call func once and measure how long it took.

    Returns:
        Tuple[T, float]: (return value, elapsed milliseconds)
    """
    start = time.perf_counter()
    result = func(*args, **kwargs)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return result, elapsed_ms


def measure_execution_time(func: Callable[..., Any], *args: Any, **kwargs: Any) -> float:
    """Run func exactly once and return the elapsed time in milliseconds."""
    _, elapsed_ms = timed(func, *args, **kwargs)
    return elapsed_ms
