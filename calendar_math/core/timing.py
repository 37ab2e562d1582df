import functools
import time
from typing import Callable, ParamSpec, TypeVar

import structlog

logger = structlog.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def log_timing(func: Callable[P, T]) -> Callable[P, T]:
    """
    Decorator that reports how long each call of func took. The elapsed time
    is logged at debug level in milliseconds, bound to the qualified name of
    the function, and is also reported when func raises.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        started_ns = time.perf_counter_ns()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter_ns() - started_ns) / 1_000_000
            logger.bind(function=func.__qualname__, module=func.__module__).debug(
                "call finished", elapsed_ms=round(elapsed_ms, 3)
            )

    return wrapper
