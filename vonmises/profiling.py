"""Profiling switch and timing decorator."""

import functools
import logging
import time
from typing import Callable, Any

logger = logging.getLogger(__name__)

# Global profiling state
PROFILING_ENABLED = False


def enable_profiling():
    """Enable profiling decorators."""
    global PROFILING_ENABLED
    PROFILING_ENABLED = True


def disable_profiling():
    """Disable profiling decorators."""
    global PROFILING_ENABLED
    PROFILING_ENABLED = False


def profile_time(func: Callable) -> Callable:
    """Decorator to log function execution time while profiling is enabled."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        if not PROFILING_ENABLED:
            return func(*args, **kwargs)

        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        end_time = time.perf_counter()

        logger.info("%s: %.6fs", func.__qualname__, end_time - start_time)
        return result
    return wrapper
