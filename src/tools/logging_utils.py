"""
Logging utilities for Style-Report tools.

Provides a decorator that records external tool calls in the session logs.
"""

import functools
import time
from typing import Any, Callable, TypeVar

from ..logging.manager import LoggingManager

F = TypeVar("F", bound=Callable[..., Any])


def log_tool_execution(tool_name: str) -> Callable[[F], F]:
    """Decorator to log tool execution with parameters and results.

    Without an active logging session the function runs unlogged.

    Args:
        tool_name: Name of the tool for logging purposes

    Returns:
        Decorated function with logging
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                logger = LoggingManager.get_instance().get_tool_logger(tool_name)
            except RuntimeError:
                # No active logging session
                return func(*args, **kwargs)

            log_args = [_truncate(arg) for arg in args]
            log_kwargs = {key: _truncate(value) for key, value in kwargs.items()}
            logger.info(f"[TOOL_START] {tool_name}")
            logger.info(f"Parameters - Args: {log_args}, Kwargs: {log_kwargs}")

            start_time = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"[TOOL_ERROR] {tool_name} failed: {e}")
                raise

            execution_time = time.time() - start_time
            logger.info(
                f"[TOOL_COMPLETE] {tool_name} - Execution time: {execution_time:.3f}s"
            )
            logger.info(f"Result: {_truncate(result)}")

            return result

        return wrapper  # type: ignore

    return decorator


def _truncate(value: Any, max_length: int = 200) -> str:
    """Shorten a value for logging."""
    text = str(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, total length: {len(text)})"
    return text
