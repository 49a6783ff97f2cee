"""Structured logging helpers: run context fields and call tracing."""

import functools
import logging
import threading
import uuid
from typing import Any, Callable, Dict, Optional

# Context fields attached to every log record of the current run
_thread_local = threading.local()


def generate_correlation_id() -> str:
    """
    Generate a unique id identifying one calculator run.

    Returns:
        UUID string
    """
    return str(uuid.uuid4())


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields currently attached to log records."""
    return dict(getattr(_thread_local, "context", {}))


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields are kept for the duration of the block and restored on exit,
    so nested contexts add to and then give back the outer fields.

    Example:
        with LogContext(correlation_id=generate_correlation_id(), start="08:00"):
            logger.info("Calculating budget")
            # Record carries correlation_id and start fields
    """

    def __init__(self, **fields):
        self.fields = fields
        self.previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self):
        self.previous_context = get_log_context()
        _thread_local.context = {**self.previous_context, **self.fields}
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _thread_local.context = self.previous_context or {}


class ContextFilter(logging.Filter):
    """Logging filter that copies the context fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in get_log_context().items():
            setattr(record, key, value)
        return True


def log_function_call(
    func: Optional[Callable] = None, *, include_args: bool = False, level: str = "DEBUG"
) -> Callable:
    """
    Decorator to log function entry, exit and exceptions.

    Args:
        func: Function to decorate (when used without arguments)
        include_args: Whether to include function arguments in logs
        level: Log level for entry and exit messages

    Returns:
        Decorated function

    Example:
        @log_function_call
        def calculate_budget(session):
            ...

        @log_function_call(include_args=True, level="INFO")
        def parse_target(daily, weekly):
            ...
    """

    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            logger = logging.getLogger(f.__module__)
            log_level = getattr(logging, level.upper())

            if include_args:
                args_repr = [repr(a) for a in args]
                kwargs_repr = [f"{k}={v!r}" for k, v in kwargs.items()]
                signature = ", ".join(args_repr + kwargs_repr)
                logger.log(log_level, f"Entering {f.__name__} with args: {signature}")
            else:
                logger.log(log_level, f"Entering {f.__name__}")

            try:
                result = f(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Exception in {f.__name__}: {type(e).__name__}: {e}",
                    exc_info=True,
                )
                raise

            logger.log(log_level, f"Exiting {f.__name__}")
            return result

        return wrapper

    if func is None:
        return decorator
    return decorator(func)
