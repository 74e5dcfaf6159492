"""
Structured Logging Utilities

Request-scoped logging context plus the operation decorator used by the
services.
"""

import inspect
import logging
from typing import Any, Dict, Optional
from contextvars import ContextVar
from functools import wraps

from exceptions import ApplicationError


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Argument names lifted into the log context by log_operation
_CONTEXT_KEYS = ("user_id", "book_id")


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Book added", extra={"user_id": user.id, "book_id": book.id})
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


class RequestContextFilter(logging.Filter):
    """
    Copies the current logging context onto every record.

    Guarantees a ``request_id`` attribute ("-" outside a request) so handler
    formats can reference it.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _logging_context.get().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        if not hasattr(record, "request_id"):
            record.request_id = "-"
        return True


def get_logging_context() -> Dict[str, Any]:
    return _logging_context.get().copy()


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    Example:
        set_logging_context(request_id="abc-123", path="/api/user")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def _operation_context(func, operation_name: str, args, kwargs) -> Dict[str, Any]:
    context = {"operation": operation_name}
    try:
        bound = inspect.signature(func).bind_partial(*args, **kwargs)
    except TypeError:
        bound = None
    arguments = bound.arguments if bound else kwargs
    for key in _CONTEXT_KEYS:
        if key in arguments:
            context[key] = arguments[key]
    return context


def log_operation(operation_name: str):
    """
    Decorator logging the start, end and failure of a service operation.

    Domain errors (ApplicationError) are expected outcomes and logged at
    WARNING without a traceback; anything else is logged at ERROR with one.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("delete_user")
        def delete_user(self, user_id: int):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _operation_context(func, operation_name, args, kwargs)

            logger.debug(f"Starting {operation_name}", extra=context)
            try:
                result = func(*args, **kwargs)
            except ApplicationError as e:
                logger.warning(f"Rejected {operation_name}: {e.message}", extra=context)
                raise
            except Exception as e:
                context["error_type"] = type(e).__name__
                logger.error(f"Failed {operation_name}: {e}", extra=context, exc_info=True)
                raise
            logger.info(f"Completed {operation_name}", extra=context)
            return result

        return wrapper

    return decorator
