"""
Structured logging helpers.

Operation logs carry a small dict of identifiers (operation, entity_id,
username, ...) as `extra` fields, merged with whatever the current request
has registered through set_logging_context().
"""

import inspect
import logging
from typing import Any, Dict, MutableMapping, Tuple
from contextvars import ContextVar
from functools import wraps

from merchant_api.exceptions import ApplicationError


_request_context: ContextVar[Dict[str, Any]] = ContextVar('merchant_api_log_context', default={})

# Argument names copied into the log context when present
_CONTEXT_KEYS = ("entity_id", "username")


class ContextLogger(logging.LoggerAdapter):
    """
    LoggerAdapter that merges the request context into every record's extra.

    Usage:
        logger = ContextLogger(__name__)
        logger.info("Supplier created", extra={"entity_id": 3})
    """

    def __init__(self, name: str):
        super().__init__(logging.getLogger(name), {})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        merged = dict(_request_context.get())
        merged.update(kwargs.get("extra") or {})
        kwargs["extra"] = merged
        return msg, kwargs


def set_logging_context(**kwargs):
    """
    Add identifiers to the context of the current request.

    Example:
        set_logging_context(username="admin")
    """
    context = dict(_request_context.get())
    context.update(kwargs)
    _request_context.set(context)


def get_logging_context() -> Dict[str, Any]:
    return dict(_request_context.get())


def clear_logging_context():
    _request_context.set({})


def _describe(error: Exception) -> Dict[str, Any]:
    message = error.message if isinstance(error, ApplicationError) else str(error)
    return {"error": message, "error_type": type(error).__name__}


def log_operation(operation_name: str):
    """
    Log the start and outcome of a service operation.

    entity_id and username are picked up whether they are passed positionally
    or by keyword. Application errors (not found, validation, conflict, ...)
    are logged as warnings, anything else as an error with traceback. The
    exception is always re-raised.

    Example:
        @log_operation("delete_supplier")
        def delete(self, entity_id: int) -> None:
            ...
    """
    def decorator(func):
        signature = inspect.signature(func)
        logger = ContextLogger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                arguments = signature.bind_partial(*args, **kwargs).arguments
            except TypeError:
                arguments = kwargs
            context = {"operation": operation_name}
            context.update({key: arguments[key] for key in _CONTEXT_KEYS if key in arguments})

            logger.debug(f"Starting {operation_name}", extra=context)
            try:
                result = func(*args, **kwargs)
            except ApplicationError as e:
                logger.warning(f"Rejected {operation_name}: {e.message}", extra={**context, **_describe(e)})
                raise
            except Exception as e:
                logger.error(f"Failed {operation_name}", extra={**context, **_describe(e)}, exc_info=True)
                raise

            logger.info(f"Completed {operation_name}", extra=context)
            return result

        return wrapper

    return decorator
