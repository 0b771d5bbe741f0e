"""
Utility functions and decorators.
"""

from .error_handlers import handle_api_errors, to_http_exception
from .logging_utils import log_operation
from .clock import utc_now

__all__ = ["handle_api_errors", "to_http_exception", "log_operation", "utc_now"]
