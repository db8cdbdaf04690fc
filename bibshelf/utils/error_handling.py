"""Error types and handling utilities."""
import logging
from functools import wraps
from typing import Callable, Any


class BibshelfError(Exception):
    """Base class for errors reported to the user."""


class FetchError(BibshelfError):
    """A document could not be retrieved from any source."""


class SourceReadError(BibshelfError):
    """A local file could not be read."""


def file_operation_handler(func: Callable) -> Callable:
    """Decorator for handling file operation errors."""
    @wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        try:
            return func(*args, **kwargs)
        except (OSError, UnicodeDecodeError) as e:
            logging.error(f"File operation error in {func.__name__}: {str(e)}")
            return None
    return wrapper
