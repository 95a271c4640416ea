"""Error handling utilities and decorators"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from ..exceptions import FocloirError

T = TypeVar("T")


def handle_errors(
    default_return: Any = None,
    log_level: int = logging.ERROR,
    reraise_on: type[Exception] | tuple[type[Exception], ...] | None = None,
    operation_name: str | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator for handling errors with customizable behavior.

    Args:
        default_return: Value to return when an error occurs
        log_level: Logging level for error messages
        reraise_on: Exception type(s) to reraise instead of handling
        operation_name: Custom operation name for logging (defaults to function name)
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            op_name = operation_name or func.__name__
            logger = logging.getLogger(func.__module__)

            try:
                return func(*args, **kwargs)
            except Exception as e:
                if reraise_on and isinstance(e, reraise_on):
                    raise

                if isinstance(e, FocloirError):
                    logger.log(log_level, f"Application error in {op_name}: {e}")
                    if e.details:
                        logger.debug(f"Error details for {op_name}: {e.details}")
                else:
                    logger.log(
                        log_level, f"Unexpected error in {op_name}: {e}", exc_info=True
                    )

                return cast(T, default_return)

        return wrapper

    return decorator


class ErrorCollector:
    """Utility class for collecting and reporting multiple errors"""

    def __init__(self) -> None:
        self.errors: list[Exception] = []
        self.warnings: list[str] = []

    def add_error(self, error: Exception) -> None:
        """Add an error to the collection"""
        self.errors.append(error)

    def add_warning(self, warning: str) -> None:
        """Add a warning to the collection"""
        self.warnings.append(warning)

    def has_errors(self) -> bool:
        """Check if any errors were collected"""
        return len(self.errors) > 0

    def log_all(self, logger: logging.Logger) -> None:
        """Log all collected errors and warnings"""
        for error in self.errors:
            if isinstance(error, FocloirError):
                logger.error(f"Application error: {error}")
            else:
                logger.error(f"Unexpected error: {error}", exc_info=False)

        for warning in self.warnings:
            logger.warning(warning)
