"""Error boundary shared by store operations."""

import functools
import logging
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from national_connect.domain.errors import DirectoryError, InternalError

_logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def store_operation(func: Callable[P, R]) -> Callable[P, R]:
    """Convert unexpected failures into ``InternalError``.

    Domain errors pass through untouched; anything else is logged and
    re-raised with its original message.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except DirectoryError:
            raise
        except Exception as exc:
            _logger.exception("Store operation %s failed", func.__qualname__)
            raise InternalError(str(exc)) from exc

    return wrapper
