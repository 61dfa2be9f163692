"""Failure signal raised by violated contracts."""

from __future__ import annotations

import logging
import traceback
from typing import Any, NoReturn

logger = logging.getLogger(__name__)


class AssertionFailedError(AssertionError):
    """Raised when a contract stated through ``dbc.ensure`` does not hold.

    Attributes:
        message: The formatted explanation of the violated condition.
        cause: The exception that led to the violation, if any. It is also
            stored as ``__cause__`` so tracebacks show the full chain.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.__cause__ = cause


def format_message(template: str, args: tuple[Any, ...] = ()) -> str:
    """Apply printf-style ``%`` formatting, ignoring surplus arguments.

    Without arguments the template is returned as is, so ``"100%% done"``
    stays ``"100%% done"``; with any argument ``%%`` becomes ``%``.
    """
    if not args:
        return template
    for count in range(len(args), -1, -1):
        try:
            return template % args[:count]
        except (TypeError, ValueError):
            continue
    return template


def fail(explanation: str, *args: Any, cause: BaseException | None = None) -> NoReturn:
    """Raise an :class:`AssertionFailedError` and log it at WARNING."""
    error = AssertionFailedError(format_message(explanation, args), cause)
    try:
        logger.warning(f"Assertion failed: {error.message}", exc_info=error)
    except Exception:
        traceback.print_exc()
    if cause is not None:
        raise error from cause
    raise error
