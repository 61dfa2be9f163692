"""Entry points for stating contracts.

Each function wraps a value in the condition type matching its shape; the
caller picks the function, so no runtime type switching takes place::

    from dbc import ensure

    ensure.that(name in registry).is_true("Unknown name %s", name)
    ensure.that_string(name).is_not_blank()
    ensure.that_object(session, user).is_not_null()
    ensure.that_iterable(rows).is_not_empty()

A violated condition raises :class:`~dbc.errors.AssertionFailedError`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, NoReturn

from dbc.conditions import (
    ArrayCondition,
    BooleanCondition,
    ExceptionCondition,
    IterableCondition,
    ObjectCondition,
    StringCondition,
)
from dbc.errors import fail


def that(value: bool) -> BooleanCondition:
    return BooleanCondition(value)


def that_object(value: Any, *additional_values: Any) -> ObjectCondition:
    return ObjectCondition(value, *additional_values)


def that_string(value: str | None) -> StringCondition:
    return StringCondition(value)


def that_iterable(value: Iterable[Any] | None) -> IterableCondition:
    return IterableCondition(value)


def that_array(value: Sequence[Any] | None) -> ArrayCondition:
    return ArrayCondition(value)


def that_exception(value: BaseException | None) -> ExceptionCondition:
    return ExceptionCondition(value)


def that_statement_is_never_reached(
    explanation: str = "This statement should never be reached.", *args: Any
) -> NoReturn:
    """Mark a code path that must never execute; always raises."""
    fail(explanation, *args)
