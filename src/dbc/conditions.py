"""Condition builders returned by the ``dbc.ensure`` entry points.

Every check evaluates immediately and either returns ``None`` or raises
:class:`~dbc.errors.AssertionFailedError` through :func:`~dbc.errors.fail`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, NoReturn, get_args

from dbc.errors import fail

_WRONG_TYPE = "Object is of wrong type. Actual: %s. Expected one of: %s"


def _type_names(types: tuple[Any, ...]) -> list[str]:
    """Names of the expected types, with unions such as ``int | str`` expanded."""
    names = []
    for expected in types:
        for member in get_args(expected) or (expected,):
            names.append(getattr(member, "__name__", repr(member)))
    return names


def _require_present(values: Iterable[Any], explanation: str, args: tuple[Any, ...]) -> None:
    for value in values:
        if value is None:
            fail(explanation, *args)


def _require_no_none_elements(elements: Iterable[Any], explanation: str, args: tuple[Any, ...]) -> None:
    """Fail if ``elements`` is empty or yields ``None``. Consumes it once."""
    empty = True
    for element in elements:
        empty = False
        if element is None:
            fail(explanation, *args)
    if empty:
        fail(explanation, *args)


class BooleanCondition:
    """Checks on a single boolean value."""

    def __init__(self, value: bool) -> None:
        self._value = value

    def is_true(self, explanation: str = "Value is not TRUE", *args: Any) -> None:
        if not self._value:
            fail(explanation, *args)

    def is_false(self, explanation: str = "Value is not FALSE", *args: Any) -> None:
        if self._value:
            fail(explanation, *args)


class ObjectCondition:
    """Checks on a value and, for ``is_not_null``, any additional values."""

    def __init__(self, value: Any, *additional_values: Any) -> None:
        self._value = value
        self._additional_values = additional_values

    def is_not_null(self, explanation: str = "Object is NULL", *args: Any) -> None:
        """Fail if the value or any of the additional values is ``None``."""
        _require_present((self._value, *self._additional_values), explanation, args)

    def is_null(self, explanation: str = "Object is not NULL", *args: Any) -> None:
        """Fail if the value is not ``None``. Additional values are not checked."""
        if self._value is not None:
            fail(explanation, *args)

    def is_instance_of(
        self,
        types: Any,
        explanation: str | None = None,
        *args: Any,
    ) -> None:
        """Fail unless the value is an instance of at least one of ``types``.

        ``types`` is a class, a union such as ``int | str`` or a tuple of
        these, as accepted by ``isinstance``. A ``None`` value always fails.
        """
        expected = types if isinstance(types, tuple) else (types,)
        if explanation is None:
            self.is_not_null()
        else:
            self.is_not_null(explanation, *args)

        if isinstance(self._value, expected):
            return
        if explanation is None:
            fail(
                _WRONG_TYPE,
                type(self._value).__name__,
                _type_names(expected),
            )
        fail(explanation, *args)


class StringCondition(ObjectCondition):
    """Checks on an optional string."""

    def __init__(self, value: str | None) -> None:
        super().__init__(value)
        self._string = value

    def is_not_empty(self, explanation: str = "The string is empty or NULL", *args: Any) -> None:
        self.is_not_null(explanation, *args)
        if len(self._string) == 0:
            fail(explanation, *args)

    def is_not_blank(self, explanation: str = "The string is blank", *args: Any) -> None:
        """Fail unless the string has at least one non-whitespace character."""
        self.is_not_null()
        if not self._string or self._string.isspace():
            fail(explanation, *args)


class IterableCondition(ObjectCondition):
    """Checks on an optional iterable, which may be a one-shot generator."""

    def __init__(self, value: Iterable[Any] | None) -> None:
        super().__init__(value)
        self._iterable = value

    def is_not_empty(self, explanation: str = "Iterable is empty or NULL", *args: Any) -> None:
        """Fail if the iterable is ``None``, empty, or contains ``None``."""
        self.is_not_null(explanation, *args)
        _require_no_none_elements(self._iterable, explanation, args)


class ArrayCondition(ObjectCondition):
    """Checks on an optional fixed-size sequence.

    The sequence is stored as given: changes made to it before a check is
    called are seen by that check.
    """

    def __init__(self, value: Sequence[Any] | None) -> None:
        super().__init__(value)
        self._array = value

    def is_not_empty(self, explanation: str = "Array is empty or NULL", *args: Any) -> None:
        """Fail if the array is ``None``, has no elements, or contains ``None``."""
        self.is_not_null(explanation, *args)
        if len(self._array) == 0:
            fail(explanation, *args)
        _require_no_none_elements(self._array, explanation, args)


class ExceptionCondition:
    """Wraps a caught exception so it can be turned into a contract violation."""

    def __init__(self, value: BaseException | None) -> None:
        self._value = value

    def is_never_thrown(self, explanation: str, *args: Any) -> NoReturn:
        """Always fail, chaining the wrapped exception as the cause."""
        fail(explanation, *args, cause=self._value)
