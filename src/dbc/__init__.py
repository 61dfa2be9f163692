"""Design-by-contract checks with a fluent interface."""

from dbc import ensure
from dbc.conditions import (
    ArrayCondition,
    BooleanCondition,
    ExceptionCondition,
    IterableCondition,
    ObjectCondition,
    StringCondition,
)
from dbc.errors import AssertionFailedError

__all__ = [
    "ArrayCondition",
    "AssertionFailedError",
    "BooleanCondition",
    "ExceptionCondition",
    "IterableCondition",
    "ObjectCondition",
    "StringCondition",
    "ensure",
]
