"""Truthiness predicates and short-circuiting all/any folds.

`truthy` dispatches on the value's type through explicit registrations
rather than generic bool() coercion:

    None                -> False
    str                 -> non-empty
    bool, numpy.bool_   -> itself
    numbers.Number      -> non-zero (int, float, numpy scalars, Decimal, ...)
    Truthy              -> value.is_truthy()
    anything else       -> True

Register further types with `@truthy.register`.
"""

import numbers
from collections.abc import Callable, Iterable
from functools import singledispatch
from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Truthy(Protocol):
    """Objects that decide their own truthiness."""

    def is_truthy(self) -> bool: ...


@singledispatch
def truthy(value: Any) -> bool:
    if isinstance(value, Truthy):
        return bool(value.is_truthy())
    return True


@truthy.register(type(None))
def _(value: None) -> bool:
    return False


@truthy.register
def _(value: str) -> bool:
    return len(value) > 0


@truthy.register(bool)
@truthy.register(np.bool_)
def _(value: bool) -> bool:
    return bool(value)


@truthy.register
def _(value: numbers.Number) -> bool:
    return bool(value != 0)


def all_of(items: Iterable[Any], predicate: Callable[[Any], bool] = truthy) -> bool:
    """True if `predicate` holds for every item. Stops at the first failure."""
    for item in items:
        if not predicate(item):
            return False
    return True


def any_of(items: Iterable[Any], predicate: Callable[[Any], bool] = truthy) -> bool:
    """True if `predicate` holds for some item. Stops at the first success."""
    for item in items:
        if predicate(item):
            return True
    return False
