from __future__ import annotations
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class NaturalOrder(Generic[T]):
    """Order elements by their built-in ``<`` operator."""

    __slots__ = ()

    def lt(self, a: T, b: T) -> bool:
        return a < b  # type: ignore[operator]

    def le(self, a: T, b: T) -> bool:
        return not b < a  # type: ignore[operator]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "NaturalOrder()"


class KeyOrder(Generic[T]):
    """Order elements by ``key(element)``, like ``sorted(..., key=...)``."""

    __slots__ = ("_key",)

    def __init__(self, key: Callable[[T], Any]) -> None:
        if not callable(key):
            raise TypeError("key must be callable")
        self._key = key

    def lt(self, a: T, b: T) -> bool:
        return self._key(a) < self._key(b)

    def le(self, a: T, b: T) -> bool:
        return not self._key(b) < self._key(a)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"KeyOrder({self._key!r})"


class ComparatorOrder(Generic[T]):
    """Order elements with a three-way comparator.

    ``cmp(a, b)`` returns a negative number when ``a`` sorts before ``b``,
    zero when they are equal and a positive number otherwise.
    """

    __slots__ = ("_cmp",)

    def __init__(self, cmp: Callable[[T, T], int]) -> None:
        if not callable(cmp):
            raise TypeError("cmp must be callable")
        self._cmp = cmp

    def lt(self, a: T, b: T) -> bool:
        return self._cmp(a, b) < 0

    def le(self, a: T, b: T) -> bool:
        return self._cmp(a, b) <= 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ComparatorOrder({self._cmp!r})"


def make_ordering(
    key: Optional[Callable[[T], Any]] = None,
    cmp: Optional[Callable[[T, T], int]] = None,
):
    """Build the ordering strategy for the given constructor arguments."""
    if key is not None and cmp is not None:
        raise ValueError("pass either key or cmp, not both")
    if key is not None:
        return KeyOrder(key)
    if cmp is not None:
        return ComparatorOrder(cmp)
    return NaturalOrder()
