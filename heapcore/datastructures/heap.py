from __future__ import annotations
import logging
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .ordering import make_ordering

T = TypeVar("T")

logger = logging.getLogger(__name__)


class MinHeap(Generic[T]):
    """An array-backed binary min-heap.

    Elements live in ``_data[0:_size]``; ``_size`` is the logical length and
    ``len(_data)`` the buffer capacity. Extraction clears the vacated slot
    instead of shrinking the buffer, and the next insert reuses it.

    Ordering defaults to the elements' own ``<``; pass ``key`` (like
    ``sorted``) or ``cmp`` (a three-way comparator) to override it.
    """

    __slots__ = ("_data", "_size", "_order")

    def __init__(
        self,
        items: Optional[Iterable[T]] = None,
        *,
        key: Optional[Callable[[T], Any]] = None,
        cmp: Optional[Callable[[T, T], int]] = None,
    ) -> None:
        self._order = make_ordering(key, cmp)
        self._data: List[Optional[T]] = []
        self._size: int = 0
        if items is not None:
            self._data = list(items)
            self._size = len(self._data)
            self._heapify()  # Bulk build in O(n) instead of repeated inserts
            logger.debug("built heap of %d elements", self._size)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _find_slot(self, value: T) -> int:
        """Return the index ``value`` settles at when sifted up from the first empty slot.

        Only compares; nothing is written, so a failed comparison leaves the
        heap untouched.
        """
        data = self._data
        lt = self._order.lt
        idx = self._size
        while idx > 0:
            parent = (idx - 1) // 2
            if not lt(value, data[parent]):
                break
            idx = parent
        return idx

    def _place(self, value: T, slot: int) -> None:
        """Shift the parents on the path from the first empty slot down, then write ``value``."""
        data = self._data
        idx = self._size
        if idx == len(data):
            data.append(value)
        while idx > slot:
            parent = (idx - 1) // 2
            data[idx] = data[parent]
            idx = parent
        data[idx] = value
        self._size += 1

    def _sift_down(self, idx: int) -> None:
        data = self._data
        lt = self._order.lt
        n = self._size
        while True:
            left = 2 * idx + 1
            if left >= n:
                break
            right = left + 1
            child = left
            # Left child wins ties
            if right < n and lt(data[right], data[left]):
                child = right
            if not lt(data[child], data[idx]):
                break
            data[idx], data[child] = data[child], data[idx]
            idx = child

    def _heapify(self) -> None:
        """Transform the current buffer into a heap in-place in O(n) time."""
        for i in reversed(range(self._size // 2)):
            self._sift_down(i)

    @staticmethod
    def _incomparable(value: Any) -> TypeError:
        logger.debug("rejected incomparable value %r", value)
        return TypeError(f"cannot order {value!r} against heap elements")

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, value: T) -> None:
        """Insert value into the heap (O(log n)).

        Raises TypeError, leaving the heap unchanged, when ``value`` cannot be
        ordered against the elements it is compared with.
        """
        try:
            slot = self._find_slot(value)
        except TypeError as exc:
            raise self._incomparable(value) from exc
        self._place(value, slot)

    push = insert

    def extract_min(self, default: Optional[T] = None) -> Optional[T]:
        """Remove and return the smallest item, or ``default`` if the heap is empty (O(log n))."""
        if self._size == 0:
            return default
        data = self._data
        top = data[0]
        self._size -= 1
        last = self._size
        data[0] = data[last]
        data[last] = None
        if self._size:
            self._sift_down(0)
        return top

    def pop(self) -> T:
        """Pop and return the smallest item (O(log n))."""
        if self._size == 0:
            raise IndexError("pop from empty heap")
        return self.extract_min()  # type: ignore[return-value]

    def peek(self, default: Optional[T] = None) -> Optional[T]:
        """Return the smallest item without removing it (O(1))."""
        return self._data[0] if self._size else default

    def replace(self, item: T) -> T:
        """Pop and return the smallest item, then push a new item (O(log n))."""
        if self._size == 0:
            raise IndexError("replace on empty heap")
        top = self._data[0]
        try:
            self._order.lt(top, item)
        except TypeError as exc:
            raise self._incomparable(item) from exc
        self._data[0] = item
        self._sift_down(0)
        return top  # type: ignore[return-value]

    def pushpop(self, item: T) -> T:
        """Push item then pop smallest in a single O(log n) operation."""
        if not self._size:
            return item
        try:
            root_first = self._order.lt(self._data[0], item)
        except TypeError as exc:
            raise self._incomparable(item) from exc
        if root_first:
            item, self._data[0] = self._data[0], item  # type: ignore[assignment]
            self._sift_down(0)
        return item

    def drain(self) -> Iterator[T]:
        """Extract every element, yielding them in non-decreasing order."""
        while self._size:
            yield self.extract_min()  # type: ignore[misc]

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def capacity(self) -> int:
        """Number of buffer slots currently allocated (always >= size())."""
        return len(self._data)

    def clear(self) -> None:
        """Remove all elements, keeping the allocated buffer."""
        self._data[: self._size] = [None] * self._size
        self._size = 0

    def shrink_to_fit(self) -> None:
        """Release buffer slots past the last element."""
        released = len(self._data) - self._size
        if released:
            del self._data[self._size:]
            logger.debug("released %d unused heap slots", released)

    def is_valid(self) -> bool:
        """Check the heap property over every parent/child pair."""
        data = self._data
        lt = self._order.lt
        return not any(lt(data[i], data[(i - 1) // 2]) for i in range(1, self._size))

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size > 0

    def to_list(self) -> List[T]:
        return self._data[: self._size]  # type: ignore[return-value]

    def __iter__(self) -> Iterator[T]:
        # Iterate over a snapshot in heap order, not sorted order
        return iter(self.to_list())

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"MinHeap({self.to_list()!r})"
