from .heap import MinHeap
from .ordering import ComparatorOrder, KeyOrder, NaturalOrder, make_ordering

__all__ = [
    "MinHeap",
    "NaturalOrder",
    "KeyOrder",
    "ComparatorOrder",
    "make_ordering",
]
