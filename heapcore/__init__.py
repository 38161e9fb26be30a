"""
heapcore: a standalone binary min-heap priority queue.

    from heapcore import MinHeap

    h = MinHeap()
    h.insert(10)
    h.insert(3)
    h.extract_min()   # -> 3
"""

import logging

from .datastructures import ComparatorOrder, KeyOrder, MinHeap, NaturalOrder

__version__ = "0.1.0"

# Library logging: emit nothing unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "MinHeap",
    "NaturalOrder",
    "KeyOrder",
    "ComparatorOrder",
]
