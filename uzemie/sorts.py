"""Sorting algorithms that work in place on sequences of blocks."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

Comparator = Callable[[Any, Any], bool]


class Sort(ABC):
    """An in-place sort of a sequence under a strict "comes before" comparator."""

    @abstractmethod
    def _sort_values(self, values: List[Any], compare: Comparator) -> None:
        """Sort ``values`` in place."""

    def sort(self, sequence, compare: Optional[Comparator] = None) -> None:
        """Sort ``sequence`` in place; ``compare`` defaults to ``<``."""
        compare = compare if compare is not None else operator.lt
        values = list(sequence)
        if not values:
            return
        self._sort_values(values, compare)
        for index, value in enumerate(values):
            sequence.access(index).data = value


class QuickSort(Sort):
    """Quick sort with the middle element as pivot."""

    def _sort_values(self, values: List[Any], compare: Comparator) -> None:
        pending = [(0, len(values) - 1)]
        while pending:
            low, high = pending.pop()
            pivot = values[low + (high - low) // 2]
            left, right = low, high
            while left <= right:
                while compare(values[left], pivot):
                    left += 1
                while compare(pivot, values[right]):
                    right -= 1
                if left <= right:
                    values[left], values[right] = values[right], values[left]
                    left += 1
                    right -= 1
            if low < right:
                pending.append((low, right))
            if left < high:
                pending.append((left, high))

    def sort(self, sequence, compare: Optional[Comparator] = None) -> None:
        super().sort(sequence, compare)