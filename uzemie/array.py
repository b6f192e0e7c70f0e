"""Fixed-size arrays and compact matrices with arbitrary index bases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Union

from uzemie.implicit_sequence import ImplicitSequence


@dataclass(frozen=True)
class Dimension:
    """The first valid index and the number of positions along one axis."""

    base: int
    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("dimension size must not be negative")

    def contains(self, index: int) -> bool:
        return self.base <= index < self.base + self.size


def _as_dimension(value: Union[int, Dimension]) -> Dimension:
    return value if isinstance(value, Dimension) else Dimension(0, value)


def _refuse_clear(structure: object) -> None:
    """Fixed-size structures keep every position; clearing them is an error."""
    name = type(structure).__name__
    message = f"{name} can't be cleared!"
    raise TypeError(message)


class Array:
    """A fixed-size array indexed from an arbitrary base."""

    def __init__(self, dimension: Union[int, Dimension]) -> None:
        dimension = _as_dimension(dimension)
        self._base = dimension.base
        self._sequence: ImplicitSequence = ImplicitSequence(dimension.size, True)

    def __len__(self) -> int:
        return len(self._sequence)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._sequence)

    def base(self) -> int:
        return self._base

    def _dimension(self) -> Dimension:
        return Dimension(self._base, len(self))

    def is_empty(self) -> bool:
        return False

    def clear(self) -> None:
        """Raise TypeError: an array's size is fixed."""
        _refuse_clear(self)

    def assign(self, other: "Array") -> "Array":
        """Copy the elements of ``other``, which must have the same dimension."""
        if not isinstance(other, Array):
            raise TypeError("can only assign from an array")
        if self._dimension() != other._dimension():
            raise ValueError("Array dimensions are different!")
        self._sequence.assign(other._sequence)
        return self

    def equals(self, other: object) -> bool:
        return (
            isinstance(other, Array)
            and self._base == other._base
            and self._sequence.equals(other._sequence)
        )

    def copy(self) -> "Array":
        return Array(self._dimension()).assign(self)

    def _block(self, index: int):
        if not self._dimension().contains(index):
            raise IndexError("Invalid index!")
        return self._sequence.access(index - self._base)

    def access(self, index: int) -> Any:
        return self._block(index).data

    def set(self, element: Any, index: int) -> None:
        self._block(index).data = element


class CompactMatrix:
    """A two-dimensional matrix stored row by row in one block of memory."""

    def __init__(
        self, dimension1: Union[int, Dimension], dimension2: Union[int, Dimension]
    ) -> None:
        self._dimension1 = _as_dimension(dimension1)
        self._dimension2 = _as_dimension(dimension2)
        self._sequence: ImplicitSequence = ImplicitSequence(
            self._dimension1.size * self._dimension2.size, True
        )

    def __len__(self) -> int:
        return self._dimension1.size * self._dimension2.size

    def dimension1(self) -> Dimension:
        return self._dimension1

    def dimension2(self) -> Dimension:
        return self._dimension2

    def is_empty(self) -> bool:
        return False

    def clear(self) -> None:
        """Raise TypeError: a matrix's size is fixed."""
        _refuse_clear(self)

    def _same_shape(self, other: "CompactMatrix") -> bool:
        return (
            self._dimension1 == other._dimension1
            and self._dimension2 == other._dimension2
        )

    def assign(self, other: "CompactMatrix") -> "CompactMatrix":
        """Copy the elements of ``other``, which must have the same dimensions."""
        if not isinstance(other, CompactMatrix):
            raise TypeError("can only assign from a compact matrix")
        if not self._same_shape(other):
            raise ValueError("CompactMatrix dimensions are different!")
        self._sequence.assign(other._sequence)
        return self

    def equals(self, other: object) -> bool:
        return (
            isinstance(other, CompactMatrix)
            and self._same_shape(other)
            and self._sequence.equals(other._sequence)
        )

    def copy(self) -> "CompactMatrix":
        return CompactMatrix(self._dimension1, self._dimension2).assign(self)

    def _block(self, index1: int, index2: int):
        if not (self._dimension1.contains(index1) and self._dimension2.contains(index2)):
            raise IndexError("Invalid index!")
        mapped = (index1 - self._dimension1.base) * self._dimension2.size + (
            index2 - self._dimension2.base
        )
        return self._sequence.access(mapped)

    def access(self, index1: int, index2: int) -> Any:
        return self._block(index1, index2).data

    def set(self, element: Any, index1: int, index2: int) -> None:
        self._block(index1, index2).data = element