"""Array-backed sequences of memory blocks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

INIT_CAPACITY = 10


@dataclass(eq=False)
class MemoryBlock(Generic[T]):
    """A block holding one piece of data; compared by identity."""

    data: Any = None


class ImplicitSequence(Generic[T]):
    """A sequence whose blocks are stored contiguously in a growable array."""

    INIT_CAPACITY = INIT_CAPACITY

    def __init__(self, capacity: int = INIT_CAPACITY, init_blocks: bool = False) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._blocks: List[MemoryBlock[T]] = []
        if init_blocks:
            self._blocks = [MemoryBlock() for _ in range(capacity)]

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[T]:
        return (block.data for block in self._blocks)

    def is_empty(self) -> bool:
        return not self._blocks

    def clear(self) -> None:
        self._blocks.clear()

    def assign(self, other: "ImplicitSequence[T]") -> "ImplicitSequence[T]":
        """Make this sequence hold copies of the blocks of ``other``."""
        if not isinstance(other, ImplicitSequence):
            raise TypeError("can only assign from an implicit sequence")
        if other is not self:
            self._capacity = max(other._capacity, len(other._blocks))
            self._blocks = [MemoryBlock(block.data) for block in other._blocks]
        return self

    def equals(self, other: "ImplicitSequence[T]") -> bool:
        if not isinstance(other, ImplicitSequence):
            raise TypeError("can only compare with an implicit sequence")
        if other is self:
            return True
        return len(self) == len(other) and all(
            mine.data == theirs.data for mine, theirs in zip(self._blocks, other._blocks)
        )

    def copy(self) -> "ImplicitSequence[T]":
        duplicate = type(self)(self._capacity, False)
        return duplicate.assign(self)

    def capacity(self) -> int:
        return self._capacity

    def change_capacity(self, new_capacity: int) -> None:
        """Set the capacity; blocks beyond it are dropped."""
        if new_capacity < 0:
            raise ValueError("capacity must not be negative")
        del self._blocks[new_capacity:]
        self._capacity = new_capacity

    def reserve_capacity(self, capacity: int) -> None:
        self.change_capacity(capacity)

    def calculate_index(self, block: MemoryBlock[T]) -> Optional[int]:
        """Return the position of ``block``, or None if it is not in the sequence."""
        return next((i for i, b in enumerate(self._blocks) if b is block), None)

    def _index_of(self, block: MemoryBlock[T]) -> int:
        index = self.calculate_index(block)
        if index is None:
            raise ValueError("block does not belong to this sequence")
        return index

    def access_first(self) -> Optional[MemoryBlock[T]]:
        return self._blocks[0] if self._blocks else None

    def access_last(self) -> Optional[MemoryBlock[T]]:
        return self._blocks[-1] if self._blocks else None

    def access(self, index: int) -> Optional[MemoryBlock[T]]:
        return self._blocks[index] if 0 <= index < len(self._blocks) else None

    def access_next(self, block: MemoryBlock[T]) -> Optional[MemoryBlock[T]]:
        index = self.index_of_next(self._index_of(block))
        return self.access(index) if index is not None else None

    def access_previous(self, block: MemoryBlock[T]) -> Optional[MemoryBlock[T]]:
        index = self.index_of_previous(self._index_of(block))
        return self.access(index) if index is not None else None

    def _allocate_at(self, index: int) -> MemoryBlock[T]:
        if not 0 <= index <= len(self._blocks):
            raise IndexError("insertion index out of range")
        if len(self._blocks) >= self._capacity:
            self._capacity = max(1, 2 * self._capacity)
        block: MemoryBlock[T] = MemoryBlock()
        self._blocks.insert(index, block)
        return block

    def _release_at(self, index: Optional[int]) -> None:
        if index is None or not 0 <= index < len(self._blocks):
            raise IndexError("removal index out of range")
        del self._blocks[index]

    def insert_first(self) -> MemoryBlock[T]:
        return self._allocate_at(0)

    def insert_last(self) -> MemoryBlock[T]:
        return self._allocate_at(len(self._blocks))

    def insert(self, index: int) -> MemoryBlock[T]:
        return self._allocate_at(index)

    def insert_after(self, block: MemoryBlock[T]) -> MemoryBlock[T]:
        return self._allocate_at(self._index_of(block) + 1)

    def insert_before(self, block: MemoryBlock[T]) -> MemoryBlock[T]:
        return self._allocate_at(self._index_of(block))

    def remove_first(self) -> None:
        self._release_at(0)

    def remove_last(self) -> None:
        self._release_at(len(self._blocks) - 1)

    def remove(self, index: int) -> None:
        self._release_at(index)

    def remove_next(self, block: MemoryBlock[T]) -> None:
        self._release_at(self.index_of_next(self._index_of(block)))

    def remove_previous(self, block: MemoryBlock[T]) -> None:
        self._release_at(self.index_of_previous(self._index_of(block)))

    def index_of_next(self, current_index: int) -> Optional[int]:
        return None if current_index >= len(self._blocks) - 1 else current_index + 1

    def index_of_previous(self, current_index: int) -> Optional[int]:
        return None if current_index <= 0 else current_index - 1

    def find_block_with_property(
        self, predicate: Callable[[MemoryBlock[T]], bool]
    ) -> Optional[MemoryBlock[T]]:
        return next((block for block in self._blocks if predicate(block)), None)


class CyclicImplicitSequence(ImplicitSequence[T]):
    """An implicit sequence whose last block is followed by its first."""

    def index_of_next(self, current_index: int) -> Optional[int]:
        size = len(self)
        if size == 0:
            return None
        return 0 if current_index >= size - 1 else current_index + 1

    def index_of_previous(self, current_index: int) -> Optional[int]:
        size = len(self)
        if size == 0:
            return None
        return size - 1 if current_index <= 0 else current_index - 1