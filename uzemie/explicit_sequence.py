"""Linked sequences of memory blocks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, TypeVar

from uzemie.implicit_sequence import MemoryBlock

T = TypeVar("T")


@dataclass(eq=False)
class SinglyLinkedBlock(MemoryBlock[T]):
    """A memory block that knows the block after it."""

    next: Optional["SinglyLinkedBlock[T]"] = None


@dataclass(eq=False)
class DoublyLinkedBlock(SinglyLinkedBlock[T]):
    """A memory block that knows the blocks before and after it."""

    previous: Optional["DoublyLinkedBlock[T]"] = None


class SinglyLinkedSequence:
    """A sequence of blocks chained by forward links."""

    _block_type: type = SinglyLinkedBlock

    def __init__(self) -> None:
        self._first: Optional[SinglyLinkedBlock] = None
        self._last: Optional[SinglyLinkedBlock] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator:
        return (block.data for block in self._iter_blocks())

    def _iter_blocks(self) -> Iterator[SinglyLinkedBlock]:
        current = self._first
        while current is not None:
            following = current.next
            yield current
            current = following

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        for block in list(self._iter_blocks()):
            self._unlink(block)
        self._first = None
        self._last = None
        self._size = 0

    def assign(self, other: "SinglyLinkedSequence") -> "SinglyLinkedSequence":
        """Make this sequence hold copies of the data of ``other``."""
        if not isinstance(other, SinglyLinkedSequence):
            raise TypeError("can only assign from a linked sequence")
        if other is not self:
            self.clear()
            for data in other:
                self.insert_last().data = data
        return self

    def equals(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, SinglyLinkedSequence) or len(self) != len(other):
            return False
        return all(mine == theirs for mine, theirs in zip(self, other))

    def copy(self) -> "SinglyLinkedSequence":
        return type(self)().assign(self)

    def calculate_index(self, block: SinglyLinkedBlock) -> Optional[int]:
        """Return the position of ``block``, or None if it is not in the sequence."""
        return next(
            (i for i, b in enumerate(self._iter_blocks()) if b is block), None
        )

    def access_first(self) -> Optional[SinglyLinkedBlock]:
        return self._first

    def access_last(self) -> Optional[SinglyLinkedBlock]:
        return self._last

    def access(self, index: int) -> Optional[SinglyLinkedBlock]:
        if not 0 <= index < self._size:
            return None
        return next(b for i, b in enumerate(self._iter_blocks()) if i == index)

    def access_next(self, block: SinglyLinkedBlock) -> Optional[SinglyLinkedBlock]:
        return block.next

    def access_previous(self, block: SinglyLinkedBlock) -> Optional[SinglyLinkedBlock]:
        return self.find_block_with_property(lambda b: b.next is block)

    def _new_block(self) -> SinglyLinkedBlock:
        self._size += 1
        return self._block_type()

    def _release(self, block: SinglyLinkedBlock) -> None:
        self._unlink(block)
        self._size -= 1

    def _unlink(self, block: SinglyLinkedBlock) -> None:
        block.next = None

    def _connect(
        self, previous: Optional[SinglyLinkedBlock], following: Optional[SinglyLinkedBlock]
    ) -> None:
        if previous is not None:
            previous.next = following

    def insert_first(self) -> SinglyLinkedBlock:
        if self._first is None:
            self._first = self._last = self._new_block()
            return self._first
        return self.insert_before(self._first)

    def insert_last(self) -> SinglyLinkedBlock:
        if self._last is None:
            self._first = self._last = self._new_block()
            return self._last
        return self.insert_after(self._last)

    def insert(self, index: int) -> SinglyLinkedBlock:
        if not 0 <= index <= self._size:
            raise IndexError("insertion index out of range")
        if index == 0:
            return self.insert_first()
        if index == self._size:
            return self.insert_last()
        return self.insert_after(self.access(index - 1))

    def insert_after(self, block: SinglyLinkedBlock) -> SinglyLinkedBlock:
        following = self.access_next(block)
        new_block = self._new_block()
        self._connect(block, new_block)
        self._connect(new_block, following)
        if block is self._last:
            self._last = new_block
        return new_block

    def insert_before(self, block: SinglyLinkedBlock) -> SinglyLinkedBlock:
        previous = self.access_previous(block)
        new_block = self._new_block()
        self._connect(previous, new_block)
        self._connect(new_block, block)
        if block is self._first:
            self._first = new_block
        return new_block

    def remove_first(self) -> None:
        removed = self._first
        if removed is None:
            raise IndexError("remove from an empty sequence")
        if removed is self._last:
            self._first = self._last = None
        else:
            self._first = removed.next
        self._release(removed)

    def remove_last(self) -> None:
        removed = self._last
        if removed is None:
            raise IndexError("remove from an empty sequence")
        if removed is self._first:
            self._first = self._last = None
        else:
            new_last = self.access_previous(removed)
            new_last.next = None
            self._last = new_last
        self._release(removed)

    def remove(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError("removal index out of range")
        if index == 0:
            self.remove_first()
        else:
            self.remove_next(self.access(index - 1))

    def remove_next(self, block: SinglyLinkedBlock) -> None:
        removed = self.access_next(block)
        if removed is None:
            raise IndexError("block has no next block")
        if removed is self._last:
            self.remove_last()
        else:
            self._connect(block, removed.next)
            self._release(removed)

    def remove_previous(self, block: SinglyLinkedBlock) -> None:
        removed = self.access_previous(block)
        if removed is None:
            raise IndexError("block has no previous block")
        if removed is self._first:
            self.remove_first()
        else:
            self._connect(self.access_previous(removed), block)
            self._release(removed)

    def find_block_with_property(
        self, predicate: Callable[[SinglyLinkedBlock], bool]
    ) -> Optional[SinglyLinkedBlock]:
        return next((b for b in self._iter_blocks() if predicate(b)), None)


class DoublyLinkedSequence(SinglyLinkedSequence):
    """A sequence of blocks chained by forward and backward links."""

    _block_type = DoublyLinkedBlock

    def access_previous(self, block: DoublyLinkedBlock) -> Optional[DoublyLinkedBlock]:
        return block.previous

    def remove_first(self) -> None:
        super().remove_first()
        if self._first is not None:
            self._first.previous = None

    def _unlink(self, block: DoublyLinkedBlock) -> None:
        super()._unlink(block)
        block.previous = None

    def _connect(
        self, previous: Optional[DoublyLinkedBlock], following: Optional[DoublyLinkedBlock]
    ) -> None:
        super()._connect(previous, following)
        if following is not None:
            following.previous = previous