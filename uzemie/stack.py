"""Stacks backed by implicit and linked sequences."""

from __future__ import annotations

from typing import Any

from uzemie.explicit_sequence import SinglyLinkedSequence
from uzemie.implicit_sequence import ImplicitSequence


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""

    def __init__(self, message: str = "Stack is empty") -> None:
        super().__init__(message)


class ImplicitStack:
    """A stack whose top is the last block of an implicit sequence."""

    def __init__(self) -> None:
        self._sequence: ImplicitSequence = ImplicitSequence()

    def __len__(self) -> int:
        return len(self._sequence)

    def is_empty(self) -> bool:
        return self._sequence.is_empty()

    def clear(self) -> None:
        self._sequence.clear()

    def copy(self) -> "ImplicitStack":
        duplicate = ImplicitStack()
        duplicate._sequence = self._sequence.copy()
        return duplicate

    def equals(self, other: object) -> bool:
        return isinstance(other, ImplicitStack) and self._sequence.equals(other._sequence)

    def push(self, element: Any) -> None:
        self._sequence.insert_last().data = element

    def peek(self) -> Any:
        if self.is_empty():
            raise StackEmptyError()
        return self._sequence.access_last().data

    def pop(self) -> Any:
        if self.is_empty():
            raise StackEmptyError()
        data = self._sequence.access_last().data
        self._sequence.remove_last()
        return data


class ExplicitStack:
    """A stack whose top is the first block of a singly linked sequence."""

    def __init__(self) -> None:
        self._sequence = SinglyLinkedSequence()

    def __len__(self) -> int:
        return len(self._sequence)

    def is_empty(self) -> bool:
        return self._sequence.is_empty()

    def clear(self) -> None:
        self._sequence.clear()

    def copy(self) -> "ExplicitStack":
        duplicate = ExplicitStack()
        duplicate._sequence = self._sequence.copy()
        return duplicate

    def equals(self, other: object) -> bool:
        return isinstance(other, ExplicitStack) and self._sequence.equals(other._sequence)

    def push(self, element: Any) -> None:
        self._sequence.insert_first().data = element

    def peek(self) -> Any:
        if self.is_empty():
            raise StackEmptyError()
        return self._sequence.access_first().data

    def pop(self) -> Any:
        if self.is_empty():
            raise StackEmptyError()
        data = self._sequence.access_first().data
        self._sequence.remove_first()
        return data