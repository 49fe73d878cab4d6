"""The data stack.

A plain Python list with the top at the end. Iteration runs top to bottom,
matching the order in which the stack is displayed.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from bprog import Value
from bprog.types.errors import StackUnderflow


class Stack:
    __slots__ = ("_items",)

    def __init__(self, values: Iterable[Value] = ()):
        # values are pushed in order: the last one ends up on top
        self._items: list[Value] = list(values)

    def push(self, value: Value) -> None:
        self._items.append(value)

    def pop(self) -> Value:
        if not self._items:
            raise StackUnderflow("Cannot pop from an empty stack")
        return self._items.pop()

    def pop_many(self, n: int) -> list[Value]:
        """Pop `n` values, returned bottom-most first (argument order)."""
        if n > len(self._items):
            raise StackUnderflow(f"Need {n} value(s), stack holds {len(self._items)}")
        if n == 0:
            return []
        popped = self._items[-n:]
        del self._items[-n:]
        return popped

    def peek_many(self, n: int) -> list[Value]:
        """The top `n` values without popping, bottom-most first."""
        return self._items[-n:] if n else []

    def peek(self) -> Optional[Value]:
        """Top value without popping, or None when empty."""
        return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Value]:
        return reversed(self._items)

    def to_list(self) -> list[Value]:
        """Contents bottom to top."""
        return list(self._items)

    def contents_to_string(self) -> str:
        from bprog.printer import stack_to_display
        return stack_to_display(self)

    def __repr__(self) -> str:
        return f"Stack({self.to_list()!r})"
