"""Quotation: an unevaluated program fragment.

Backed by a deque so the evaluator can take items off the front cheaply and
splice a whole fragment back onto the pending input.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from bprog import Value


class Quotation:
    __slots__ = ("items",)

    def __init__(self, items: Iterable[Value] = ()):
        self.items: deque[Value] = deque(items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __eq__(self, other) -> bool:
        return isinstance(other, Quotation) and list(self.items) == list(other.items)

    def __add__(self, other: Quotation) -> Quotation:
        return Quotation([*self.items, *other.items])

    def copy(self) -> Quotation:
        return Quotation(self.items)

    def __repr__(self) -> str:
        return f"Quotation({list(self.items)!r})"
