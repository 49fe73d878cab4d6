"""Helpers for the Quotations that operators hand back to the evaluator.

Any Quotation result is spliced into the pending input and run. Operators that
mean to return a Quotation as *data* wrap it with `as_data`, so the splice
just pushes it. Inside a continuation the concern is the opposite one: a
Quotation item is pushed as it is, but an Operator item would be dispatched,
so operator values are carried as `Literal`s.
"""

from __future__ import annotations

from bprog import Value
from bprog.operations.operator import Operator
from bprog.types.coercion import to_quotation
from bprog.types.quotation import Quotation


class Literal:
    """A pending-input item that is pushed without being dispatched."""

    __slots__ = ("value",)

    def __init__(self, value: Value):
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, Literal) and self.value == other.value

    def __repr__(self) -> str:
        return f"Literal({self.value!r})"


def as_data(value: Value) -> Value:
    """Wrap a rule's return value so the splice pushes it unchanged."""
    if isinstance(value, Quotation):
        return Quotation([value])
    return value


def literal(value: Value) -> Value:
    """A continuation item that will be pushed, never run."""
    if isinstance(value, Operator):
        return Literal(value)
    return value


def block(value: Value) -> Quotation:
    """The runnable body of an executable operand or branch."""
    return to_quotation(value)
