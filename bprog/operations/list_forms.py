"""Container operators: head, tail, empty, length, cons, append."""

from __future__ import annotations

from bprog import Value
from bprog.operations.continuation import as_data
from bprog.types.environment import Environment
from bprog.types.stack_error import StackError


def head(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """First element, or Error(HeadEmpty) for an empty list."""
    items = args[0]
    if not items:
        return StackError.head_empty()
    # an element that is itself a quotation stays data
    return as_data(items[0])


def tail(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    items = args[0]
    if not items:
        return StackError.head_empty()
    return items[1:]


def empty(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    return len(args[0]) == 0


def length(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    return len(args[0])


def cons(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    item, items = args
    return [item, *items]


def append(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """Concatenate two Strings, two Lists or two Quotations; a joined
    Quotation is data, not code."""
    lhs, rhs = args
    return as_data(lhs + rhs)
