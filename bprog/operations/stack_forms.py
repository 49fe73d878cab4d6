"""Stack shuffling: dup, swap, pop, and the no-op ().

dup and swap do not touch the stack themselves: they return a Quotation of
the operands in the new order and the splice pushes them back.
"""

from __future__ import annotations

from bprog import Value
from bprog.types.environment import Environment
from bprog.operations.continuation import literal
from bprog.types.quotation import Quotation
from bprog.types.void import Void


def dup(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    value = args[0]
    return Quotation([literal(value), literal(value)])


def swap(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    lhs, rhs = args
    return Quotation([literal(rhs), literal(lhs)])


def pop(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    return Void


def void(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    return Void
