"""Ordering, equality and boolean operators.

Both operands of `<`, `>` and `==` are checked for compatibility before the
rule runs (homogeneous signature), so these rules only see comparable pairs at
the top level. Lists nest, and an incompatible pair found deeper inside two
lists yields Error(Undefined).
"""

from __future__ import annotations

from bprog import Value
from bprog.types.environment import Environment
from bprog.types.errors import BprogTypeError
from bprog.types.stack_error import StackError
from bprog.types.value_type import compare, values_equal


def lt(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    try:
        return compare(*args) < 0
    except BprogTypeError:
        return StackError.undefined()


def gt(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    try:
        return compare(*args) > 0
    except BprogTypeError:
        return StackError.undefined()


def eq(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    return values_equal(*args)


def logical_and(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    lhs, rhs = args
    return lhs and rhs


def logical_or(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    lhs, rhs = args
    return lhs or rhs


def logical_not(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    return not args[0]
