"""Arithmetic operators: + - * / div %.

Same-tag operands keep their tag; an Integer meeting a Float promotes both to
Float. Failures inside the language (division by zero, a float too large to
truncate) produce Error(Undefined) rather than raising.
"""

from __future__ import annotations

from bprog import Value
from bprog.types.coercion import coerce
from bprog.types.environment import Environment
from bprog.types.errors import CoercionError
from bprog.types.stack_error import StackError
from bprog.types.value_type import Type, type_of


def _promote(lhs: Value, rhs: Value) -> tuple[Value, Value]:
    if type_of(lhs) is type_of(rhs):
        return lhs, rhs
    return coerce(lhs, Type.FLOAT), coerce(rhs, Type.FLOAT)


def _trunc_div(lhs: int, rhs: int) -> int:
    # Python's // floors; bprog truncates toward zero
    q = abs(lhs) // abs(rhs)
    return q if (lhs < 0) == (rhs < 0) else -q


def add(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """Numeric sum, or concatenation of two Strings / two Lists."""
    try:
        lhs, rhs = _promote(*args)
    except CoercionError:
        return StackError.undefined()
    return lhs + rhs


def sub(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    try:
        lhs, rhs = _promote(*args)
    except CoercionError:
        return StackError.undefined()
    return lhs - rhs


def mul(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    try:
        lhs, rhs = _promote(*args)
    except CoercionError:
        return StackError.undefined()
    return lhs * rhs


def div(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """True division: both operands become Float first."""
    try:
        lhs, rhs = (coerce(a, Type.FLOAT) for a in args)
    except CoercionError:
        return StackError.undefined()
    if rhs == 0.0:
        return StackError.undefined()
    return lhs / rhs


def int_div(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """Integer division truncating toward zero: `7 2 div` is 3, `-7 2 div` is -3."""
    try:
        lhs, rhs = (coerce(a, Type.INTEGER) for a in args)
    except CoercionError:
        return StackError.undefined()
    if rhs == 0:
        return StackError.undefined()
    return _trunc_div(lhs, rhs)


def mod(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """Remainder of truncating division; takes the sign of the dividend."""
    lhs, rhs = args
    if rhs == 0:
        return StackError.undefined()
    return lhs - rhs * _trunc_div(lhs, rhs)
