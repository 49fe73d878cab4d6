"""Runtime type tags and the constraints that gate operator dispatch.

Every value carries exactly one Type. A Constraint is a named predicate over
Types; `is_satisfied_by` is a plain table lookup and never coerces.
"""

from __future__ import annotations

from enum import Enum

from bprog import Value
from bprog.types.errors import BprogTypeError
from bprog.types.quotation import Quotation
from bprog.types.stack_error import StackError
from bprog.types.symbol import Symbol
from bprog.types.void import VoidType


class Type(Enum):
    VOID = "Void"
    BOOL = "Bool"
    INTEGER = "Integer"
    FLOAT = "Float"
    STRING = "String"
    SYMBOL = "Symbol"
    LIST = "List"
    QUOTATION = "Quotation"
    OPERATOR = "Operator"
    ERROR = "Error"

    def __str__(self) -> str:
        return self.value


def type_of(value: Value) -> Type:
    # bool before int: bool is an int subclass in Python
    if isinstance(value, bool):
        return Type.BOOL
    if isinstance(value, int):
        return Type.INTEGER
    if isinstance(value, float):
        return Type.FLOAT
    if isinstance(value, str):
        return Type.STRING
    if isinstance(value, Symbol):
        return Type.SYMBOL
    if isinstance(value, list):
        return Type.LIST
    if isinstance(value, Quotation):
        return Type.QUOTATION
    if isinstance(value, StackError):
        return Type.ERROR
    if isinstance(value, VoidType):
        return Type.VOID
    # Late import: operations depend on this module
    from bprog.operations.operator import Operator
    if isinstance(value, Operator):
        return Type.OPERATOR
    raise BprogTypeError(f"Not a bprog value: {value!r}")


NUMERIC = frozenset({Type.INTEGER, Type.FLOAT})
_ALL = frozenset(Type)


class Constraint(Enum):
    ANY = "Any"
    DISPLAY = "Display"
    NUM = "Num"
    BOOLEAN = "Boolean"
    ORD = "Ord"
    EQ = "Eq"
    SIZED = "Sized"
    EXECUTABLE = "Executable"
    ADDABLE = "Addable"
    # Exact-tag constraints
    BOOL = "Bool"
    INTEGER = "Integer"
    FLOAT = "Float"
    STRING = "String"
    SYMBOL = "Symbol"
    LIST = "List"
    QUOTATION = "Quotation"
    OPERATOR = "Operator"
    VOID = "Void"
    ERROR = "Error"

    def __str__(self) -> str:
        return self.value

    def is_satisfied_by(self, tag: Type) -> bool:
        return tag in SATISFIED_BY[self]


SATISFIED_BY: dict[Constraint, frozenset[Type]] = {
    Constraint.ANY: _ALL,
    Constraint.DISPLAY: _ALL,
    Constraint.NUM: NUMERIC,
    Constraint.BOOLEAN: frozenset({Type.BOOL}),
    Constraint.ORD: _ALL - {Type.ERROR},
    Constraint.EQ: _ALL - {Type.ERROR},
    Constraint.SIZED: frozenset({Type.STRING, Type.LIST, Type.QUOTATION}),
    Constraint.EXECUTABLE: frozenset({Type.OPERATOR, Type.QUOTATION}),
    Constraint.ADDABLE: NUMERIC | {Type.STRING, Type.LIST},
    Constraint.BOOL: frozenset({Type.BOOL}),
    Constraint.INTEGER: frozenset({Type.INTEGER}),
    Constraint.FLOAT: frozenset({Type.FLOAT}),
    Constraint.STRING: frozenset({Type.STRING}),
    Constraint.SYMBOL: frozenset({Type.SYMBOL}),
    Constraint.LIST: frozenset({Type.LIST}),
    Constraint.QUOTATION: frozenset({Type.QUOTATION}),
    Constraint.OPERATOR: frozenset({Type.OPERATOR}),
    Constraint.VOID: frozenset({Type.VOID}),
    Constraint.ERROR: frozenset({Type.ERROR}),
}


def is_satisfied_by(constraint: Constraint, tag: Type) -> bool:
    return constraint.is_satisfied_by(tag)


def compatible(lhs: Type, rhs: Type) -> bool:
    """True if two tags may meet in one comparison or arithmetic operation."""
    return lhs is rhs or (lhs in NUMERIC and rhs in NUMERIC)


# -------------------------------
# Structural equality and ordering
# -------------------------------
def values_equal(a: Value, b: Value) -> bool:
    """Tag-aware structural equality (Python's own == confuses 1 and True)."""
    ta, tb = type_of(a), type_of(b)
    if ta in NUMERIC and tb in NUMERIC:
        return a == b
    if ta is not tb:
        return False
    if ta in (Type.LIST, Type.QUOTATION):
        a, b = list(a), list(b)
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    return a == b


def compare(a: Value, b: Value) -> int:
    """Three-way comparison of two compatible values: -1, 0 or 1."""
    ta, tb = type_of(a), type_of(b)
    if not compatible(ta, tb):
        raise BprogTypeError(f"Cannot order {ta} against {tb}")
    if ta in (Type.LIST, Type.QUOTATION):
        for x, y in zip(a, b):
            c = compare(x, y)
            if c:
                return c
        return (len(a) > len(b)) - (len(a) < len(b))
    if ta is Type.OPERATOR:
        a, b = a.name, b.name
    elif ta is Type.VOID:
        return 0
    elif ta is Type.ERROR:
        raise BprogTypeError("Error values have no order")
    return (a > b) - (a < b)
