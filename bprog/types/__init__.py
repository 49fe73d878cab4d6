from bprog.types.symbol import Symbol
from bprog.types.void import Void, VoidType
from bprog.types.quotation import Quotation
from bprog.types.stack_error import StackError, ErrorKind
from bprog.types.value_type import Type, Constraint, type_of, is_satisfied_by
from bprog.types.coercion import coerce
from bprog.types.stack import Stack
from bprog.types.environment import Environment, Binding
from bprog.types.signature import Signature

__all__ = [
    "Symbol",
    "Void",
    "VoidType",
    "Quotation",
    "StackError",
    "ErrorKind",
    "Type",
    "Constraint",
    "type_of",
    "is_satisfied_by",
    "coerce",
    "Stack",
    "Environment",
    "Binding",
    "Signature",
]
