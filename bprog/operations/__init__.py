"""The operation catalog.

One row per built-in: textual name, signature and execution rule. The reader
maps tokens onto these rows and the evaluator dispatches through them, so
adding an operator is a one-line change here.
"""

from bprog.types.value_type import Constraint as C
from bprog.types.signature import (
    nullary,
    unary,
    homogeneous_binary,
    heterogeneous_binary,
)
from bprog.operations.operator import Operator, register, operator, find_operator
from bprog.operations import (
    arithmetic,
    binding_forms,
    control_forms,
    higher_order_forms,
    io_forms,
    list_forms,
    logic_forms,
    stack_forms,
)

CATALOG = [
    # Void / IO / parsing
    ("()", nullary(C.VOID), stack_forms.void),
    ("print", unary(C.DISPLAY, C.VOID), io_forms.print_form),
    ("read", nullary(C.STRING), io_forms.read_form),
    ("parseInteger", unary(C.STRING, C.INTEGER), io_forms.parse_integer),
    ("parseFloat", unary(C.STRING, C.FLOAT), io_forms.parse_float),
    ("words", unary(C.STRING, C.LIST), io_forms.words),
    # Arithmetic
    ("+", homogeneous_binary(C.ADDABLE, C.ADDABLE), arithmetic.add),
    ("-", homogeneous_binary(C.NUM, C.NUM), arithmetic.sub),
    ("*", homogeneous_binary(C.NUM, C.NUM), arithmetic.mul),
    ("/", homogeneous_binary(C.NUM, C.FLOAT), arithmetic.div),
    ("div", homogeneous_binary(C.NUM, C.INTEGER), arithmetic.int_div),
    ("%", homogeneous_binary(C.INTEGER, C.INTEGER), arithmetic.mod),
    # Ordering, equality, boolean
    ("<", homogeneous_binary(C.ORD, C.BOOL), logic_forms.lt),
    (">", homogeneous_binary(C.ORD, C.BOOL), logic_forms.gt),
    ("==", homogeneous_binary(C.EQ, C.BOOL), logic_forms.eq),
    ("&&", homogeneous_binary(C.BOOLEAN, C.BOOL), logic_forms.logical_and),
    ("||", homogeneous_binary(C.BOOLEAN, C.BOOL), logic_forms.logical_or),
    ("not", unary(C.BOOLEAN, C.BOOL), logic_forms.logical_not),
    # Containers
    ("head", unary(C.LIST, C.ANY), list_forms.head),
    ("tail", unary(C.LIST, C.LIST), list_forms.tail),
    ("empty", unary(C.SIZED, C.BOOL), list_forms.empty),
    ("length", unary(C.SIZED, C.INTEGER), list_forms.length),
    ("cons", heterogeneous_binary(C.ANY, C.LIST, C.LIST), list_forms.cons),
    ("append", homogeneous_binary(C.SIZED, C.ANY), list_forms.append),
    # Higher order
    ("each", unary(C.LIST, C.ANY).with_modifiers(C.EXECUTABLE), higher_order_forms.each_form),
    ("map", unary(C.LIST, C.ANY).with_modifiers(C.EXECUTABLE), higher_order_forms.map_form),
    ("foldl", heterogeneous_binary(C.LIST, C.ANY, C.ANY).with_modifiers(C.EXECUTABLE),
     higher_order_forms.foldl_form),
    # Control
    ("if", unary(C.BOOLEAN, C.ANY).with_modifiers(C.ANY, C.ANY), control_forms.if_form),
    ("loop", nullary(C.ANY).with_modifiers(C.EXECUTABLE, C.EXECUTABLE), control_forms.loop_form),
    ("times", unary(C.INTEGER, C.ANY).with_modifiers(C.ANY), control_forms.times_form),
    ("exec", unary(C.EXECUTABLE, C.QUOTATION), control_forms.exec_form),
    # Bindings
    (":=", heterogeneous_binary(C.SYMBOL, C.ANY, C.VOID), binding_forms.assign_form),
    ("fun", heterogeneous_binary(C.SYMBOL, C.EXECUTABLE, C.VOID), binding_forms.assign_func_form),
    ("'", nullary(C.SYMBOL).with_modifiers(C.SYMBOL), binding_forms.quote_form),
    ("eval", unary(C.SYMBOL, C.ANY), binding_forms.eval_form),
    # Stack
    ("dup", unary(C.ANY, C.QUOTATION), stack_forms.dup),
    ("swap", heterogeneous_binary(C.ANY, C.ANY, C.QUOTATION), stack_forms.swap),
    ("pop", unary(C.ANY, C.VOID), stack_forms.pop),
    # Errors
    ("err", nullary(C.ERROR).with_modifiers(C.STRING), io_forms.err_form),
]

OPERATIONS: dict[str, Operator] = {
    name: register(name, signature, rule) for name, signature, rule in CATALOG
}

__all__ = [
    "CATALOG",
    "OPERATIONS",
    "Operator",
    "operator",
    "find_operator",
]
