"""Display rendering of bprog values.

This is the text `print` writes and the form used to show the stack. Strings
are shown quoted so that `"1"` and `1` stay distinguishable on the stack.
"""

from bprog import Value
from bprog.types.value_type import Type, type_of


def to_display(value: Value) -> str:
    tag = type_of(value)
    if tag is Type.BOOL:
        return "True" if value else "False"
    if tag is Type.STRING:
        return f'"{value}"'
    if tag is Type.LIST:
        return "[" + ",".join(to_display(v) for v in value) + "]"
    if tag is Type.QUOTATION:
        if not len(value):
            return "{ }"
        return "{ " + " ".join(to_display(v) for v in value) + " }"
    if tag is Type.FLOAT:
        return repr(value)
    if tag is Type.OPERATOR:
        return value.name
    # Integer, Symbol, Void and Error render through str/repr
    return str(value) if tag in (Type.INTEGER, Type.SYMBOL) else repr(value)


def stack_to_display(values) -> str:
    """Render values top to bottom, separated by single spaces."""
    return " ".join(to_display(v) for v in values)
