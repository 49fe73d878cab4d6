"""Explicit coercion between related tags.

Coercion is never implied by constraint satisfaction; the operators that need
it (`/`, `div`, `exec`, `if`, `times`, the higher order forms) call `coerce`
themselves.
"""

from __future__ import annotations

import math

from bprog import Value
from bprog.types.errors import CoercionError
from bprog.types.quotation import Quotation
from bprog.types.value_type import Type, type_of


def coerce(value: Value, target: Type) -> Value:
    """Convert `value` to `target`, raising CoercionError if no rule applies."""
    source = type_of(value)
    if source is target:
        return value

    if target is Type.FLOAT and source is Type.INTEGER:
        try:
            return float(value)
        except OverflowError:
            raise CoercionError(f"Integer too large for {target}") from None
    if target is Type.INTEGER and source is Type.FLOAT:
        if not math.isfinite(value):
            raise CoercionError(f"Cannot coerce {value!r} to {target}")
        # int() truncates toward zero
        return int(value)

    if target is Type.LIST:
        if source is Type.QUOTATION:
            return list(value)
        return [value]
    if target is Type.QUOTATION:
        if source is Type.LIST:
            return Quotation(value)
        return Quotation([value])

    raise CoercionError(f"Cannot coerce {source} to {target}")


def to_quotation(value: Value) -> Quotation:
    """Coerce to a fresh Quotation that the caller may consume."""
    quotation = coerce(value, Type.QUOTATION)
    return quotation.copy() if quotation is value else quotation
