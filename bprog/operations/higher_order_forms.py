"""Higher order operators over lists: map, each, foldl.

Each step handles the head of the list and re-emits the operator for the
tail, so long lists never grow the Python call stack.
"""

from __future__ import annotations

from bprog import Value
from bprog.operations.continuation import as_data, block, literal
from bprog.operations.operator import operator
from bprog.types.environment import Environment
from bprog.types.quotation import Quotation
from bprog.types.void import Void


def map_form(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """`xs map { f }`: `(head f) cons (tail map { f })`, or [] when empty."""
    items = args[0]
    fn = mods[0]
    if not items:
        return []
    return Quotation(
        [literal(items[0]), *block(fn), items[1:], operator("map"), fn, operator("cons")]
    )


def each_form(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """`xs each { f }`: like map, but whatever f leaves is not collected."""
    items = args[0]
    fn = mods[0]
    if not items:
        return Void
    return Quotation([literal(items[0]), *block(fn), items[1:], operator("each"), fn])


def foldl_form(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """`xs acc foldl { f }`: `acc head f` becomes the accumulator for the tail."""
    items, acc = args
    fn = mods[0]
    if not items:
        return as_data(acc)
    return Quotation(
        [
            literal(acc),
            literal(items[0]),
            *block(fn),
            items[1:],
            operator("swap"),
            operator("foldl"),
            fn,
        ]
    )
