"""Binding operators: := fun ' eval."""

from __future__ import annotations

from bprog import Value
from bprog.operations.continuation import as_data, block
from bprog.types.environment import Environment


def assign_form(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """`name value :=` binds a plain value."""
    name, value = args
    return env.define(name, value)


def assign_func_form(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """`name { body } fun` binds a function."""
    name, value = args
    return env.define(name, value, function=True)


def quote_form(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """`' name` yields the next token unevaluated."""
    return mods[0]


def eval_form(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """Resolve a symbol.

    Function bindings come back as a Quotation and therefore run; plain
    bindings come back as data. Unbound symbols are returned unchanged.
    """
    name = args[0]
    binding = env.find(name)
    if binding is None:
        return name
    if binding.is_function:
        return block(binding.value)
    return as_data(binding.value)
