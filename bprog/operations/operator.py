"""Operator descriptors and the registry behind the catalog.

Each built-in is one Operator row: its textual name, its Signature and its
execution rule. Operators are singletons, so identity is equality.
"""

from __future__ import annotations

from bprog import Rule
from bprog.types.signature import Signature

_REGISTRY: dict[str, Operator] = {}


class Operator:
    __slots__ = ("name", "signature", "rule")

    def __init__(self, name: str, signature: Signature, rule: Rule):
        self.name = name
        self.signature = signature
        self.rule = rule

    def __lt__(self, other: Operator) -> bool:
        return self.name < other.name

    def __repr__(self) -> str:
        return f"Operator({self.name!r})"

    def __str__(self) -> str:
        return self.name


def register(name: str, signature: Signature, rule: Rule) -> Operator:
    if name in _REGISTRY:
        raise ValueError(f"Operator {name!r} is already registered")
    op = Operator(name, signature, rule)
    _REGISTRY[name] = op
    return op


def operator(name: str) -> Operator:
    """Catalog row for `name`; KeyError if there is none."""
    return _REGISTRY[name]


def find_operator(name: str) -> Operator | None:
    return _REGISTRY.get(name)
