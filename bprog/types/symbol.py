"""Symbols: names that stay data until `eval` looks them up."""

from __future__ import annotations

import sys


class Symbol:
    __slots__ = ("name",)

    def __init__(self, name: str):
        # interned, so equal names share one string object
        self.name = sys.intern(name)

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.name is other.name

    def __lt__(self, other: Symbol) -> bool:
        return self.name < other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name
