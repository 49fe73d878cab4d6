"""Binding environment for bprog.

One flat table from Symbols to Bindings, shared by every operator of a run.
`:=` installs plain bindings, `fun` installs function bindings, and `eval`
reads them back.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import Optional

from bprog import Value
from bprog.types.errors import BprogTypeError
from bprog.types.stack_error import StackError
from bprog.types.symbol import Symbol
from bprog.types.void import Void


@dataclass
class Binding:
    value: Value
    is_function: bool = False
    is_constant: bool = False


class Environment:
    """Mapping from Symbols to Bindings."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[Symbol, Binding] = {}

    def define(
        self,
        name: Symbol,
        value: Value,
        *,
        function: bool = False,
        constant: bool = False,
    ) -> Value:
        """Bind `name` to `value`, overwriting any earlier non-constant binding.

        Returns Void on success. A constant binding is left untouched and an
        Error(Undefined) value is returned instead.

        Raises BprogTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise BprogTypeError(f"Cannot bind {name!r}: not a symbol")
        existing = self.vars.get(name)
        if existing is not None and existing.is_constant:
            return StackError.undefined()
        self.vars[name] = Binding(value, function, constant)
        return Void

    def find(self, name: Symbol) -> Optional[Binding]:
        return self.vars.get(name)

    def __len__(self) -> int:
        return len(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write the bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, b in self.vars.items():
            if not first:
                buffer.write(", ")
            flags = ("fun " if b.is_function else "") + ("const " if b.is_constant else "")
            buffer.write(f"{k}: {flags}{b.value!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
