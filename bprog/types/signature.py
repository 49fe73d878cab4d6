"""Operator signatures.

`stack_args` and `modifiers` are tuples of Constraints; their length is the
arity (Nullary to Ternary). Stack operands are listed bottom-most first, so
for `5 3 -` the first constraint applies to 5.
"""

from __future__ import annotations

from dataclasses import dataclass

from bprog.types.value_type import Constraint


@dataclass(frozen=True)
class Signature:
    stack_args: tuple[Constraint, ...] = ()
    modifiers: tuple[Constraint, ...] = ()
    ret: Constraint = Constraint.VOID
    # Stack operands must also share a tag (numbers count as one family)
    homogeneous: bool = False

    def __post_init__(self):
        if len(self.stack_args) > 3 or len(self.modifiers) > 3:
            raise ValueError("Signatures take at most three operands per source")

    def with_modifiers(self, *modifiers: Constraint) -> Signature:
        return Signature(self.stack_args, tuple(modifiers), self.ret, self.homogeneous)

    def __str__(self) -> str:
        args = ", ".join(str(c) for c in self.stack_args)
        mods = " ".join(str(c) for c in self.modifiers)
        text = f"({args} -> {self.ret})"
        return f"{text} {{{mods}}}" if mods else text


def nullary(ret: Constraint) -> Signature:
    return Signature((), (), ret)


def unary(arg: Constraint, ret: Constraint) -> Signature:
    return Signature((arg,), (), ret)


def homogeneous_binary(arg: Constraint, ret: Constraint) -> Signature:
    return Signature((arg, arg), (), ret, homogeneous=True)


def heterogeneous_binary(lhs: Constraint, rhs: Constraint, ret: Constraint) -> Signature:
    return Signature((lhs, rhs), (), ret)
