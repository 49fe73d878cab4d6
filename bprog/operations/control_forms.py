"""Control operators: if, times, loop, exec.

None of these recurse in Python. Each one returns a Quotation that the
evaluator splices onto the front of the pending input, so a loop is just an
operator that re-emits itself at the end of its own continuation. The
continuations are built in memory from the operator's operands.
"""

from __future__ import annotations

from bprog import Value
from bprog.operations.continuation import block
from bprog.operations.operator import operator
from bprog.types.environment import Environment
from bprog.types.quotation import Quotation
from bprog.types.void import Void


def if_form(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """`cond if { then } { else }`: the chosen branch, to be run."""
    then_branch, else_branch = mods
    return block(then_branch if args[0] else else_branch)


def times_form(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """`n times { body }`: run body, then `n-1 times { body }`."""
    count = args[0]
    body = mods[0]
    if count <= 0:
        return Void
    return Quotation([*block(body), count - 1, operator("times"), body])


def loop_form(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """`loop { stop? } { body }`: run the condition; stop when it yields true,
    otherwise run the body and loop again."""
    condition, body = mods
    again = Quotation([*block(body), operator("loop"), condition, body])
    return Quotation([*block(condition), operator("if"), Quotation(), again])


def exec_form(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    return block(args[0])
