"""Evaluation loop and splice trampoline for bprog.

The pending input is a deque drained front to back. Literals are pushed;
operators are dispatched through their catalog row. Operators never recurse:
a Quotation result is spliced back onto the front of the pending input and
run from there, anything else is pushed.
"""

from __future__ import annotations

import logging
from collections import deque
from itertools import islice
from typing import Callable, Iterable, Optional

from bprog import Value
from bprog.operations.continuation import Literal
from bprog.operations.operator import Operator
from bprog.types.environment import Environment
from bprog.types.errors import (
    BprogTypeError,
    ConstraintMismatch,
    InputExhausted,
    StackUnderflow,
)
from bprog.types.quotation import Quotation
from bprog.types.stack import Stack
from bprog.types.value_type import Constraint, Type, compatible, is_satisfied_by, type_of
from bprog.types.void import Void

logger = logging.getLogger(__name__)

Reporter = Callable[[ConstraintMismatch], None]


def run(
    queue: deque,
    stack: Stack,
    env: Environment,
    report: Optional[Reporter] = None,
) -> Stack:
    """
    Trampoline: drain `queue` against `stack` and `env`.

    Constraint mismatches are reported (logged, and passed to `report`) and
    the loop moves on to the next item. StackUnderflow, InputExhausted and
    ReadExhausted abort the program and propagate to the caller.
    """
    while queue:
        item = queue.popleft()
        if isinstance(item, Literal):
            stack.push(item.value)
            continue
        if not isinstance(item, Operator):
            stack.push(item)
            continue
        try:
            result = dispatch(item, stack, queue, env)
        except ConstraintMismatch as mismatch:
            logger.warning("%s", mismatch)
            if report is not None:
                report(mismatch)
            continue
        splice(result, stack, queue)
    return stack


def evaluate(
    program: Iterable[Value],
    stack: Stack | None = None,
    env: Environment | None = None,
    report: Optional[Reporter] = None,
) -> Stack:
    """Run an already-read program on a fresh (or given) stack and environment."""
    if stack is None:
        stack = Stack()
    if env is None:
        env = Environment()
    return run(deque(program), stack, env, report)


def splice(result: Value, stack: Stack, queue: deque) -> None:
    """Quotations resume as code; Void vanishes; everything else is data."""
    if isinstance(result, Quotation):
        queue.extendleft(reversed(result.items))
    elif result is not Void:
        stack.push(result)


def dispatch(op: Operator, stack: Stack, queue: deque, env: Environment) -> Value:
    """
    Single step: gather and check operands for `op`, run its rule and return
    the result. On any failure before the rule runs, neither the stack nor the
    queue has been touched.
    """
    sig = op.signature
    n_args = len(sig.stack_args)
    n_mods = len(sig.modifiers)

    mods, mods_on_stack = take_modifiers(op, stack, queue)
    depth = n_args + (n_mods if mods_on_stack else 0)
    if stack.size() < depth:
        raise StackUnderflow(
            f"{op.name} needs {depth} value(s) on the stack, found {stack.size()}"
        )

    args = stack.peek_many(depth)[:n_args]
    mismatches = check_arguments(op, args)
    if mismatches:
        raise ConstraintMismatch(op.name, mismatches)

    # Operands are valid: consume them
    stack.pop_many(depth)
    if not mods_on_stack:
        for _ in range(n_mods):
            queue.popleft()

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("dispatch %s args=%r mods=%r", op.name, args, mods)

    result = op.rule(env, args, mods)
    check_result(op, result)
    return result


def take_modifiers(op: Operator, stack: Stack, queue: deque) -> tuple[list[Value], bool]:
    """
    Find `op`'s modifier operands without consuming them.

    Two layouts are possible: trailing (`cond if { a } { b }`), where the
    modifiers follow in the pending input, and block-first
    (`cond { a } { b } if`), where they sit on the stack above the operator's
    stack operands. The trailing layout wins when the whole signature checks
    against it; otherwise a block-first layout that checks is used, so
    `cond { a } { b } if 5 6` still takes its branches from the stack.
    Returns the operands and whether they came from the stack.
    """
    constraints = op.signature.modifiers
    n_mods = len(constraints)
    if not n_mods:
        return [], False

    front = [
        item.value if isinstance(item, Literal) else item
        for item in islice(queue, n_mods)
    ]
    trailing = len(front) == n_mods and not check_operands("modifier", constraints, front)
    if trailing and arguments_fit(op, stack, 0):
        return front, False

    n_args = len(op.signature.stack_args)
    if stack.size() >= n_args + n_mods:
        top = stack.peek_many(n_mods)
        if not check_operands("modifier", constraints, top):
            if not trailing or arguments_fit(op, stack, n_mods):
                return top, True

    if trailing:
        # the operands below are reported by dispatch
        return front, False
    if len(front) < n_mods:
        raise InputExhausted(
            f"{op.name} needs {n_mods} modifier(s), {len(front)} left in the input"
        )
    raise ConstraintMismatch(op.name, check_operands("modifier", constraints, front))


def arguments_fit(op: Operator, stack: Stack, skip: int) -> bool:
    """True if the stack operands found below the top `skip` values check."""
    n_args = len(op.signature.stack_args)
    if stack.size() < n_args + skip:
        return False
    args = stack.peek_many(n_args + skip)[:n_args]
    return not check_arguments(op, args)


def check_arguments(op: Operator, args: list[Value]) -> list[tuple[str, object, object]]:
    sig = op.signature
    mismatches = check_operands("argument", sig.stack_args, args)
    if not mismatches and sig.homogeneous:
        mismatches = check_homogeneous(sig.stack_args, args)
    return mismatches


def check_operands(
    kind: str, constraints: tuple[Constraint, ...], values: list[Value]
) -> list[tuple[str, object, object]]:
    """(position, expected, actual) for every value failing its constraint."""
    mismatches = []
    for i, (constraint, value) in enumerate(zip(constraints, values), start=1):
        tag = type_of(value)
        if not is_satisfied_by(constraint, tag):
            mismatches.append((f"{kind} {i}", constraint, tag))
    return mismatches


def check_homogeneous(
    constraints: tuple[Constraint, ...], values: list[Value]
) -> list[tuple[str, object, object]]:
    """Later operands must be comparable with the first one."""
    first = type_of(values[0])
    mismatches = []
    for i, (constraint, value) in enumerate(zip(constraints[1:], values[1:]), start=2):
        tag = type_of(value)
        if not compatible(first, tag):
            mismatches.append((f"argument {i}", f"{constraint} like {first}", tag))
    return mismatches


def check_result(op: Operator, result: Value) -> None:
    """Error values may stand in for any result; anything else must match."""
    if result is Void:
        return
    tag = type_of(result)
    if tag is Type.ERROR or op.signature.ret.is_satisfied_by(tag):
        return
    raise BprogTypeError(
        f"{op.name} returned {tag}, its signature promises {op.signature.ret}"
    )
