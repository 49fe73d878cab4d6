"""Input/output and text parsing operators: print, read, parseInteger,
parseFloat, words, err."""

from __future__ import annotations

import re

from bprog import Value
from bprog.config import get_read_prompt
from bprog.printer import to_display
from bprog.types.environment import Environment
from bprog.types.errors import ReadExhausted
from bprog.types.stack_error import StackError
from bprog.types.void import Void

INTEGER_RE = re.compile(r"[+-]?\d+")
FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def print_form(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    print(to_display(args[0]))
    return Void


def read_form(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """One line of standard input, without its newline."""
    try:
        return input(get_read_prompt())
    except EOFError:
        raise ReadExhausted("read: end of input") from None


def parse_integer(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    text = args[0]
    if not INTEGER_RE.fullmatch(text):
        return StackError.overflow()
    try:
        return int(text)
    except ValueError:
        # beyond the interpreter's int string conversion limit
        return StackError.overflow()


def parse_float(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    text = args[0]
    if not FLOAT_RE.fullmatch(text):
        return StackError.overflow()
    return float(text)


def words(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    return args[0].split()


def err_form(env: Environment, args: list[Value], mods: list[Value]) -> Value:
    """`err "message"`: a user-defined error value."""
    return StackError.user_defined(mods[0])
