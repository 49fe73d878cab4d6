"""
  bprog Reader: Lexer and Parser

- Streaming, lazy lexing; one pass of parsing into a deque of values
- Emits Python primitives wherever a tag has one:

    - integers -> int, floats -> float
    - True / False -> bool
    - "text" -> str
    - [ ... ] -> Python list
    - { ... } -> Quotation
    - catalog names -> Operator
    - anything else -> Symbol

  Commas separate tokens like whitespace, so `[1,2,3]` and `[ 1 2 3 ]` read
  the same. A numeric literal that cannot be converted becomes an
  Error(Overflow) value rather than a read failure.
"""

from __future__ import annotations

import re
from collections import deque
from typing import Iterator, Optional

from bprog import Value
from bprog.operations import find_operator
from bprog.types.errors import BprogSyntaxError
from bprog.types.quotation import Quotation
from bprog.types.stack_error import StackError
from bprog.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"[\s,]*("
    r"(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<word>[^\s,{}\[\]"]+)'  # fallback: numbers, booleans, operators, symbols
    r")",
    re.DOTALL,
)

SEPARATORS_RE = re.compile(r"^[\s,]+")
INTEGER_RE = re.compile(r"[+-]?\d+")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+(?=[eE]))(?:[eE][+-]?\d+)?")

BOOLEANS: dict[str, bool] = {
    "True": True,
    "true": True,
    "False": False,
    "false": False,
}

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            break
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                yield nm, m.group(nm)
                break
        pos = m.end()

    # Only an unterminated string literal stops the scan early
    rest = SEPARATORS_RE.sub("", source[pos:], count=1)
    if rest:
        raise BprogSyntaxError(f"Unterminated string at {n - len(rest)}: {rest[:10]!r}")


def read_string(token: str) -> str:
    """String literal body with escapes resolved.

    The space-delimited form `" hello "` drops one space on each side.
    """
    body = token[1:-1]
    if len(body) >= 2 and body[0] == " " and body[-1] == " ":
        body = body[1:-1]
    return re.sub(r"\\(.)", lambda m: ESCAPES.get(m.group(1), m.group(1)), body)


def read_word(word: str) -> Value:
    """Classify a bare word: number, boolean, operator or symbol."""
    if INTEGER_RE.fullmatch(word):
        try:
            return int(word)
        except ValueError:
            return StackError.overflow()
    if FLOAT_RE.fullmatch(word):
        try:
            return float(word)
        except (ValueError, OverflowError):
            return StackError.overflow()
    if word in BOOLEANS:
        return BOOLEANS[word]
    op = find_operator(word)
    if op is not None:
        return op
    return Symbol(word)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Value:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise BprogSyntaxError("Unexpected end of input")

        if tok_type == "word":
            return read_word(tok_val)

        if tok_type == "string":
            return read_string(tok_val)

        if tok_type == "lbrace":
            return Quotation(self._parse_until("rbrace", "{"))

        if tok_type == "lbracket":
            return self._parse_until("rbracket", "[")

        raise BprogSyntaxError(f"Unmatched {tok_val!r}")

    def _parse_until(self, closer: str, opener: str) -> list[Value]:
        items = []
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                raise BprogSyntaxError(f"Unmatched {opener!r}")
            if tok_type == closer:
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[Value]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> deque:
    """Read a whole program into the pending-input queue."""
    return deque(TokenStream(lex(source)).parse_all())
