from __future__ import annotations

import logging
from typing import Literal

from bprog import Value
from bprog.config import get_prelude_files
from bprog.evaluation.evaluator import evaluate, run
from bprog.reader.parser import parse
from bprog.types.environment import Environment
from bprog.types.errors import ConstraintMismatch
from bprog.types.stack import Stack
from bprog.types.void import Void

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A streaming interpreter for bprog programs.
    Keeps one stack and one environment across calls, so code can be fed in
    pieces; constraint mismatches are collected in `diagnostics`.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.stack = Stack()
        self.env = Environment()
        self.diagnostics: list[ConstraintMismatch] = []

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self.load_prelude()
        else:
            self.eval_prelude(prelude)

    def load_prelude(self) -> None:
        """Evaluate every prelude file found on BPROG_PRELUDE_PATH."""
        for path in get_prelude_files():
            logger.info("loading prelude %s", path)
            self.eval_prelude(path.read_text(encoding="utf-8"))

    def eval_prelude(self, code: str) -> None:
        """Evaluate prelude code for its bindings; whatever it leaves on the stack is dropped."""
        evaluate(parse(code), env=self.env, report=self.diagnostics.append)

    def run(self, code: str) -> Stack:
        """Feed code to the interpreter and run it against the session stack."""
        return run(parse(code), self.stack, self.env, self.diagnostics.append)

    def eval(self, code: str) -> Value:
        """Run code and return the top of the stack (Void when it is empty)."""
        self.run(code)
        return Void if self.stack.is_empty() else self.stack.peek()

    def reset(self) -> None:
        """Start over with an empty stack; bindings are kept."""
        self.stack.clear()
        self.diagnostics.clear()
