"""Command-line runner: `python -m bprog [FILE]`.

With a file, runs it and prints the final stack. Without one, starts a REPL
that prints the stack after every line.
"""

from __future__ import annotations

import argparse
import logging
import sys

from bprog.config import get_log_level
from bprog.interpreter import Interpreter
from bprog.types.errors import BprogError


def repl(interp: Interpreter) -> None:
    while True:
        try:
            line = input("bprog> ")
        except EOFError:
            print()
            return
        if line.strip() in (":q", ":quit"):
            return
        try:
            interp.run(line)
        except BprogError as e:
            print(f"error: {e}")
        # mismatches were already reported through logging
        interp.diagnostics.clear()
        print(interp.stack.contents_to_string())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="bprog", description=__doc__.splitlines()[0])
    parser.add_argument("file", nargs="?", help="program to run; omit for a REPL")
    parser.add_argument("--no-prelude", action="store_true", help="skip BPROG_PRELUDE_PATH")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    interp = Interpreter(prelude=None if args.no_prelude else 'auto')

    if args.file is None:
        repl(interp)
        return 0

    with open(args.file, encoding="utf-8") as f:
        source = f.read()
    try:
        interp.run(source)
    except BprogError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(interp.stack.contents_to_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())
