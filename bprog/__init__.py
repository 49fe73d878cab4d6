# Core type aliases for bprog's data model.
# Values are plain Python objects wherever a builtin type maps one-to-one onto a
# runtime tag (bool, int, float, str, list). Tags with no builtin counterpart
# (Void, Symbol, Quotation, Operator, Error) get their own small classes.
#
# Naming guidance:
# - Value:    anything that can sit on the stack, in the pending input, in a
#             list/quotation or in a binding.
# - Rule:     the execution rule of one catalog operator.

from typing import Any, Callable

# Runtime value alias
Value = Any

# Execution rule: (environment, stack operands, modifier operands) -> result Value
Rule = Callable[..., Value]
