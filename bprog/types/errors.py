class BprogError(Exception):
    """ Base class for all bprog errors"""
    pass


class BprogSyntaxError(BprogError):
    """ Raised when source text cannot be read into values"""


class BprogTypeError(BprogError):
    """ Raised when a value has a tag the operation cannot handle"""


class CoercionError(BprogTypeError):
    """ Raised when no coercion rule exists between two tags"""


class ConstraintMismatch(BprogTypeError):
    """ Raised when operands do not satisfy an operator's signature.

    `mismatches` holds one (position, expected, actual) triple per failing
    operand, where `position` reads "argument N" or "modifier N" (1-based).
    """

    def __init__(self, op_name: str, mismatches: list[tuple[str, object, object]]):
        self.op_name = op_name
        self.mismatches = mismatches
        super().__init__(self.describe())

    def describe(self) -> str:
        parts = [
            f"{position} of type {actual} does not satisfy {expected}"
            for position, expected, actual in self.mismatches
        ]
        return f"{self.op_name}: " + "; ".join(parts)


class BprogRuntimeError(BprogError):
    """ Raised when the current program cannot continue"""


class StackUnderflow(BprogRuntimeError):
    """ Raised when an operator needs more stack operands than are present"""


class InputExhausted(BprogRuntimeError):
    """ Raised when an operator needs more modifier operands than remain in the input"""


class ReadExhausted(BprogRuntimeError):
    """ Raised when `read` reaches the end of standard input"""
