from __future__ import annotations


class VoidType:
    """The result of operators that produce nothing. Never pushed."""

    def __repr__(self): return "()"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, VoidType)

    def __hash__(self):
        return hash(VoidType)

    def __lt__(self, other):
        return False


Void = VoidType()
