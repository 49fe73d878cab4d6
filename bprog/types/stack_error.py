"""First-class error values.

A StackError is data, not an exception: it is pushed, stored in bindings and
printed like any other value. Only the `err` operator and a handful of
failure paths (bad numeric text, empty `head`, impossible coercion) create one.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    OVERFLOW = "Overflow"
    HEAD_EMPTY = "HeadEmpty"
    UNDEFINED = "Undefined"
    USER_DEFINED = "UserDefined"


class StackError:
    __slots__ = ("kind", "message")

    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind = kind
        self.message = message

    @classmethod
    def overflow(cls) -> StackError:
        return cls(ErrorKind.OVERFLOW)

    @classmethod
    def head_empty(cls) -> StackError:
        return cls(ErrorKind.HEAD_EMPTY)

    @classmethod
    def undefined(cls) -> StackError:
        return cls(ErrorKind.UNDEFINED)

    @classmethod
    def user_defined(cls, message: str) -> StackError:
        return cls(ErrorKind.USER_DEFINED, message)

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, StackError)
            and self.kind is other.kind
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self) -> str:
        if self.kind is ErrorKind.USER_DEFINED:
            return f"Error({self.kind.value}: {self.message})"
        return f"Error({self.kind.value})"
