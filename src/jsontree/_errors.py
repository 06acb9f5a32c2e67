"""Parse failure taxonomy and the exception raised at the public boundary."""

from enum import Enum
from typing import TypeAlias

Position: TypeAlias = int


class ErrorKind(Enum):
    """
    Classifies why a parse failed.

    Kinds are informational; they never change which alternative is tried.
    """

    SYNTAX = "syntax"
    MALFORMED_ESCAPE = "malformed_escape"
    TRUNCATED = "truncated"
    TOO_DEEP = "too_deep"


class ParseError(ValueError):
    """
    Handles parsing failures with position, kind and context information.

    Error state containing the failing position, line/column numbers and the
    chain of grammar constructs (innermost first) that were being parsed.
    """

    def __init__(
        self,
        msg: str,
        doc: str = "",
        pos: Position = 0,
        kind: ErrorKind = ErrorKind.SYNTAX,
        contexts: tuple[str, ...] = (),
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.kind = kind
        self.contexts = contexts

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        message = f"{msg} at line {self.lineno}, column {self.colno}"
        if contexts:
            message += f" (in {' < '.join(contexts)})"
        super().__init__(message)

    def __reduce__(self) -> tuple[type["ParseError"], tuple[object, ...]]:
        return (
            self.__class__,
            (self.msg, self.doc, self.pos, self.kind, self.contexts),
        )
