"""
Translator exceptions.

Defines the exception hierarchy raised by the public API.
"""

from typing import Any, Dict, Iterable, Optional


class KoscError(Exception):
    """Base exception for translator errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ParseError(KoscError):
    """
    Raised when the input cannot be parsed as a whole.

    Attributes:
        offset: Character offset of the furthest point the parser reached
        line: 1-based line number of ``offset``
        column: 1-based column number of ``offset``
        expected: Names of the constructs that were tried at ``offset``
        context: Excerpt of the unconsumed input starting at ``offset``
    """

    def __init__(
        self,
        offset: int,
        line: int,
        column: int,
        expected: Iterable[str] = (),
        context: str = "",
    ):
        self.offset = offset
        self.line = line
        self.column = column
        self.expected = tuple(sorted(set(expected)))
        self.context = context

        message = f"Parse error at line {line}, column {column}"
        if self.expected:
            message += f": expected {', '.join(self.expected)}"
        message += f" near {context!r}" if context else " at end of input"

        super().__init__(
            message=message,
            details={
                "offset": offset,
                "line": line,
                "column": column,
                "expected": list(self.expected),
            },
        )

    @classmethod
    def at(cls, text: str, offset: int, expected: Iterable[str] = (), width: int = 20) -> "ParseError":
        """Build an error for ``offset`` within ``text``, computing line and column."""
        line = text.count("\n", 0, offset) + 1
        column = offset - (text.rfind("\n", 0, offset) + 1) + 1
        context = text[offset:offset + width].split("\n", 1)[0]
        return cls(offset, line, column, expected, context)
