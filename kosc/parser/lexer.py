"""
Lexical layer and cursor machinery shared by the expression and statement parsers.

The grammar is written as ordered choice: alternatives are tried in a fixed
order and the first one that matches wins. Every alternative runs against a
saved cursor position; when it fails, the position is restored before the
next alternative is tried, so a failed branch never consumes input.

Failures inside alternatives are signalled with ``NoMatch``, which never
leaves this package. The scanner remembers the furthest offset any primitive
failed at, and what it expected there, so the top level can report a
``ParseError`` that points at the real problem.
"""

import re
from functools import wraps
from typing import Any, Callable, NoReturn, Optional, TypeVar

T = TypeVar("T")

IDENTIFIER_RE = re.compile(r"[A-Za-z][A-Za-z0-9]*")
NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
STRING_RE = re.compile(r'"[^"]*"')
SPACE_RE = re.compile(r"[ \t]*")
MULTISPACE_RE = re.compile(r"[ \t\r\n]*")
LINE_ENDING_RE = re.compile(r"\r?\n")


def scan_identifier(text: str, pos: int = 0) -> Optional[tuple[str, int]]:
    """
    Recognize an identifier at ``pos``.

    An identifier is one ASCII letter followed by zero or more ASCII letters
    or digits.

    Returns:
        ``(name, end)`` where ``end`` is the offset of the first unconsumed
        character, or None when ``text`` has no identifier at ``pos``
    """
    match = IDENTIFIER_RE.match(text, pos)
    if match is None:
        return None
    return match.group(), match.end()


class NoMatch(Exception):
    """The alternative being tried does not match at the current position."""


_FAILED = object()


def memoized(method: Callable[..., T]) -> Callable[..., T]:
    """
    Cache a production's outcome per start offset.

    The ordered-choice grammar re-tries the same production at the same
    offset many times (every expression layer starts with the layer above
    it). Results are stored on the scanner and dropped with it.
    """
    name = method.__name__

    @wraps(method)
    def wrapper(self: "Scanner") -> T:
        key = (name, self.pos)
        cached = self._memo.get(key)
        if cached is not None:
            result, end = cached
            if result is _FAILED:
                raise NoMatch(name)
            self.pos = end
            return result

        try:
            result = method(self)
        except NoMatch:
            self._memo[key] = (_FAILED, self.pos)
            raise
        self._memo[key] = (result, self.pos)
        return result

    return wrapper


class Scanner:
    """
    Cursor over an in-memory source text.

    Attributes:
        text: The full source being parsed
        pos: Offset of the next unconsumed character
        furthest: Greatest offset at which a primitive failed
        expected: What the failing primitives wanted at ``furthest``
    """

    def __init__(self):
        self.reset("")

    def reset(self, text: str) -> None:
        """Start scanning ``text`` from the beginning."""
        self.text = text
        self.pos = 0
        self.furthest = 0
        self.expected: set[str] = set()
        self._memo: dict[tuple[str, int], tuple[Any, int]] = {}

    # Failure bookkeeping

    def expect(self, expected: str) -> None:
        """Record that ``expected`` was wanted at the cursor."""
        if self.pos > self.furthest:
            self.furthest = self.pos
            self.expected = {expected}
        elif self.pos == self.furthest:
            self.expected.add(expected)

    def fail(self, expected: str) -> NoReturn:
        """Record ``expected`` and abandon the current alternative."""
        self.expect(expected)
        raise NoMatch(expected)

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    # Combinators

    def choice(self, *alternatives: Callable[[], Any]) -> Any:
        """Return the result of the first alternative that matches."""
        for alternative in alternatives:
            saved = self.pos
            try:
                return alternative()
            except NoMatch:
                self.pos = saved
        raise NoMatch("choice")

    def optional(self, alternative: Callable[[], T]) -> Optional[T]:
        """Run ``alternative``; on failure restore the cursor and return None."""
        saved = self.pos
        try:
            return alternative()
        except NoMatch:
            self.pos = saved
            return None

    def many0(self, alternative: Callable[[], T]) -> list[T]:
        """Collect repetitions of ``alternative`` until it fails or stops consuming."""
        results: list[T] = []
        while True:
            saved = self.pos
            try:
                item = alternative()
            except NoMatch:
                self.pos = saved
                return results
            results.append(item)
            if self.pos == saved:
                return results

    def many1(self, alternative: Callable[[], T]) -> list[T]:
        first = alternative()
        return [first] + self.many0(alternative)

    # Primitives

    def match(self, pattern: re.Pattern, expected: str) -> str:
        """Consume a regex match at the cursor."""
        found = pattern.match(self.text, self.pos)
        if found is None:
            self.fail(expected)
        self.pos = found.end()
        return found.group()

    def tag(self, literal: str) -> str:
        """Consume ``literal`` exactly."""
        if not self.text.startswith(literal, self.pos):
            self.fail(repr(literal))
        self.pos += len(literal)
        return literal

    def one_of(self, literals: tuple[str, ...]) -> str:
        """Consume the first of ``literals`` found at the cursor."""
        for literal in literals:
            if self.text.startswith(literal, self.pos):
                self.pos += len(literal)
                return literal
        for literal in literals:
            self.expect(repr(literal))
        raise NoMatch(literals)

    def identifier(self) -> str:
        scanned = scan_identifier(self.text, self.pos)
        if scanned is None:
            self.fail("identifier")
        name, self.pos = scanned
        return name

    def space0(self) -> str:
        """Consume optional horizontal whitespace."""
        return self.match(SPACE_RE, "whitespace")

    def space1(self) -> str:
        """Consume at least one space or tab."""
        spaces = self.space0()
        if not spaces:
            self.fail("whitespace")
        return spaces

    def multispace0(self) -> str:
        """Consume optional whitespace including line endings."""
        return self.match(MULTISPACE_RE, "whitespace")

    def line_ending(self) -> str:
        return self.match(LINE_ENDING_RE, "line ending")
