"""Exception hierarchy for parsing and translation failures.

Every failure is raised; nothing is reported through return values.
``SignatureError.operation`` tells which stage failed:

- ParseError              (operation "parse")     : malformed signature text
- EmptyUnionError         (operation "translate") : union with no cases
- UnsupportedArityError   (operation "translate") : too many union cases
"""

from __future__ import annotations

__all__ = [
    "EmptyUnionError",
    "ParseError",
    "SignatureError",
    "TranslationError",
    "UnsupportedArityError",
]


class SignatureError(Exception):
    """Base class for every error raised by ts_overloads."""

    operation: str = ""


class ParseError(SignatureError, ValueError):
    """Signature text does not match the grammar.

    Attributes:
        text:     The full input that failed to parse.
        line:     1-based line of the offending position.
        column:   1-based column of the offending position.
        position: 0-based offset into ``text``.
        expected: Names of the tokens the parser would have accepted.
    """

    operation = "parse"

    def __init__(
        self,
        message: str,
        text: str,
        line: int,
        column: int,
        position: int,
        expected: frozenset[str] = frozenset(),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.text = text
        self.line = line
        self.column = column
        self.position = position
        self.expected = expected

    def __str__(self) -> str:
        return f"{self.message} (line {self.line}, column {self.column})"

    def context(self, span: int = 20) -> str:
        """Return the offending source line with a caret under the position."""
        lines = self.text.splitlines() or [""]
        source = lines[min(self.line, len(lines)) - 1]
        start = max(0, self.column - 1 - span)
        snippet = source[start : self.column - 1 + span]
        return f"{snippet}\n{' ' * (self.column - 1 - start)}^"


class TranslationError(SignatureError, ValueError):
    """A well-formed type tree cannot be translated."""

    operation = "translate"


class EmptyUnionError(TranslationError):
    def __init__(self) -> None:
        super().__init__("Union cannot be empty")


class UnsupportedArityError(TranslationError):
    """A union has more distinct cases than the target union family supports.

    Attributes:
        arity:     Number of distinct cases after deduplication.
        max_arity: The configured ceiling.
    """

    def __init__(self, arity: int, max_arity: int) -> None:
        super().__init__(
            f"Unions with more than {max_arity} cases are not supported, got {arity}"
        )
        self.arity = arity
        self.max_arity = max_arity
