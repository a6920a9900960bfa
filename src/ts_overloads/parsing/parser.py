"""SignatureParser: turns signature text into a type tree.

The lark LALR parser is built once at import time with the transformer
embedded, so parsing goes straight from text to model nodes without an
intermediate parse tree. The parser is anchored to the whole input: any
trailing non-whitespace is an error.

Lark exceptions never escape; they are converted to ``ParseError`` with a
readable message, the 1-based line/column and the set of expected tokens.
"""

from __future__ import annotations

import logging

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import (
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedInput,
    UnexpectedToken,
)

from ts_overloads.errors import ParseError
from ts_overloads.model.nodes import (
    ArrayType,
    Atomic,
    AtomicKind,
    Field,
    ObjectType,
    TsType,
    UnionType,
)
from ts_overloads.parsing.grammar import SIGNATURE_GRAMMAR

__all__ = ["SignatureParser", "parse"]

logger = logging.getLogger(__name__)


@v_args(inline=True)
class _SignatureTransformer(Transformer[Token, TsType]):
    """Builds model nodes bottom-up as the LALR parser reduces rules."""

    def signature(self, tree: TsType) -> TsType:
        return tree

    def union(self, *cases: TsType) -> TsType:
        # A single case is never wrapped.
        if len(cases) == 1:
            return cases[0]
        return UnionType(cases)

    def obj(self, *fields: Field) -> ObjectType:
        return ObjectType(fields)

    def field(self, name: Token, *rest: Token | TsType) -> Field:
        *markers, field_type = rest
        return Field(str(name), field_type, optional=bool(markers))

    def array(self, element: TsType) -> ArrayType:
        return ArrayType(element)

    def string_type(self) -> Atomic:
        return Atomic(AtomicKind.STRING)

    def number_type(self) -> Atomic:
        return Atomic(AtomicKind.NUMBER)

    def boolean_type(self) -> Atomic:
        return Atomic(AtomicKind.BOOLEAN)

    def func_type(self) -> Atomic:
        return Atomic(AtomicKind.FUNC)

    def object_type(self) -> Atomic:
        return Atomic(AtomicKind.OBJECT)

    def element_type(self) -> Atomic:
        return Atomic(AtomicKind.ELEMENT)

    def element_type_constructor(self) -> Atomic:
        return Atomic(AtomicKind.ELEMENT_TYPE)

    def literal_type(self, token: Token) -> Atomic:
        # Strip the surrounding quotes; the body never contains them.
        return Atomic.literal(str(token)[1:-1])

    def other_type(self, token: Token) -> Atomic:
        return Atomic.other(str(token))


_LARK = Lark(
    SIGNATURE_GRAMMAR,
    start="signature",
    parser="lalr",
    transformer=_SignatureTransformer(),
)


class SignatureParser:
    """Parses signature text into a ``TsType`` tree.

    Stateless: every instance shares the module-level lark parser, which is
    only read after construction.

    Example::

        parser = SignatureParser()
        parser.parse("{a: string, b?: number}")
        # ObjectType(fields=(Field('a', Atomic(STRING)), Field('b', ..., optional=True)))
    """

    def parse(self, text: str) -> TsType:
        """Parse ``text`` into a type tree.

        Args:
            text: Signature text. Leading and trailing whitespace is ignored.

        Returns:
            The parsed tree. A single-case union is returned as the case itself.

        Raises:
            ParseError: If ``text`` does not match the grammar in full.
        """
        try:
            return _LARK.parse(text)  # type: ignore[return-value]
        except UnexpectedInput as exc:
            error = _to_parse_error(text, exc)
            logger.debug(
                "Failed to parse signature %r at %d:%d: %s",
                text,
                error.line,
                error.column,
                error.message,
            )
            raise error from exc


def parse(text: str) -> TsType:
    """Parse ``text`` with a fresh ``SignatureParser``."""
    return SignatureParser().parse(text)


# ---------------------------------------------------------------------------
# Error conversion
# ---------------------------------------------------------------------------


def _to_parse_error(text: str, exc: UnexpectedInput) -> ParseError:
    position = exc.pos_in_stream if exc.pos_in_stream is not None else -1
    at_end = isinstance(exc, UnexpectedEOF) or (
        isinstance(exc, UnexpectedToken) and exc.token.type == "$END"
    )
    if at_end or position < 0:
        position = len(text)

    if isinstance(exc, UnexpectedCharacters):
        message = f"Unexpected character {text[position]!r}"
        expected = exc.allowed or set()
    elif at_end:
        message = "Unexpected end of input"
        expected = getattr(exc, "expected", None) or set()
    elif isinstance(exc, UnexpectedToken):
        message = f"Unexpected token {str(exc.token)!r}"
        expected = exc.expected or set()
    else:
        message = f"Unexpected input at position {position}"
        expected = set()

    names = frozenset(expected)
    if names:
        message += "; expected one of: " + ", ".join(
            sorted(_describe_terminal(n) for n in names)
        )

    line, column = _line_column(text, position)
    return ParseError(message, text, line, column, position, names)


def _describe_terminal(name: str) -> str:
    """Return the literal text of a string terminal, or its name otherwise."""
    try:
        pattern = _LARK.get_terminal(name).pattern
    except KeyError:
        return name
    if pattern.type == "str":
        return repr(pattern.value)
    return name


def _line_column(text: str, position: int) -> tuple[int, int]:
    line = text.count("\n", 0, position) + 1
    column = position - (text.rfind("\n", 0, position) + 1) + 1
    return line, column
