"""Type-tree nodes produced by the signature parser.

A parsed signature is one of four shapes:
- Atomic      : a leaf (primitive keyword, string literal, or opaque name)
- ObjectType  : ordered fields, each possibly optional
- ArrayType   : a single element type
- UnionType   : two or more alternative cases

All nodes are frozen, slotted dataclasses, so trees are immutable, hashable
and compared structurally. ``str(node)`` renders a node back to signature
text in canonical spacing. Re-parsing the text gives back an equal tree for
every tree the parser produces. A union built directly with another union
as a case renders flat and re-parses as one flat union.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = [
    "ArrayType",
    "Atomic",
    "AtomicKind",
    "Field",
    "ObjectType",
    "TsType",
    "UnionType",
]


class AtomicKind(StrEnum):
    """The closed set of leaf types.

    - STRING         -> "string"          : primitive string
    - NUMBER         -> "number"          : primitive number
    - BOOLEAN        -> "boolean"         : primitive boolean
    - FUNC           -> "func"            : function value
    - OBJECT         -> "object"          : opaque object
    - ELEMENT        -> "element"         : UI element value
    - ELEMENT_TYPE   -> "element_type"    : UI element constructor
    - STRING_LITERAL -> "string_literal"  : a quoted literal, text in Atomic.text
    - OTHER          -> "other"           : any other identifier, passed through
    """

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    FUNC = auto()
    OBJECT = auto()
    ELEMENT = auto()
    ELEMENT_TYPE = auto()
    STRING_LITERAL = auto()
    OTHER = auto()


# Kinds whose Atomic must carry text.
_TEXT_KINDS = frozenset({AtomicKind.STRING_LITERAL, AtomicKind.OTHER})

# Signature keyword for each keyword kind, used when rendering.
_KEYWORDS: dict[AtomicKind, str] = {
    AtomicKind.STRING: "string",
    AtomicKind.NUMBER: "number",
    AtomicKind.BOOLEAN: "boolean",
    AtomicKind.FUNC: "func",
    AtomicKind.OBJECT: "object",
    AtomicKind.ELEMENT: "element",
    AtomicKind.ELEMENT_TYPE: "elementType",
}


@dataclass(frozen=True, slots=True)
class Atomic:
    """A leaf type.

    Attributes:
        kind: Which leaf this is (see AtomicKind).
        text: Literal text for STRING_LITERAL (without quotes); the raw
              identifier for OTHER; empty for every keyword kind.
    """

    kind: AtomicKind
    text: str = ""

    def __post_init__(self) -> None:
        if self.kind in _TEXT_KINDS and not self.text:
            msg = f"{self.kind} atomic requires non-empty text"
            raise ValueError(msg)
        if self.kind not in _TEXT_KINDS and self.text:
            msg = f"{self.kind} atomic takes no text, got {self.text!r}"
            raise ValueError(msg)

    @classmethod
    def literal(cls, text: str) -> Atomic:
        return cls(AtomicKind.STRING_LITERAL, text)

    @classmethod
    def other(cls, name: str) -> Atomic:
        return cls(AtomicKind.OTHER, name)

    @property
    def is_literal(self) -> bool:
        return self.kind is AtomicKind.STRING_LITERAL

    def __str__(self) -> str:
        if self.kind is AtomicKind.STRING_LITERAL:
            quote = "'" if '"' in self.text else '"'
            return f"{quote}{self.text}{quote}"
        if self.kind is AtomicKind.OTHER:
            return self.text
        return _KEYWORDS[self.kind]


@dataclass(frozen=True, slots=True)
class Field:
    """One entry of an object type.

    Attributes:
        name:     Field name exactly as written in the signature.
        type:     The field's type tree.
        optional: True when the field was marked with ``?``.
    """

    name: str
    type: TsType
    optional: bool = False

    def __str__(self) -> str:
        marker = "?" if self.optional else ""
        return f"{self.name}{marker}: {self.type}"


@dataclass(frozen=True, slots=True)
class ObjectType:
    """An object shape. Field order is the order written in the signature."""

    fields: tuple[Field, ...]

    def __str__(self) -> str:
        return "{" + ", ".join(str(f) for f in self.fields) + "}"


@dataclass(frozen=True, slots=True)
class ArrayType:
    element: TsType

    def __str__(self) -> str:
        return f"Array<{self.element}>"


@dataclass(frozen=True, slots=True)
class UnionType:
    """Alternative cases, in the order written.

    The parser never builds a single-case union, but any length can be
    constructed directly; an empty union is rejected at translation time.
    A union case that is itself a union renders without grouping, so
    ``A | (B | C)`` prints as ``A | B | C``.
    """

    cases: tuple[TsType, ...]

    def __str__(self) -> str:
        return " | ".join(str(c) for c in self.cases)


TsType = Atomic | ObjectType | ArrayType | UnionType
