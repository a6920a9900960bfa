"""ts-overloads - structural type signatures to F# method overloads."""

from __future__ import annotations

from ts_overloads.api import (
    parse,
    parse_and_translate_custom,
    parse_and_translate_default,
    translate_custom,
    translate_default,
    translate_nested_default,
)
from ts_overloads.cache import ParseCache
from ts_overloads.errors import (
    EmptyUnionError,
    ParseError,
    SignatureError,
    TranslationError,
    UnsupportedArityError,
)
from ts_overloads.model import (
    ArrayType,
    Atomic,
    AtomicKind,
    EnumOverload,
    Field,
    ObjectType,
    Overload,
    RegularOverload,
    TsType,
    UnionType,
)
from ts_overloads.translation import IdentifierAdapter, TranslatorConfig, Translators

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayType",
    "Atomic",
    "AtomicKind",
    "EmptyUnionError",
    "EnumOverload",
    "Field",
    "IdentifierAdapter",
    "ObjectType",
    "Overload",
    "ParseCache",
    "ParseError",
    "RegularOverload",
    "SignatureError",
    "TranslationError",
    "TranslatorConfig",
    "Translators",
    "TsType",
    "UnionType",
    "UnsupportedArityError",
    "parse",
    "parse_and_translate_custom",
    "parse_and_translate_default",
    "translate_custom",
    "translate_default",
    "translate_nested_default",
]
