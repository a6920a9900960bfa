"""Translation subpackage: type trees to F# type text and overloads."""

from ts_overloads.translation.config import DEFAULT_MAX_UNION_ARITY, TranslatorConfig
from ts_overloads.translation.identifiers import FSHARP_RESERVED, IdentifierAdapter
from ts_overloads.translation.translators import (
    Customization,
    Translators,
    translate_atomic,
    translate_inner_array,
    translate_inner_object,
    translate_inner_union,
    translate_nested,
    translate_top_level,
    translate_top_level_array,
    translate_top_level_object,
    translate_top_level_union,
)

__all__ = [
    "DEFAULT_MAX_UNION_ARITY",
    "FSHARP_RESERVED",
    "Customization",
    "IdentifierAdapter",
    "TranslatorConfig",
    "Translators",
    "translate_atomic",
    "translate_inner_array",
    "translate_inner_object",
    "translate_inner_union",
    "translate_nested",
    "translate_top_level",
    "translate_top_level_array",
    "translate_top_level_object",
    "translate_top_level_union",
]
