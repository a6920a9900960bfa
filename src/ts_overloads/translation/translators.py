"""Translator bundle: seven mutually-referential translation rules.

Two entry points walk a type tree:

- ``translate_nested``     renders a tree as one inline F# type expression.
  Used for object fields, array elements and union cases.
- ``translate_top_level``  renders the outermost tree as a list of method
  overloads, because some shapes need several call forms (one enum member
  per string literal, a ParamArray member for arrays).

Neither entry point does any work itself; it dispatches to a rule held by the
active ``Translators`` bundle. Every rule receives the bundle as its first
argument and reaches sub-translations only through it, never by calling a
sibling function directly. Replacing one rule therefore changes its behaviour
everywhere it is reached from, while the remaining defaults stay unchanged:

    def loose_numbers(bundle, atomic):
        if atomic.kind is AtomicKind.NUMBER:
            return "int"
        return translate_atomic(bundle, atomic)

    bundle = Translators.default().replace_rules(atomic=loose_numbers)
    bundle.nested(parse("{a: number, b: Array<number>}"))
    # "{| a: int; b: int [] |}"

Translation is a pure structural recursion bounded by the depth of the tree.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from ts_overloads.errors import EmptyUnionError, UnsupportedArityError
from ts_overloads.model.nodes import (
    ArrayType,
    Atomic,
    AtomicKind,
    Field,
    ObjectType,
    TsType,
    UnionType,
)
from ts_overloads.model.overloads import EnumOverload, Overload, RegularOverload
from ts_overloads.translation.config import TranslatorConfig

__all__ = [
    "Customization",
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

logger = logging.getLogger(__name__)

AtomicRule = Callable[["Translators", Atomic], str]
InnerObjectRule = Callable[["Translators", tuple[Field, ...]], str]
InnerUnionRule = Callable[["Translators", tuple[TsType, ...]], str]
InnerArrayRule = Callable[["Translators", TsType], str]
TopLevelObjectRule = Callable[["Translators", tuple[Field, ...]], list[Overload]]
TopLevelUnionRule = Callable[["Translators", tuple[TsType, ...]], list[Overload]]
TopLevelArrayRule = Callable[["Translators", TsType], list[Overload]]


@dataclass(frozen=True, slots=True)
class Translators:
    """The active set of translation rules plus the config they share.

    Attributes:
        atomic:            Atomic -> F# type text.
        inner_object:      Object fields -> anonymous record type text.
        inner_union:       Union cases -> ``U{N}<...>`` type text.
        inner_array:       Element type -> array type text.
        top_level_object:  Object fields -> overloads.
        top_level_union:   Union cases -> overloads.
        top_level_array:   Element type -> overloads.
        config:            Settings read by the rules (arity ceiling,
                           identifier adaptation).
    """

    atomic: AtomicRule
    inner_object: InnerObjectRule
    inner_union: InnerUnionRule
    inner_array: InnerArrayRule
    top_level_object: TopLevelObjectRule
    top_level_union: TopLevelUnionRule
    top_level_array: TopLevelArrayRule
    config: TranslatorConfig = field(default_factory=TranslatorConfig)

    @classmethod
    def default(cls, config: TranslatorConfig | None = None) -> Translators:
        """Return the bundle of default rules."""
        return cls(
            atomic=translate_atomic,
            inner_object=translate_inner_object,
            inner_union=translate_inner_union,
            inner_array=translate_inner_array,
            top_level_object=translate_top_level_object,
            top_level_union=translate_top_level_union,
            top_level_array=translate_top_level_array,
            config=config if config is not None else TranslatorConfig(),
        )

    def replace_rules(self, **rules: Callable[..., object]) -> Translators:
        """Return a copy with the named rules replaced.

        Raises:
            TypeError: If a keyword does not name a field of the bundle.
        """
        return dataclasses.replace(self, **rules)  # type: ignore[arg-type]

    def nested(self, tree: TsType) -> str:
        return translate_nested(self, tree)

    def top_level(self, tree: TsType) -> list[Overload]:
        return translate_top_level(self, tree)


Customization = Callable[[Translators], Translators]


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def translate_nested(bundle: Translators, tree: TsType) -> str:
    """Render ``tree`` as an inline type expression using ``bundle``'s rules."""
    if isinstance(tree, Atomic):
        return bundle.atomic(bundle, tree)
    if isinstance(tree, ArrayType):
        return bundle.inner_array(bundle, tree.element)
    if isinstance(tree, UnionType):
        return bundle.inner_union(bundle, tree.cases)
    if isinstance(tree, ObjectType):
        return bundle.inner_object(bundle, tree.fields)
    raise TypeError(f"Unsupported type tree node: {type(tree)!r}")


def translate_top_level(bundle: Translators, tree: TsType) -> list[Overload]:
    """Render ``tree`` as the overloads of one generated member.

    An atomic type needs no rule of its own: it becomes a single ``value``
    parameter typed by ``bundle.atomic``.
    """
    if isinstance(tree, Atomic):
        type_text = bundle.atomic(bundle, tree)
        return [RegularOverload(f"(value: {type_text})", "value")]
    if isinstance(tree, UnionType):
        return bundle.top_level_union(bundle, tree.cases)
    if isinstance(tree, ObjectType):
        return bundle.top_level_object(bundle, tree.fields)
    if isinstance(tree, ArrayType):
        return bundle.top_level_array(bundle, tree.element)
    raise TypeError(f"Unsupported type tree node: {type(tree)!r}")


# ---------------------------------------------------------------------------
# Nested rules
# ---------------------------------------------------------------------------

_ATOMIC_TYPES: dict[AtomicKind, str] = {
    AtomicKind.STRING: "string",
    AtomicKind.NUMBER: "float",
    AtomicKind.BOOLEAN: "bool",
    AtomicKind.FUNC: "Func<obj, obj>",
    AtomicKind.OBJECT: "obj",
    AtomicKind.ELEMENT: "ReactElement",
    AtomicKind.ELEMENT_TYPE: "ReactElementType",
}

_STRING = Atomic(AtomicKind.STRING)


def translate_atomic(bundle: Translators, atomic: Atomic) -> str:
    """Look up the F# type for a leaf; opaque names pass through unchanged."""
    if atomic.kind is AtomicKind.STRING_LITERAL:
        return _string_code(atomic.text)
    if atomic.kind is AtomicKind.OTHER:
        return atomic.text
    return _ATOMIC_TYPES[atomic.kind]


def translate_inner_array(bundle: Translators, element: TsType) -> str:
    return translate_nested(bundle, element) + " []"


def translate_inner_object(bundle: Translators, fields: tuple[Field, ...]) -> str:
    """Render fields as an anonymous record, ``{| a: string; b: float option |}``."""
    identifiers = bundle.config.identifiers
    entries = []
    for f in fields:
        type_text = translate_nested(bundle, f.type)
        if f.optional:
            type_text += " option"
        entries.append(f"{identifiers.adapt(f.name)}: {type_text}")
    return "{| " + "; ".join(entries) + " |}"


def translate_inner_union(bundle: Translators, cases: tuple[TsType, ...]) -> str:
    """Render union cases as one erased-union type.

    String-literal cases widen to the plain string type, since a literal
    cannot stand alone as a nested type. Cases that render identically are
    merged, first occurrence wins.

    Returns:
        The single case text when one distinct case remains, otherwise
        ``U{N}<T1, ..., TN>``.

    Raises:
        EmptyUnionError: If no case remains.
        UnsupportedArityError: If more than ``config.max_union_arity`` remain.
    """
    rendered = [
        bundle.atomic(bundle, _STRING)
        if isinstance(case, Atomic) and case.is_literal
        else translate_nested(bundle, case)
        for case in cases
    ]
    distinct = list(dict.fromkeys(rendered))
    if len(distinct) < len(rendered):
        logger.debug(
            "Merged %d union cases into %d distinct types",
            len(rendered),
            len(distinct),
        )

    arity = len(distinct)
    if arity == 0:
        raise EmptyUnionError
    if arity == 1:
        return distinct[0]
    max_arity = bundle.config.max_union_arity
    if arity > max_arity:
        raise UnsupportedArityError(arity, max_arity)
    return f"U{arity}<{', '.join(distinct)}>"


# ---------------------------------------------------------------------------
# Top-level rules
# ---------------------------------------------------------------------------


def translate_top_level_object(
    bundle: Translators, fields: tuple[Field, ...]
) -> list[Overload]:
    """One overload taking each field as a parameter, in field order.

    Optional fields become optional parameters (``?b: float``). The body
    builds a JS object keyed by the original field names, recovered from
    the adapted parameter names.
    """
    identifiers = bundle.config.identifiers
    params = []
    entries = []
    for f in fields:
        name = identifiers.adapt(f.name)
        key = _string_code(identifiers.restore(name))
        type_text = translate_nested(bundle, f.type)
        if f.optional:
            params.append(f"?{name}: {type_text}")
            entries.append(f"if {name}.IsSome then {key} ==> {name}.Value")
        else:
            params.append(f"{name}: {type_text}")
            entries.append(f"{key} ==> {name}")

    params_code = "(" + ", ".join(params) + ")"
    body_code = "createObj [ " + "; ".join(entries) + " ]"
    return [RegularOverload(params_code, body_code)]


def translate_top_level_array(bundle: Translators, element: TsType) -> list[Overload]:
    type_text = translate_nested(bundle, element)
    return [RegularOverload(f"([<ParamArray>] values: {type_text} [])", "values")]


def translate_top_level_union(
    bundle: Translators, cases: tuple[TsType, ...]
) -> list[Overload]:
    """Collect the overloads of every case.

    Each string literal becomes an argument-free enum member named after the
    literal; every other case contributes its own top-level overloads.
    Duplicates are dropped by overload identity, first occurrence wins.

    Raises:
        EmptyUnionError: If there are no cases.
    """
    if not cases:
        raise EmptyUnionError

    identifiers = bundle.config.identifiers
    overloads: list[Overload] = []
    for case in cases:
        if isinstance(case, Atomic) and case.is_literal:
            overloads.append(
                EnumOverload(identifiers.adapt(case.text), _string_code(case.text))
            )
        else:
            overloads.extend(translate_top_level(bundle, case))

    distinct = _distinct(overloads)
    if len(distinct) < len(overloads):
        logger.debug(
            "Dropped %d duplicate overloads", len(overloads) - len(distinct)
        )
    return distinct


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _distinct(overloads: Iterable[Overload]) -> list[Overload]:
    seen: dict[tuple[str, str, str], Overload] = {}
    for overload in overloads:
        seen.setdefault(overload.identity, overload)
    return list(seen.values())


def _string_code(text: str) -> str:
    """Quote ``text`` as an F# string literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
