"""Property tests for parsing and translation.

These tests verify invariants that must hold for every well-formed signature:
- Rendering a tree and parsing it back gives the same tree
- Parsing and translating are deterministic
- Top-level translation never returns duplicate overloads
- Nested union arity never exceeds the configured ceiling
- Identifier adaptation round-trips and never merges distinct names
"""

from __future__ import annotations

import hypothesis.strategies as st
from hypothesis import given, settings

from ts_overloads.errors import UnsupportedArityError
from ts_overloads.model.nodes import (
    ArrayType,
    Atomic,
    AtomicKind,
    Field,
    ObjectType,
    TsType,
    UnionType,
)
from ts_overloads.parsing.parser import parse
from ts_overloads.translation.identifiers import IdentifierAdapter
from ts_overloads.translation.translators import Translators

# Words the parser would read as something other than an opaque name.
_RESERVED_BY_GRAMMAR = {
    "string",
    "number",
    "bool",
    "boolean",
    "func",
    "object",
    "element",
    "elementType",
    "Array",
}


# =============================================================================
# Strategy Definitions
# =============================================================================


identifiers = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,8}", fullmatch=True).filter(
    lambda s: s not in _RESERVED_BY_GRAMMAR
)

literal_texts = st.text(
    alphabet=st.sampled_from("abcXYZ019 -_.:/"), min_size=1, max_size=10
)

keyword_atomics = st.sampled_from(
    [
        Atomic(kind)
        for kind in AtomicKind
        if kind not in (AtomicKind.STRING_LITERAL, AtomicKind.OTHER)
    ]
)

atomics = st.one_of(
    keyword_atomics,
    literal_texts.map(Atomic.literal),
    identifiers.map(Atomic.other),
)


def _extend(children: st.SearchStrategy[TsType]) -> st.SearchStrategy[TsType]:
    fields = st.builds(Field, identifiers, children, st.booleans())
    objects = st.lists(fields, min_size=1, max_size=4).map(
        lambda fs: ObjectType(tuple(fs))
    )
    arrays = children.map(ArrayType)
    # Union cases are never unions themselves: "a | (b | c)" renders flat.
    non_unions = children.filter(lambda t: not isinstance(t, UnionType))
    unions = st.lists(non_unions, min_size=2, max_size=4).map(
        lambda cs: UnionType(tuple(cs))
    )
    return st.one_of(objects, arrays, unions)


trees = st.recursive(atomics, _extend, max_leaves=12)


# =============================================================================
# Parsing
# =============================================================================


@given(trees)
@settings(max_examples=200)
def test_render_then_parse_is_identity(tree: TsType) -> None:
    assert parse(str(tree)) == tree


@given(trees)
def test_parse_is_deterministic(tree: TsType) -> None:
    text = str(tree)
    assert parse(text) == parse(text)


@given(trees, st.sampled_from(["", " ", "\n", "\t  "]))
def test_surrounding_whitespace_is_ignored(tree: TsType, padding: str) -> None:
    text = str(tree)
    assert parse(padding + text + padding) == parse(text)


# =============================================================================
# Translation
# =============================================================================


@given(trees)
def test_translation_is_deterministic(tree: TsType) -> None:
    bundle = Translators.default()
    assert bundle.top_level(tree) == bundle.top_level(tree)
    assert bundle.nested(tree) == bundle.nested(tree)


@given(trees)
def test_top_level_has_no_duplicates(tree: TsType) -> None:
    overloads = Translators.default().top_level(tree)
    identities = [o.identity for o in overloads]
    assert len(identities) == len(set(identities))
    assert overloads


@given(st.lists(identifiers, min_size=2, max_size=12, unique=True))
def test_union_arity_bound(names: list[str]) -> None:
    tree = UnionType(tuple(Atomic.other(n) for n in names))
    bundle = Translators.default()
    if len(names) > bundle.config.max_union_arity:
        try:
            bundle.nested(tree)
        except UnsupportedArityError as exc:
            assert exc.arity == len(names)
        else:
            raise AssertionError("expected UnsupportedArityError")
    else:
        assert bundle.nested(tree).startswith(f"U{len(names)}<")


# =============================================================================
# Identifier adaptation
# =============================================================================

# Names built from the escaped characters and the letters their escapes use.
escape_heavy_names = st.text(
    alphabet=st.sampled_from("ab_-` '\t\r\ngtn"), min_size=1, max_size=12
)

adaptable_names = escape_heavy_names | st.text(min_size=1, max_size=20)


@given(adaptable_names)
def test_adapt_restore_round_trip(name: str) -> None:
    adapter = IdentifierAdapter()
    assert adapter.restore(adapter.adapt(name)) == name


@given(adaptable_names, adaptable_names)
def test_adapt_is_injective(a: str, b: str) -> None:
    adapter = IdentifierAdapter()
    if a != b:
        assert adapter.adapt(a) != adapter.adapt(b)


@given(st.lists(escape_heavy_names, min_size=1, max_size=6, unique=True))
def test_distinct_literals_keep_their_enum_overloads(texts: list[str]) -> None:
    tree = UnionType(tuple(Atomic.literal(t) for t in texts))
    overloads = Translators.default().top_level(tree)
    assert len(overloads) == len(texts)
