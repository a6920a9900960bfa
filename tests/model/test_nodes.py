"""Tests for the type-tree node dataclasses.

Covers:
- AtomicKind members and StrEnum values
- Atomic text validation (required for literal/other, forbidden otherwise)
- Immutability and structural equality / hashing
- Canonical rendering back to signature text
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from ts_overloads.model.nodes import (
    ArrayType,
    Atomic,
    AtomicKind,
    Field,
    ObjectType,
    UnionType,
)

# ---------------------------------------------------------------------------
# AtomicKind
# ---------------------------------------------------------------------------


class TestAtomicKind:
    def test_has_exactly_nine_members(self) -> None:
        assert len(list(AtomicKind)) == 9

    def test_values_are_lowercased_names(self) -> None:
        assert AtomicKind.STRING == "string"
        assert AtomicKind.ELEMENT_TYPE == "element_type"
        assert AtomicKind.STRING_LITERAL == "string_literal"

    def test_is_str_subclass(self) -> None:
        assert isinstance(AtomicKind.OTHER, str)


# ---------------------------------------------------------------------------
# Atomic validation
# ---------------------------------------------------------------------------


class TestAtomicValidation:
    def test_keyword_kind_without_text(self) -> None:
        assert Atomic(AtomicKind.NUMBER).text == ""

    def test_keyword_kind_rejects_text(self) -> None:
        with pytest.raises(ValueError, match="takes no text"):
            Atomic(AtomicKind.NUMBER, "float")

    def test_literal_requires_text(self) -> None:
        with pytest.raises(ValueError, match="requires non-empty text"):
            Atomic(AtomicKind.STRING_LITERAL)

    def test_other_requires_text(self) -> None:
        with pytest.raises(ValueError, match="requires non-empty text"):
            Atomic.other("")

    def test_literal_constructor(self) -> None:
        atomic = Atomic.literal("red")
        assert atomic.kind is AtomicKind.STRING_LITERAL
        assert atomic.text == "red"
        assert atomic.is_literal

    def test_other_is_not_literal(self) -> None:
        assert not Atomic.other("ReactNode").is_literal


# ---------------------------------------------------------------------------
# Immutability and equality
# ---------------------------------------------------------------------------


class TestImmutability:
    def test_atomic_is_frozen(self) -> None:
        atomic = Atomic(AtomicKind.STRING)
        with pytest.raises(FrozenInstanceError):
            atomic.kind = AtomicKind.NUMBER  # type: ignore[misc]

    def test_object_is_frozen(self) -> None:
        obj = ObjectType((Field("a", Atomic(AtomicKind.STRING)),))
        with pytest.raises(FrozenInstanceError):
            obj.fields = ()  # type: ignore[misc]

    def test_structural_equality(self) -> None:
        left = ArrayType(UnionType((Atomic(AtomicKind.STRING), Atomic.other("T"))))
        right = ArrayType(UnionType((Atomic(AtomicKind.STRING), Atomic.other("T"))))
        assert left == right
        assert hash(left) == hash(right)

    def test_field_order_matters(self) -> None:
        a = Field("a", Atomic(AtomicKind.STRING))
        b = Field("b", Atomic(AtomicKind.NUMBER))
        assert ObjectType((a, b)) != ObjectType((b, a))

    def test_optional_flag_matters(self) -> None:
        t = Atomic(AtomicKind.STRING)
        assert Field("a", t) != Field("a", t, optional=True)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRendering:
    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (AtomicKind.STRING, "string"),
            (AtomicKind.NUMBER, "number"),
            (AtomicKind.BOOLEAN, "boolean"),
            (AtomicKind.FUNC, "func"),
            (AtomicKind.OBJECT, "object"),
            (AtomicKind.ELEMENT, "element"),
            (AtomicKind.ELEMENT_TYPE, "elementType"),
        ],
    )
    def test_keywords(self, kind: AtomicKind, expected: str) -> None:
        assert str(Atomic(kind)) == expected

    def test_literal_uses_double_quotes(self) -> None:
        assert str(Atomic.literal("red")) == '"red"'

    def test_literal_containing_double_quote_uses_single_quotes(self) -> None:
        assert str(Atomic.literal('say "hi"')) == "'say \"hi\"'"

    def test_other_passes_through(self) -> None:
        assert str(Atomic.other("ReactNode")) == "ReactNode"

    def test_object(self) -> None:
        obj = ObjectType(
            (
                Field("a", Atomic(AtomicKind.STRING)),
                Field("b", Atomic(AtomicKind.NUMBER), optional=True),
            )
        )
        assert str(obj) == "{a: string, b?: number}"

    def test_array_of_union(self) -> None:
        tree = ArrayType(UnionType((Atomic(AtomicKind.STRING), Atomic.literal("x"))))
        assert str(tree) == 'Array<string | "x">'

    def test_union_inside_union_renders_flat(self) -> None:
        inner = UnionType((Atomic.other("A"), Atomic.other("B")))
        tree = UnionType((inner, Atomic.other("C")))
        assert str(tree) == "A | B | C"
