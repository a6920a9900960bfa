"""Public API functions for ts-overloads.

This module combines parsing and translation into the user-facing entry
points. Each call builds a fresh translator bundle, so there is no global
state mutation between calls and identical input always gives identical
output.

Every failure is raised: ``ParseError`` for malformed text,
``EmptyUnionError`` / ``UnsupportedArityError`` for trees that cannot be
translated. All three derive from ``SignatureError``.
"""

from __future__ import annotations

import logging

from ts_overloads.model.nodes import TsType
from ts_overloads.model.overloads import Overload
from ts_overloads.parsing.parser import SignatureParser
from ts_overloads.translation.config import TranslatorConfig
from ts_overloads.translation.translators import Customization, Translators

__all__ = [
    "parse",
    "parse_and_translate_custom",
    "parse_and_translate_default",
    "translate_custom",
    "translate_default",
    "translate_nested_default",
]

logger = logging.getLogger(__name__)


def parse(text: str) -> TsType:
    """Parse signature text into a type tree.

    Args:
        text: Signature text, e.g. ``"{a: string, b?: Array<number>}"``.

    Returns:
        The parsed ``TsType``.

    Raises:
        ParseError: If ``text`` is not a complete, valid signature.
    """
    return SignatureParser().parse(text)


def translate_default(
    tree: TsType,
    config: TranslatorConfig | None = None,
) -> list[Overload]:
    """Translate a tree into overloads with the default rules.

    Args:
        tree:   A type tree, usually from ``parse``.
        config: Translation settings. Defaults to ``TranslatorConfig()`` when None.

    Returns:
        The distinct overloads for ``tree``, in first-occurrence order.

    Raises:
        EmptyUnionError: If a union has no cases.
        UnsupportedArityError: If a nested union has too many distinct cases.
    """
    return _translate(Translators.default(config), tree)


def translate_custom(
    customize: Customization,
    tree: TsType,
    config: TranslatorConfig | None = None,
) -> list[Overload]:
    """Translate a tree into overloads with customized rules.

    Args:
        customize: Maps the default bundle to the bundle to use, e.g.
                   ``lambda t: t.replace_rules(atomic=my_atomic)``.
        tree:      A type tree, usually from ``parse``.
        config:    Settings of the default bundle handed to ``customize``.
                   Defaults to ``TranslatorConfig()`` when None.

    Returns:
        The distinct overloads for ``tree``, in first-occurrence order.
    """
    return _translate(customize(Translators.default(config)), tree)


def parse_and_translate_default(
    text: str,
    config: TranslatorConfig | None = None,
) -> list[Overload]:
    """Parse ``text`` and translate it with the default rules."""
    return translate_default(parse(text), config=config)


def parse_and_translate_custom(
    customize: Customization,
    text: str,
    config: TranslatorConfig | None = None,
) -> list[Overload]:
    """Parse ``text`` and translate it with customized rules."""
    return translate_custom(customize, parse(text), config=config)


def translate_nested_default(
    tree: TsType,
    config: TranslatorConfig | None = None,
) -> str:
    """Render a whole tree as one inline F# type expression.

    Useful for record fields and other places where a type, not an overload,
    is emitted.
    """
    return Translators.default(config).nested(tree)


def _translate(bundle: Translators, tree: TsType) -> list[Overload]:
    overloads = bundle.top_level(tree)
    logger.debug("Translated %s into %d overload(s)", tree, len(overloads))
    return overloads
