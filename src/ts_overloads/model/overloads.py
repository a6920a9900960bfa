"""Overload descriptors handed to the downstream code emitter.

Each translated signature yields a list of overloads. The emitter splices
``params_code`` / ``body_code`` (or ``method_name`` / ``value_code``) into
full member declarations; that step lives outside this package.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

__all__ = ["EnumOverload", "Overload", "RegularOverload"]


@dataclass(frozen=True, slots=True)
class RegularOverload:
    """A normal overload.

    Attributes:
        params_code: Parenthesised parameter list, e.g. ``"(value: string)"``.
        body_code:   Expression producing the value passed on, e.g. ``"value"``.
    """

    params_code: str
    body_code: str

    @property
    def identity(self) -> tuple[str, str, str]:
        return ("regular", self.params_code, self.body_code)


@dataclass(frozen=True, slots=True)
class EnumOverload:
    """A zero-argument overload standing in for one string-literal case.

    Attributes:
        method_name: Identifier derived from the literal text.
        value_code:  The quoted literal the generated member supplies.
    """

    params_code: ClassVar[str] = "()"

    method_name: str
    value_code: str

    @property
    def identity(self) -> tuple[str, str, str]:
        return ("enum", self.method_name, self.params_code)


Overload = RegularOverload | EnumOverload
