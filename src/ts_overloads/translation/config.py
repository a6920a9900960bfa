"""TranslatorConfig: settings shared by every translation rule.

TranslatorConfig is a frozen (immutable) dataclass. It travels inside the
translator bundle, so custom rules read the same settings as the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ts_overloads.translation.identifiers import IdentifierAdapter

__all__ = ["DEFAULT_MAX_UNION_ARITY", "TranslatorConfig"]

# The target union family stops at U9.
DEFAULT_MAX_UNION_ARITY = 9


@dataclass(frozen=True, slots=True)
class TranslatorConfig:
    """Immutable configuration for signature translation.

    Attributes:
        max_union_arity: Largest number of distinct cases a nested union may
            have. Must be >= 2. Defaults to 9, the size of the ``U2`` .. ``U9``
            union family.
        identifiers: Maps field names and literal texts to target identifiers
            and back.
    """

    max_union_arity: int = DEFAULT_MAX_UNION_ARITY
    identifiers: IdentifierAdapter = field(default_factory=IdentifierAdapter)

    def __post_init__(self) -> None:
        if self.max_union_arity < 2:
            msg = f"max_union_arity must be >= 2, got {self.max_union_arity}"
            raise ValueError(msg)
