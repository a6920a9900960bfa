"""IdentifierAdapter: maps source names to target-language identifiers and back.

Source names come from object field names and string-literal texts. The
target is F#, where any text can become an identifier by quoting it in
double backticks (``like this``). Adaptation therefore mostly just quotes:

- "value"      -> "value"           (already a valid identifier)
- "type"       -> "``type``"        (reserved word)
- "small-caps" -> "``small-caps``"  (not an identifier)
- "2xl"        -> "``2xl``"         (starts with a digit)

A quoted identifier cannot hold backticks, tabs or line breaks, so inside the
quotes those are written as two-character escapes introduced by ``'``, and a
literal ``'`` is doubled:

- "a`b"  -> "``a'gb``"
- "a'b"  -> "``a''b``"
- "a\tb" -> "``a'tb``"

Every escape starts with ``'`` and is decoded left to right, so distinct
names adapt to distinct identifiers and ``restore`` recovers the original
exactly.
"""

from __future__ import annotations

import re

# A plain identifier: a letter or underscore, then letters, digits, underscores.
_PLAIN = re.compile(r"[^\W\d]\w*\Z")

_ESCAPES = {"'": "''", "`": "'g", "\t": "'t", "\r": "'r", "\n": "'n"}
_UNESCAPES = {code[1]: char for char, code in _ESCAPES.items()}

_NEEDS_ESCAPE = re.compile(r"['`\t\r\n]")
_ESCAPE_SEQUENCE = re.compile(r"'(.)", re.DOTALL)

_QUOTE = "``"

FSHARP_RESERVED: frozenset[str] = frozenset(
    {
        # Keywords
        "abstract", "and", "as", "assert", "base", "begin", "class", "default",
        "delegate", "do", "done", "downcast", "downto", "elif", "else", "end",
        "exception", "extern", "false", "finally", "fixed", "for", "fun",
        "function", "global", "if", "in", "inherit", "inline", "interface",
        "internal", "lazy", "let", "match", "member", "module", "mutable",
        "namespace", "new", "not", "null", "of", "open", "or", "override",
        "private", "public", "rec", "return", "select", "sig", "static",
        "struct", "then", "to", "true", "try", "type", "upcast", "use", "val",
        "void", "when", "while", "with", "yield", "const",
        # OCaml-compatibility keywords
        "asr", "land", "lor", "lsl", "lsr", "lxor", "mod",
        # Reserved for future use
        "break", "checked", "component", "constraint", "continue", "event",
        "external", "include", "mixin", "parallel", "process", "protected",
        "pure", "sealed", "tailcall", "trait", "virtual",
        # Wildcard pattern
        "_",
    }
)  # fmt: skip


class IdentifierAdapter:
    """Quotes source names that are not usable as bare identifiers.

    Args:
        reserved: Words that must always be quoted. Defaults to the F# keyword
            and reserved-word set.

    Example usage:
        adapter = IdentifierAdapter()
        adapter.adapt("onClick")        # "onClick"
        adapter.adapt("type")           # "``type``"
        adapter.restore("``type``")     # "type"
    """

    def __init__(self, reserved: frozenset[str] = FSHARP_RESERVED) -> None:
        self._reserved = frozenset(reserved)

    @property
    def reserved(self) -> frozenset[str]:
        return self._reserved

    def is_plain(self, name: str) -> bool:
        """True when ``name`` can be used as an identifier without quoting."""
        return bool(_PLAIN.match(name)) and name not in self._reserved

    def adapt(self, name: str) -> str:
        """Return a valid identifier for ``name``.

        Processing:
        1. Plain, non-reserved names are returned unchanged.
        2. ``'``, backticks, tabs and line breaks are escaped.
        3. The result is wrapped in double backticks.
        """
        if self.is_plain(name):
            return name
        escaped = _NEEDS_ESCAPE.sub(lambda m: _ESCAPES[m.group()], name)
        return f"{_QUOTE}{escaped}{_QUOTE}"

    def restore(self, identifier: str) -> str:
        """Undo ``adapt``: strip a double-backtick quote and decode its escapes.

        Unknown escape sequences are kept as written.
        """
        if (
            len(identifier) > 2 * len(_QUOTE)
            and identifier.startswith(_QUOTE)
            and identifier.endswith(_QUOTE)
        ):
            quoted = identifier[len(_QUOTE) : -len(_QUOTE)]
            return _ESCAPE_SEQUENCE.sub(
                lambda m: _UNESCAPES.get(m.group(1), m.group()), quoted
            )
        return identifier

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentifierAdapter):
            return NotImplemented
        return type(self) is type(other) and self._reserved == other._reserved

    def __hash__(self) -> int:
        return hash((type(self), self._reserved))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(reserved=<{len(self._reserved)} words>)"
