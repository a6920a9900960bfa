"""Lark grammar for the signature language.

Precedence, lowest first: union, then object / array / atomic. ``type``
appears inside ``obj``, ``array`` and ``union``; lark resolves the
self-reference when it builds the LALR tables.

Keywords are anonymous string terminals that also match IDENTIFIER. The
lark lexer re-types an IDENTIFIER only when the whole token equals a keyword,
so ``stringValue`` stays an identifier. The contextual lexer only re-types
where a keyword is acceptable, which keeps ``{object: string}`` legal.
"""

from __future__ import annotations

__all__ = ["SIGNATURE_GRAMMAR"]

SIGNATURE_GRAMMAR = r"""
    signature: type

    ?type: union

    union: _non_union ("|" _non_union)*

    _non_union: obj
              | array
              | atomic

    obj: "{" field ("," field)* ","? "}"

    field: IDENTIFIER OPTIONAL? ":" type

    array: "Array" "<" type ">"

    atomic: "string"                -> string_type
           | "number"               -> number_type
           | "bool"                 -> boolean_type
           | "boolean"              -> boolean_type
           | "func"                 -> func_type
           | "object"               -> object_type
           | "element"              -> element_type
           | "elementType"          -> element_type_constructor
           | LITERAL                -> literal_type
           | IDENTIFIER             -> other_type

    OPTIONAL: "?"

    LITERAL: /"[^"\r\n]+"/
           | /'[^'\r\n]+'/

    IDENTIFIER: /[^\W\d]\w*/

    %import common.WS
    %ignore WS
"""
