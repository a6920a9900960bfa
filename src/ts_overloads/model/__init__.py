"""Model subpackage: type-tree nodes and overload descriptors.

Re-exports:
- AtomicKind, Atomic, Field, ObjectType, ArrayType, UnionType, TsType
- RegularOverload, EnumOverload, Overload
"""

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

__all__ = [
    "ArrayType",
    "Atomic",
    "AtomicKind",
    "EnumOverload",
    "Field",
    "ObjectType",
    "Overload",
    "RegularOverload",
    "TsType",
    "UnionType",
]
