"""
Type model module.

Contains the class graph nodes built during ingestion.
"""

from __future__ import annotations

from .nodes import (
    ArrayOf,
    Composite,
    ConstructorDef,
    EnumDef,
    MemberDef,
    MultiType,
    Namespace,
    Native,
    Nature,
    ParameterDef,
    ResolvedType,
    TypeNode,
    UnresolvedRef,
    create_anonymous_type,
    create_unresolved_reference,
)

__all__ = [
    "ArrayOf",
    "Composite",
    "ConstructorDef",
    "EnumDef",
    "MemberDef",
    "MultiType",
    "Namespace",
    "Native",
    "Nature",
    "ParameterDef",
    "ResolvedType",
    "TypeNode",
    "UnresolvedRef",
    "create_anonymous_type",
    "create_unresolved_reference",
]
