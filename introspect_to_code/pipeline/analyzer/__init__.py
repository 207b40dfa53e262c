"""
Analyzer module.

Contains the type registry, reference resolution, name resolution and
import collection.
"""

from __future__ import annotations

from .imports import ENUM_SUPPORT_IMPORTS, LIST_IMPORTS, collect_imports, find_module_imports, is_visible
from .name_resolver import (
    ARRAY,
    GLOBAL,
    NATIVE,
    NameKind,
    NameResolver,
    NamingContext,
    derive_enum_name,
    derive_name,
    plural_to_singular,
)
from .reference_resolver import ReferenceResolver, resolve
from .type_registry import TypeRegistry

__all__ = [
    "ARRAY",
    "ENUM_SUPPORT_IMPORTS",
    "LIST_IMPORTS",
    "GLOBAL",
    "NATIVE",
    "NameKind",
    "NameResolver",
    "NamingContext",
    "ReferenceResolver",
    "TypeRegistry",
    "collect_imports",
    "derive_enum_name",
    "derive_name",
    "find_module_imports",
    "is_visible",
    "plural_to_singular",
    "resolve",
]
