"""
Visibility and import collection for resolved classes.
"""

from __future__ import annotations

from ..model.nodes import ResolvedType

# Inner enums are rendered with a Set of their values
ENUM_SUPPORT_IMPORTS = frozenset({"java.util.HashSet", "java.util.Set", "java.util.Arrays"})

# Array members are rendered as lists
LIST_IMPORTS = frozenset({"java.util.List"})


def is_visible(klass: ResolvedType) -> bool:
    """
    Whether the class is rendered as a class of its own.

    Natives and arrays of natives are inlined, everything else is rendered.
    """
    if klass.is_native:
        return False
    if klass.is_array:
        return is_visible(klass.array_type)
    return True


def collect_imports(klass: ResolvedType) -> set[str]:
    """
    Collect all imports needed to render a class.

    Recomputed on every call from the resolved graph.

    Args:
        klass: A resolved class

    Returns:
        Own imports, plus those of member types, inner types and inner enums
    """
    imports: set[str] = set()
    _collect(klass, imports, set())
    return imports


def _collect(klass: ResolvedType, imports: set[str], seen: set[int]) -> None:
    # Member types may refer back to the class being collected
    if id(klass) in seen:
        return
    seen.add(id(klass))

    imports |= klass.imports

    for member in klass.members:
        if member.is_enum:
            continue
        if member.type.is_array:
            imports |= LIST_IMPORTS
        if not is_visible(member.type):
            continue
        _collect(member.type, imports, seen)

    for inner in klass.inner_types:
        _collect(inner, imports, seen)

    if klass.inner_enums:
        imports |= ENUM_SUPPORT_IMPORTS


def find_module_imports(klass: ResolvedType) -> None:
    """Add the imports the namespace modules need for ``klass`` and its inner classes."""
    if not is_visible(klass):
        return

    for module in klass.class_modules:
        klass.imports |= module.get_imports(klass)

    parent_module = klass.parent_module
    if parent_module is not None:
        klass.imports |= parent_module.get_imports(klass)

    for inner in klass.inner_types:
        find_module_imports(inner)
