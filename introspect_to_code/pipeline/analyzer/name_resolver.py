"""
Name resolver for turning introspect ids into Java identifiers.

Naming is a projection of the class graph: it never changes a node and
never takes part in identity. Global names go through an ordered rule
table so that e.g. ``Filter.Rule.Albums`` reads ``AlbumFilterRule``.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..config import CodeGeneratorConfig
from ..errors import UnknownNativeTypeError
from ..model.nodes import EnumDef, MemberDef, Namespace, ParameterDef, ResolvedType

# Java reserved keywords that cannot be used as field names
JAVA_RESERVED_KEYWORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "false",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "null",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "true",
    "try",
    "void",
    "volatile",
    "while",
}

# JSON schema primitive -> Java class
NATIVE_TYPES = {
    "boolean": "Boolean",
    "number": "Double",
    "integer": "Integer",
    "string": "String",
}

_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")


class NameKind(Enum):
    """Which naming rules apply."""

    GLOBAL = "global"
    INNER = "inner"
    ARRAY = "array"
    NATIVE = "native"


@dataclass(frozen=True)
class NamingContext:
    """What is known about the type being named."""

    kind: NameKind = NameKind.GLOBAL

    # Raw name of the owning class, for inner types
    owner_name: str | None = None

    list_type_template: str = "List<{}>"


GLOBAL = NamingContext(NameKind.GLOBAL)
NATIVE = NamingContext(NameKind.NATIVE)
ARRAY = NamingContext(NameKind.ARRAY)


def plural_to_singular(word: str) -> str:
    """
    Best-effort singular of a plural word.

    Rules, in order:
        "...ovies" is returned unchanged
        "...ies" -> every "ies" becomes "y"
        trailing "s" is dropped
        anything else is returned unchanged

    Examples:
        "Categories" -> "Category"
        "Movies" -> "Movies"
        "Files" -> "File"
    """
    if word.endswith("ovies"):
        return word
    if word.endswith("ies"):
        return word.replace("ies", "y")
    if word.endswith("s"):
        return word[:-1]
    return word


@dataclass(frozen=True)
class NamingRule:
    """One (predicate, transform) rewrite of a name."""

    description: str
    predicate: Callable[[str], bool]
    transform: Callable[[str], str]

    # Stop rewriting once this rule applied
    terminal: bool = False


def _prefix_rule(prefixes: tuple[str, ...], suffix: str, description: str) -> NamingRule:
    """``<prefix><Plural>`` -> ``<Singular><suffix>``, trying prefixes in order."""

    def transform(name: str) -> str:
        prefix = next(p for p in prefixes if name.startswith(p))
        return plural_to_singular(name[len(prefix) :]) + suffix

    return NamingRule(description, lambda name: name.startswith(prefixes), transform)


def _exact_rule(names: tuple[str, ...], replacement: str, description: str) -> NamingRule:
    return NamingRule(description, lambda name: name in names, lambda name: replacement, terminal=True)


# Each group is tried in order; within a group the first matching rule wins
# and its result is fed to the next group.
GLOBAL_TYPE_RULES: list[list[NamingRule]] = [
    [_exact_rule(("ItemAll", "Item.All"), "AllItems", "Item.All -> AllItems")],
    [
        _prefix_rule(("Items.", "Items"), "Item", "Items.Sources -> SourceItem"),
        _prefix_rule(("Item.", "Item"), "Item", "Item.File -> FileItem"),
    ],
    [_prefix_rule(("Details.", "Details"), "Detail", "Details.Album -> AlbumDetail")],
    [
        _prefix_rule(("Filter.Rule.", "FilterRule.", "FilterRule"), "FilterRule", "Filter.Rule.Albums -> AlbumFilterRule"),
        _prefix_rule(("Filter.",), "Filter", "Filter.Albums -> AlbumFilter"),
    ],
]

GLOBAL_ENUM_RULES: list[list[NamingRule]] = [
    [_prefix_rule(("Fields.",), "Fields", "Fields.Files -> FileFields")],
    [
        _prefix_rule(("Filter.Fields.",), "FilterFields", "Filter.Fields.TVShows -> TVShowFilterFields"),
        _prefix_rule(("Filter.",), "Filters", "Filter.Operators -> OperatorFilters"),
    ],
]


def apply_rules(name: str, rules: list[list[NamingRule]]) -> str:
    """Run ``name`` through a rule table and drop the remaining dots."""
    for group in rules:
        rule = next((r for r in group if r.predicate(name)), None)
        if rule is None:
            continue
        name = rule.transform(name)
        if rule.terminal:
            break
    return name.replace(".", "")


def inner_type_name(name: str, owner_name: str | None) -> str:
    """Singular, capitalized name without dots; ``Value`` is appended when it would clash with the owner."""
    if not name:
        raise ValueError(f"Inner type of {owner_name or 'an anonymous type'} has no name")
    suffix = "Value" if owner_name == name else ""
    singular = plural_to_singular(name).replace(".", "")
    return singular[:1].upper() + singular[1:] + suffix


def derive_name(raw_name: str | None, context: NamingContext = GLOBAL) -> str:
    """
    Derive a Java identifier from a raw introspect name.

    Args:
        raw_name: Raw name; the primitive kind for natives and the element's
            reference for arrays
        context: Which rules apply

    Returns:
        The Java identifier

    Raises:
        UnknownNativeTypeError: If a native kind is not one of the four primitives
    """
    if context.kind is NameKind.NATIVE:
        if raw_name not in NATIVE_TYPES:
            raise UnknownNativeTypeError(raw_name)
        return NATIVE_TYPES[raw_name]
    if context.kind is NameKind.ARRAY:
        return context.list_type_template.format(raw_name)
    if context.kind is NameKind.INNER:
        return inner_type_name(raw_name or "", context.owner_name)
    return apply_rules(raw_name or "", GLOBAL_TYPE_RULES)


def derive_enum_name(raw_name: str, context: NamingContext = GLOBAL) -> str:
    if context.kind is NameKind.INNER:
        return inner_type_name(raw_name, context.owner_name)
    return apply_rules(raw_name, GLOBAL_ENUM_RULES)


def _split_words(text: str) -> list[str]:
    return _WORD_PATTERN.findall(text.replace("_", " ").replace("-", " ").replace(".", " "))


def constant_name(text: str) -> str:
    """``dateadded`` -> ``DATEADDED``, ``playCount`` -> ``PLAY_COUNT``."""
    return "_".join(word.upper() for word in _split_words(text))


def field_name(text: str) -> str:
    """camelCase field name, escaped if it is a Java keyword."""
    words = _split_words(text)
    if not words:
        return "_"
    result = words[0].lower() + "".join(word.capitalize() for word in words[1:])
    if result[0].isdigit():
        result = "_" + result
    if result in JAVA_RESERVED_KEYWORDS:
        result = result + "_"
    return result


class NameResolver:
    """Derives display names of resolved nodes."""

    def __init__(self, config: CodeGeneratorConfig | None = None):
        """
        Initialize the resolver.

        Args:
            config: Code generation configuration
        """
        self.config = config or CodeGeneratorConfig()

    def class_name(self, klass: ResolvedType) -> str:
        """Name of a class as used in its declaration."""
        if klass.is_native:
            return derive_name(klass.native_type, NATIVE)
        if klass.is_array:
            context = NamingContext(NameKind.ARRAY, list_type_template=self.config.list_type_template)
            return derive_name(self.class_reference(klass.namespace, klass.array_type), context)
        if klass.is_inner:
            owner = klass.owner
            context = NamingContext(NameKind.INNER, owner_name=owner.name if owner else None)
            return derive_name(klass.name, context)
        return derive_name(klass.name, GLOBAL)

    def class_reference(self, namespace: Namespace | None, klass: ResolvedType) -> str:
        """
        Name of a class as referred to from ``namespace``.

        ``Video.Cast`` is declared as ``Cast`` but referred to as
        ``VideoModel.Cast`` from other namespaces.
        """
        name = self.class_name(klass)
        if klass.is_native or klass.is_array or klass.namespace is None or klass.namespace == namespace:
            return name
        return f"{self.model_name(klass.namespace)}.{name}"

    def model_name(self, namespace: Namespace) -> str:
        return f"{namespace.name}{self.config.model_suffix}"

    def enum_name(self, enum_def: EnumDef) -> str:
        if enum_def.is_inner:
            owner = enum_def.owner
            context = NamingContext(NameKind.INNER, owner_name=owner.name if owner else None)
            return derive_enum_name(enum_def.name, context)
        return derive_enum_name(enum_def.name, GLOBAL)

    def member_type_name(self, namespace: Namespace | None, member: MemberDef | ParameterDef) -> str:
        """Enum members are plain strings; everything else refers to its type."""
        if member.is_enum:
            return NATIVE_TYPES["string"]
        return self.class_reference(namespace, member.type)

    def list_getter(self, klass: ResolvedType) -> str:
        return f"get{self.class_name(klass)}List"
