"""
Introspect parser that builds the class graph.

Phase 1 of the pipeline: walk the ``types`` map of a JSON-RPC introspect
document and register every global type. References to other global types
are kept as ``UnresolvedRef`` since the target may come later in the
document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..analyzer.type_registry import TypeRegistry
from ..config import CodeGeneratorConfig
from ..errors import InvalidSchemaError
from ..model.nodes import (
    ConstructorDef,
    EnumDef,
    MemberDef,
    Namespace,
    ParameterDef,
    ResolvedType,
    TypeNode,
    create_anonymous_type,
    create_unresolved_reference,
)
from ..modules import load_class_modules, load_parent_module

logger = logging.getLogger(__name__)


@dataclass
class ParsedSchema:
    """Everything the parser found, in document order."""

    namespaces: list[Namespace] = field(default_factory=list)
    global_types: list[ResolvedType] = field(default_factory=list)
    enums: list[EnumDef] = field(default_factory=list)


class IntrospectParser:
    """Parses an introspect document into a ``TypeRegistry``."""

    # Primitive type names
    PRIMITIVE_TYPES = {"string", "integer", "number", "boolean"}

    def __init__(self, registry: TypeRegistry, config: CodeGeneratorConfig | None = None):
        """
        Initialize the parser.

        Args:
            registry: Registry the global types are added to
            config: Code generation configuration
        """
        self.registry = registry
        self.config = config or CodeGeneratorConfig()
        self._namespaces: dict[str, Namespace] = {}

        # Item classes synthesized for the global array being parsed
        self._item_classes: list[ResolvedType] = []

    def parse(self, document: dict[str, Any]) -> ParsedSchema:
        """
        Parse an introspect document.

        Args:
            document: The ``result`` of ``JSONRPC.Introspect``

        Returns:
            ParsedSchema with namespaces, global types and global enums
        """
        types = document.get("types") if isinstance(document, dict) else None
        if not isinstance(types, dict):
            raise InvalidSchemaError("Introspect document has no 'types' map")

        parsed = ParsedSchema()
        for api_type, type_schema in types.items():
            if api_type in self.config.ignore_types:
                logger.info("Ignoring type %s", api_type)
                continue
            if not isinstance(type_schema, dict):
                raise InvalidSchemaError("Type definition must be an object", api_type)

            namespace = self._namespace(api_type)
            raw_name = api_type.partition(".")[2] or api_type

            if self._is_string_enum(type_schema):
                enum_def = EnumDef(name=raw_name, values=type_schema["enum"], api_type=api_type, namespace=namespace)
                self.registry.register_enum(enum_def)
                parsed.enums.append(enum_def)
                # References to the enum type are plain strings
                self.registry.register_global_type(api_type, raw_name, namespace).set_native("string")
                continue

            klass = self.registry.register_global_type(api_type, raw_name, namespace)
            self._populate(klass, type_schema, api_type)
            parsed.global_types.append(klass)
            parsed.global_types.extend(self._item_classes)
            self._item_classes.clear()

        parsed.namespaces = list(self._namespaces.values())
        logger.debug("Parsed %d types in %d namespaces", len(parsed.global_types), len(parsed.namespaces))
        return parsed

    def _namespace(self, api_type: str) -> Namespace:
        name = api_type.split(".")[0]
        if name not in self._namespaces:
            self._namespaces[name] = Namespace(
                name=name,
                class_modules=load_class_modules(self.config.class_modules),
                parent_module=load_parent_module(self.config.parent_module),
                inner_class_modules=load_class_modules(self.config.inner_class_modules),
                inner_parent_module=load_parent_module(self.config.inner_parent_module),
            )
        return self._namespaces[name]

    def _populate(self, klass: ResolvedType, schema: dict[str, Any], path: str) -> None:
        """Fill a class from its schema."""
        if "extends" in schema:
            parent = schema["extends"]
            if isinstance(parent, list):
                parent = parent[0] if parent else None
            if not isinstance(parent, str):
                raise InvalidSchemaError("'extends' must be a type id", path)
            klass.set_parent(create_unresolved_reference(parent))

        if "$ref" in schema:
            # A global type that only aliases another one
            klass.set_parent(create_unresolved_reference(self._ref(schema, path)))
            return

        type_value = self._type_value(schema, path)
        if isinstance(type_value, list):
            klass.set_multitype()
            self._parse_variants(klass, type_value, path)
        elif type_value == "array":
            # Only global types get here; inline arrays are handled by _type_of
            klass.set_array(self._global_items(klass, schema, path))
        elif type_value in self.PRIMITIVE_TYPES:
            klass.set_native(type_value)
        elif type_value == "object" or "properties" in schema:
            self._parse_properties(klass, schema.get("properties") or {}, path)
        else:
            # Unknown kinds fail when the class is named
            klass.set_native(type_value)

    def _parse_properties(self, klass: ResolvedType, properties: dict[str, Any], path: str) -> None:
        required = []
        for prop_name, prop_schema in properties.items():
            prop_path = f"{path}/{prop_name}"
            if not isinstance(prop_schema, dict):
                raise InvalidSchemaError("Property definition must be an object", prop_path)

            member = MemberDef(
                name=prop_name,
                type=self._type_of(prop_schema, klass, prop_name, prop_path),
                is_enum=self._is_string_enum(prop_schema),
                is_required=bool(prop_schema.get("required", False)),
                description=prop_schema.get("description", ""),
            )
            klass.add_member(member)
            if member.is_required:
                required.append(member)

        if required:
            parameters = [ParameterDef(m.name, m.type, m.is_enum) for m in required]
            klass.add_constructor(ConstructorDef(parameters))

    def _parse_variants(self, klass: ResolvedType, variants: list[Any], path: str) -> None:
        """One member per variant of a multitype."""
        used: set[str] = set()
        for i, variant in enumerate(variants):
            variant_path = f"{path}/type[{i}]"
            if isinstance(variant, str):
                variant = {"type": variant}
            if not isinstance(variant, dict):
                raise InvalidSchemaError("Type variant must be a type name or an object", variant_path)
            if variant.get("type") == "null":
                # Java references are nullable anyway
                continue

            if "$ref" in variant:
                name = self._ref(variant, variant_path).split(".")[-1]
                name = name[:1].lower() + name[1:]
            elif isinstance(variant.get("type"), str) and variant["type"] != "object":
                name = variant["type"]
            else:
                name = "value"
            if name in used:
                name = f"{name}{i}"
            used.add(name)

            klass.add_member(
                MemberDef(
                    name=name,
                    type=self._type_of(variant, klass, name, variant_path),
                    is_enum=self._is_string_enum(variant),
                )
            )

    def _type_of(self, schema: dict[str, Any], owner: ResolvedType, guessed_name: str | None, path: str) -> TypeNode:
        """Type of a property, array item or variant declared inside ``owner``."""
        if not isinstance(schema, dict):
            raise InvalidSchemaError("Type definition must be an object", path)

        if "$ref" in schema:
            return create_unresolved_reference(self._ref(schema, path))

        if self._is_string_enum(schema):
            owner.link_inner_enum(EnumDef(name=guessed_name or owner.name or "", values=schema["enum"]))
            native = create_anonymous_type(owner.namespace, "string")
            native.set_native("string")
            return native

        type_value = self._type_value(schema, path)
        if type_value == "array":
            array = create_anonymous_type(owner.namespace, guessed_name)
            array.set_array(self._items(owner, guessed_name, schema, path))
            owner.add_import("java.util.List")
            return array

        if isinstance(type_value, list) or type_value == "object" or "properties" in schema:
            inner = create_anonymous_type(owner.namespace, guessed_name)
            owner.link_inner_type(inner)
            self._populate(inner, schema, path)
            return inner

        native = create_anonymous_type(owner.namespace, type_value)
        native.set_native(type_value)
        return native

    def _items(self, owner: ResolvedType, guessed_name: str | None, schema: dict[str, Any], path: str) -> TypeNode:
        items = schema.get("items")
        if items is None:
            raise InvalidSchemaError("Array has no 'items'", path)
        # Inline item classes are nested in the class declaring the array
        return self._type_of(items, owner, guessed_name, f"{path}/items")

    def _global_items(self, array: ResolvedType, schema: dict[str, Any], path: str) -> TypeNode:
        """
        Element type of a global array.

        A global array is never rendered, so inline item classes cannot be
        nested in it. They become classes of the namespace named after the
        array instead (``Details.Genres`` items -> ``GenreDetail``).
        """
        items = schema.get("items")
        if items is None:
            raise InvalidSchemaError("Array has no 'items'", path)
        path = f"{path}/items"
        if not isinstance(items, dict) or "$ref" in items or self._is_string_enum(items):
            return self._type_of(items, array, array.name, path)

        type_value = self._type_value(items, path)
        if type_value == "array":
            element = create_anonymous_type(array.namespace, array.name)
            element.set_array(self._global_items(array, items, path))
            return element
        if isinstance(type_value, list) or type_value == "object" or "properties" in items:
            item = create_anonymous_type(array.namespace, array.name)
            self._populate(item, items, path)
            self._item_classes.append(item)
            return item
        return self._type_of(items, array, array.name, path)

    def _ref(self, schema: dict[str, Any], path: str) -> str:
        ref = schema["$ref"]
        if not isinstance(ref, str) or not ref:
            raise InvalidSchemaError("'$ref' must be a type id", path)
        return ref

    def _type_value(self, schema: dict[str, Any], path: str) -> str | list:
        type_value = schema.get("type", "object")
        if not isinstance(type_value, (str, list)):
            raise InvalidSchemaError("'type' must be a string or a list", path)
        return type_value

    @staticmethod
    def _is_string_enum(schema: Any) -> bool:
        return isinstance(schema, dict) and "enum" in schema and schema.get("type", "string") == "string"
