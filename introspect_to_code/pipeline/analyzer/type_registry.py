"""
Registry of global types.

Maps API type ids ("id" under "types" in the introspect document) to their
canonical ``ResolvedType``. One registry lives for one generation run and
is passed explicitly to the parser and the reference resolver.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..errors import DuplicateRegistrationError
from ..model.nodes import EnumDef, Namespace, ResolvedType

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Canonical nodes of all global types, keyed by API type id."""

    def __init__(self, strict: bool = False):
        """
        Initialize the registry.

        Args:
            strict: Raise on a second, distinct registration of an id instead
                of overwriting it with a warning
        """
        self.strict = strict
        self._types: dict[str, ResolvedType] = {}
        self._enums: dict[str, EnumDef] = {}

    def register(self, api_type: str, node: ResolvedType) -> None:
        """Register ``node`` as the canonical type for ``api_type``. Last writer wins."""
        existing = self._types.get(api_type)
        if existing is not None and existing is not node:
            if self.strict:
                raise DuplicateRegistrationError(api_type)
            logger.warning("Type %s registered twice, keeping the last one", api_type)
        self._types[api_type] = node
        logger.debug("Registered type %s", api_type)

    def lookup(self, api_type: str) -> ResolvedType | None:
        return self._types.get(api_type)

    def register_global_type(self, api_type: str, raw_name: str, namespace: Namespace) -> ResolvedType:
        """Create an empty global type and register it right away."""
        node = ResolvedType(namespace=namespace, name=raw_name, api_type=api_type)
        self.register(api_type, node)
        return node

    def register_enum(self, enum_def: EnumDef) -> None:
        """Register a global enum under its API type id."""
        if enum_def.api_type is None:
            raise ValueError(f"Enum {enum_def.name} has no API type")
        if self.strict and enum_def.api_type in self._enums:
            raise DuplicateRegistrationError(enum_def.api_type)
        self._enums[enum_def.api_type] = enum_def

    def lookup_enum(self, api_type: str) -> EnumDef | None:
        return self._enums.get(api_type)

    def global_types(self) -> list[ResolvedType]:
        """All registered types, in registration order."""
        return list(self._types.values())

    def global_enums(self) -> list[EnumDef]:
        return list(self._enums.values())

    def __contains__(self, api_type: object) -> bool:
        return api_type in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)
