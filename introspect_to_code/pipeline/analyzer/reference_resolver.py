"""
Reference resolver for global type references.

Swaps ``UnresolvedRef`` placeholders for the canonical ``ResolvedType``
registered under the same API type id, and does so for the whole graph
reachable from a node: parent, array element, inner types, members and
constructor parameters.
"""

from __future__ import annotations

import logging

from ..errors import UnknownTypeError
from ..model.nodes import ArrayOf, ResolvedType, TypeNode, UnresolvedRef
from .type_registry import TypeRegistry

logger = logging.getLogger(__name__)


class ReferenceResolver:
    """Resolves references against a ``TypeRegistry``."""

    def __init__(self, registry: TypeRegistry):
        """
        Initialize the resolver.

        Args:
            registry: Registry holding the canonical global types
        """
        self.registry = registry

    def resolve(self, node: TypeNode) -> ResolvedType:
        """
        Resolve a node and everything reachable from it.

        A node is marked resolved before its relationships are visited, so
        cycles (a type containing itself through parents, inner types or
        members) terminate. Resolving an already resolved node is a no-op.

        Args:
            node: A reference or a resolved type

        Returns:
            The canonical resolved type

        Raises:
            UnknownTypeError: If a reference has no registered type
        """
        target = self._canonical(node)
        if target.is_resolved:
            return target

        target.mark_resolved()
        pending = [target]
        while pending:
            current = pending.pop()
            for child in self._link_children(current):
                if not child.is_resolved:
                    child.mark_resolved()
                    pending.append(child)

        return target

    def resolve_all(self) -> list[ResolvedType]:
        """Resolve every registered global type."""
        return [self.resolve(node) for node in self.registry.global_types()]

    def _canonical(self, node: TypeNode) -> ResolvedType:
        """Return the registered type for a reference, or the node itself."""
        if isinstance(node, UnresolvedRef):
            resolved = self.registry.lookup(node.api_type)
            if resolved is None:
                raise UnknownTypeError(node.api_type)
            logger.debug("Resolved reference to %s", node.api_type)
            return resolved
        return node

    def _link_children(self, klass: ResolvedType) -> list[ResolvedType]:
        """Replace references held by ``klass`` in place and return its direct children."""
        children = []

        if klass.parent is not None:
            klass.parent = self._canonical(klass.parent)
            children.append(klass.parent)

        if isinstance(klass.nature, ArrayOf) and klass.nature.element is not None:
            klass.nature.element = self._canonical(klass.nature.element)
            children.append(klass.nature.element)

        for i, inner in enumerate(klass.inner_types):
            klass.inner_types[i] = self._canonical(inner)
            children.append(klass.inner_types[i])

        for member in klass.members:
            if member.type is not None:
                member.type = self._canonical(member.type)
                children.append(member.type)

        for constructor in klass.constructors:
            for param in constructor.parameters:
                if param.type is not None:
                    param.type = self._canonical(param.type)
                    children.append(param.type)

        return children


def resolve(node: TypeNode, registry: TypeRegistry) -> ResolvedType:
    """Resolve ``node`` against ``registry``."""
    return ReferenceResolver(registry).resolve(node)
