"""
Type model for the generated class graph.

A type is either an ``UnresolvedRef`` (only the API type id of a global
type is known) or a ``ResolvedType`` carrying the full graph: nature,
parent, members, inner types and enums, constructors and imports.
References are swapped for their canonical ``ResolvedType`` by the
reference resolver.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from ..errors import UseBeforeResolveError

if TYPE_CHECKING:
    from ..modules import ClassModule, ParentModule


@dataclass
class Namespace:
    """One API module, e.g. ``Video`` for ``Video.Details.Movie``.

    Classes declared directly in the namespace use ``class_modules`` and
    ``parent_module``; inner classes use the ``inner_*`` counterparts. The
    two sets are independent.
    """

    name: str = ""
    class_modules: list[ClassModule] = field(default_factory=list)
    parent_module: ParentModule | None = None
    inner_class_modules: list[ClassModule] = field(default_factory=list)
    inner_parent_module: ParentModule | None = None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Namespace) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)


@dataclass
class Native:
    """A primitive: boolean, number, integer or string."""

    primitive: str = ""


@dataclass
class Composite:
    """A class with members and inner types."""


@dataclass
class ArrayOf:
    """A list of ``element``."""

    element: TypeNode | None = None


@dataclass
class MultiType:
    """A choice among several primitive or enum variants."""


Nature = Union[Native, Composite, ArrayOf, MultiType]


@dataclass(frozen=True, eq=False)
class UnresolvedRef:
    """Placeholder for a global type that may not be registered yet."""

    api_type: str

    def __post_init__(self):
        if not self.api_type:
            raise ValueError("API type must not be empty when creating unresolved references.")

    @property
    def is_resolved(self) -> bool:
        return False

    @property
    def is_unresolved(self) -> bool:
        return True

    def __getattr__(self, item: str):
        # Only reached for attributes the reference does not have.
        if item.startswith("__"):
            raise AttributeError(item)
        raise UseBeforeResolveError(self.api_type, item)

    def __repr__(self) -> str:
        return f"UnresolvedRef({self.api_type!r})"


@dataclass(eq=False)
class ParameterDef:
    """A constructor parameter."""

    name: str = ""
    type: TypeNode | None = None
    is_enum: bool = False


@dataclass(eq=False)
class ConstructorDef:
    """A constructor, as an ordered list of parameters."""

    parameters: list[ParameterDef] = field(default_factory=list)


@dataclass(eq=False)
class MemberDef:
    """A field of a class."""

    name: str = ""
    type: TypeNode | None = None

    # Enum-typed members are rendered as plain strings
    is_enum: bool = False
    is_required: bool = False
    description: str = ""


@dataclass(eq=False)
class EnumDef:
    """An enum: a name and its ordered literal values.

    Global enums carry their ``api_type``; inner enums point back at their
    owning class.
    """

    name: str = ""
    values: tuple[str, ...] = ()
    api_type: str | None = None
    namespace: Namespace | None = None
    _owner: weakref.ref | None = field(default=None, repr=False)

    def __post_init__(self):
        self.values = tuple(self.values)

    @property
    def owner(self) -> ResolvedType | None:
        return self._owner() if self._owner is not None else None

    @property
    def is_inner(self) -> bool:
        return self._owner is not None


@dataclass(eq=False)
class ResolvedType:
    """A declared or synthesized type with its full relationship graph.

    ``name`` is only a best guess; display names are derived later by the
    name resolver. Equality is identity: two references to the same global
    type end up pointing at one instance.
    """

    namespace: Namespace | None = None
    name: str | None = None
    api_type: str | None = None
    nature: Nature = field(default_factory=Composite)
    parent: TypeNode | None = None
    is_inner: bool = False

    constructors: list[ConstructorDef] = field(default_factory=list)
    inner_types: list[TypeNode] = field(default_factory=list)
    inner_enums: list[EnumDef] = field(default_factory=list)
    imports: set[str] = field(default_factory=set)

    _members: list[MemberDef] = field(default_factory=list, repr=False)
    _owner: weakref.ref | None = field(default=None, repr=False)
    _resolved: bool = field(default=False, repr=False)

    @property
    def is_resolved(self) -> bool:
        return self._resolved

    @property
    def is_unresolved(self) -> bool:
        return False

    def mark_resolved(self) -> None:
        self._resolved = True

    # Nature

    @property
    def is_native(self) -> bool:
        return isinstance(self.nature, Native)

    @property
    def is_array(self) -> bool:
        return isinstance(self.nature, ArrayOf)

    @property
    def is_multitype(self) -> bool:
        return isinstance(self.nature, MultiType)

    @property
    def is_composite(self) -> bool:
        return isinstance(self.nature, Composite)

    @property
    def native_type(self) -> str | None:
        return self.nature.primitive if isinstance(self.nature, Native) else None

    @property
    def array_type(self) -> TypeNode | None:
        return self.nature.element if isinstance(self.nature, ArrayOf) else None

    def set_native(self, primitive: str) -> None:
        self.nature = Native(primitive)

    def set_array(self, element: TypeNode) -> None:
        self.nature = ArrayOf(element)

    def set_multitype(self) -> None:
        self.nature = MultiType()

    # Relationships

    @property
    def is_global(self) -> bool:
        return not self.is_inner

    @property
    def owner(self) -> ResolvedType | None:
        return self._owner() if self._owner is not None else None

    @property
    def does_extend(self) -> bool:
        return self.parent is not None

    def set_parent(self, parent: TypeNode) -> None:
        self.parent = parent

    @property
    def members(self) -> list[MemberDef]:
        """Members sorted by name, whatever order they were added in."""
        return sorted(self._members, key=lambda m: m.name)

    def add_member(self, member: MemberDef) -> None:
        self._members.append(member)

    def add_constructor(self, constructor: ConstructorDef) -> None:
        self.constructors.append(constructor)

    def add_import(self, name: str) -> None:
        self.imports.add(name)

    def link_inner_type(self, klass: TypeNode) -> None:
        """Add an inner type and point its owner back at this class."""
        self.inner_types.append(klass)
        if isinstance(klass, ResolvedType):
            klass.is_inner = True
            klass._owner = weakref.ref(self)

    def link_inner_enum(self, enum_def: EnumDef) -> None:
        self.inner_enums.append(enum_def)
        enum_def._owner = weakref.ref(self)
        enum_def.namespace = self.namespace

    @property
    def has_inner_types(self) -> bool:
        return bool(self.inner_types)

    @property
    def has_inner_enums(self) -> bool:
        return bool(self.inner_enums)

    # Namespace modules

    @property
    def class_modules(self) -> list[ClassModule]:
        if self.namespace is None:
            return []
        return self.namespace.inner_class_modules if self.is_inner else self.namespace.class_modules

    @property
    def parent_module(self) -> ParentModule | None:
        if self.namespace is None:
            return None
        return self.namespace.inner_parent_module if self.is_inner else self.namespace.parent_module

    @property
    def has_parent_module(self) -> bool:
        return self.parent_module is not None

    def __repr__(self) -> str:
        label = self.api_type or self.name
        return f"ResolvedType({label!r}, {type(self.nature).__name__})"


TypeNode = Union[UnresolvedRef, ResolvedType]


def create_anonymous_type(namespace: Namespace, guessed_name: str | None = None) -> ResolvedType:
    """Create an unregistered type, e.g. an inline object of a property."""
    return ResolvedType(namespace=namespace, name=guessed_name)


def create_unresolved_reference(api_type: str) -> UnresolvedRef:
    """Create a placeholder for the global type ``api_type``."""
    return UnresolvedRef(api_type)
