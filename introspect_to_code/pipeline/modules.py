"""
Namespace modules.

A module adds behaviour to every class of a namespace (or to its inner
classes): extra imports, implemented interfaces and extra code rendered
inside the class body.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .analyzer.name_resolver import field_name

if TYPE_CHECKING:
    from .analyzer.name_resolver import NameResolver
    from .model.nodes import ResolvedType


class ClassModule(ABC):
    """Renders additional code into a class."""

    name: str = ""

    # The rendered code declares a constructor, so the class needs an
    # explicit no-argument one as well
    adds_constructor: bool = False

    @abstractmethod
    def get_imports(self, klass: ResolvedType) -> set[str]:
        """Imports needed by the rendered code."""

    def interfaces(self, klass: ResolvedType) -> list[str]:
        """Interfaces the class implements because of this module."""
        return []

    def render(self, klass: ResolvedType, names: NameResolver, indent: str) -> list[str]:
        """Lines to add to the class body, already indented."""
        return []


class ParentModule(ABC):
    """Provides the superclass of classes that do not extend another type."""

    name: str = ""

    @property
    @abstractmethod
    def parent_name(self) -> str:
        """Name of the superclass."""

    @abstractmethod
    def get_imports(self, klass: ResolvedType) -> set[str]:
        """Imports needed for the superclass."""


class ParcelableModule(ClassModule):
    """
    Makes classes Android ``Parcelable``.

    Members are written and read back in name order with
    ``Parcel.writeValue``/``readValue``. A parent class that is parcelable
    itself writes and reads its own members first.
    """

    name = "parcelable"
    adds_constructor = True

    def get_imports(self, klass: ResolvedType) -> set[str]:
        return {"android.os.Parcel", "android.os.Parcelable"}

    def interfaces(self, klass: ResolvedType) -> list[str]:
        return ["Parcelable"]

    @staticmethod
    def is_parcelable(klass: ResolvedType) -> bool:
        return any(isinstance(module, ParcelableModule) for module in klass.class_modules)

    def render(self, klass: ResolvedType, names: NameResolver, indent: str) -> list[str]:
        body = indent + names.config.indent
        class_name = names.class_name(klass)
        parcelable_parent = klass.does_extend and self.is_parcelable(klass.parent)
        fields = [(names.member_type_name(klass.namespace, m), field_name(m.name)) for m in klass.members]

        lines = ["", f"{indent}protected {class_name}(Parcel parcel) {{"]
        if parcelable_parent:
            lines.append(f"{body}super(parcel);")
        for type_name, field in fields:
            lines.append(f"{body}{field} = ({type_name}) parcel.readValue({class_name}.class.getClassLoader());")
        lines.append(f"{indent}}}")

        lines += ["", f"{indent}@Override", f"{indent}public void writeToParcel(Parcel parcel, int flags) {{"]
        if parcelable_parent:
            lines.append(f"{body}super.writeToParcel(parcel, flags);")
        for _, field in fields:
            lines.append(f"{body}parcel.writeValue({field});")
        lines.append(f"{indent}}}")

        inner = body + names.config.indent
        lines += [
            "",
            f"{indent}@Override",
            f"{indent}public int describeContents() {{",
            f"{body}return 0;",
            f"{indent}}}",
            "",
            f"{indent}public static final Parcelable.Creator<{class_name}> CREATOR = new Parcelable.Creator<{class_name}>() {{",
            f"{body}@Override",
            f"{body}public {class_name} createFromParcel(Parcel parcel) {{",
            f"{inner}return new {class_name}(parcel);",
            f"{body}}}",
            "",
            f"{body}@Override",
            f"{body}public {class_name}[] newArray(int size) {{",
            f"{inner}return new {class_name}[size];",
            f"{body}}}",
            f"{indent}}};",
        ]
        return lines


class AbstractModelParentModule(ParentModule):
    """Lets classes extend the hand-written ``AbstractModel``."""

    name = "abstract_model"

    @property
    def parent_name(self) -> str:
        return "AbstractModel"

    def get_imports(self, klass: ResolvedType) -> set[str]:
        return {"org.xbmc.android.jsonrpc.api.AbstractModel"}


MODULES: dict[str, type[ClassModule]] = {
    ParcelableModule.name: ParcelableModule,
}

PARENT_MODULES: dict[str, type[ParentModule]] = {
    AbstractModelParentModule.name: AbstractModelParentModule,
}


def load_class_modules(names: list[str]) -> list[ClassModule]:
    """Instantiate class modules by name."""
    modules = []
    for name in names:
        if name not in MODULES:
            raise ValueError(f"Unknown class module '{name}'")
        modules.append(MODULES[name]())
    return modules


def load_parent_module(name: str | None) -> ParentModule | None:
    if name is None:
        return None
    if name not in PARENT_MODULES:
        raise ValueError(f"Unknown parent module '{name}'")
    return PARENT_MODULES[name]()
