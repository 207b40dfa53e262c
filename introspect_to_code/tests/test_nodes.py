from __future__ import annotations

import pytest

from introspect_to_code.pipeline.errors import UseBeforeResolveError
from introspect_to_code.pipeline.model import (
    ArrayOf,
    Composite,
    EnumDef,
    MemberDef,
    MultiType,
    Namespace,
    Native,
    create_anonymous_type,
    create_unresolved_reference,
)
from introspect_to_code.pipeline.modules import AbstractModelParentModule, ParcelableModule


class TestUnresolvedRef:
    def test_only_api_type_is_available(self):
        ref = create_unresolved_reference("Video.Cast")

        assert ref.api_type == "Video.Cast"
        assert ref.is_unresolved
        assert not ref.is_resolved

    @pytest.mark.parametrize("attribute", ["members", "name", "namespace", "inner_types", "parent", "is_native"])
    def test_accessors_fail(self, attribute):
        ref = create_unresolved_reference("Video.Cast")

        with pytest.raises(UseBeforeResolveError) as exc_info:
            getattr(ref, attribute)

        assert exc_info.value.api_type == "Video.Cast"
        assert exc_info.value.attribute == attribute

    def test_mutators_fail(self):
        ref = create_unresolved_reference("Video.Cast")

        with pytest.raises(UseBeforeResolveError):
            ref.add_member(MemberDef(name="name"))

    def test_empty_api_type_is_rejected(self):
        with pytest.raises(ValueError):
            create_unresolved_reference("")

    def test_dunder_lookups_stay_attribute_errors(self):
        ref = create_unresolved_reference("Video.Cast")

        assert not hasattr(ref, "__deepcopy_hook__")


class TestResolvedType:
    def setup_method(self):
        self.namespace = Namespace(name="Video")

    def test_defaults_to_composite(self):
        klass = create_anonymous_type(self.namespace, "cast")

        assert isinstance(klass.nature, Composite)
        assert klass.is_composite
        assert not klass.is_resolved
        assert klass.is_global

    def test_natures(self):
        klass = create_anonymous_type(self.namespace)

        klass.set_native("string")
        assert klass.nature == Native("string")
        assert klass.is_native
        assert klass.native_type == "string"
        assert klass.array_type is None

        element = create_anonymous_type(self.namespace)
        klass.set_array(element)
        assert isinstance(klass.nature, ArrayOf)
        assert klass.is_array
        assert klass.array_type is element
        assert klass.native_type is None

        klass.set_multitype()
        assert klass.nature == MultiType()
        assert klass.is_multitype

    def test_members_are_sorted_by_name(self):
        klass = create_anonymous_type(self.namespace)
        for name in ["title", "art", "year", "cast"]:
            klass.add_member(MemberDef(name=name))

        assert [m.name for m in klass.members] == ["art", "cast", "title", "year"]

    def test_link_inner_type_sets_owner(self):
        owner = create_anonymous_type(self.namespace, "Details.Movie")
        inner = create_anonymous_type(self.namespace, "cast")

        owner.link_inner_type(inner)

        assert owner.inner_types == [inner]
        assert owner.has_inner_types
        assert inner.is_inner
        assert inner.owner is owner

    def test_link_inner_enum_sets_owner(self):
        owner = create_anonymous_type(self.namespace, "Details.Movie")
        enum_def = EnumDef(name="type", values=["movie", "episode"])

        owner.link_inner_enum(enum_def)

        assert owner.has_inner_enums
        assert enum_def.is_inner
        assert enum_def.owner is owner
        assert enum_def.namespace == self.namespace
        assert enum_def.values == ("movie", "episode")

    def test_equality_is_identity(self):
        a = create_anonymous_type(self.namespace, "cast")
        b = create_anonymous_type(self.namespace, "cast")

        assert a != b
        assert a == a

    def test_modules_depend_on_inner(self):
        parcelable = ParcelableModule()
        parent = AbstractModelParentModule()
        namespace = Namespace(name="Video", class_modules=[parcelable], inner_parent_module=parent)
        owner = create_anonymous_type(namespace, "Details.Movie")
        inner = create_anonymous_type(namespace, "cast")
        owner.link_inner_type(inner)

        assert owner.class_modules == [parcelable]
        assert owner.parent_module is None
        assert not owner.has_parent_module
        assert inner.class_modules == []
        assert inner.parent_module is parent


def test_namespaces_compare_by_name():
    assert Namespace(name="Video") == Namespace(name="Video")
    assert Namespace(name="Video") != Namespace(name="Audio")
    assert len({Namespace(name="Video"), Namespace(name="Video")}) == 1
