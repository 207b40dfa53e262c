"""
Tests for walking an introspect document into the type registry.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from introspect_to_code.pipeline.analyzer import TypeRegistry
from introspect_to_code.pipeline.config import CodeGeneratorConfig
from introspect_to_code.pipeline.errors import InvalidSchemaError
from introspect_to_code.pipeline.model import UnresolvedRef
from introspect_to_code.pipeline.schema_ast import IntrospectParser

TEST_DATA = Path(__file__).parent / "test_data"


def load_introspect():
    with open(TEST_DATA / "introspect.json") as f:
        return json.load(f)["result"]


def parse(document, config=None):
    registry = TypeRegistry()
    parsed = IntrospectParser(registry, config).parse(document)
    return registry, parsed


class TestIntrospectParser:
    def setup_method(self):
        self.registry, self.parsed = parse(load_introspect())

    def test_all_types_are_registered(self):
        assert list(self.registry) == [
            "Video.Details.Movie",
            "Video.Details.Base",
            "Video.Cast",
            "Library.Details.Set",
            "Library.Fields.Set",
            "List.Filter.Albums",
            "List.Filter.Rule.Albums",
            "Global.Time",
            "Global.String.NotEmpty",
        ]

    def test_namespaces(self):
        assert [ns.name for ns in self.parsed.namespaces] == ["Video", "Library", "List", "Global"]

    def test_global_type_names(self):
        movie = self.registry.lookup("Video.Details.Movie")

        assert movie.name == "Details.Movie"
        assert movie.namespace.name == "Video"
        assert movie.is_global

    def test_parent_is_a_reference(self):
        movie = self.registry.lookup("Video.Details.Movie")

        assert isinstance(movie.parent, UnresolvedRef)
        assert movie.parent.api_type == "Video.Details.Base"

    def test_members(self):
        movie = self.registry.lookup("Video.Details.Movie")

        assert [m.name for m in movie.members] == ["cast", "genre", "ratings", "set", "title", "type"]

    def test_array_member(self):
        movie = self.registry.lookup("Video.Details.Movie")
        cast = next(m for m in movie.members if m.name == "cast")

        assert cast.type.is_array
        assert isinstance(cast.type.array_type, UnresolvedRef)
        assert "java.util.List" in movie.imports

    def test_native_array_member(self):
        movie = self.registry.lookup("Video.Details.Movie")
        genre = next(m for m in movie.members if m.name == "genre")

        assert genre.type.array_type.native_type == "string"

    def test_enum_member(self):
        movie = self.registry.lookup("Video.Details.Movie")
        member = next(m for m in movie.members if m.name == "type")

        assert member.is_enum
        assert member.type.native_type == "string"
        assert [e.name for e in movie.inner_enums] == ["type"]
        assert movie.inner_enums[0].values == ("movie", "episode")
        assert movie.inner_enums[0].owner is movie

    def test_inline_object_is_inner_type(self):
        movie = self.registry.lookup("Video.Details.Movie")
        ratings = next(m for m in movie.members if m.name == "ratings")

        assert movie.inner_types == [ratings.type]
        assert ratings.type.is_inner
        assert ratings.type.owner is movie
        assert [m.name for m in ratings.type.members] == ["default", "votes"]

    def test_member_description(self):
        movie = self.registry.lookup("Video.Details.Movie")
        member = next(m for m in movie.members if m.name == "set")

        assert member.description == "Movie set"

    def test_required_members_make_a_constructor(self):
        cast = self.registry.lookup("Video.Cast")

        assert len(cast.constructors) == 1
        assert [p.name for p in cast.constructors[0].parameters] == ["name", "role"]
        assert self.registry.lookup("Video.Details.Base").constructors == []

    def test_global_enum(self):
        assert [e.api_type for e in self.parsed.enums] == ["Library.Fields.Set"]
        assert self.parsed.enums[0].values == ("title", "playcount")
        assert self.registry.lookup("Library.Fields.Set").native_type == "string"
        assert self.registry.lookup("Library.Fields.Set") not in self.parsed.global_types

    def test_multitype(self):
        albums = self.registry.lookup("List.Filter.Albums")

        assert albums.is_multitype
        assert [m.name for m in albums.members] == ["albums", "value"]
        assert len(albums.inner_types) == 1

    def test_native_global(self):
        assert self.registry.lookup("Global.String.NotEmpty").native_type == "string"


class TestParserEdgeCases:
    def test_ignore_types(self):
        config = CodeGeneratorConfig(ignore_types=["Global.Time"])
        registry, _ = parse({"types": {"Global.Time": {"type": "object"}}}, config)

        assert "Global.Time" not in registry

    def test_extends_list_uses_first(self):
        registry, _ = parse({"types": {"Video.A": {"extends": ["Video.B", "Video.C"], "type": "object"}}})

        assert registry.lookup("Video.A").parent.api_type == "Video.B"

    def test_ref_alias_becomes_parent(self):
        registry, _ = parse({"types": {"Video.A": {"$ref": "Video.B"}}})

        assert registry.lookup("Video.A").parent.api_type == "Video.B"

    def test_null_variants_are_skipped(self):
        registry, _ = parse({"types": {"Optional.Integer": {"type": ["null", "integer"]}}})

        assert [m.name for m in registry.lookup("Optional.Integer").members] == ["integer"]

    def test_global_array(self):
        registry, _ = parse({"types": {"Video.Ids": {"type": "array", "items": {"type": "integer"}}}})

        ids = registry.lookup("Video.Ids")
        assert ids.is_array
        assert ids.array_type.native_type == "integer"

    @pytest.mark.parametrize(
        "document",
        [
            {},
            {"types": []},
            {"types": {"Video.A": "object"}},
            {"types": {"Video.A": {"type": 3}}},
            {"types": {"Video.A": {"$ref": 3}}},
            {"types": {"Video.A": {"extends": 3}}},
            {"types": {"Video.A": {"type": "array"}}},
            {"types": {"Video.A": {"type": "object", "properties": {"b": "string"}}}},
            {"types": {"Video.A": {"type": [3]}}},
        ],
    )
    def test_malformed_documents(self, document):
        with pytest.raises(InvalidSchemaError):
            parse(document)

    def test_error_names_the_path(self):
        with pytest.raises(InvalidSchemaError) as exc_info:
            parse({"types": {"Video.A": {"type": "object", "properties": {"b": {"type": 3}}}}})

        assert exc_info.value.path == "Video.A/b"


class TestGlobalArraysAndAliases:
    def setup_method(self):
        with open(TEST_DATA / "audio.json") as f:
            self.registry, self.parsed = parse(json.load(f)["result"])

    def test_inline_items_become_namespace_classes(self):
        genres = self.registry.lookup("Audio.Details.Genres")
        item = genres.array_type

        assert genres.inner_types == []
        assert item.is_composite
        assert item.is_global
        assert item.api_type is None
        assert item.namespace.name == "Audio"
        assert item in self.parsed.global_types
        assert [m.name for m in item.members] == ["genreid", "title"]

    def test_nested_arrays_keep_the_item_class_global(self):
        matrix = self.registry.lookup("Audio.Details.Matrix")
        rows = matrix.array_type

        assert rows.is_array
        assert rows.array_type.is_composite
        assert rows.array_type in self.parsed.global_types

    def test_item_classes_follow_their_array(self):
        global_types = self.parsed.global_types

        assert [klass.api_type for klass in global_types] == [
            "Audio.Details.Genres",
            None,
            "Audio.Details.Album",
            "Audio.Details.Artist",
            "Audio.Details.Media",
            "Audio.Tags",
            "Audio.Details.Matrix",
            None,
        ]
        assert global_types[1] is self.registry.lookup("Audio.Details.Genres").array_type

    def test_native_items_are_not_classes(self):
        tags = self.registry.lookup("Audio.Tags")

        assert tags.array_type.native_type == "string"

    def test_alias_extends_its_target(self):
        media = self.registry.lookup("Audio.Details.Media")

        assert media.parent.api_type == "Audio.Details.Album"
        assert media.members == []

    def test_required_reference_parameter(self):
        album = self.registry.lookup("Audio.Details.Album")
        parameters = album.constructors[0].parameters

        assert [p.name for p in parameters] == ["artist"]
        assert isinstance(parameters[0].type, UnresolvedRef)
        assert parameters[0].type.api_type == "Audio.Details.Artist"
