"""Test describing the classes of Python modules."""

import sys

import pytest

from typedocgen.config import CategorySettings
from typedocgen.documentation import (
    DocumentationCategory,
    MemberKind,
    PythonTypeSource,
    TypeCatalog,
    get_type_id,
)


@pytest.fixture
def described(sample_package):
    """Every type of the sample package, by raw name."""
    name, search_path = sample_package
    source = PythonTypeSource(
        [name],
        search_paths=[search_path],
        behaviour_bases=[f"{name}.Component"],
        asset_bases=[f"{name}.Asset"],
    )
    return {type.name: type for type in source.enumerate_types()}


def members_by_name(type):
    return {member.name: member for member in type.members}


class TestEnumeration:
    """Test which classes are found."""

    def test_finds_classes_of_all_modules(self, described):
        assert set(described) == {
            "Component", "Asset", "Color", "Shape", "Widget", "Handle",
            "Box`1", "Texture", "_Private", "Gadget",
        }

    def test_namespaces(self, described):
        assert described["Widget"].namespace == "sample_widgets"
        assert described["Gadget"].namespace == "sample_widgets.extra"

    def test_missing_module_is_skipped(self):
        source = PythonTypeSource(["typedocgen_no_such_module"])

        assert source.enumerate_types() == []

    def test_unresolvable_role_base_is_ignored(self, sample_package):
        name, search_path = sample_package
        source = PythonTypeSource([name], search_paths=[search_path], behaviour_bases=["nowhere.Thing"])

        found = {type.name: type for type in source.enumerate_types()}

        assert not found["Widget"].is_behaviour

    def test_search_paths_are_restored(self, sample_package):
        name, search_path = sample_package
        before = list(sys.path)
        source = PythonTypeSource([name], search_paths=[search_path])

        first = {type.name for type in source.enumerate_types()}
        second = {type.name for type in source.enumerate_types()}

        assert "Widget" in first
        assert first == second
        assert sys.path == before

    def test_non_recursive(self, sample_package):
        name, search_path = sample_package
        source = PythonTypeSource([name], search_paths=[search_path], recursive=False)

        assert "Gadget" not in {type.name for type in source.enumerate_types()}


class TestTypeFlags:
    """Test kind and visibility flags."""

    def test_roles(self, described):
        assert described["Widget"].is_behaviour
        assert described["Component"].is_behaviour
        assert described["Texture"].is_asset
        assert not described["Box`1"].is_behaviour
        assert not described["Box`1"].is_asset

    def test_enum_and_abstract(self, described):
        assert described["Color"].is_enum
        assert described["Shape"].is_abstract
        assert not described["Widget"].is_abstract

    def test_private_class_is_hidden(self, described):
        assert not described["_Private"].is_visible
        assert described["Widget"].is_visible

    def test_nested_class(self, described):
        handle = described["Handle"]

        assert handle.declaring_type == described["Widget"]
        assert get_type_id(handle) == "widget-handle"

    def test_generic_class(self, described):
        box = described["Box`1"]

        assert box.generic_parameters == ("T",)
        assert box.is_generic_type
        assert box.bases == ()

    def test_bases(self, described):
        assert [base.name for base in described["Widget"].bases] == ["Component"]
        assert [base.name for base in described["Texture"].bases] == ["Asset"]


class TestMembers:
    """Test member descriptions."""

    def test_dataclass_constructor_and_fields(self, described):
        members = members_by_name(described["Widget"])

        constructor = members["Widget"]
        assert constructor.kind == MemberKind.CONSTRUCTOR
        assert constructor.type is None
        assert [parameter.name for parameter in constructor.parameters] == ["name", "size"]
        assert constructor.parameters[1].decorators == ("optional",)

        assert members["name"].kind == MemberKind.FIELD
        assert members["name"].type.name == "str"
        assert not members["name"].is_static
        assert members["registry"].is_static
        assert members["registry"].decorators == ("static",)
        assert members["registry"].type.name == "dict`2"

    def test_property(self, described):
        label = members_by_name(described["Widget"])["label"]

        assert label.kind == MemberKind.PROPERTY
        assert label.decorators == ("readonly",)
        assert label.type.name == "str"

    def test_methods(self, described):
        members = members_by_name(described["Widget"])

        resize = members["resize"]
        assert resize.kind == MemberKind.METHOD
        assert [parameter.name for parameter in resize.parameters] == ["width", "scale"]
        assert resize.parameters[0].type.name == "int"
        assert resize.type.name == "NoneType"

        create = members["create"]
        assert create.is_static
        assert create.decorators == ("static",)
        assert create.type == described["Widget"]

        pick = members["pick"]
        assert pick.generic_parameters == ("U",)
        assert pick.type.is_generic_parameter

    def test_class_type_parameters_are_not_method_generics(self, described):
        members = members_by_name(described["Box`1"])

        assert members["get"].generic_parameters == ()
        assert members["get"].type.name == "T"
        assert members["Box"].parameters[0].type.is_generic_parameter

    def test_enum_members(self, described):
        color = described["Color"]
        fields = [member for member in color.members if member.kind == MemberKind.FIELD]

        assert [field.name for field in fields] == ["RED", "GREEN"]
        assert all(field.is_static and field.type == color for field in fields)
        assert not any(member.kind == MemberKind.CONSTRUCTOR for member in color.members)

    def test_abstract_method(self, described):
        area = members_by_name(described["Shape"])["area"]

        assert "abstract" in area.decorators
        assert area.type.name == "float"

    def test_variadic_parameters(self, described):
        run = members_by_name(described["Gadget"])["run"]

        assert [parameter.decorators for parameter in run.parameters] == [("*",), ("**",)]
        assert run.parameters[0].type is None


class TestCategoryOverModules:
    """Test documenting introspected classes."""

    def test_class_only_category(self, sample_package, recording_writer):
        name, search_path = sample_package
        catalog = TypeCatalog([PythonTypeSource([name], search_paths=[search_path])])
        category = DocumentationCategory(
            CategorySettings(name="Api", included_types=["class"], included_namespaces=[name]),
            catalog,
        )

        assert [type.name for type in category.get_types()] == [
            "Asset", "Box`1", "Component", "Gadget", "Handle", "Texture", "Widget",
        ]

        category.generate([category], "docs", recording_writer)

        widget = recording_writer.files["docs/Generated/api/widget.txt"]
        assert "sample_widgets.Widget : Component" in widget
        assert "static Widget create(str name)" in widget
        assert "Widget(str name, optional int size)" in widget
