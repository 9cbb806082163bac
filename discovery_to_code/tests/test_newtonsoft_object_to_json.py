"""
Tests for the NewtonsoftObjectToJson service decorator.

These check the shape of each AST node the decorator builds, and that the
field, property and method refer to each other by the same names.
"""

from __future__ import annotations

import pytest

from discovery_to_code.decorators import NewtonsoftObjectToJson
from discovery_to_code.discovery import DiscoveryService
from discovery_to_code.pipeline.ast_backends.csharp_ast_nodes import (
    AccessModifier,
    BinaryOperator,
    CSharpAssign,
    CSharpBinaryOperation,
    CSharpClass,
    CSharpCondition,
    CSharpExpressionStatement,
    CSharpField,
    CSharpFieldReference,
    CSharpMethod,
    CSharpMethodInvoke,
    CSharpObjectCreate,
    CSharpPrimitive,
    CSharpProperty,
    CSharpPropertyReference,
    CSharpReturn,
    CSharpThisReference,
    CSharpTypeReference,
    CSharpVariableDeclaration,
    CSharpVariableReference,
)
from discovery_to_code.pipeline.config import ObjectToJsonNames


@pytest.fixture
def decorator():
    return NewtonsoftObjectToJson()


@pytest.fixture
def books():
    return DiscoveryService(name="books", version="v1")


def this_field(name: str) -> CSharpFieldReference:
    return CSharpFieldReference(CSharpThisReference(), name)


class TestJsonSerializerField:
    def test_field_declaration(self, decorator):
        field = decorator.create_json_serializer_field()

        assert isinstance(field, CSharpField)
        assert field.name == "newtonJsonSerilizer"
        assert field.type_name == "JsonSerializer"
        assert field.access == AccessModifier.PRIVATE
        assert field.init_expression == CSharpPrimitive(None)
        assert field.modifiers == []

    def test_field_is_rebuilt_identically(self, decorator):
        first = decorator.create_json_serializer_field()
        second = decorator.create_json_serializer_field()

        assert first == second
        assert first is not second


class TestSerializerCreationBlock:
    def test_three_statements_in_order(self, decorator):
        block = decorator.create_serializer_creation_block()

        assert [type(stmt) for stmt in block] == [CSharpVariableDeclaration, CSharpAssign, CSharpAssign]

    def test_settings_declared_with_default_constructor(self, decorator):
        declaration = decorator.create_serializer_creation_block()[0]

        assert declaration.type_name == "JsonSerializerSettings"
        assert declaration.name == "settings"
        assert declaration.init_expression == CSharpObjectCreate("JsonSerializerSettings", [])

    def test_null_values_are_ignored(self, decorator):
        assignment = decorator.create_serializer_creation_block()[1]

        assert assignment.left == CSharpPropertyReference(CSharpVariableReference("settings"), "NullValueHandling")
        assert assignment.right == CSharpFieldReference(CSharpTypeReference("NullValueHandling"), "Ignore")

    def test_serializer_created_from_settings(self, decorator):
        assignment = decorator.create_serializer_creation_block()[2]

        assert assignment.left == this_field("newtonJsonSerilizer")
        assert assignment.right == CSharpMethodInvoke(
            CSharpTypeReference("JsonSerializer"),
            "Create",
            [CSharpVariableReference("settings")],
        )

    def test_each_call_returns_a_new_list(self, decorator):
        first = decorator.create_serializer_creation_block()
        second = decorator.create_serializer_creation_block()

        assert first == second
        assert first is not second


class TestJsonSerializerGetter:
    def test_private_get_only_property(self, decorator):
        prop = decorator.create_json_serializer_getter()

        assert isinstance(prop, CSharpProperty)
        assert prop.name == "NewtonJsonSerilizer"
        assert prop.type_name == "JsonSerializer"
        assert prop.access == AccessModifier.PRIVATE
        assert prop.has_getter
        assert not prop.has_setter

    def test_guard_compares_field_to_null(self, decorator):
        condition_stmt, _ = decorator.create_json_serializer_getter().get_statements

        assert isinstance(condition_stmt, CSharpCondition)
        assert condition_stmt.condition == CSharpBinaryOperation(
            left=this_field("newtonJsonSerilizer"),
            operator=BinaryOperator.IDENTITY_EQUALITY,
            right=CSharpPrimitive(None),
        )
        assert condition_stmt.false_statements == []

    def test_guard_runs_the_creation_block(self, decorator):
        condition_stmt, _ = decorator.create_json_serializer_getter().get_statements

        assert condition_stmt.true_statements == decorator.create_serializer_creation_block()

    def test_returns_the_field(self, decorator):
        _, return_stmt = decorator.create_json_serializer_getter().get_statements

        assert return_stmt == CSharpReturn(this_field("newtonJsonSerilizer"))


class TestObjectToJson:
    def test_signature(self, decorator):
        method = decorator.create_object_to_json()

        assert isinstance(method, CSharpMethod)
        assert method.name == "ObjectToJson"
        assert method.access == AccessModifier.PUBLIC
        assert method.return_type == "string"
        assert [(p.type_name, p.name) for p in method.parameters] == [("object", "obj")]

    def test_declares_string_writer(self, decorator):
        declaration = decorator.create_object_to_json().body[0]

        assert declaration == CSharpVariableDeclaration("TextWriter", "tw", CSharpObjectCreate("StringWriter"))

    def test_serialize_goes_through_lazy_property(self, decorator):
        statement = decorator.create_object_to_json().body[1]

        assert isinstance(statement, CSharpExpressionStatement)
        call = statement.expression
        assert call.method_name == "Serialize"
        assert call.arguments == [CSharpVariableReference("tw"), CSharpVariableReference("obj")]
        # Serialize is called on the serializer property, never on the service itself
        assert call.target == CSharpPropertyReference(CSharpThisReference(), "NewtonJsonSerilizer")
        assert call.target != CSharpThisReference()

    def test_returns_writer_text(self, decorator):
        return_stmt = decorator.create_object_to_json().body[2]

        assert return_stmt == CSharpReturn(CSharpMethodInvoke(CSharpVariableReference("tw"), "ToString"))


class TestDecorateClass:
    def test_appends_field_property_method(self, decorator, books):
        service_class = CSharpClass(name="BooksService")

        result = decorator.decorate_class(books, service_class)

        assert result is None
        assert [type(m) for m in service_class.members] == [CSharpField, CSharpProperty, CSharpMethod]
        assert [m.name for m in service_class.members] == [
            "newtonJsonSerilizer",
            "NewtonJsonSerilizer",
            "ObjectToJson",
        ]

    def test_existing_members_are_kept_in_front(self, decorator, books):
        existing = CSharpMethod(name="GetVolume")
        service_class = CSharpClass(name="BooksService", members=[existing])

        decorator.decorate_class(books, service_class)

        assert len(service_class.members) == 4
        assert service_class.members[0] is existing

    @pytest.mark.parametrize(
        "service",
        [
            DiscoveryService(),
            DiscoveryService(name="books", version="v1"),
            DiscoveryService(name="urlshortener", raw={"resources": {"url": {}}}),
            None,
        ],
    )
    def test_service_description_does_not_change_output(self, decorator, service):
        reference = CSharpClass(name="Service")
        decorator.decorate_class(DiscoveryService(name="other"), reference)

        service_class = CSharpClass(name="Service")
        decorator.decorate_class(service, service_class)

        assert service_class.members == reference.members

    def test_second_pass_duplicates_members(self, decorator, books):
        service_class = CSharpClass(name="BooksService")

        decorator.decorate_class(books, service_class)
        decorator.decorate_class(books, service_class)

        names = [m.name for m in service_class.members]
        assert len(names) == 6
        assert names[:3] == names[3:]

    def test_custom_names_stay_consistent(self, books):
        names = ObjectToJsonNames(field_name="jsonSerializer", property_name="JsonSerializerInstance", method_name="ToJson")
        decorator = NewtonsoftObjectToJson(names)
        service_class = CSharpClass(name="BooksService")

        decorator.decorate_class(books, service_class)
        field, prop, method = service_class.members

        assert field.name == "jsonSerializer"
        assert prop.get_statements[0].condition.left == this_field("jsonSerializer")
        assert prop.get_statements[1].expression == this_field("jsonSerializer")
        assert method.name == "ToJson"
        assert method.body[1].expression.target == CSharpPropertyReference(CSharpThisReference(), "JsonSerializerInstance")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
