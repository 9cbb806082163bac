"""
Supplies the ObjectToJson method of generated services, backed by
Newtonsoft.Json's JsonSerializer.

The decorator adds three members to the service class:

    private JsonSerializer newtonJsonSerilizer = null;

    private JsonSerializer NewtonJsonSerilizer
    {
        get
        {
            if (this.newtonJsonSerilizer == null)
            {
                JsonSerializerSettings settings = new JsonSerializerSettings();
                settings.NullValueHandling = NullValueHandling.Ignore;
                this.newtonJsonSerilizer = JsonSerializer.Create(settings);
            }
            return this.newtonJsonSerilizer;
        }
    }

    public string ObjectToJson(object obj)
    {
        TextWriter tw = new StringWriter();
        this.NewtonJsonSerilizer.Serialize(tw, obj);
        return tw.ToString();
    }

The getter initializes the serializer lazily and without locking, so the
generated class must not be used from several threads before the first
call to ObjectToJson completes.
"""

from __future__ import annotations

import logging

from ..discovery import DiscoveryService
from ..pipeline.ast_backends.csharp_ast_nodes import (
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
    CSharpParameter,
    CSharpPrimitive,
    CSharpProperty,
    CSharpPropertyReference,
    CSharpReturn,
    CSharpStatement,
    CSharpThisReference,
    CSharpTypeReference,
    CSharpVariableDeclaration,
    CSharpVariableReference,
)
from ..pipeline.config import CodeGeneratorConfig, ObjectToJsonNames
from .base import ServiceDecorator

logger = logging.getLogger(__name__)

JSON_SERIALIZER_TYPE = "JsonSerializer"
JSON_SERIALIZER_SETTINGS_TYPE = "JsonSerializerSettings"
NULL_VALUE_HANDLING_TYPE = "NullValueHandling"


class NewtonsoftObjectToJson(ServiceDecorator):
    """Adds a lazily created JsonSerializer and an ObjectToJson method."""

    REQUIRED_USINGS = ("System.IO", "Newtonsoft.Json")

    def __init__(self, names: ObjectToJsonNames | None = None):
        self.names = names or ObjectToJsonNames()

    @classmethod
    def from_config(cls, config: CodeGeneratorConfig) -> NewtonsoftObjectToJson:
        return cls(config.object_to_json)

    def _serializer_field(self) -> CSharpFieldReference:
        # this.newtonJsonSerilizer
        return CSharpFieldReference(CSharpThisReference(), self.names.field_name)

    def create_json_serializer_field(self) -> CSharpField:
        """
        Create the field holding the serializer.

        <code>private JsonSerializer newtonJsonSerilizer = null;</code>
        """
        return CSharpField(
            name=self.names.field_name,
            type_name=JSON_SERIALIZER_TYPE,
            access=AccessModifier.PRIVATE,
            init_expression=CSharpPrimitive(None),
        )

    def create_serializer_creation_block(self) -> list[CSharpStatement]:
        """
        Create the statements that configure and build the serializer.

        <code>
            JsonSerializerSettings settings = new JsonSerializerSettings();
            settings.NullValueHandling = NullValueHandling.Ignore;
            this.newtonJsonSerilizer = JsonSerializer.Create(settings);
        </code>

        The settings object is fully configured before it is handed to
        JsonSerializer.Create, so the order of the returned list matters.
        """
        settings = self.names.settings_variable

        declare_settings = CSharpVariableDeclaration(
            type_name=JSON_SERIALIZER_SETTINGS_TYPE,
            name=settings,
            init_expression=CSharpObjectCreate(JSON_SERIALIZER_SETTINGS_TYPE),
        )

        ignore_null_values = CSharpAssign(
            left=CSharpPropertyReference(CSharpVariableReference(settings), "NullValueHandling"),
            right=CSharpFieldReference(CSharpTypeReference(NULL_VALUE_HANDLING_TYPE), "Ignore"),
        )

        create_serializer = CSharpAssign(
            left=self._serializer_field(),
            right=CSharpMethodInvoke(
                CSharpTypeReference(JSON_SERIALIZER_TYPE),
                "Create",
                [CSharpVariableReference(settings)],
            ),
        )

        return [declare_settings, ignore_null_values, create_serializer]

    def create_json_serializer_getter(self) -> CSharpProperty:
        """
        Create the private get-only property that builds the serializer on
        first access and returns the cached instance afterwards.
        """
        # if (this.newtonJsonSerilizer == null) { ...creation block... }
        is_unset = CSharpBinaryOperation(
            left=self._serializer_field(),
            operator=BinaryOperator.IDENTITY_EQUALITY,
            right=CSharpPrimitive(None),
        )
        create_if_unset = CSharpCondition(
            condition=is_unset,
            true_statements=self.create_serializer_creation_block(),
        )

        # return this.newtonJsonSerilizer;
        return_serializer = CSharpReturn(self._serializer_field())

        return CSharpProperty(
            name=self.names.property_name,
            type_name=JSON_SERIALIZER_TYPE,
            access=AccessModifier.PRIVATE,
            has_getter=True,
            has_setter=False,
            get_statements=[create_if_unset, return_serializer],
        )

    def create_object_to_json(self) -> CSharpMethod:
        """
        Create the public ObjectToJson method.

        <code>
            public string ObjectToJson(object obj)
            {
                TextWriter tw = new StringWriter();
                this.NewtonJsonSerilizer.Serialize(tw, obj);
                return tw.ToString();
            }
        </code>

        Serialize is called on the property, not on the field, so the
        serializer is created on first use.
        """
        writer = self.names.writer_variable
        parameter = self.names.parameter_name

        declare_writer = CSharpVariableDeclaration(
            type_name="TextWriter",
            name=writer,
            init_expression=CSharpObjectCreate("StringWriter"),
        )

        serialize_call = CSharpExpressionStatement(
            CSharpMethodInvoke(
                CSharpPropertyReference(CSharpThisReference(), self.names.property_name),
                self.names.serialize_method,
                [CSharpVariableReference(writer), CSharpVariableReference(parameter)],
            )
        )

        return_text = CSharpReturn(CSharpMethodInvoke(CSharpVariableReference(writer), "ToString"))

        return CSharpMethod(
            name=self.names.method_name,
            return_type="string",
            access=AccessModifier.PUBLIC,
            parameters=[CSharpParameter(name=parameter, type_name="object")],
            body=[declare_writer, serialize_call, return_text],
        )

    def decorate_class(self, service: DiscoveryService, service_class: CSharpClass) -> None:
        # The service description is not used yet. Members are appended
        # without checking for existing ones.
        members = [
            self.create_json_serializer_field(),
            self.create_json_serializer_getter(),
            self.create_object_to_json(),
        ]
        for member in members:
            logger.debug("Adding %s to %s", member.name, service_class.name)
            service_class.members.append(member)
