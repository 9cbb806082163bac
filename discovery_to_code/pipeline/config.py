"""
Configuration for the service code generator pipeline.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields


@dataclass
class ObjectToJsonNames:
    """Names shared by the members the ObjectToJson decorator emits.

    The property body refers to field_name and the method body refers to
    property_name, so all three members must be built from the same record.
    The defaults are the names generated services have always exposed.
    """

    field_name: str = "newtonJsonSerilizer"
    property_name: str = "NewtonJsonSerilizer"
    method_name: str = "ObjectToJson"
    settings_variable: str = "settings"
    writer_variable: str = "tw"
    parameter_name: str = "obj"
    serialize_method: str = "Serialize"


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # C# specific configuration
    csharp_namespace: str = ""  # Namespace to wrap all types in (e.g., "Google.Apis.Books")
    csharp_additional_usings: list[str] = field(default_factory=list)  # Extra using statements

    # Appended to the PascalCase service name to form the class name
    service_class_suffix: str = "Service"

    # Service decorators to run, in order
    decorators: list[str] = field(default_factory=lambda: ["newtonsoft_object_to_json"])

    # Member names used by the ObjectToJson decorator
    object_to_json: ObjectToJsonNames = field(default_factory=ObjectToJsonNames)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "object_to_json" and isinstance(v, dict):
                known = {f.name for f in fields(ObjectToJsonNames)}
                config.object_to_json = ObjectToJsonNames(**{name: value for name, value in v.items() if name in known})
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "add_generation_comment": self.add_generation_comment,
            "csharp_namespace": self.csharp_namespace,
            "csharp_additional_usings": self.csharp_additional_usings,
            "service_class_suffix": self.service_class_suffix,
            "decorators": self.decorators,
            "object_to_json": asdict(self.object_to_json),
        }
