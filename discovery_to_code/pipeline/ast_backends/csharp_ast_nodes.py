"""
C# AST node definitions.

These nodes describe generated service classes down to the statement and
expression level, so decorators can add members with real bodies. They are
plain data: nothing here checks that a tree is well formed. The
CSharpSerializer turns a tree into source code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AccessModifier(str, Enum):
    """C# access modifiers."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    INTERNAL = "internal"


class MemberModifier(str, Enum):
    """C# member modifiers."""

    STATIC = "static"
    READONLY = "readonly"
    ABSTRACT = "abstract"
    VIRTUAL = "virtual"
    OVERRIDE = "override"
    SEALED = "sealed"


class BinaryOperator(str, Enum):
    """Binary operators usable in generated expressions."""

    IDENTITY_EQUALITY = "=="
    IDENTITY_INEQUALITY = "!="
    BOOLEAN_AND = "&&"
    BOOLEAN_OR = "||"


@dataclass
class CSharpNode:
    """Base class for all C# AST nodes."""

    pass


@dataclass
class CSharpAttribute(CSharpNode):
    """Represents a C# attribute (e.g., [JsonProperty("name")])."""

    name: str = ""
    arguments: list[str] = field(default_factory=list)

    def to_string(self) -> str:
        """Convert to attribute string."""
        if self.arguments:
            args_str = ", ".join(self.arguments)
            return f"[{self.name}({args_str})]"
        return f"[{self.name}]"


# Expressions


@dataclass
class CSharpExpression(CSharpNode):
    """Base class for expression nodes."""

    pass


@dataclass
class CSharpPrimitive(CSharpExpression):
    """A literal value. None stands for null."""

    value: Any = None


@dataclass
class CSharpThisReference(CSharpExpression):
    """The `this` instance."""

    pass


@dataclass
class CSharpTypeReference(CSharpExpression):
    """A type used as an expression, for static member access."""

    type_name: str = ""


@dataclass
class CSharpVariableReference(CSharpExpression):
    """A local variable or parameter."""

    name: str = ""


@dataclass
class CSharpFieldReference(CSharpExpression):
    """`target.field_name` where the member is a field (or enum member)."""

    target: CSharpExpression | None = None
    field_name: str = ""


@dataclass
class CSharpPropertyReference(CSharpExpression):
    """`target.property_name` where the member is a property."""

    target: CSharpExpression | None = None
    property_name: str = ""


@dataclass
class CSharpObjectCreate(CSharpExpression):
    """`new type_name(arguments)`."""

    type_name: str = ""
    arguments: list[CSharpExpression] = field(default_factory=list)


@dataclass
class CSharpMethodInvoke(CSharpExpression):
    """`target.method_name(arguments)`; a None target calls an unqualified method."""

    target: CSharpExpression | None = None
    method_name: str = ""
    arguments: list[CSharpExpression] = field(default_factory=list)


@dataclass
class CSharpBinaryOperation(CSharpExpression):
    """`left <operator> right`."""

    left: CSharpExpression | None = None
    operator: BinaryOperator = BinaryOperator.IDENTITY_EQUALITY
    right: CSharpExpression | None = None


# Statements


@dataclass
class CSharpStatement(CSharpNode):
    """Base class for statement nodes."""

    pass


@dataclass
class CSharpVariableDeclaration(CSharpStatement):
    """`type_name name = init_expression;`"""

    type_name: str = ""
    name: str = ""
    init_expression: CSharpExpression | None = None


@dataclass
class CSharpAssign(CSharpStatement):
    """`left = right;`"""

    left: CSharpExpression | None = None
    right: CSharpExpression | None = None


@dataclass
class CSharpCondition(CSharpStatement):
    """`if (condition) { ... } else { ... }`"""

    condition: CSharpExpression | None = None
    true_statements: list[CSharpStatement] = field(default_factory=list)
    false_statements: list[CSharpStatement] = field(default_factory=list)


@dataclass
class CSharpReturn(CSharpStatement):
    """`return expression;`"""

    expression: CSharpExpression | None = None


@dataclass
class CSharpExpressionStatement(CSharpStatement):
    """An expression evaluated for its side effects, e.g. a method call."""

    expression: CSharpExpression | None = None


# Members


@dataclass
class CSharpParameter(CSharpNode):
    """Represents a method parameter."""

    name: str = ""
    type_name: str = ""


@dataclass
class CSharpField(CSharpNode):
    """Represents a class field."""

    name: str = ""
    type_name: str = ""
    access: AccessModifier = AccessModifier.PRIVATE
    modifiers: list[MemberModifier] = field(default_factory=list)
    init_expression: CSharpExpression | None = None
    attributes: list[CSharpAttribute] = field(default_factory=list)


@dataclass
class CSharpProperty(CSharpNode):
    """Represents a class property.

    Without get_statements the property is emitted as an auto-property.
    """

    name: str = ""
    type_name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    has_getter: bool = True
    has_setter: bool = True
    get_statements: list[CSharpStatement] = field(default_factory=list)
    attributes: list[CSharpAttribute] = field(default_factory=list)


@dataclass
class CSharpMethod(CSharpNode):
    """Represents a class method."""

    name: str = ""
    return_type: str = "void"
    access: AccessModifier = AccessModifier.PUBLIC
    modifiers: list[MemberModifier] = field(default_factory=list)
    parameters: list[CSharpParameter] = field(default_factory=list)
    body: list[CSharpStatement] = field(default_factory=list)


@dataclass
class CSharpClass(CSharpNode):
    """Represents a class declaration.

    Members are kept in a single list so their declaration order is preserved.
    """

    name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    base_class: str | None = None
    interfaces: list[str] = field(default_factory=list)
    attributes: list[CSharpAttribute] = field(default_factory=list)
    members: list[CSharpMember] = field(default_factory=list)


CSharpMember = CSharpField | CSharpProperty | CSharpMethod | CSharpClass


@dataclass
class UsingDirective(CSharpNode):
    """Represents a using directive."""

    namespace: str = ""


@dataclass
class CSharpFile(CSharpNode):
    """Represents a complete C# source file."""

    using_directives: list[UsingDirective] = field(default_factory=list)
    generation_comment: str = ""
    namespace: str | None = None  # Optional namespace to wrap all types
    classes: list[CSharpClass] = field(default_factory=list)
