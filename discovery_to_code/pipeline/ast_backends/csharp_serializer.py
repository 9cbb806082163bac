"""
C# AST Serializer.

Converts C# AST nodes to properly-formatted C# source code.
Follows C# style guidelines:
- Braces on new lines (Allman style)
- 4-space indentation
- Blank line between members
- Attributes on separate lines above declarations
"""

from __future__ import annotations

from .csharp_ast_nodes import (
    CSharpAssign,
    CSharpBinaryOperation,
    CSharpClass,
    CSharpCondition,
    CSharpExpression,
    CSharpExpressionStatement,
    CSharpField,
    CSharpFieldReference,
    CSharpFile,
    CSharpMember,
    CSharpMethod,
    CSharpMethodInvoke,
    CSharpObjectCreate,
    CSharpPrimitive,
    CSharpProperty,
    CSharpPropertyReference,
    CSharpReturn,
    CSharpStatement,
    CSharpThisReference,
    CSharpTypeReference,
    CSharpVariableDeclaration,
    CSharpVariableReference,
    UsingDirective,
)


class CSharpSerializer:
    """Serializes C# AST nodes to source code."""

    INDENT = "    "  # 4 spaces

    def serialize(self, file: CSharpFile) -> str:
        """Serialize a complete C# file to source code."""
        lines: list[str] = []

        # Generation comment
        if file.generation_comment:
            lines.append(file.generation_comment)

        # Using directives
        for using in file.using_directives:
            lines.append(self._serialize_using(using))

        if file.using_directives:
            lines.append("")

        # Namespace wrapping
        if file.namespace:
            lines.append(f"namespace {file.namespace}")
            lines.append("{")
            indent_level = 1
        else:
            indent_level = 0

        # Classes
        for i, cls in enumerate(file.classes):
            if i > 0:
                lines.append("")
            class_lines = self.serialize_class(cls)
            lines.extend(self._indent_lines(class_lines, indent_level))

        # Close namespace
        if file.namespace:
            lines.append("}")

        return "\n".join(lines) + "\n"

    def _indent_lines(self, lines: list[str], level: int) -> list[str]:
        """Add indentation to a list of lines."""
        if level == 0:
            return lines
        prefix = self.INDENT * level
        return [prefix + line if line.strip() else line for line in lines]

    def _serialize_using(self, using: UsingDirective) -> str:
        """Serialize a using directive."""
        return f"using {using.namespace};"

    def serialize_class(self, cls: CSharpClass) -> list[str]:
        """Serialize a class declaration."""
        lines: list[str] = []

        # Attributes
        for attr in cls.attributes:
            lines.append(attr.to_string())

        # Class declaration
        declaration = f"{cls.access.value} class {cls.name}"
        bases = ([cls.base_class] if cls.base_class else []) + cls.interfaces
        if bases:
            declaration += f" : {', '.join(bases)}"

        lines.append(declaration)
        lines.append("{")

        for i, member in enumerate(cls.members):
            if i > 0:
                lines.append("")
            lines.extend(self._indent_lines(self.serialize_member(member), 1))

        lines.append("}")

        return lines

    def serialize_member(self, member: CSharpMember) -> list[str]:
        """Serialize any class member."""
        if isinstance(member, CSharpField):
            return self._serialize_field(member)
        if isinstance(member, CSharpProperty):
            return self._serialize_property(member)
        if isinstance(member, CSharpMethod):
            return self._serialize_method(member)
        if isinstance(member, CSharpClass):
            return self.serialize_class(member)
        raise TypeError(f"Cannot serialize class member of type {type(member).__name__}")

    def _serialize_field(self, field: CSharpField) -> list[str]:
        """Serialize a field declaration."""
        lines: list[str] = []

        # Attributes
        for attr in field.attributes:
            lines.append(attr.to_string())

        # Field declaration
        modifiers = " ".join(m.value for m in field.modifiers)
        if modifiers:
            modifiers = f" {modifiers}"

        declaration = f"{field.access.value}{modifiers} {field.type_name} {field.name}"
        if field.init_expression is not None:
            declaration += f" = {self.serialize_expression(field.init_expression)}"
        declaration += ";"

        lines.append(declaration)

        return lines

    def _serialize_property(self, prop: CSharpProperty) -> list[str]:
        """Serialize a property declaration."""
        lines: list[str] = []

        # Attributes
        for attr in prop.attributes:
            lines.append(attr.to_string())

        declaration = f"{prop.access.value} {prop.type_name} {prop.name}"

        # Auto-property
        if not prop.get_statements:
            accessors = []
            if prop.has_getter:
                accessors.append("get;")
            if prop.has_setter:
                accessors.append("set;")
            lines.append(f"{declaration} {{ {' '.join(accessors)} }}")
            return lines

        # A bodied getter cannot be paired with an auto-implemented setter
        if prop.has_setter:
            raise ValueError(f"Property {prop.name} has a getter body, so it cannot have an auto-implemented setter")

        lines.append(declaration)
        lines.append("{")
        lines.append(f"{self.INDENT}get")
        lines.append(f"{self.INDENT}{{")
        lines.extend(self._indent_lines(self._serialize_block(prop.get_statements), 2))
        lines.append(f"{self.INDENT}}}")
        lines.append("}")

        return lines

    def _serialize_method(self, method: CSharpMethod) -> list[str]:
        """Serialize a method declaration."""
        lines: list[str] = []

        # Modifiers
        modifiers = " ".join(m.value for m in method.modifiers)
        if modifiers:
            modifiers = f" {modifiers}"

        # Parameter list
        params = ", ".join(f"{p.type_name} {p.name}" for p in method.parameters)

        lines.append(f"{method.access.value}{modifiers} {method.return_type} {method.name}({params})")
        lines.append("{")
        lines.extend(self._indent_lines(self._serialize_block(method.body), 1))
        lines.append("}")

        return lines

    def _serialize_block(self, statements: list[CSharpStatement]) -> list[str]:
        """Serialize a statement sequence, without braces or indentation."""
        lines: list[str] = []
        for stmt in statements:
            lines.extend(self.serialize_statement(stmt))
        return lines

    def serialize_statement(self, stmt: CSharpStatement) -> list[str]:
        """Serialize a single statement to one or more lines."""
        if isinstance(stmt, CSharpVariableDeclaration):
            declaration = f"{stmt.type_name} {stmt.name}"
            if stmt.init_expression is not None:
                declaration += f" = {self.serialize_expression(stmt.init_expression)}"
            return [f"{declaration};"]

        if isinstance(stmt, CSharpAssign):
            return [f"{self.serialize_expression(stmt.left)} = {self.serialize_expression(stmt.right)};"]

        if isinstance(stmt, CSharpReturn):
            if stmt.expression is None:
                return ["return;"]
            return [f"return {self.serialize_expression(stmt.expression)};"]

        if isinstance(stmt, CSharpExpressionStatement):
            return [f"{self.serialize_expression(stmt.expression)};"]

        if isinstance(stmt, CSharpCondition):
            lines = [f"if ({self.serialize_expression(stmt.condition)})", "{"]
            lines.extend(self._indent_lines(self._serialize_block(stmt.true_statements), 1))
            lines.append("}")
            if stmt.false_statements:
                lines.append("else")
                lines.append("{")
                lines.extend(self._indent_lines(self._serialize_block(stmt.false_statements), 1))
                lines.append("}")
            return lines

        raise TypeError(f"Cannot serialize statement of type {type(stmt).__name__}")

    def serialize_expression(self, expr: CSharpExpression) -> str:
        """Serialize a single expression."""
        if isinstance(expr, CSharpPrimitive):
            return self._format_primitive(expr.value)

        if isinstance(expr, CSharpThisReference):
            return "this"

        if isinstance(expr, CSharpTypeReference):
            return expr.type_name

        if isinstance(expr, CSharpVariableReference):
            return expr.name

        if isinstance(expr, CSharpFieldReference):
            return self._qualify(expr.target, expr.field_name)

        if isinstance(expr, CSharpPropertyReference):
            return self._qualify(expr.target, expr.property_name)

        if isinstance(expr, CSharpObjectCreate):
            return f"new {expr.type_name}({self._serialize_arguments(expr.arguments)})"

        if isinstance(expr, CSharpMethodInvoke):
            method = self._qualify(expr.target, expr.method_name)
            return f"{method}({self._serialize_arguments(expr.arguments)})"

        if isinstance(expr, CSharpBinaryOperation):
            left = self.serialize_expression(expr.left)
            right = self.serialize_expression(expr.right)
            return f"{left} {expr.operator.value} {right}"

        raise TypeError(f"Cannot serialize expression of type {type(expr).__name__}")

    def _qualify(self, target: CSharpExpression | None, member_name: str) -> str:
        if target is None:
            return member_name
        return f"{self.serialize_expression(target)}.{member_name}"

    def _serialize_arguments(self, arguments: list[CSharpExpression]) -> str:
        return ", ".join(self.serialize_expression(arg) for arg in arguments)

    def _format_primitive(self, value) -> str:
        """Format a literal value for C#."""
        if value is None:
            return "null"

        if isinstance(value, bool):
            return "true" if value else "false"

        if isinstance(value, str):
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            escaped = escaped.replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
            return f'"{escaped}"'

        return str(value)
