"""
C# AST used to build generated service classes, and its serializer.
"""

from __future__ import annotations

from .csharp_ast_nodes import CSharpClass, CSharpFile, UsingDirective
from .csharp_serializer import CSharpSerializer

__all__ = [
    "CSharpClass",
    "CSharpFile",
    "CSharpSerializer",
    "UsingDirective",
]
