"""
Pipeline - AST-based service class generator.

1. Phase 1 (Discovery): Load the service description
2. Phase 2 (Decorators): Build the service class AST and let each decorator add members
3. Phase 3 (Serializer): Convert the AST to C# source code
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, ObjectToJsonNames
from .generator import CodeGenerationError, ServiceGenerator

__all__ = [
    "ServiceGenerator",
    "CodeGeneratorConfig",
    "ObjectToJsonNames",
    "CodeGenerationError",
]
