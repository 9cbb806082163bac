"""Discovery to Code Generator

Generates C# client service classes from discovery documents. Service
decorators add members to the generated class through a small C# AST,
which is then serialized to source code.
"""

__version__ = "0.1.0"
__author__ = "François Lagunas"

from .discovery import DiscoveryError, DiscoveryService
from .pipeline import (
    CodeGenerationError,
    CodeGeneratorConfig,
    ObjectToJsonNames,
    ServiceGenerator,
)

__all__ = [
    "ServiceGenerator",
    "CodeGeneratorConfig",
    "ObjectToJsonNames",
    "CodeGenerationError",
    "DiscoveryService",
    "DiscoveryError",
]
