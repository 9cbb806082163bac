"""
Base class for service decorators.

A service decorator adds members to the AST of a generated service class.
The pipeline runs decorators one after another over the same class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..discovery import DiscoveryService
from ..pipeline.ast_backends.csharp_ast_nodes import CSharpClass
from ..pipeline.config import CodeGeneratorConfig


class ServiceDecorator(ABC):
    """Abstract base class for service class decorators."""

    # Namespaces the emitted members need in the generated file
    REQUIRED_USINGS: tuple[str, ...] = ()

    @classmethod
    def from_config(cls, config: CodeGeneratorConfig) -> ServiceDecorator:
        """Create the decorator from the generator configuration."""
        return cls()

    @abstractmethod
    def decorate_class(self, service: DiscoveryService, service_class: CSharpClass) -> None:
        """
        Add members to a generated service class.

        Args:
            service: Description of the service being generated
            service_class: The class node to decorate, modified in place
        """
