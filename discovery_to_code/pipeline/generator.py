"""
Service class generator.

Builds the class for a discovery service, lets each configured decorator add
its members, then serializes the result to C#.
"""

from __future__ import annotations

import logging

from .. import __version__
from ..cli_utils import reconstruct_command_line
from ..decorators import DECORATORS, ServiceDecorator
from ..discovery import DiscoveryService
from .ast_backends import CSharpClass, CSharpFile, CSharpSerializer, UsingDirective
from .config import CodeGeneratorConfig

logger = logging.getLogger(__name__)


class CodeGenerationError(Exception):
    """Raised when the configuration asks for something the generator cannot do,
    such as an unknown decorator name."""

    pass


class ServiceGenerator:
    """Generates the C# service class for a discovery service."""

    def __init__(self, service: DiscoveryService, config: CodeGeneratorConfig | None = None):
        self.service = service
        self.config = config or CodeGeneratorConfig()
        self.serializer = CSharpSerializer()
        self.decorators = [self._create_decorator(name) for name in self.config.decorators]

    def _create_decorator(self, name: str) -> ServiceDecorator:
        decorator_cls = DECORATORS.get(name)
        if decorator_cls is None:
            known = ", ".join(sorted(DECORATORS))
            raise CodeGenerationError(f"Unknown service decorator '{name}' (known: {known})")
        return decorator_cls.from_config(self.config)

    @property
    def class_name(self) -> str:
        return f"{self.service.class_name}{self.config.service_class_suffix}"

    def build_class(self) -> CSharpClass:
        """Create the service class and run every decorator over it, in order."""
        service_class = CSharpClass(name=self.class_name)
        for decorator in self.decorators:
            logger.debug("Running %s on %s", type(decorator).__name__, service_class.name)
            decorator.decorate_class(self.service, service_class)
        return service_class

    def build_file(self) -> CSharpFile:
        """Wrap the decorated service class in a file with its using directives."""
        file = CSharpFile()
        file.generation_comment = self._generate_command_comment()

        required_usings = {"System"}
        for decorator in self.decorators:
            required_usings.update(decorator.REQUIRED_USINGS)

        for ns in sorted(required_usings):
            file.using_directives.append(UsingDirective(namespace=ns))

        # Add additional using directives from config
        for ns in self.config.csharp_additional_usings:
            if ns not in required_usings:
                file.using_directives.append(UsingDirective(namespace=ns))

        if self.config.csharp_namespace:
            file.namespace = self.config.csharp_namespace

        file.classes.append(self.build_class())
        return file

    def generate(self) -> str:
        """Generate C# source code for the service."""
        return self.serializer.serialize(self.build_file())

    def _generate_command_comment(self) -> str:
        """Generate a simplified command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        from ..discovery_to_code import discovery_to_code as click_command

        command_line = reconstruct_command_line(click_command)
        return f"// Generated by discovery_to_code v{__version__} : {command_line}"
