"""
Service description loaded from a discovery document.

Decorators receive a DiscoveryService alongside the class they decorate.
Only the few top-level fields the pipeline needs are extracted; the full
document stays available in `raw`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any


class DiscoveryError(Exception):
    """Raised when a discovery document cannot describe a service.

    This happens when the document is not a JSON object or has no
    usable service name.
    """

    pass


@dataclass
class DiscoveryService:
    """A network service as described by its discovery document."""

    name: str = ""
    version: str = ""
    title: str = ""
    description: str = ""
    base_path: str = ""
    raw: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(doc: dict) -> DiscoveryService:
        """Create a service description from a parsed discovery document."""
        if not isinstance(doc, dict):
            raise DiscoveryError(f"Discovery document must be a JSON object, got {type(doc).__name__}")

        name = doc.get("name")
        if not isinstance(name, str) or not name.strip():
            raise DiscoveryError("Discovery document has no service name")

        service = DiscoveryService(
            name=name,
            version=doc.get("version", ""),
            title=doc.get("title", ""),
            description=doc.get("description", ""),
            base_path=doc.get("basePath", ""),
            raw=doc,
        )

        # The class name must be a valid C# identifier
        class_name = service.class_name
        if not class_name or class_name[0].isdigit():
            raise DiscoveryError(f"Service name '{name}' does not give a valid class name")

        return service

    @property
    def class_name(self) -> str:
        """Service name in PascalCase, e.g. "url-shortener" -> "UrlShortener"."""
        words = re.findall(r"[a-z]+|[A-Z][a-z]*|[0-9]+", self.name.replace("_", " ").replace("-", " "))
        return "".join(word.capitalize() for word in words if word)
