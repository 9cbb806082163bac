"""
Service decorators.

Each decorator adds members to a generated service class. The pipeline looks
decorators up by name in DECORATORS.
"""

from __future__ import annotations

from .base import ServiceDecorator
from .newtonsoft_object_to_json import NewtonsoftObjectToJson

DECORATORS: dict[str, type[ServiceDecorator]] = {
    "newtonsoft_object_to_json": NewtonsoftObjectToJson,
}

__all__ = [
    "DECORATORS",
    "ServiceDecorator",
    "NewtonsoftObjectToJson",
]
