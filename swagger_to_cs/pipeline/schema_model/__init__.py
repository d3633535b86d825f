"""
Schema model: the resolved, immutable view of a Swagger document.
"""

from __future__ import annotations

from .nodes import (
    ArrayType,
    AuthScheme,
    ElementType,
    Operation,
    Parameter,
    ParameterLocation,
    PrimitiveKind,
    PrimitiveType,
    Property,
    PropertyType,
    ReferenceType,
    SchemaModel,
    TypeDefinition,
)
from .parser import SchemaParser, load_schema

__all__ = [
    "ArrayType",
    "AuthScheme",
    "ElementType",
    "Operation",
    "Parameter",
    "ParameterLocation",
    "PrimitiveKind",
    "PrimitiveType",
    "Property",
    "PropertyType",
    "ReferenceType",
    "SchemaModel",
    "SchemaParser",
    "TypeDefinition",
    "load_schema",
]
