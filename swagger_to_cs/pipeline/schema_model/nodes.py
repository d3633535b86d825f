"""
Schema model node definitions.

These nodes represent the subset of a Swagger document used for generation.
They are built once by the parser, with every $ref already resolved, and are
never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union


class PrimitiveKind(str, Enum):
    """Primitive schema types supported by the mapping table."""

    INTEGER = "integer"
    BOOLEAN = "boolean"
    STRING = "string"


class ParameterLocation(str, Enum):
    """Where an operation parameter travels."""

    PATH = "path"
    QUERY = "query"
    BODY = "body"


class AuthScheme(str, Enum):
    """Authentication requirement of an operation."""

    NONE = "none"
    BASIC = "basic"
    BEARER = "bearer"


@dataclass(frozen=True)
class PrimitiveType:
    kind: PrimitiveKind


@dataclass(frozen=True)
class ReferenceType:
    """A resolved reference to a definition.

    ``target`` is the key of the definition in ``SchemaModel.definitions``,
    guaranteed to be present once the model is loaded.
    """

    target: str


ElementType = Union[PrimitiveType, ReferenceType]


@dataclass(frozen=True)
class ArrayType:
    element: ElementType


PropertyType = Union[PrimitiveType, ArrayType, ReferenceType]


@dataclass(frozen=True)
class Property:
    """A property of a definition, keyed by its wire name."""

    name: str
    type: PropertyType
    description: str = ""


@dataclass(frozen=True)
class TypeDefinition:
    name: str
    description: str = ""
    properties: tuple[Property, ...] = ()


@dataclass(frozen=True)
class Parameter:
    name: str
    location: ParameterLocation
    type: PropertyType
    required: bool = False


@dataclass(frozen=True)
class Operation:
    """An HTTP operation, identified by its path and method."""

    path: str
    method: str
    operation_id: str
    summary: str = ""
    parameters: tuple[Parameter, ...] = ()
    auth: AuthScheme = AuthScheme.BEARER
    response: ReferenceType | None = None


@dataclass(frozen=True)
class SchemaModel:
    """The complete, resolved schema model."""

    # Definition name -> definition, in declaration order
    definitions: Mapping[str, TypeDefinition] = field(default_factory=lambda: MappingProxyType({}))

    # Operations in declaration order (paths first, then methods)
    operations: tuple[Operation, ...] = ()
