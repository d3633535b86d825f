"""
Exceptions raised by the generation pipeline.
"""

from __future__ import annotations

from enum import Enum


class CodeGenerationError(Exception):
    """Base class for every error that aborts a generation run."""

    pass


class SchemaErrorKind(str, Enum):
    """Kind of schema problem."""

    MALFORMED_DOCUMENT = "malformed_document"
    UNRESOLVED_REFERENCE = "unresolved_reference"


class SchemaError(CodeGenerationError):
    """Raised when the schema document cannot be turned into a model.

    Attributes:
        kind: What went wrong
        owner: Definition name or operation id owning the offending fragment
        field: Property or parameter name, when the problem is field-level
        ref: The offending $ref string for unresolved references
    """

    def __init__(
        self,
        kind: SchemaErrorKind,
        message: str,
        owner: str | None = None,
        field: str | None = None,
        ref: str | None = None,
    ):
        self.kind = kind
        self.owner = owner
        self.field = field
        self.ref = ref
        location = ".".join(part for part in (owner, field) if part)
        if location:
            message = f"{location}: {message}"
        super().__init__(message)

    @classmethod
    def malformed(cls, message: str, owner: str | None = None, field: str | None = None) -> SchemaError:
        return cls(SchemaErrorKind.MALFORMED_DOCUMENT, message, owner=owner, field=field)

    @classmethod
    def unresolved(cls, ref: str, owner: str, field: str | None = None) -> SchemaError:
        return cls(
            SchemaErrorKind.UNRESOLVED_REFERENCE,
            f"unresolved reference '{ref}'",
            owner=owner,
            field=field,
            ref=ref,
        )


class UnsupportedTypeError(CodeGenerationError):
    """Raised when a property or parameter uses a type outside the mapping table."""

    def __init__(self, owner: str, field: str, type_name: str):
        self.owner = owner
        self.field = field
        self.type_name = type_name
        super().__init__(f"{owner}.{field}: unsupported type '{type_name}'")


class OutputValidationError(CodeGenerationError):
    """Raised when generated code fails the structural check before being written."""

    pass
