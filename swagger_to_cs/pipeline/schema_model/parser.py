"""
Swagger document parser that builds the schema model.

Phase 1 of the pipeline: turn the raw document into an immutable
SchemaModel, resolving every $ref against the definitions table so that
later phases never look at reference strings again.
"""

from __future__ import annotations

import json
import logging
from types import MappingProxyType
from typing import Any

from ...utils import DEFINITIONS_REF_PREFIX
from ..errors import SchemaError, UnsupportedTypeError
from .nodes import (
    ArrayType,
    AuthScheme,
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

logger = logging.getLogger(__name__)

# HTTP methods that may appear as keys of a path item
HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")

# Security scheme names recognized when the document has no securityDefinitions entry for them
DEFAULT_SECURITY_SCHEMES = {
    "BasicAuth": AuthScheme.BASIC,
    "HttpKeyAuth": AuthScheme.BEARER,
}

# securityDefinitions "type" -> scheme
SECURITY_DEFINITION_TYPES = {
    "basic": AuthScheme.BASIC,
    "apiKey": AuthScheme.BEARER,
    "oauth2": AuthScheme.BEARER,
}


def load_schema(raw: bytes | str) -> SchemaModel:
    """
    Decode a raw schema document and parse it into a SchemaModel.

    Args:
        raw: The JSON document, as bytes or text

    Returns:
        The resolved SchemaModel

    Raises:
        SchemaError: If the document is not valid JSON or cannot be modeled
        UnsupportedTypeError: If a property or parameter uses an unsupported type
    """
    try:
        document = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SchemaError.malformed(f"invalid JSON document: {e}") from e
    return SchemaParser().parse(document)


class SchemaParser:
    """Parses a Swagger document into a SchemaModel."""

    PRIMITIVE_TYPES = {kind.value: kind for kind in PrimitiveKind}

    def __init__(self) -> None:
        self._definition_names: set[str] = set()
        self._security_definitions: dict[str, Any] = {}

    def parse(self, document: Any) -> SchemaModel:
        """
        Parse a decoded Swagger document.

        Args:
            document: The decoded JSON document

        Returns:
            SchemaModel with resolved definitions and operations
        """
        if not isinstance(document, dict):
            raise SchemaError.malformed("schema document must be a JSON object")

        raw_definitions = self._expect_object(document.get("definitions", {}), "definitions")
        raw_paths = self._expect_object(document.get("paths", {}), "paths")
        self._security_definitions = self._expect_object(document.get("securityDefinitions", {}), "securityDefinitions")

        # All names must be known before any $ref can be resolved
        self._definition_names = set(raw_definitions)

        definitions: dict[str, TypeDefinition] = {}
        for name, raw_definition in raw_definitions.items():
            definitions[name] = self._parse_definition(name, raw_definition)

        operations: list[Operation] = []
        for url, path_item in raw_paths.items():
            operations.extend(self._parse_path_item(url, path_item))

        logger.debug("Parsed %d definitions and %d operations", len(definitions), len(operations))
        return SchemaModel(definitions=MappingProxyType(definitions), operations=tuple(operations))

    def _expect_object(self, value: Any, owner: str, field: str | None = None) -> dict[str, Any]:
        if not isinstance(value, dict):
            raise SchemaError.malformed("expected a JSON object", owner=owner, field=field)
        return value

    # Definitions

    def _parse_definition(self, name: str, raw: Any) -> TypeDefinition:
        raw = self._expect_object(raw, name)
        raw_properties = self._expect_object(raw.get("properties", {}), name, "properties")
        properties = tuple(
            Property(
                name=prop_name,
                type=self._parse_property_type(prop_schema, name, prop_name),
                description=str(prop_schema.get("description", "")),
            )
            for prop_name, prop_schema in raw_properties.items()
        )
        return TypeDefinition(
            name=name,
            description=str(raw.get("description", "")),
            properties=properties,
        )

    def _parse_property_type(self, schema: Any, owner: str, field: str) -> PropertyType:
        schema = self._expect_object(schema, owner, field)

        if "$ref" in schema:
            return self._resolve_ref(schema["$ref"], owner, field)

        schema_type = schema.get("type")
        if schema_type == "array":
            return ArrayType(element=self._parse_element_type(schema.get("items"), owner, field))

        return self._parse_primitive(schema_type, owner, field)

    def _parse_element_type(self, items: Any, owner: str, field: str) -> PrimitiveType | ReferenceType:
        if not isinstance(items, dict):
            raise SchemaError.malformed("array without 'items'", owner=owner, field=field)
        if "$ref" in items:
            return self._resolve_ref(items["$ref"], owner, field)
        item_type = items.get("type")
        if item_type == "array":
            raise UnsupportedTypeError(owner, field, "array of array")
        return self._parse_primitive(item_type, owner, field)

    def _parse_primitive(self, schema_type: Any, owner: str, field: str) -> PrimitiveType:
        kind = self.PRIMITIVE_TYPES.get(schema_type) if isinstance(schema_type, str) else None
        if kind is None:
            raise UnsupportedTypeError(owner, field, str(schema_type))
        return PrimitiveType(kind)

    def _resolve_ref(self, ref: Any, owner: str, field: str | None = None) -> ReferenceType:
        if not isinstance(ref, str):
            raise SchemaError.malformed("'$ref' must be a string", owner=owner, field=field)
        target = ref[len(DEFINITIONS_REF_PREFIX) :] if ref.startswith(DEFINITIONS_REF_PREFIX) else None
        if target is None or target not in self._definition_names:
            raise SchemaError.unresolved(ref, owner, field)
        return ReferenceType(target=target)

    # Operations

    def _parse_path_item(self, url: str, path_item: Any) -> list[Operation]:
        path_item = self._expect_object(path_item, url)
        shared_parameters = path_item.get("parameters", [])

        operations = []
        for method, raw_operation in path_item.items():
            if method.lower() not in HTTP_METHODS:
                logger.debug("Skipping non-operation key '%s' in path '%s'", method, url)
                continue
            operations.append(self._parse_operation(url, method.lower(), raw_operation, shared_parameters))
        return operations

    def _parse_operation(self, url: str, method: str, raw: Any, shared_parameters: Any) -> Operation:
        label = f"{method.upper()} {url}"
        raw = self._expect_object(raw, label)

        operation_id = raw.get("operationId")
        if not isinstance(operation_id, str) or not operation_id:
            raise SchemaError.malformed("missing 'operationId'", owner=label)

        parameters = self._merge_parameters(shared_parameters, raw.get("parameters", []), operation_id)

        return Operation(
            path=url,
            method=method,
            operation_id=operation_id,
            summary=str(raw.get("summary", "")),
            parameters=tuple(self._parse_parameter(p, operation_id) for p in parameters),
            auth=self._parse_security(raw.get("security"), operation_id),
            response=self._parse_response(raw.get("responses"), operation_id),
        )

    def _merge_parameters(self, shared: Any, own: Any, operation_id: str) -> list[dict[str, Any]]:
        """Combine path-level and operation-level parameters.

        Operation-level parameters override path-level ones with the same name and location.
        """
        if not isinstance(shared, list) or not isinstance(own, list):
            raise SchemaError.malformed("'parameters' must be a list", owner=operation_id)
        for parameter in [*shared, *own]:
            self._expect_object(parameter, operation_id, "parameters")

        own_keys = {(p.get("name"), p.get("in")) for p in own}
        return [p for p in shared if (p.get("name"), p.get("in")) not in own_keys] + own

    def _parse_parameter(self, raw: dict[str, Any], operation_id: str) -> Parameter:
        name = raw.get("name")
        if not isinstance(name, str) or not name:
            raise SchemaError.malformed("parameter without a name", owner=operation_id)

        try:
            location = ParameterLocation(raw.get("in"))
        except ValueError:
            raise UnsupportedTypeError(operation_id, name, f"{raw.get('in')} parameter") from None

        if location == ParameterLocation.BODY:
            param_type = self._parse_body_type(raw.get("schema"), operation_id, name)
        elif location == ParameterLocation.QUERY and raw.get("type") == "array":
            element = self._parse_element_type(raw.get("items"), operation_id, name)
            if isinstance(element, ReferenceType):
                raise UnsupportedTypeError(operation_id, name, "array of reference")
            param_type = ArrayType(element=element)
        else:
            param_type = self._parse_primitive(raw.get("type"), operation_id, name)

        return Parameter(
            name=name,
            location=location,
            type=param_type,
            required=bool(raw.get("required", False)),
        )

    def _parse_body_type(self, schema: Any, operation_id: str, name: str) -> PrimitiveType | ReferenceType:
        if not isinstance(schema, dict):
            raise SchemaError.malformed("body parameter without 'schema'", owner=operation_id, field=name)
        if "$ref" in schema:
            return self._resolve_ref(schema["$ref"], operation_id, name)
        if schema.get("type") == PrimitiveKind.STRING.value:
            return PrimitiveType(PrimitiveKind.STRING)
        raise UnsupportedTypeError(operation_id, name, str(schema.get("type")))

    def _parse_security(self, security: Any, operation_id: str) -> AuthScheme:
        # No explicit requirement means a bearer token is expected
        if not security:
            return AuthScheme.BEARER
        if not isinstance(security, list) or not isinstance(security[0], dict):
            raise SchemaError.malformed("'security' must be a list of objects", owner=operation_id)

        if len(security) > 1:
            logger.warning(
                "%s declares %d alternative security requirements, only the first one is used",
                operation_id,
                len(security),
            )

        for scheme_name in security[0]:
            scheme = self._classify_security_scheme(scheme_name)
            if scheme is not None:
                return scheme
            logger.warning("%s: unknown security scheme '%s' ignored", operation_id, scheme_name)
        return AuthScheme.NONE

    def _classify_security_scheme(self, scheme_name: str) -> AuthScheme | None:
        definition = self._security_definitions.get(scheme_name)
        if isinstance(definition, dict):
            return SECURITY_DEFINITION_TYPES.get(definition.get("type"))
        return DEFAULT_SECURITY_SCHEMES.get(scheme_name)

    def _parse_response(self, responses: Any, operation_id: str) -> ReferenceType | None:
        if not isinstance(responses, dict):
            raise SchemaError.malformed("missing 'responses'", owner=operation_id)

        success = responses.get("200")
        if success is None:
            success = next((r for code, r in responses.items() if str(code).startswith("2")), None)
        if success is None:
            raise SchemaError.malformed("no success response", owner=operation_id, field="responses")
        success = self._expect_object(success, operation_id, "responses")

        schema = success.get("schema")
        if schema is None:
            return None
        schema = self._expect_object(schema, operation_id, "response")
        if "$ref" not in schema:
            raise UnsupportedTypeError(operation_id, "response", str(schema.get("type")))
        return self._resolve_ref(schema["$ref"], operation_id, "response")
