"""
Schema type to C# type mapping.

The mapping table is fixed. Every PropertyType variant is matched explicitly
and anything else raises UnsupportedTypeError.
"""

from __future__ import annotations

from ...utils import clean_reference
from ..errors import UnsupportedTypeError
from ..schema_model.nodes import (
    ArrayType,
    Parameter,
    ParameterLocation,
    PrimitiveKind,
    PrimitiveType,
    PropertyType,
    ReferenceType,
)

TYPE_MAP = {
    PrimitiveKind.INTEGER: "int",
    PrimitiveKind.BOOLEAN: "bool",
    PrimitiveKind.STRING: "string",
}

# Primitives represented by C# value types (cannot be null unless declared nullable)
VALUE_TYPES = {PrimitiveKind.INTEGER, PrimitiveKind.BOOLEAN}

# C# reserved keywords that need escaping
CS_RESERVED_KEYWORDS = {
    "abstract",
    "as",
    "base",
    "bool",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "checked",
    "class",
    "const",
    "continue",
    "decimal",
    "default",
    "delegate",
    "do",
    "double",
    "else",
    "enum",
    "event",
    "explicit",
    "extern",
    "false",
    "finally",
    "fixed",
    "float",
    "for",
    "foreach",
    "goto",
    "if",
    "implicit",
    "in",
    "int",
    "interface",
    "internal",
    "is",
    "lock",
    "long",
    "namespace",
    "new",
    "null",
    "object",
    "operator",
    "out",
    "override",
    "params",
    "private",
    "protected",
    "public",
    "readonly",
    "ref",
    "return",
    "sbyte",
    "sealed",
    "short",
    "sizeof",
    "stackalloc",
    "static",
    "string",
    "struct",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "uint",
    "ulong",
    "unchecked",
    "unsafe",
    "ushort",
    "using",
    "virtual",
    "void",
    "volatile",
    "while",
}


def escape_identifier(name: str) -> str:
    """Prefix C# keywords with '@' so they can be used as identifiers."""
    return f"@{name}" if name in CS_RESERVED_KEYWORDS else name


def class_name(reference: ReferenceType) -> str:
    """Concrete class name generated for a referenced definition."""
    return clean_reference(reference.target)


def interface_name(reference: ReferenceType) -> str:
    """Capability interface name generated for a referenced definition."""
    return f"I{class_name(reference)}"


def translate_primitive(primitive: PrimitiveType, owner: str, field: str) -> str:
    if primitive.kind not in TYPE_MAP:
        raise UnsupportedTypeError(owner, field, str(primitive.kind))
    return TYPE_MAP[primitive.kind]


def translate_property_type(prop_type: PropertyType, owner: str, field: str) -> str:
    """
    Translate a property type to the type exposed by the capability interface.

    Args:
        prop_type: The property type
        owner: Owning definition name, for error reporting
        field: Property name, for error reporting

    Returns:
        C# type string
    """
    if isinstance(prop_type, PrimitiveType):
        return translate_primitive(prop_type, owner, field)

    if isinstance(prop_type, ReferenceType):
        return interface_name(prop_type)

    if isinstance(prop_type, ArrayType):
        element = prop_type.element
        if isinstance(element, PrimitiveType):
            return f"List<{translate_primitive(element, owner, field)}>"
        if isinstance(element, ReferenceType):
            return f"IEnumerable<{interface_name(element)}>"

    raise UnsupportedTypeError(owner, field, type(prop_type).__name__)


def translate_backing_type(prop_type: PropertyType) -> str | None:
    """
    Concrete type of the serialized backing field for reference-typed properties.

    Returns None for properties serialized directly (primitives and arrays of primitives).
    """
    if isinstance(prop_type, ReferenceType):
        return class_name(prop_type)
    if isinstance(prop_type, ArrayType) and isinstance(prop_type.element, ReferenceType):
        return f"List<{class_name(prop_type.element)}>"
    return None


def translate_parameter_type(parameter: Parameter, owner: str) -> str:
    """
    Translate an operation parameter to its C# argument type.

    Path and query primitives map directly (nullable when optional value types),
    array query parameters become IEnumerable<T>, body parameters are the
    referenced class or string.
    """
    param_type = parameter.type

    if parameter.location == ParameterLocation.BODY:
        if isinstance(param_type, ReferenceType):
            return class_name(param_type)
        if isinstance(param_type, PrimitiveType) and param_type.kind == PrimitiveKind.STRING:
            return "string"
        raise UnsupportedTypeError(owner, parameter.name, type(param_type).__name__)

    if isinstance(param_type, PrimitiveType):
        type_name = translate_primitive(param_type, owner, parameter.name)
        if not parameter.required and param_type.kind in VALUE_TYPES:
            return f"{type_name}?"
        return type_name

    if (
        parameter.location == ParameterLocation.QUERY
        and isinstance(param_type, ArrayType)
        and isinstance(param_type.element, PrimitiveType)
    ):
        return f"IEnumerable<{translate_primitive(param_type.element, owner, parameter.name)}>"

    raise UnsupportedTypeError(owner, parameter.name, type(param_type).__name__)


def is_nullable(parameter: Parameter) -> bool:
    """Whether the generated argument can hold null."""
    param_type = parameter.type
    if isinstance(param_type, PrimitiveType) and param_type.kind in VALUE_TYPES:
        return not parameter.required
    return True


def query_value_expression(kind: PrimitiveKind, expression: str) -> str:
    """C# expression rendering a query value as URL-safe text."""
    if kind == PrimitiveKind.BOOLEAN:
        return f"{expression}.ToString().ToLower()"
    if kind == PrimitiveKind.STRING:
        return f"Uri.EscapeDataString({expression})"
    return expression


def path_value_expression(kind: PrimitiveKind, expression: str) -> str:
    """C# expression rendering a path placeholder value, percent-escaped."""
    if kind == PrimitiveKind.STRING:
        return f"Uri.EscapeDataString({expression})"
    if kind == PrimitiveKind.BOOLEAN:
        return f"Uri.EscapeDataString({expression}.ToString().ToLower())"
    return f"Uri.EscapeDataString({expression}.ToString())"
