"""
Unit tests for schema type to C# type mapping.
"""

import unittest

from swagger_to_cs.pipeline.emitter.type_mapping import (
    escape_identifier,
    is_nullable,
    path_value_expression,
    query_value_expression,
    translate_backing_type,
    translate_parameter_type,
    translate_property_type,
)
from swagger_to_cs.pipeline.errors import UnsupportedTypeError
from swagger_to_cs.pipeline.schema_model import (
    ArrayType,
    Parameter,
    ParameterLocation,
    PrimitiveKind,
    PrimitiveType,
    ReferenceType,
)

INTEGER = PrimitiveType(PrimitiveKind.INTEGER)
BOOLEAN = PrimitiveType(PrimitiveKind.BOOLEAN)
STRING = PrimitiveType(PrimitiveKind.STRING)
USER_REF = ReferenceType(target="apiUser")


class TestPropertyTypes(unittest.TestCase):
    def test_primitives(self):
        self.assertEqual(translate_property_type(INTEGER, "apiUser", "create_time"), "int")
        self.assertEqual(translate_property_type(BOOLEAN, "apiUser", "online"), "bool")
        self.assertEqual(translate_property_type(STRING, "apiUser", "id"), "string")

    def test_array_of_primitive(self):
        self.assertEqual(translate_property_type(ArrayType(STRING), "apiUser", "labels"), "List<string>")
        self.assertEqual(translate_property_type(ArrayType(INTEGER), "apiUser", "scores"), "List<int>")

    def test_reference(self):
        self.assertEqual(translate_property_type(USER_REF, "apiAccount", "user"), "IApiUser")

    def test_array_of_reference(self):
        self.assertEqual(translate_property_type(ArrayType(USER_REF), "apiUsers", "users"), "IEnumerable<IApiUser>")

    def test_unmapped_variant_raises(self):
        with self.assertRaises(UnsupportedTypeError) as ctx:
            translate_property_type(ArrayType(ArrayType(STRING)), "apiUser", "matrix")
        self.assertEqual(ctx.exception.owner, "apiUser")
        self.assertEqual(ctx.exception.field, "matrix")

    def test_backing_types(self):
        self.assertEqual(translate_backing_type(USER_REF), "ApiUser")
        self.assertEqual(translate_backing_type(ArrayType(USER_REF)), "List<ApiUser>")
        self.assertIsNone(translate_backing_type(STRING))
        self.assertIsNone(translate_backing_type(ArrayType(STRING)))


class TestParameterTypes(unittest.TestCase):
    def test_required_path_primitive(self):
        param = Parameter("id", ParameterLocation.PATH, STRING, required=True)
        self.assertEqual(translate_parameter_type(param, "get_friend"), "string")

    def test_optional_value_types_are_nullable(self):
        limit = Parameter("limit", ParameterLocation.QUERY, INTEGER)
        create = Parameter("create", ParameterLocation.QUERY, BOOLEAN)
        self.assertEqual(translate_parameter_type(limit, "get_users"), "int?")
        self.assertEqual(translate_parameter_type(create, "authenticate_email"), "bool?")

    def test_required_value_type_is_not_nullable(self):
        limit = Parameter("limit", ParameterLocation.QUERY, INTEGER, required=True)
        self.assertEqual(translate_parameter_type(limit, "get_users"), "int")
        self.assertFalse(is_nullable(limit))

    def test_array_query(self):
        ids = Parameter("ids", ParameterLocation.QUERY, ArrayType(STRING))
        self.assertEqual(translate_parameter_type(ids, "get_users"), "IEnumerable<string>")

    def test_body(self):
        body = Parameter("body", ParameterLocation.BODY, USER_REF, required=True)
        payload = Parameter("payload", ParameterLocation.BODY, STRING)
        self.assertEqual(translate_parameter_type(body, "update_user"), "ApiUser")
        self.assertEqual(translate_parameter_type(payload, "rpc_func"), "string")

    def test_array_path_parameter_raises(self):
        param = Parameter("ids", ParameterLocation.PATH, ArrayType(STRING), required=True)
        with self.assertRaises(UnsupportedTypeError):
            translate_parameter_type(param, "get_users")

    def test_integer_body_raises(self):
        param = Parameter("count", ParameterLocation.BODY, INTEGER)
        with self.assertRaises(UnsupportedTypeError):
            translate_parameter_type(param, "rpc_func")


class TestExpressions(unittest.TestCase):
    def test_escape_identifier(self):
        self.assertEqual(escape_identifier("params"), "@params")
        self.assertEqual(escape_identifier("string"), "@string")
        self.assertEqual(escape_identifier("limit"), "limit")

    def test_query_values(self):
        self.assertEqual(query_value_expression(PrimitiveKind.STRING, "label"), "Uri.EscapeDataString(label)")
        self.assertEqual(query_value_expression(PrimitiveKind.BOOLEAN, "create"), "create.ToString().ToLower()")
        self.assertEqual(query_value_expression(PrimitiveKind.INTEGER, "limit"), "limit")

    def test_path_values_are_escaped(self):
        self.assertEqual(path_value_expression(PrimitiveKind.STRING, "id"), "Uri.EscapeDataString(id)")
        self.assertEqual(path_value_expression(PrimitiveKind.INTEGER, "id"), "Uri.EscapeDataString(id.ToString())")
