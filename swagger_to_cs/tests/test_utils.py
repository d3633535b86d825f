"""
Unit tests for the naming rules.
"""

import pytest

from swagger_to_cs.utils import (
    clean_reference,
    strip_newlines,
    to_camel_case,
    to_pascal_case,
    to_title_case,
)


class TestPascalCase:
    @pytest.mark.parametrize(
        "identifier,expected",
        [
            ("create_match", "CreateMatch"),
            ("match_create_request", "MatchCreateRequest"),
            ("healthcheck", "Healthcheck"),
            ("createTime", "CreateTime"),
            ("CreateTime", "CreateTime"),
            ("a", "A"),
            ("", ""),
        ],
    )
    def test_conversion(self, identifier, expected):
        assert to_pascal_case(identifier) == expected

    def test_leading_underscore_is_kept(self):
        # Position 0 is emitted as-is, so it never acts as a separator
        assert to_pascal_case("_foo") == "_foo"
        assert to_pascal_case("_foo_bar") == "_fooBar"

    def test_trailing_underscore_is_dropped(self):
        assert to_pascal_case("foo_") == "Foo"

    def test_double_underscore_keeps_second(self):
        assert to_pascal_case("a__b") == "A_b"

    def test_only_underscores(self):
        assert to_pascal_case("_") == "_"
        assert to_pascal_case("__") == "_"

    @pytest.mark.parametrize("identifier", ["user", "account", "rpcFunc", "x1"])
    def test_no_underscore_only_first_char_changes(self, identifier):
        assert to_pascal_case(identifier) == identifier[0].upper() + identifier[1:]


class TestCamelCase:
    @pytest.mark.parametrize(
        "identifier,expected",
        [
            ("create_match", "createMatch"),
            ("match_create_request", "matchCreateRequest"),
            ("http_key", "httpKey"),
            ("Id", "id"),
            ("", ""),
        ],
    )
    def test_conversion(self, identifier, expected):
        assert to_camel_case(identifier) == expected

    def test_leading_underscore_is_kept(self):
        assert to_camel_case("_foo_bar") == "_fooBar"

    @pytest.mark.parametrize("identifier", ["User", "account", "RpcFunc"])
    def test_no_underscore_only_first_char_changes(self, identifier):
        assert to_camel_case(identifier) == identifier[0].lower() + identifier[1:]

    @pytest.mark.parametrize("identifier", ["create_match", "a_b_c", "foo_", "x"])
    def test_matches_pascal_except_first_char(self, identifier):
        pascal = to_pascal_case(identifier)
        camel = to_camel_case(identifier)
        assert camel[1:] == pascal[1:]
        assert camel[:1] == pascal[:1].lower()


class TestTitleCase:
    def test_first_char_only(self):
        assert to_title_case("apiAccount") == "ApiAccount"

    def test_underscores_untouched(self):
        assert to_title_case("api_account") == "Api_account"

    def test_empty(self):
        assert to_title_case("") == ""


class TestStripNewlines:
    def test_replaces_each_newline(self):
        assert strip_newlines("A user.\nAlways current.") == "A user. Always current."
        assert strip_newlines("a\n\nb") == "a  b"

    def test_no_newline(self):
        assert strip_newlines("one line") == "one line"

    def test_carriage_returns(self):
        assert strip_newlines("A user.\r\nAlways current.") == "A user. Always current."
        assert strip_newlines("a\rb") == "a b"
        assert strip_newlines("a\n\rb") == "a  b"


class TestCleanReference:
    def test_strips_prefix(self):
        assert clean_reference("#/definitions/ApiSession") == "ApiSession"

    def test_applies_title_case(self):
        assert clean_reference("#/definitions/apiSession") == "ApiSession"

    def test_idempotent(self):
        once = clean_reference("#/definitions/apiSession")
        assert clean_reference(once) == once

    def test_only_exact_prefix_removed(self):
        # Characters of the prefix at the start of the name are kept
        assert clean_reference("#/definitions/definitionsList") == "DefinitionsList"
        assert clean_reference("#/definitions/") == ""
