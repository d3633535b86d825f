"""
Naming rules used by the Swagger to C# generator.

All functions are total: any string, including the empty string, is accepted.
"""

# Prefix of local references into the definitions table
DEFINITIONS_REF_PREFIX = "#/definitions/"


def to_title_case(identifier: str) -> str:
    """Upper-case the first character of an identifier, leaving the rest untouched.

    Examples:
        "apiAccount" -> "ApiAccount"
        "api_account" -> "Api_account"
    """
    return identifier[:1].upper() + identifier[1:]


def _convert_snake_case(identifier: str, first_upper: bool) -> str:
    # The first character is emitted as-is (cased), never treated as a separator.
    if not identifier:
        return ""
    first = identifier[0].upper() if first_upper else identifier[0].lower()
    out = [first]
    to_upper = False
    for char in identifier[1:]:
        if to_upper:
            out.append(char.upper())
            to_upper = False
        elif char == "_":
            to_upper = True
        else:
            out.append(char)
    return "".join(out)


def to_pascal_case(snake_identifier: str) -> str:
    """Convert a snake_case identifier to PascalCase.

    Every underscore after the first character is removed and the character
    following it is upper-cased.

    Examples:
        "create_match" -> "CreateMatch"
        "healthcheck" -> "Healthcheck"
        "_foo" -> "_foo"
        "foo_" -> "Foo"
        "a__b" -> "A_b"

    Args:
        snake_identifier: The identifier to convert

    Returns:
        PascalCase string
    """
    return _convert_snake_case(snake_identifier, first_upper=True)


def to_camel_case(snake_identifier: str) -> str:
    """Convert a snake_case identifier to camelCase.

    Same scan as :func:`to_pascal_case` with the first character lower-cased.

    Examples:
        "create_match" -> "createMatch"
        "CreateTime" -> "createTime"
    """
    return _convert_snake_case(snake_identifier, first_upper=False)


def strip_newlines(text: str) -> str:
    """Replace every line break (\\r\\n, \\r or \\n) with a single space."""
    return text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")


def clean_reference(ref: str) -> str:
    """Turn a "#/definitions/Name" reference into the generated type name."""
    if ref.startswith(DEFINITIONS_REF_PREFIX):
        ref = ref[len(DEFINITIONS_REF_PREFIX) :]
    return to_title_case(ref)
