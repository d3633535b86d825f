"""
C# code emitter.

Phase 2 of the pipeline: render the schema model as a single C# compilation
unit. Each definition and each operation is rendered independently from its
own template context, then the pieces are assembled in declaration order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from ...utils import strip_newlines, to_camel_case, to_pascal_case, to_title_case
from ..config import CodeGeneratorConfig
from ..schema_model.nodes import (
    ArrayType,
    AuthScheme,
    Operation,
    ParameterLocation,
    SchemaModel,
    TypeDefinition,
)
from .type_mapping import (
    class_name,
    escape_identifier,
    interface_name,
    is_nullable,
    path_value_expression,
    query_value_expression,
    translate_backing_type,
    translate_parameter_type,
    translate_property_type,
)

GENERATION_COMMENT = "/* Code generated by swagger_to_cs. DO NOT EDIT. */"

# Leading string arguments implied by the authentication requirement
CREDENTIAL_ARGUMENTS = {
    AuthScheme.BASIC: ("username", "password"),
    AuthScheme.BEARER: ("bearerToken",),
    AuthScheme.NONE: (),
}

# Credential names used when an operation parameter already takes the plain one
QUALIFIED_CREDENTIAL_ARGUMENTS = {
    AuthScheme.BASIC: ("basicAuthUsername", "basicAuthPassword"),
    AuthScheme.BEARER: ("httpKeyBearerToken",),
    AuthScheme.NONE: (),
}

# Local variables declared in every generated method body
METHOD_LOCALS = ("urlpath", "queryParams", "elem", "uri", "headers", "credentials", "content", "response")


class CSharpEmitter:
    """Renders a SchemaModel as C# client code."""

    TEMPLATE_LANG = "cs"
    FILE_EXTENSION = "cs"
    INDENT = "    "  # 4 spaces

    def __init__(self, config: CodeGeneratorConfig | None = None):
        self.config = config or CodeGeneratorConfig()
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=jinja2.StrictUndefined,
        )
        self.jinja_env.filters["strip_newlines"] = strip_newlines

        ext = self.FILE_EXTENSION
        self.prefix_template = self.jinja_env.get_template(f"prefix.{ext}.jinja2")
        self.type_template = self.jinja_env.get_template(f"type.{ext}.jinja2")
        self.operation_template = self.jinja_env.get_template(f"operation.{ext}.jinja2")
        self.client_template = self.jinja_env.get_template(f"client.{ext}.jinja2")
        self.suffix_template = self.jinja_env.get_template(f"suffix.{ext}.jinja2")

    def emit_document(self, model: SchemaModel) -> str:
        """
        Render the complete compilation unit.

        Args:
            model: The resolved schema model

        Returns:
            C# source code, ending with a newline
        """
        prefix = self._render(
            self.prefix_template,
            GENERATION_COMMENT=GENERATION_COMMENT if self.config.add_generation_comment else "",
            NAMESPACE=self.config.namespace,
            USINGS=self.config.usings,
        )

        blocks = [prefix]
        for definition in model.definitions.values():
            blocks.append(self._indent(self.emit_type(definition), 1))
        blocks.append(self._indent(self.emit_client(model), 1))

        suffix = self._render(self.suffix_template)
        return "\n\n".join(blocks) + "\n" + suffix + "\n"

    def emit_type(self, definition: TypeDefinition) -> str:
        """Render the interface and class declarations for one definition."""
        return self._render(self.type_template, **self._prepare_type_context(definition))

    def emit_operation(self, operation: Operation) -> str:
        """Render the client method for one operation."""
        return self._render(self.operation_template, **self._prepare_operation_context(operation))

    def emit_client(self, model: SchemaModel) -> str:
        """Render the transport contract and the client class with one method per operation."""
        operations = [self._indent(self.emit_operation(operation), 1) for operation in model.operations]
        return self._render(
            self.client_template,
            CLIENT_CLASS_NAME=self.config.client_class_name,
            operations=operations,
        )

    def _render(self, template: jinja2.Template, **context: Any) -> str:
        rendered = template.render(**context).rstrip()
        return "\n".join(line.rstrip() for line in rendered.split("\n"))

    def _indent(self, text: str, level: int) -> str:
        """Add indentation to every non-blank line."""
        prefix = self.INDENT * level
        return "\n".join(prefix + line if line.strip() else line for line in text.split("\n"))

    def _method_locals(self, taken: set[str]) -> dict[str, str]:
        """Map each method local to a name no argument uses, prefixing '_' until free."""
        local_names = {}
        for local in METHOD_LOCALS:
            name = local
            while name in taken:
                name = f"_{name}"
            local_names[local] = name
        return local_names

    def _prepare_type_context(self, definition: TypeDefinition) -> dict[str, Any]:
        """
        Prepare the template context for a definition.

        Args:
            definition: The type definition

        Returns:
            Dictionary of template variables
        """
        properties = []
        for prop in definition.properties:
            backing_type = translate_backing_type(prop.type)
            properties.append(
                {
                    "NAME": prop.name,
                    "FIELD": to_pascal_case(prop.name),
                    "TYPE": translate_property_type(prop.type, definition.name, prop.name),
                    "DESCRIPTION": prop.description,
                    "BACKING_TYPE": backing_type,
                    "BACKING_FIELD": f"_{to_camel_case(prop.name)}" if backing_type else None,
                    "IS_ARRAY": isinstance(prop.type, ArrayType),
                }
            )

        return {
            "CLASS_NAME": to_title_case(definition.name),
            "DESCRIPTION": definition.description,
            "properties": properties,
        }

    def _prepare_operation_context(self, operation: Operation) -> dict[str, Any]:
        """
        Prepare the template context for an operation.

        Credentials come first, then one argument per parameter in declaration order.
        Credentials and method locals are renamed when a parameter takes their name.
        """
        owner = operation.operation_id
        variables = [escape_identifier(to_camel_case(parameter.name)) for parameter in operation.parameters]

        credentials = CREDENTIAL_ARGUMENTS[operation.auth]
        if any(name in variables for name in credentials):
            credentials = QUALIFIED_CREDENTIAL_ARGUMENTS[operation.auth]
        local_names = self._method_locals({*variables, *credentials})

        arguments = [f"string {name}" for name in credentials]
        required = []
        path_params = []
        query_params = []
        body = None

        for parameter, var in zip(operation.parameters, variables):
            camel_name = to_camel_case(parameter.name)
            arguments.append(f"{translate_parameter_type(parameter, owner)} {var}")

            if parameter.required and is_nullable(parameter):
                required.append({"VAR": var, "NAME": camel_name})

            if parameter.location == ParameterLocation.PATH:
                path_params.append(
                    {
                        "PLACEHOLDER": "{" + parameter.name + "}",
                        "VALUE": path_value_expression(parameter.type.kind, var),
                    }
                )
            elif parameter.location == ParameterLocation.QUERY:
                is_array = isinstance(parameter.type, ArrayType)
                kind = parameter.type.element.kind if is_array else parameter.type.kind
                query_params.append(
                    {
                        "NAME": parameter.name,
                        "VAR": var,
                        "IS_ARRAY": is_array,
                        "OPTIONAL": not parameter.required,
                        "VALUE": query_value_expression(kind, local_names["elem"] if is_array else var),
                    }
                )
            elif body is None:
                body = {"VAR": var, "OPTIONAL": not parameter.required}

        response = operation.response
        return {
            "SUMMARY": operation.summary,
            "METHOD_NAME": to_pascal_case(operation.operation_id) + "Async",
            "RETURN_TYPE": f"Task<{interface_name(response)}>" if response else "Task",
            "ARGUMENTS": arguments,
            "REQUIRED": required,
            "URL": operation.path,
            "PATH_PARAMS": path_params,
            "QUERY_PARAMS": query_params,
            "HTTP_METHOD": operation.method,
            "AUTH": operation.auth.value,
            "CREDENTIALS": credentials,
            "LOCALS": local_names,
            "BODY": body,
            "RESPONSE_CLASS": class_name(response) if response else None,
        }
