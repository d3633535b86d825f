"""
End-to-end tests for the generation pipeline on the sample document.
"""

import json
from pathlib import Path

import pytest

from swagger_to_cs import CodeGeneratorConfig, PipelineGenerator, SchemaError, SchemaErrorKind
from swagger_to_cs.pipeline.writer import AtomicWriter

TEST_DATA = Path(__file__).parent / "test_data"
SAMPLE = TEST_DATA / "nakama_subset.swagger.json"


@pytest.fixture
def raw_document():
    return SAMPLE.read_bytes()


@pytest.fixture
def generated(raw_document):
    return PipelineGenerator(raw_document).generate()


def test_prefix(generated):
    assert generated.startswith(
        "/* Code generated by swagger_to_cs. DO NOT EDIT. */\n"
        "\n"
        "namespace Nakama\n"
        "{\n"
        "    using System;\n"
        "    using System.Collections.Generic;\n"
        "    using System.Runtime.Serialization;\n"
        "    using System.Text;\n"
        "    using System.Threading.Tasks;\n"
        "    using TinyJson;\n"
        "\n"
        "    /// <summary>\n"
    )


def test_suffix(generated):
    assert generated.endswith("    }\n}\n")
    assert not generated.endswith("\n\n")


def test_types_follow_declaration_order(generated):
    positions = [
        generated.index(f"public interface I{name}\n")
        for name in ("ApiAccount", "ApiAccountDevice", "ApiAccountEmail", "ApiSession", "ApiUser", "ApiUsers")
    ]
    assert positions == sorted(positions)
    assert generated.index("internal class ApiUsers :") < generated.index("internal class ApiClient")


def test_operations_follow_declaration_order(generated):
    names = [
        "HealthcheckAsync",
        "GetAccountAsync",
        "UpdateAccountAsync",
        "AuthenticateEmailAsync",
        "GetFriendAsync",
        "GetUsersAsync",
        "RpcFuncAsync",
    ]
    positions = [generated.index(f" {name}(") for name in names]
    assert positions == sorted(positions)


def test_nested_indentation(generated):
    assert "\n    internal class ApiSession : IApiSession\n    {\n" in generated
    assert "\n        public async Task HealthcheckAsync(string bearerToken)\n        {\n" in generated
    assert '\n            var urlpath = "/healthcheck";\n' in generated


def test_output_is_deterministic(raw_document, generated):
    assert PipelineGenerator(raw_document).generate() == generated
    assert PipelineGenerator(json.loads(raw_document)).generate() == generated


def test_output_is_structurally_valid(generated):
    AtomicWriter()._default_validate_csharp(generated)
    assert not any(line != line.rstrip() for line in generated.split("\n"))


def test_config_namespace_and_client():
    config = CodeGeneratorConfig(namespace="Game.Api", client_class_name="GameClient", add_generation_comment=False)
    generated = PipelineGenerator(SAMPLE.read_bytes(), config).generate()
    assert generated.startswith("namespace Game.Api\n{\n    using System;\n")
    assert "internal class GameClient\n" in generated
    assert "DO NOT EDIT" not in generated


def test_config_from_dict_ignores_unknown_keys():
    config = CodeGeneratorConfig.from_dict({"namespace": "Other", "indent": 2})
    assert config.namespace == "Other"
    assert config.to_dict()["client_class_name"] == "ApiClient"


def test_unresolved_reference_aborts(raw_document):
    document = json.loads(raw_document)
    document["paths"]["/v2/user"]["get"]["responses"]["200"]["schema"]["$ref"] = "#/definitions/apiMissing"
    with pytest.raises(SchemaError) as exc_info:
        PipelineGenerator(document).generate()
    assert exc_info.value.kind == SchemaErrorKind.UNRESOLVED_REFERENCE
    assert exc_info.value.ref == "#/definitions/apiMissing"


def test_empty_document():
    generated = PipelineGenerator({"definitions": {}, "paths": {}}).generate()
    assert "internal class ApiClient" in generated
    assert "public async" not in generated
    assert generated.endswith("    }\n}\n")
