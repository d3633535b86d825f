"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_USINGS = [
    "System",
    "System.Collections.Generic",
    "System.Runtime.Serialization",
    "System.Text",
    "System.Threading.Tasks",
    "TinyJson",
]


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        validate_before_write: Whether to check the generated code structure before writing
    """

    validate_before_write: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Namespace wrapping every generated type
    namespace: str = "Nakama"

    # Name of the generated low level client class
    client_class_name: str = "ApiClient"

    # Add the "do not edit" marker at top of file
    add_generation_comment: bool = True

    # using directives, emitted in this order
    usings: list[str] = field(default_factory=lambda: list(DEFAULT_USINGS))

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "namespace": self.namespace,
            "client_class_name": self.client_class_name,
            "add_generation_comment": self.add_generation_comment,
            "usings": list(self.usings),
        }
