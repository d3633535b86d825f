"""Swagger to C# Generator

A Python package for generating strongly-typed C# API clients from
Swagger documents, with resolved references, async request methods and
atomic output.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CodeGenerationError,
    CodeGeneratorConfig,
    OutputConfig,
    OutputValidationError,
    PipelineGenerator,
    SchemaError,
    SchemaErrorKind,
    UnsupportedTypeError,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "OutputConfig",
    "AtomicWriter",
    "CodeGenerationError",
    "OutputValidationError",
    "SchemaError",
    "SchemaErrorKind",
    "UnsupportedTypeError",
]
