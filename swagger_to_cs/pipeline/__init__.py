"""
Pipeline - Swagger document to C# client generator.

This module provides a single-pass architecture for generating a C# API
client from a Swagger document:

1. Phase 1 (Schema model): Parse the document and resolve every $ref
2. Phase 2 (Emitter): Render each definition and operation through templates
3. Phase 3 (Writer): Optionally write the result atomically to a file
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, OutputConfig
from .errors import (
    CodeGenerationError,
    OutputValidationError,
    SchemaError,
    SchemaErrorKind,
    UnsupportedTypeError,
)
from .generator import PipelineGenerator
from .writer import AtomicWriter

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
