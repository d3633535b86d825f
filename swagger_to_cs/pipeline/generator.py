"""
Pipeline generator: Swagger document -> schema model -> C# source.
"""

from __future__ import annotations

import logging
from typing import Any

from .config import CodeGeneratorConfig
from .emitter import CSharpEmitter
from .schema_model import SchemaModel, SchemaParser, load_schema

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates a C# client from a Swagger document.

    The document may be given raw (bytes or text) or already decoded.
    Generation either returns the complete source or raises; nothing is
    produced halfway.
    """

    def __init__(self, schema: bytes | str | dict[str, Any], config: CodeGeneratorConfig | None = None):
        self.schema = schema
        self.config = config or CodeGeneratorConfig()

    def build_model(self) -> SchemaModel:
        """Phase 1: parse the document and resolve references."""
        if isinstance(self.schema, (bytes, str)):
            return load_schema(self.schema)
        return SchemaParser().parse(self.schema)

    def generate(self) -> str:
        """Run the full pipeline and return the generated source code."""
        model = self.build_model()
        logger.debug(
            "Emitting %d types and %d operations",
            len(model.definitions),
            len(model.operations),
        )
        return CSharpEmitter(self.config).emit_document(model)
