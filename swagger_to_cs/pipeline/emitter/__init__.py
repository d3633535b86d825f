"""
Code emitter: renders the schema model as C# source code.
"""

from __future__ import annotations

from .csharp_emitter import GENERATION_COMMENT, CSharpEmitter

__all__ = [
    "CSharpEmitter",
    "GENERATION_COMMENT",
]
