"""
Atomic file writer for generated code.

The destination either receives the complete generated file or is left
untouched.
"""

from __future__ import annotations

import logging
import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from .errors import OutputValidationError

logger = logging.getLogger(__name__)

_STRING_LITERAL = re.compile(r'"(?:[^"\\]|\\.)*"')


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(self, validate_csharp: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_csharp: Optional validation function for C# code
        """
        self._validate_csharp = validate_csharp or self._default_validate_csharp

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputValidationError: If validation fails
            OSError: If file operations fail
        """
        # Validate first so that nothing touches the filesystem for bad output
        if validate:
            self._validate_csharp(content)

        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
            temp_path.replace(path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

        logger.debug("Wrote %d characters to %s", len(content), path)

    def _default_validate_csharp(self, content: str) -> None:
        """Default C# validation.

        Args:
            content: C# code to validate

        Raises:
            OutputValidationError: If validation fails
        """
        # Basic structural checks (no full parsing)
        if "namespace " not in content:
            raise OutputValidationError("Generated C# code is missing namespace declaration")

        if "class " not in content and "interface " not in content:
            raise OutputValidationError("Generated C# code has no type definitions")

        # Braces in comments and string literals do not count
        code_lines = [line for line in content.split("\n") if not line.lstrip().startswith("//")]
        code = _STRING_LITERAL.sub('""', "\n".join(code_lines))
        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise OutputValidationError(f"Generated C# code has unbalanced braces: {open_braces} open, {close_braces} close")
