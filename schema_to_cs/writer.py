"""
Atomic file writer for generated C# files.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import logging
import re
import tempfile
from pathlib import Path

from .errors import GeneratedCodeError

logger = logging.getLogger(__name__)

_TYPE_DECLARATION = re.compile(r"\b(class|struct|enum)\s+\w+")


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, require_namespace: bool = False):
        """Initialize the atomic writer.

        Args:
            require_namespace: Whether to require a namespace declaration in the output
        """
        self._require_namespace = require_namespace

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            GeneratedCodeError: If validation fails
            OSError: If file operations fail
        """
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

            if validate:
                self.validate(content, path.name)

            temp_path.replace(path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

        logger.debug("Wrote %s", path)

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content only if the file doesn't exist.

        Raises:
            FileExistsError: If the file already exists
            GeneratedCodeError: If validation fails
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use --force to overwrite.")

        self.write(path, content, validate)

    def validate(self, content: str, name: str = "<generated>") -> None:
        """Basic structural validation of generated C# code."""
        if not _TYPE_DECLARATION.search(content):
            raise GeneratedCodeError(f"{name}: generated C# code has no type definitions")

        if self._require_namespace and not re.search(r"^namespace\s+[\w.]+", content, re.MULTILINE):
            raise GeneratedCodeError(f"{name}: generated C# code is missing namespace declaration")

        # String literals may legitimately contain braces
        code = re.sub(r'"(?:\\.|[^"\\])*"', '""', content)
        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise GeneratedCodeError(f"{name}: generated C# code has unbalanced braces: {open_braces} open, {close_braces} close")
