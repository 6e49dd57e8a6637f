"""
JSON output for aggregated Swagger documents.

Documents are rendered before the target file is touched, then written
through a temporary sibling file that replaces the target in one step,
so readers never observe a truncated document.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any

from .errors import OutputError


class AtomicJsonWriter:
    """Renders documents as JSON text and writes them atomically."""

    def __init__(self, indent: int | None = 2):
        """Initialize the writer.

        Args:
            indent: JSON indentation, None for a single line
        """
        self.indent = indent

    def render(self, document: Any) -> str:
        """Render a document as JSON text, keeping declaration order.

        Raises:
            OutputError: If the document is not a JSON-serializable object
        """
        if not isinstance(document, dict):
            raise OutputError(f"Swagger documents must be JSON objects, got {type(document).__name__}")
        try:
            return json.dumps(document, indent=self.indent, ensure_ascii=False) + "\n"
        except (TypeError, ValueError) as e:
            raise OutputError(f"Document is not JSON serializable: {e}") from e

    def write(self, path: Path, document: Any) -> None:
        """Write a document to `path` atomically.

        Raises:
            OutputError: If the document cannot be rendered; `path` is untouched
            OSError: If file operations fail
        """
        text = self.render(document)
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        temp_path = Path(temp_name)
        try:
            with open(fd, "w", encoding="utf-8") as f:
                f.write(text)
            temp_path.replace(path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise
