"""Export writer interface."""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from taskcycle.core.rows import ExportRow


class RowWriter(Protocol):
    """Interface for serializing export rows."""

    def write(self, rows: Sequence[ExportRow], columns: Sequence[str]) -> Path:
        """Write rows with the given header order. Returns the output path."""
        ...
