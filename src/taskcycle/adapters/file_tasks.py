"""File-based task source adapter."""

import json
import logging
import re
from pathlib import Path

from taskcycle.core.errors import TaskSourceError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = (".txt", ".json")

_LINE_SPLIT = re.compile(r"\r?\n")


def parse_tasks(raw: str, suffix: str) -> list[str]:
    """
    Parse task labels from file content.

    .json must hold an array (items are stringified); .txt is one task per
    line. Labels are trimmed and blanks dropped.
    """
    suffix = suffix.lower()
    if suffix == ".json":
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise TaskSourceError(f"Invalid JSON: {e}") from e
        if not isinstance(data, list):
            raise TaskSourceError("JSON must be an array of strings.")
        items = [str(item) for item in data]
    elif suffix == ".txt":
        items = _LINE_SPLIT.split(raw)
    else:
        raise TaskSourceError(f"Unsupported task file type: {suffix or '(none)'}")
    return [s.strip() for s in items if s.strip()]


class FileTaskSource:
    """
    Directory of task list files.

    Implements TaskSource protocol. Each .txt or .json file is one list.
    """

    def __init__(self, input_dir: Path | str):
        self.input_dir = Path(input_dir).expanduser()

    def list_sources(self) -> list[str]:
        """Sorted names of .txt/.json files in the input directory."""
        if not self.input_dir.exists():
            return []
        return sorted(
            p.name
            for p in self.input_dir.iterdir()
            if p.is_file() and p.suffix.lower() in ALLOWED_EXTENSIONS
        )

    def load(self, name: str) -> list[str]:
        """Load task labels from a file in the input directory."""
        path = self.input_dir / name
        if not path.is_file():
            raise TaskSourceError(f"Task file not found: {path}")
        try:
            raw = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise TaskSourceError(f"Task file is not valid UTF-8: {path}: {e}") from e
        tasks = parse_tasks(raw, path.suffix)
        logger.info(f"Loaded {len(tasks)} task(s) from {path}")
        return tasks
