"""CSV export adapter for ClickUp spreadsheet import."""

import csv
import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from pathlib import Path

from taskcycle.core.errors import ExportError
from taskcycle.core.rows import ExportRow

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "clickup_import"


def output_filename(stamp: datetime, prefix: str = DEFAULT_PREFIX) -> str:
    """Timestamped file name, e.g. clickup_import_20251020_0930.csv."""
    return f"{prefix}_{stamp.strftime('%Y%m%d_%H%M')}.csv"


class CsvRowWriter:
    """
    Writes export rows to a timestamped CSV file.

    Implements RowWriter protocol.
    """

    def __init__(
        self,
        output_dir: Path | str,
        prefix: str = DEFAULT_PREFIX,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.output_dir = Path(output_dir).expanduser()
        self.prefix = prefix
        self._now = now

    def write(self, rows: Sequence[ExportRow], columns: Sequence[str]) -> Path:
        """Write a header row plus one line per export row."""
        path = self.output_dir / output_filename(self._now(), self.prefix)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8", newline="") as f:
                writer = csv.DictWriter(f, fieldnames=list(columns), restval="", extrasaction="ignore")
                writer.writeheader()
                for row in rows:
                    writer.writerow(row.as_dict())
        except OSError as e:
            raise ExportError(f"Cannot write export {path}: {e}") from e

        logger.info(f"Wrote {len(rows)} row(s) to {path}")
        return path
