"""Adapters - I/O implementations of ports."""

from .file_tasks import FileTaskSource
from .csv_export import CsvRowWriter

__all__ = [
    "FileTaskSource",
    "CsvRowWriter",
]
