"""Ports - interfaces/protocols for external dependencies."""

from .task_source import TaskSource
from .row_writer import RowWriter

__all__ = [
    "TaskSource",
    "RowWriter",
]
