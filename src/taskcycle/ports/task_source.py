"""Task source interface."""

from typing import Protocol


class TaskSource(Protocol):
    """Interface for reading task labels from any backend."""

    def list_sources(self) -> list[str]:
        """Names of the task lists that can be loaded."""
        ...

    def load(self, name: str) -> list[str]:
        """Load trimmed, non-empty task labels from a named list."""
        ...
