"""Agent files gateway ABC.

This gateway provides filesystem access to agent definition directories.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class AgentFiles(ABC):
    """Abstract gateway for reading and writing agent files."""

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Check if path is an existing directory."""
        ...

    @abstractmethod
    def list_markdown_files(self, directory: Path) -> list[str]:
        """List markdown files directly inside a directory.

        Args:
            directory: Directory to list (not searched recursively)

        Returns:
            Sorted file names (e.g., "uix-setup-specialist.md")
        """
        ...

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read a UTF-8 file.

        Raises:
            OSError: If the file cannot be read
        """
        ...

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Write a UTF-8 file, replacing any existing content.

        Raises:
            OSError: If the file cannot be written
        """
        ...

    @abstractmethod
    def ensure_dir(self, path: Path) -> None:
        """Create a directory and its parents if missing."""
        ...
