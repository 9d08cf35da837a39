"""Fake AgentFiles implementation for testing.

FakeAgentFiles is an in-memory implementation backed by a dict[Path, str]
mapping file paths to content. Enables fast and deterministic tests.
"""

from pathlib import Path

from agent_converter.gateway.abc import AgentFiles


class FakeAgentFiles(AgentFiles):
    """In-memory fake implementation backed by dict.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        files: dict[Path, str] | None = None,
        dirs: set[Path] | None = None,
        unreadable: set[Path] | None = None,
    ) -> None:
        """Create FakeAgentFiles with pre-seeded contents.

        Args:
            files: Dict mapping file paths to content. Parent directories of
                seeded files exist implicitly.
            dirs: Additional (possibly empty) directories that exist.
            unreadable: Paths whose reads raise PermissionError.
        """
        self._files = dict(files) if files is not None else {}
        self._dirs = set(dirs) if dirs is not None else set()
        self._unreadable = set(unreadable) if unreadable is not None else set()
        self._written_files: dict[Path, str] = {}
        self._created_dirs: list[Path] = []

    @property
    def written_files(self) -> dict[Path, str]:
        """Get files written via write_text().

        Returns a copy of the dict to prevent external mutation.

        This property is for test assertions only.
        """
        return dict(self._written_files)

    @property
    def created_dirs(self) -> list[Path]:
        """Directories passed to ensure_dir() that did not exist yet."""
        return list(self._created_dirs)

    def is_dir(self, path: Path) -> bool:
        if path in self._dirs:
            return True
        return any(path in file_path.parents for file_path in self._files)

    def list_markdown_files(self, directory: Path) -> list[str]:
        return sorted(
            file_path.name
            for file_path in self._files
            if file_path.parent == directory and file_path.suffix == ".md"
        )

    def read_text(self, path: Path) -> str:
        if path in self._unreadable:
            raise PermissionError(f"Permission denied: '{path}'")
        if path not in self._files:
            raise FileNotFoundError(f"No such file or directory: '{path}'")
        return self._files[path]

    def write_text(self, path: Path, content: str) -> None:
        if not self.is_dir(path.parent):
            raise FileNotFoundError(f"No such file or directory: '{path}'")
        self._files[path] = content
        self._written_files[path] = content

    def ensure_dir(self, path: Path) -> None:
        if self.is_dir(path):
            return
        self._dirs.add(path)
        self._created_dirs.append(path)
