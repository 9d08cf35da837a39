"""Dry-run AgentFiles implementation.

Delegates read-only methods to wrapped, no-ops mutations.
"""

from pathlib import Path

from agent_converter.gateway.abc import AgentFiles
from agent_converter.output import user_output


class DryRunAgentFiles(AgentFiles):
    """No-op wrapper that prevents writes in dry-run mode.

    Read-only methods delegate to the wrapped implementation.
    Mutation methods (write_text, ensure_dir) are no-ops that print what would happen.
    """

    def __init__(self, wrapped: AgentFiles) -> None:
        self._wrapped = wrapped

    def is_dir(self, path: Path) -> bool:
        return self._wrapped.is_dir(path)

    def list_markdown_files(self, directory: Path) -> list[str]:
        return self._wrapped.list_markdown_files(directory)

    def read_text(self, path: Path) -> str:
        return self._wrapped.read_text(path)

    def write_text(self, path: Path, content: str) -> None:
        user_output(f"[DRY RUN] Would write {path}")

    def ensure_dir(self, path: Path) -> None:
        if not self._wrapped.is_dir(path):
            user_output(f"[DRY RUN] Would create directory {path}")
