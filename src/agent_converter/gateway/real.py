"""Real AgentFiles implementation using filesystem operations."""

import logging
from pathlib import Path

from agent_converter.gateway.abc import AgentFiles

logger = logging.getLogger(__name__)


class RealAgentFiles(AgentFiles):
    """Production implementation backed by the filesystem."""

    def is_dir(self, path: Path) -> bool:
        if not path.exists():
            return False
        return path.is_dir()

    def list_markdown_files(self, directory: Path) -> list[str]:
        if not directory.exists():
            return []
        return sorted(p.name for p in directory.glob("*.md") if p.is_file())

    def read_text(self, path: Path) -> str:
        logger.debug("Reading %s", path)
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        logger.debug("Writing %s (%d chars)", path, len(content))
        path.write_text(content, encoding="utf-8")

    def ensure_dir(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)
