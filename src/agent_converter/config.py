import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

CONFIG_FILENAME = "agent-converter.toml"

DEFAULT_SOURCE_DIR = ".claude/agents"
DEFAULT_OUTPUT_DIR = ".opencode/agent"
DEFAULT_INDEX_FILE = "AGENTS.md"
DEFAULT_SKIP_FILES = ("README.md",)


class ConfigError(Exception):
    """Raised when agent-converter.toml cannot be parsed."""


@dataclass(frozen=True)
class ConverterConfig:
    """In-memory representation of `agent-converter.toml`.

    Example agent-converter.toml:
      # Claude Code agents to convert
      source_dir = ".claude/agents"

      # Where converted opencode.ai agents are written
      output_dir = ".opencode/agent"

      # Generated index of all agents
      index_file = "AGENTS.md"

      # Files in source_dir that are not agents
      skip_files = ["README.md"]
    """

    source_dir: Path
    output_dir: Path
    index_file: Path
    skip_files: tuple[str, ...]


def default_config(project_root: Path) -> ConverterConfig:
    return ConverterConfig(
        source_dir=project_root / DEFAULT_SOURCE_DIR,
        output_dir=project_root / DEFAULT_OUTPUT_DIR,
        index_file=project_root / DEFAULT_INDEX_FILE,
        skip_files=DEFAULT_SKIP_FILES,
    )


def load_config(project_root: Path) -> ConverterConfig:
    """Load agent-converter.toml from the project root if present; otherwise return defaults.

    Relative paths in the file resolve against the project root.

    Raises:
        ConfigError: If the file is not valid TOML.
    """
    cfg_path = project_root / CONFIG_FILENAME
    if not cfg_path.exists():
        return default_config(project_root)

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid {CONFIG_FILENAME}: {e}") from e

    skip_files = data.get("skip_files")
    return ConverterConfig(
        source_dir=project_root / str(data.get("source_dir", DEFAULT_SOURCE_DIR)),
        output_dir=project_root / str(data.get("output_dir", DEFAULT_OUTPUT_DIR)),
        index_file=project_root / str(data.get("index_file", DEFAULT_INDEX_FILE)),
        skip_files=(
            tuple(str(x) for x in skip_files) if skip_files is not None else DEFAULT_SKIP_FILES
        ),
    )


def apply_overrides(
    config: ConverterConfig,
    project_root: Path,
    *,
    source_dir: Path | None,
    output_dir: Path | None,
    index_file: Path | None,
) -> ConverterConfig:
    """Apply command-line path overrides on top of loaded config.

    Relative override paths resolve against the project root; None keeps the
    configured value.
    """
    if source_dir is not None:
        config = replace(config, source_dir=project_root / source_dir)
    if output_dir is not None:
        config = replace(config, output_dir=project_root / output_dir)
    if index_file is not None:
        config = replace(config, index_file=project_root / index_file)
    return config
