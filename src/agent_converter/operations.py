"""Operations for converting, validating and indexing agent directories.

These functions do not print or exit; the CLI reports their results.
"""

import logging
from datetime import datetime
from pathlib import Path

from agent_converter.frontmatter import parse_frontmatter
from agent_converter.gateway.abc import AgentFiles
from agent_converter.models import (
    AgentEntry,
    ConversionResult,
    SkippedAgent,
    ValidationResult,
    ValidationSummary,
)
from agent_converter.rewriter import convert_agent
from agent_converter.summary import agent_entry, generate_agents_md
from agent_converter.validation import check_yaml_syntax, validate_agent_frontmatter

logger = logging.getLogger(__name__)


def discover_agents(
    agent_files: AgentFiles, source_dir: Path, skip_files: tuple[str, ...]
) -> list[str]:
    """List agent files in the source directory, excluding reserved names."""
    return [
        name for name in agent_files.list_markdown_files(source_dir) if name not in skip_files
    ]


def convert_all_agents(
    agent_files: AgentFiles,
    source_dir: Path,
    output_dir: Path,
    skip_files: tuple[str, ...],
) -> ConversionResult:
    """Convert every agent in source_dir, writing results to output_dir.

    The output directory is created if missing. A file that cannot be read,
    decoded or written is recorded as skipped and the remaining files are
    still converted.

    Callers must check that source_dir exists first.
    """
    filenames = discover_agents(agent_files, source_dir, skip_files)
    agent_files.ensure_dir(output_dir)

    result = ConversionResult(found=filenames)
    for filename in filenames:
        try:
            content = agent_files.read_text(source_dir / filename)
            converted = convert_agent(content, filename)
            agent_files.write_text(output_dir / filename, converted)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Failed to convert %s", filename, exc_info=True)
            result.skipped.append(SkippedAgent(filename=filename, error=str(e)))
            continue
        result.converted.append(filename)

    return result


def validate_agent_file(
    agent_files: AgentFiles, path: Path, *, strict: bool
) -> ValidationResult:
    """Validate a single converted agent file.

    In strict mode, YAML syntax problems found by a full YAML loader are
    added as errors.
    """
    content = agent_files.read_text(path)
    result = validate_agent_frontmatter(parse_frontmatter(content), path.name)
    if not strict:
        return result

    yaml_errors = check_yaml_syntax(content, path.name)
    if not yaml_errors:
        return result
    return ValidationResult(
        filename=result.filename,
        errors=[*result.errors, *yaml_errors],
        warnings=result.warnings,
    )


def validate_converted_agents(
    agent_files: AgentFiles, output_dir: Path, *, strict: bool
) -> ValidationSummary:
    """Validate every converted agent in output_dir.

    Callers must check that output_dir exists first.
    """
    results = [
        validate_agent_file(agent_files, output_dir / filename, strict=strict)
        for filename in agent_files.list_markdown_files(output_dir)
    ]
    return ValidationSummary(results=results)


def collect_agent_entries(
    agent_files: AgentFiles, source_dir: Path, skip_files: tuple[str, ...]
) -> list[AgentEntry]:
    """Build AGENTS.md entries from the source agents.

    Read errors propagate; a partial index is never produced.
    """
    entries: list[AgentEntry] = []
    for filename in discover_agents(agent_files, source_dir, skip_files):
        content = agent_files.read_text(source_dir / filename)
        entries.append(agent_entry(Path(filename).stem, parse_frontmatter(content)))
    return entries


def write_agents_md(
    agent_files: AgentFiles,
    source_dir: Path,
    index_file: Path,
    skip_files: tuple[str, ...],
    *,
    generated_at: datetime,
) -> list[AgentEntry]:
    """Generate AGENTS.md from the source agents and write it to index_file.

    Returns:
        The entries listed in the generated file.
    """
    entries = collect_agent_entries(agent_files, source_dir, skip_files)
    content = generate_agents_md(entries, generated_at=generated_at)
    agent_files.write_text(index_file, content)
    return entries
