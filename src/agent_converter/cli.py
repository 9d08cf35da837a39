import logging
from datetime import UTC, datetime
from pathlib import Path

import click

from agent_converter.config import ConfigError, ConverterConfig, apply_overrides, load_config
from agent_converter.frontmatter import parse_frontmatter
from agent_converter.gateway.abc import AgentFiles
from agent_converter.gateway.dry_run import DryRunAgentFiles
from agent_converter.gateway.real import RealAgentFiles
from agent_converter.models import ValidationResult
from agent_converter.operations import (
    convert_all_agents,
    validate_converted_agents,
    write_agents_md,
)
from agent_converter.output import machine_output, user_output
from agent_converter.rewriter import convert_agent
from agent_converter.validation import validate_agent_frontmatter

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

SAMPLE_AGENT_FILENAME = "test-agent.md"
SAMPLE_AGENT = """\
---
name: test-agent
description: Test agent for validation
model: sonnet
tools: Read, Grep, file_editor
---

This is a test agent."""


def run_sample_conversion() -> None:
    """Convert the built-in sample agent and validate the result."""
    user_output("🧪 Testing conversion with a sample agent...")
    user_output()

    converted = convert_agent(SAMPLE_AGENT, SAMPLE_AGENT_FILENAME)
    user_output("Converted agent:")
    machine_output(converted)

    validation = validate_agent_frontmatter(parse_frontmatter(converted), SAMPLE_AGENT_FILENAME)

    user_output()
    user_output("📝 Validation results:")
    if validation.is_valid:
        user_output(click.style("✅ No validation errors", fg="green"))
    else:
        user_output(click.style("❌ Validation errors:", fg="red"))
        for error in validation.errors:
            user_output(f"  - {error}")

    if validation.warnings:
        user_output(click.style("⚠️  Warnings:", fg="yellow"))
        for warning in validation.warnings:
            user_output(f"  - {warning}")


def run_convert(agent_files: AgentFiles, config: ConverterConfig) -> None:
    """Convert all agents, then regenerate AGENTS.md.

    Raises:
        SystemExit: With code 1 if the source directory is missing. Files that
            fail to convert are reported but do not change the exit code.
    """
    if not agent_files.is_dir(config.source_dir):
        user_output(
            click.style(
                f"❌ Claude Code agents directory not found: {config.source_dir}", fg="red"
            )
        )
        raise SystemExit(1)

    result = convert_all_agents(
        agent_files, config.source_dir, config.output_dir, config.skip_files
    )

    user_output(f"Found {len(result.found)} Claude Code agents to convert:")
    for filename in result.found:
        user_output(f"  - {filename}")

    for filename in result.converted:
        user_output(click.style(f"✅ Converted: {filename}", fg="green"))
    for skipped in result.skipped:
        user_output(
            click.style(f"❌ Failed to convert {skipped.filename}: {skipped.error}", fg="red")
        )

    user_output()
    user_output("Conversion complete:")
    user_output(f"  ✅ Converted: {len(result.converted)} agents")
    user_output(f"  ❌ Skipped: {len(result.skipped)} agents")
    user_output()
    user_output(f"Converted agents saved to: {config.output_dir}")
    user_output()

    run_agents_md(agent_files, config)


def run_agents_md(agent_files: AgentFiles, config: ConverterConfig) -> None:
    """Generate AGENTS.md from the source agents.

    Raises:
        SystemExit: With code 1 if the source directory is missing.
    """
    user_output("📝 Generating AGENTS.md for opencode.ai...")
    user_output()

    if not agent_files.is_dir(config.source_dir):
        user_output(
            click.style(
                f"❌ Claude Code agents directory not found: {config.source_dir}", fg="red"
            )
        )
        raise SystemExit(1)

    entries = write_agents_md(
        agent_files,
        config.source_dir,
        config.index_file,
        config.skip_files,
        generated_at=datetime.now(UTC),
    )
    user_output(
        click.style(f"✅ Generated {config.index_file.name} ({len(entries)} agents)", fg="green")
    )


def run_validate(agent_files: AgentFiles, config: ConverterConfig, *, strict: bool) -> None:
    """Validate all converted agents.

    Raises:
        SystemExit: With code 1 if the output directory is missing or any
            agent has validation errors. Warnings never fail the run.
    """
    user_output("🔍 Validating all converted opencode agents...")
    user_output()

    if not agent_files.is_dir(config.output_dir):
        user_output(
            click.style(f"❌ Opencode agents directory not found: {config.output_dir}", fg="red")
        )
        user_output("Run the conversion first: convert-agents")
        raise SystemExit(1)

    summary = validate_converted_agents(agent_files, config.output_dir, strict=strict)

    for result in summary.results:
        if not result.has_findings:
            user_output(click.style(f"✅ {result.filename}", fg="green"))
            continue
        _print_findings(result)

    user_output()
    user_output("📊 Validation Summary:")
    user_output(f"  ✅ Valid agents: {summary.valid_count}/{len(summary.results)}")
    user_output(f"  ❌ Total errors: {summary.total_errors}")
    user_output(f"  ⚠️  Total warnings: {summary.total_warnings}")

    if summary.passed:
        user_output()
        user_output(click.style("🎉 All agents conform to opencode specification!", fg="green"))
        return

    user_output()
    user_output(
        click.style("❌ Some agents have validation errors that should be fixed.", fg="red")
    )
    raise SystemExit(1)


def _print_findings(result: ValidationResult) -> None:
    user_output()
    user_output(f"📄 {result.filename}:")
    if result.errors:
        user_output(click.style("  ❌ Errors:", fg="red"))
        for error in result.errors:
            user_output(f"    - {error}")
    if result.warnings:
        user_output(click.style("  ⚠️  Warnings:", fg="yellow"))
        for warning in result.warnings:
            user_output(f"    - {warning}")


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="opencode-agent-converter")
@click.option("--test", "run_test", is_flag=True, help="Test conversion with a sample agent.")
@click.option("--validate", is_flag=True, help="Validate all converted agents.")
@click.option("--agents-md", is_flag=True, help="Generate AGENTS.md only.")
@click.option(
    "--strict",
    is_flag=True,
    help="With --validate, also load frontmatter with a full YAML parser.",
)
@click.option("--dry-run", is_flag=True, help="Show what would be written without writing files.")
@click.option(
    "--project-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project directory (defaults to the current directory).",
)
@click.option(
    "--source-dir",
    type=click.Path(path_type=Path),
    default=None,
    help="Claude Code agents directory (default: .claude/agents).",
)
@click.option(
    "--output-dir",
    type=click.Path(path_type=Path),
    default=None,
    help="opencode.ai agents directory (default: .opencode/agent).",
)
@click.option(
    "--index-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Generated agent index (default: AGENTS.md).",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    *,
    run_test: bool,
    validate: bool,
    agents_md: bool,
    strict: bool,
    dry_run: bool,
    project_root: Path | None,
    source_dir: Path | None,
    output_dir: Path | None,
    index_file: Path | None,
    debug: bool,
) -> None:
    """Convert Claude Code agents to opencode.ai format.

    \b
    Usage:
      convert-agents              # Convert all agents and generate AGENTS.md
      convert-agents --test       # Test conversion with sample
      convert-agents --validate   # Validate all converted agents
      convert-agents --agents-md  # Generate AGENTS.md only

    Maps Claude Code tools and model names to their opencode.ai equivalents,
    keeps agent descriptions and content, and lists agents by category in
    AGENTS.md.

    \b
    Exit codes:
    - 0: Success (agents that fail to convert are reported, not fatal)
    - 1: Missing agents directory, or validation errors with --validate
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    selected_modes = [
        flag
        for flag, enabled in (
            ("--test", run_test),
            ("--validate", validate),
            ("--agents-md", agents_md),
        )
        if enabled
    ]
    if len(selected_modes) > 1:
        raise click.UsageError(f"{' and '.join(selected_modes)} cannot be used together")
    if strict and not validate:
        raise click.UsageError("--strict can only be used with --validate")

    if run_test:
        run_sample_conversion()
        return

    root = project_root if project_root is not None else Path.cwd()
    try:
        config = load_config(root)
    except ConfigError as e:
        user_output(click.style(f"❌ {e}", fg="red"))
        raise SystemExit(1) from e
    config = apply_overrides(
        config, root, source_dir=source_dir, output_dir=output_dir, index_file=index_file
    )

    # Tests provide a fake gateway through ctx.obj
    agent_files: AgentFiles = ctx.obj if ctx.obj is not None else RealAgentFiles()
    if dry_run:
        agent_files = DryRunAgentFiles(agent_files)

    if validate:
        run_validate(agent_files, config, strict=strict)
    elif agents_md:
        run_agents_md(agent_files, config)
    else:
        run_convert(agent_files, config)
