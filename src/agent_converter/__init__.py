"""convert-agents CLI entry point.

This package converts Claude Code agent definitions into the opencode.ai
agent format. See `convert-agents --help` for details.
"""

from agent_converter.cli import cli


def main() -> None:
    """CLI entry point used by the `convert-agents` console script."""
    cli()
