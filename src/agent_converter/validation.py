"""Validation of converted agents against the opencode.ai agent schema."""

import frontmatter
import yaml

from agent_converter.constants import RECOGNIZED_TOOLS, VALID_MODES
from agent_converter.models import (
    BoolMap,
    FrontmatterBlock,
    Number,
    Scalar,
    StringList,
    ValidationResult,
)

MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 1.0


def validate_agent_frontmatter(frontmatter: FrontmatterBlock, filename: str) -> ValidationResult:
    """Validate parsed opencode.ai frontmatter.

    Errors:
    - Missing or empty `description`
    - `mode` outside primary/subagent/all

    Warnings:
    - `temperature` outside 0.0-1.0, or not a number
    - Each unknown tool name in `tools`
    - `tools` still in the comma-separated Claude Code form

    Args:
        frontmatter: Parsed frontmatter block of a converted agent.
        filename: File name used to prefix each finding.

    Returns:
        ValidationResult with errors and warnings in check order.
    """
    errors: list[str] = []
    warnings: list[str] = []

    description = frontmatter.get("description")
    if not isinstance(description, Scalar) or not description.text:
        errors.append(f"{filename}: Missing required 'description' field")

    mode = frontmatter.get("mode")
    if mode is not None:
        mode_text = mode.text if isinstance(mode, Scalar) else str(mode)
        if mode_text not in VALID_MODES:
            errors.append(
                f"{filename}: Invalid mode '{mode_text}'. "
                f"Must be one of: {', '.join(VALID_MODES)}"
            )

    match frontmatter.get("temperature"):
        case Number(value=value) if not MIN_TEMPERATURE <= value <= MAX_TEMPERATURE:
            warnings.append(
                f"{filename}: Temperature {value} is outside recommended range "
                f"{MIN_TEMPERATURE}-{MAX_TEMPERATURE}"
            )
        case Scalar(text=text):
            warnings.append(f"{filename}: Temperature '{text}' is not a number")
        case _:
            pass

    valid_tools = ", ".join(sorted(RECOGNIZED_TOOLS))
    match frontmatter.get("tools"):
        case BoolMap(flags=flags):
            for tool in flags:
                if tool not in RECOGNIZED_TOOLS:
                    warnings.append(
                        f"{filename}: Unknown tool '{tool}'. Valid tools: {valid_tools}"
                    )
        case StringList():
            warnings.append(
                f"{filename}: Tools use the Claude Code list format; "
                "expected a map of tool names to true/false"
            )
        case _:
            pass

    return ValidationResult(filename=filename, errors=errors, warnings=warnings)


def check_yaml_syntax(content: str, filename: str) -> list[str]:
    """Load the frontmatter with a real YAML parser and report failures.

    The converter's own parser is lenient, but opencode.ai reads agents with a
    full YAML loader, so quoting mistakes only surface here.
    """
    try:
        post = frontmatter.loads(content)
    except yaml.YAMLError as e:
        return [f"{filename}: Invalid YAML frontmatter: {e}"]

    if not isinstance(post.metadata, dict) or not post.metadata:
        return [f"{filename}: Frontmatter is not a valid YAML mapping"]
    return []
