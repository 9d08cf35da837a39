"""Rewrite Claude Code agent definitions into the opencode.ai agent format."""

from pathlib import Path

from agent_converter.constants import (
    DEFAULT_MODE,
    DEFAULT_TEMPERATURE,
    FRONTMATTER_DELIMITER,
    MODEL_MAPPING,
)
from agent_converter.frontmatter import BLOCK_SCALAR_INDENT, parse_document, parse_float
from agent_converter.models import (
    BoolMap,
    FrontmatterBlock,
    FrontmatterValue,
    Number,
    Scalar,
    StringList,
)
from agent_converter.tools import convert_tools

MIN_PARAGRAPH_LENGTH = 10
MAX_DESCRIPTION_LENGTH = 100
MAX_QUOTED_LENGTH = 100

YAML_SPECIAL_CHARACTERS = frozenset(":\"'#|><[]{}@\n")


def resolve_description(frontmatter: FrontmatterBlock, body: str, filename: str) -> str:
    """Pick the description for a converted agent.

    Uses the explicit `description` field when set. Otherwise takes the first
    top-level heading of the body, or the first plain line longer than ten
    characters (truncated to 100 characters). Falls back to a description
    built from the filename.
    """
    description = frontmatter.get("description")
    if isinstance(description, Scalar) and description.text:
        return description.text

    for line in body.split("\n"):
        trimmed = line.strip()
        if trimmed.startswith("# "):
            return trimmed[2:].strip()
        if trimmed and not trimmed.startswith("#") and len(trimmed) > MIN_PARAGRAPH_LENGTH:
            if len(trimmed) > MAX_DESCRIPTION_LENGTH:
                return trimmed[:MAX_DESCRIPTION_LENGTH] + "..."
            return trimmed

    return f"Converted from Claude Code agent: {Path(filename).stem}"


def resolve_temperature(value: FrontmatterValue | None) -> float:
    match value:
        case Number(value=number):
            return number
        case Scalar(text=text):
            number = parse_float(text)
            return number if number is not None else DEFAULT_TEMPERATURE
        case _:
            return DEFAULT_TEMPERATURE


def build_destination_frontmatter(
    claude_frontmatter: FrontmatterBlock, body: str, filename: str
) -> FrontmatterBlock:
    """Build the opencode.ai frontmatter for a parsed Claude Code agent.

    Keys are always written in the order description, mode, temperature,
    tools, then model when the source model has a known opencode.ai name.
    """
    opencode_frontmatter: FrontmatterBlock = {
        "description": Scalar(resolve_description(claude_frontmatter, body, filename)),
        "mode": Scalar(DEFAULT_MODE),
        "temperature": Number(resolve_temperature(claude_frontmatter.get("temperature"))),
        "tools": BoolMap(convert_tools(claude_frontmatter.get("tools"))),
    }

    model = claude_frontmatter.get("model")
    if isinstance(model, Scalar) and model.text in MODEL_MAPPING:
        opencode_frontmatter["model"] = Scalar(MODEL_MAPPING[model.text])

    return opencode_frontmatter


def serialize_frontmatter(frontmatter: FrontmatterBlock) -> str:
    """Render a frontmatter block as YAML lines, without delimiters."""
    lines: list[str] = []
    for key, value in frontmatter.items():
        match value:
            case BoolMap(flags=flags):
                lines.append(f"{key}:")
                for tool, enabled in flags.items():
                    lines.append(f"{BLOCK_SCALAR_INDENT}{tool}: {_format_bool(enabled)}")
            case StringList(items=items):
                lines.extend(_serialize_string(key, ", ".join(items)))
            case Number(value=number):
                lines.append(f"{key}: {number!r}")
            case Scalar(text=text):
                lines.extend(_serialize_string(key, text))
    return "\n".join(lines)


def render_agent(frontmatter: FrontmatterBlock, body: str) -> str:
    return (
        f"{FRONTMATTER_DELIMITER}\n"
        f"{serialize_frontmatter(frontmatter)}\n"
        f"{FRONTMATTER_DELIMITER}\n\n"
        f"{body}"
    )


def convert_agent(claude_content: str, filename: str) -> str:
    """Convert a Claude Code agent file into opencode.ai format.

    Args:
        claude_content: Raw content of the Claude Code agent file.
        filename: Name of the agent file, used for the fallback description.

    Returns:
        The converted agent. The body is carried over unchanged.
    """
    document = parse_document(claude_content)
    opencode_frontmatter = build_destination_frontmatter(
        document.frontmatter, document.body, filename
    )
    return render_agent(opencode_frontmatter, document.body)


def needs_quoting(value: str) -> bool:
    return any(char in YAML_SPECIAL_CHARACTERS for char in value)


def _serialize_string(key: str, value: str) -> list[str]:
    if not needs_quoting(value):
        return [f"{key}: {value}"]

    # Literal block scalar for multiline or long values
    if "\n" in value or len(value) > MAX_QUOTED_LENGTH:
        lines = [f"{key}: |"]
        lines.extend(f"{BLOCK_SCALAR_INDENT}{line}" for line in value.split("\n"))
        return lines

    escaped = value.replace('"', '\\"')
    return [f'{key}: "{escaped}"']


def _format_bool(value: bool) -> str:
    return "true" if value else "false"
