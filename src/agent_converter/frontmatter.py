"""Line-oriented frontmatter parsing for agent definition files.

Agent files use a small YAML-like dialect rather than full YAML: scalar
`key: value` lines, an optional nested `tools:` block of `name: true|false`
flags, and `key: |` literal blocks for long values. Parsing is best-effort;
lines that don't fit the dialect are skipped instead of raising.
"""

import logging
import math
import re
from enum import Enum, auto

from agent_converter.constants import FRONTMATTER_DELIMITER
from agent_converter.models import (
    BoolMap,
    FrontmatterBlock,
    FrontmatterValue,
    Number,
    ParsedDocument,
    Scalar,
    StringList,
)

logger = logging.getLogger(__name__)

_KEY_VALUE = re.compile(r"^(\w+):\s*(.+)$")
_TOOL_FLAG = re.compile(r"^(\w+):\s*(true|false)$")
_TOOLS_INDENT = re.compile(r"^\s{2,}")

BLOCK_SCALAR_INDICATOR = "|"
BLOCK_SCALAR_INDENT = "  "


class _Mode(Enum):
    SCALAR = auto()
    TOOLS = auto()
    BLOCK = auto()


def split_document(content: str) -> tuple[list[str] | None, str]:
    """Split raw content into frontmatter lines and body.

    Returns:
        Tuple of (frontmatter_lines, body). frontmatter_lines is None when the
        first non-blank line is not a `---` delimiter; the body is then the
        whole content. A block with no closing delimiter runs to the end of
        the content and leaves an empty body.
    """
    lines = content.split("\n")

    start = next((i for i, line in enumerate(lines) if line.strip()), None)
    if start is None or lines[start].strip() != FRONTMATTER_DELIMITER:
        return None, content.strip()

    for end in range(start + 1, len(lines)):
        if lines[end].strip() == FRONTMATTER_DELIMITER:
            return lines[start + 1 : end], "\n".join(lines[end + 1 :]).strip()

    return lines[start + 1 :], ""


def parse_frontmatter(content: str) -> FrontmatterBlock:
    """Parse the frontmatter block of an agent file.

    Returns an empty block for content without frontmatter.
    """
    frontmatter_lines, _ = split_document(content)
    if frontmatter_lines is None:
        return {}
    return _parse_lines(frontmatter_lines)


def parse_document(content: str) -> ParsedDocument:
    """Parse an agent file into its frontmatter block and untouched body."""
    frontmatter_lines, body = split_document(content)
    if frontmatter_lines is None:
        return ParsedDocument(frontmatter={}, body=body, has_frontmatter=False)
    return ParsedDocument(
        frontmatter=_parse_lines(frontmatter_lines),
        body=body,
        has_frontmatter=True,
    )


def _parse_lines(lines: list[str]) -> FrontmatterBlock:
    block: FrontmatterBlock = {}
    tools: dict[str, bool] = {}
    mode = _Mode.SCALAR
    block_key = ""
    block_lines: list[str] = []

    for raw_line in lines:
        line = raw_line.rstrip("\r")

        if mode is _Mode.BLOCK:
            if _has_leading_whitespace(line):
                block_lines.append(line.removeprefix(BLOCK_SCALAR_INDENT))
                continue
            block[block_key] = Scalar("\n".join(block_lines))
            mode = _Mode.SCALAR

        if mode is _Mode.TOOLS:
            if _TOOLS_INDENT.match(line):
                tool_match = _TOOL_FLAG.match(line.strip())
                if tool_match:
                    tools[tool_match.group(1)] = tool_match.group(2) == "true"
                else:
                    logger.debug("Skipping malformed tool line: %r", line)
                continue
            if _has_leading_whitespace(line):
                continue
            block["tools"] = BoolMap(dict(tools))
            mode = _Mode.SCALAR

        if line.strip() == "tools:":
            mode = _Mode.TOOLS
            continue

        key_match = _KEY_VALUE.match(line)
        if key_match is None:
            if line.strip():
                logger.debug("Skipping unrecognized frontmatter line: %r", line)
            continue

        key = key_match.group(1)
        value = key_match.group(2).strip()
        if value == BLOCK_SCALAR_INDICATOR:
            mode = _Mode.BLOCK
            block_key = key
            block_lines = []
            continue

        block[key] = _scalar_value(key, value)

    if mode is _Mode.BLOCK:
        block[block_key] = Scalar("\n".join(block_lines))
    elif mode is _Mode.TOOLS:
        block["tools"] = BoolMap(dict(tools))

    # Legacy dialect: `tools: Read, Grep, Glob`
    legacy_tools = block.get("tools")
    if isinstance(legacy_tools, Scalar):
        items = [item.strip() for item in legacy_tools.text.split(",")]
        block["tools"] = StringList([item for item in items if item])

    return block


def _scalar_value(key: str, value: str) -> FrontmatterValue:
    text = _unquote(value)
    if key == "temperature":
        number = parse_float(text)
        if number is not None:
            return Number(number)
    return Scalar(text)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1].replace('\\"', '"')
    return value


def parse_float(text: str) -> float | None:
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def _has_leading_whitespace(line: str) -> bool:
    return line[:1].isspace()
