"""Translation of Claude Code tool names into opencode.ai tool flags."""

import logging

from agent_converter.constants import DEFAULT_TOOLS, TOOL_MAPPING
from agent_converter.models import BoolMap, FrontmatterValue, StringList

logger = logging.getLogger(__name__)


def convert_tools(claude_tools: FrontmatterValue | None) -> dict[str, bool]:
    """Map a Claude Code `tools` value onto an opencode.ai tool map.

    Legacy tool lists start from the default map and merge each known tool's
    flags in order. Unknown tool names grant nothing. A tool map that is
    already in opencode.ai form passes through unchanged, and anything else
    yields the defaults.
    """
    match claude_tools:
        case BoolMap(flags=flags):
            return dict(flags)
        case StringList(items=items):
            opencode_tools = dict(DEFAULT_TOOLS)
            for tool in items:
                flags = TOOL_MAPPING.get(tool)
                if flags is None:
                    logger.debug("Ignoring unknown Claude Code tool: %s", tool)
                    continue
                opencode_tools.update(flags)
            return opencode_tools
        case _:
            return dict(DEFAULT_TOOLS)
