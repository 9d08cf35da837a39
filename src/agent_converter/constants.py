"""Static lookup tables for Claude Code to opencode.ai conversion."""

from types import MappingProxyType

from agent_converter.models import AgentCategory

FRONTMATTER_DELIMITER = "---"

DEFAULT_MODE = "subagent"
DEFAULT_TEMPERATURE = 0.3
VALID_MODES = ("primary", "subagent", "all")

# Order here is the order tools are written in converted agents
DEFAULT_TOOLS: MappingProxyType[str, bool] = MappingProxyType(
    {
        "read": True,
        "grep": True,
        "glob": True,
        "edit": False,
        "write": False,
        "bash": False,
        "webfetch": False,
        "todowrite": False,
        "todoread": False,
        "list": False,
        "patch": False,
    }
)

RECOGNIZED_TOOLS: frozenset[str] = frozenset(DEFAULT_TOOLS)

ALL_TOOLS: MappingProxyType[str, bool] = MappingProxyType({name: True for name in DEFAULT_TOOLS})

WILDCARD_TOOL = "*"

_READ_EDIT_WRITE = MappingProxyType({"read": True, "edit": True, "write": True})

TOOL_MAPPING: MappingProxyType[str, MappingProxyType[str, bool]] = MappingProxyType(
    {
        "Read": MappingProxyType({"read": True}),
        "Grep": MappingProxyType({"grep": True}),
        "Glob": MappingProxyType({"glob": True}),
        "Edit": MappingProxyType({"edit": True}),
        "Write": MappingProxyType({"write": True}),
        "MultiEdit": MappingProxyType({"edit": True}),
        "file_editor": MappingProxyType({"edit": True, "write": True}),
        "terminal": MappingProxyType({"bash": True}),
        "Bash": MappingProxyType({"bash": True}),
        "web_search": MappingProxyType({"webfetch": True}),
        "WebFetch": MappingProxyType({"webfetch": True}),
        # Task agents delegate, so they only need the read-side tools
        "Task": MappingProxyType({"read": True, "grep": True, "glob": True}),
        "TodoWrite": MappingProxyType({"todowrite": True}),
        "TodoRead": MappingProxyType({"todoread": True}),
        "UIxComponent": _READ_EDIT_WRITE,
        "UIxStyling": _READ_EDIT_WRITE,
        "UIxState": _READ_EDIT_WRITE,
        "UIxRouting": _READ_EDIT_WRITE,
        "UIxForms": _READ_EDIT_WRITE,
        "UIxAnimation": _READ_EDIT_WRITE,
        "UIxAsync": _READ_EDIT_WRITE,
        "UIxInterop": _READ_EDIT_WRITE,
        "UIxMigration": _READ_EDIT_WRITE,
        WILDCARD_TOOL: ALL_TOOLS,
    }
)

MODEL_MAPPING: MappingProxyType[str, str] = MappingProxyType(
    {
        "sonnet": "anthropic/claude-sonnet-3.5-20241022",
        "claude-3.5-sonnet": "anthropic/claude-sonnet-3.5-20241022",
        "claude-3-sonnet": "anthropic/claude-sonnet-3-20240229",
        "claude-3-opus": "anthropic/claude-opus-3-20240229",
        "claude-3-haiku": "anthropic/claude-haiku-3-20240307",
    }
)

# First matching rule wins; names matching nothing fall back to DEFAULT_CATEGORY
CATEGORY_RULES: tuple[tuple[AgentCategory, tuple[str, ...]], ...] = (
    (AgentCategory.CORE_ARCHITECTURE, ("setup", "component", "state", "lifecycle")),
    (AgentCategory.DEVELOPMENT_INTEGRATION, ("react", "routing", "async", "interop")),
    (AgentCategory.UI_STYLING, ("ui", "forms", "animation")),
    (AgentCategory.MIGRATION_QUALITY, ("migration",)),
)

DEFAULT_CATEGORY = AgentCategory.CORE_ARCHITECTURE
