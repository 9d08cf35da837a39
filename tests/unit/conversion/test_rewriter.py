"""Tests for converting Claude Code agents into opencode.ai agents."""

from agent_converter.frontmatter import parse_document, split_document
from agent_converter.models import BoolMap, Number, Scalar, StringList
from agent_converter.rewriter import (
    build_destination_frontmatter,
    convert_agent,
    resolve_description,
    resolve_temperature,
    serialize_frontmatter,
)

DEFAULT_TOOLS_YAML = """\
tools:
  read: true
  grep: true
  glob: true
  edit: false
  write: false
  bash: false
  webfetch: false
  todowrite: false
  todoread: false
  list: false
  patch: false"""


def _frontmatter_text(converted: str) -> str:
    lines, _ = split_document(converted)
    assert lines is not None
    return "\n".join(lines)


class TestResolveDescription:
    """Tests for resolve_description function."""

    def test_explicit_description(self) -> None:
        frontmatter = {"description": Scalar("From frontmatter")}
        assert resolve_description(frontmatter, "# Heading", "a.md") == "From frontmatter"

    def test_empty_description_falls_back_to_body(self) -> None:
        frontmatter = {"description": Scalar("")}
        assert resolve_description(frontmatter, "# Foo Bar\n\nText", "a.md") == "Foo Bar"

    def test_first_heading(self) -> None:
        assert resolve_description({}, "\n# Foo Bar\n\nSome paragraph text.", "a.md") == "Foo Bar"

    def test_lower_level_headings_are_skipped(self) -> None:
        body = "## Overview\n\nThis agent handles routing."
        assert resolve_description({}, body, "a.md") == "This agent handles routing."

    def test_paragraph_before_heading(self) -> None:
        body = "A long enough intro line.\n\n# Later Heading"
        assert resolve_description({}, body, "a.md") == "A long enough intro line."

    def test_short_lines_are_skipped(self) -> None:
        body = "Short.\nThis line is long enough to use."
        assert resolve_description({}, body, "a.md") == "This line is long enough to use."

    def test_long_paragraph_is_truncated(self) -> None:
        body = "x" * 150
        assert resolve_description({}, body, "a.md") == "x" * 100 + "..."

    def test_paragraph_of_exactly_100_chars_is_kept(self) -> None:
        body = "y" * 100
        assert resolve_description({}, body, "a.md") == body

    def test_fallback_uses_filename_stem(self) -> None:
        description = resolve_description({}, "tiny", "uix-forms-expert.md")
        assert description == "Converted from Claude Code agent: uix-forms-expert"

    def test_fallback_for_empty_body(self) -> None:
        description = resolve_description({}, "", "agent.md")
        assert description == "Converted from Claude Code agent: agent"


class TestResolveTemperature:
    """Tests for resolve_temperature function."""

    def test_number(self) -> None:
        assert resolve_temperature(Number(0.7)) == 0.7

    def test_zero_is_kept(self) -> None:
        assert resolve_temperature(Number(0.0)) == 0.0

    def test_numeric_scalar(self) -> None:
        assert resolve_temperature(Scalar("0.1")) == 0.1

    def test_non_numeric_scalar_uses_default(self) -> None:
        assert resolve_temperature(Scalar("warm")) == 0.3

    def test_missing_uses_default(self) -> None:
        assert resolve_temperature(None) == 0.3


class TestBuildDestinationFrontmatter:
    """Tests for build_destination_frontmatter function."""

    def test_key_order_without_model(self) -> None:
        block = build_destination_frontmatter({"description": Scalar("X")}, "", "a.md")
        assert list(block) == ["description", "mode", "temperature", "tools"]
        assert block["mode"] == Scalar("subagent")
        assert block["temperature"] == Number(0.3)

    def test_known_model_is_mapped(self) -> None:
        block = build_destination_frontmatter(
            {"description": Scalar("X"), "model": Scalar("claude-3-opus")}, "", "a.md"
        )
        assert list(block) == ["description", "mode", "temperature", "tools", "model"]
        assert block["model"] == Scalar("anthropic/claude-opus-3-20240229")

    def test_unknown_model_is_dropped(self) -> None:
        block = build_destination_frontmatter(
            {"description": Scalar("X"), "model": Scalar("gpt-4")}, "", "a.md"
        )
        assert "model" not in block

    def test_source_only_fields_are_dropped(self) -> None:
        block = build_destination_frontmatter(
            {"name": Scalar("agent"), "color": Scalar("blue")}, "", "a.md"
        )
        assert "name" not in block
        assert "color" not in block

    def test_tools_are_translated(self) -> None:
        block = build_destination_frontmatter({"tools": StringList(["Bash"])}, "", "a.md")
        tools = block["tools"]
        assert isinstance(tools, BoolMap)
        assert tools.flags["bash"] is True


class TestSerializeFrontmatter:
    """Tests for serialize_frontmatter function."""

    def test_plain_values_are_unquoted(self) -> None:
        text = serialize_frontmatter({"description": Scalar("Simple text"), "mode": Scalar("all")})
        assert text == "description: Simple text\nmode: all"

    def test_special_characters_are_double_quoted(self) -> None:
        text = serialize_frontmatter({"description": Scalar('Use when: "fixing" bugs')})
        assert text == 'description: "Use when: \\"fixing\\" bugs"'

    def test_each_special_character_triggers_quoting(self) -> None:
        for char in ":\"'#|><[]{}@":
            text = serialize_frontmatter({"description": Scalar(f"a {char} b")})
            assert text.startswith('description: "'), char

    def test_long_special_value_uses_block_scalar(self) -> None:
        value = "Handles: " + "z" * 100
        text = serialize_frontmatter({"description": Scalar(value)})
        assert text == f"description: |\n  {value}"

    def test_long_plain_value_stays_unquoted(self) -> None:
        value = "w" * 150
        assert serialize_frontmatter({"description": Scalar(value)}) == f"description: {value}"

    def test_multiline_value_uses_block_scalar(self) -> None:
        text = serialize_frontmatter({"description": Scalar("one\ntwo")})
        assert text == "description: |\n  one\n  two"

    def test_number(self) -> None:
        assert serialize_frontmatter({"temperature": Number(0.3)}) == "temperature: 0.3"

    def test_tools_block(self) -> None:
        text = serialize_frontmatter({"tools": BoolMap({"read": True, "bash": False})})
        assert text == "tools:\n  read: true\n  bash: false"


class TestConvertAgent:
    """Tests for convert_agent function."""

    def test_minimal_agent(self) -> None:
        converted = convert_agent("---\ndescription: X\n---\n\nBody text", "x.md")
        assert converted == (
            "---\n"
            "description: X\n"
            "mode: subagent\n"
            "temperature: 0.3\n"
            f"{DEFAULT_TOOLS_YAML}\n"
            "---\n"
            "\n"
            "Body text"
        )
        assert parse_document(converted).body == "Body text"

    def test_legacy_agent_with_model(self) -> None:
        source = """\
---
name: test-agent
description: Test agent for validation
model: sonnet
tools: Read, Grep, file_editor
---

This is a test agent."""
        converted = convert_agent(source, "test-agent.md")
        frontmatter = _frontmatter_text(converted)

        assert "name:" not in frontmatter
        assert "description: Test agent for validation" in frontmatter
        assert "  edit: true" in frontmatter
        assert "  write: true" in frontmatter
        assert "  bash: false" in frontmatter
        assert frontmatter.endswith("model: anthropic/claude-sonnet-3.5-20241022")
        assert converted.endswith("---\n\nThis is a test agent.")

    def test_wildcard_tools(self) -> None:
        converted = convert_agent("---\ndescription: All\ntools: *\n---\nBody", "all.md")
        tools = parse_document(converted).frontmatter["tools"]
        assert isinstance(tools, BoolMap)
        assert all(tools.flags.values())
        assert len(tools.flags) == 11

    def test_source_temperature_is_kept(self) -> None:
        converted = convert_agent("---\ndescription: X\ntemperature: 0.8\n---\n", "x.md")
        assert "temperature: 0.8" in _frontmatter_text(converted)

    def test_nested_tools_pass_through(self) -> None:
        source = "---\ndescription: X\ntools:\n  read: true\n  bash: true\n---\nBody"
        converted = convert_agent(source, "x.md")
        assert "tools:\n  read: true\n  bash: true" in _frontmatter_text(converted)

    def test_document_without_frontmatter(self) -> None:
        source = "# Foo Bar\n\nThis agent does things."
        converted = convert_agent(source, "foo.md")
        document = parse_document(converted)

        assert document.body == source
        assert document.frontmatter["description"] == Scalar("Foo Bar")
        assert document.frontmatter["mode"] == Scalar("subagent")
        assert document.frontmatter["temperature"] == Number(0.3)

    def test_missing_description_uses_heading(self) -> None:
        converted = convert_agent("---\nmodel: sonnet\n---\n\n# Foo Bar\n\nText", "foo.md")
        assert parse_document(converted).frontmatter["description"] == Scalar("Foo Bar")

    def test_body_is_preserved_verbatim(self) -> None:
        body = "# Title\n\n```yaml\n---\nkey: value\n---\n```\n\n  indented: line\n\ttab"
        converted = convert_agent(f"---\ndescription: X\n---\n\n{body}\n", "x.md")
        assert parse_document(converted).body == body
        assert converted.endswith(body)


class TestReparseIsStable:
    """Serializing a re-parsed converted agent reproduces its frontmatter."""

    def _assert_stable(self, source: str, filename: str) -> None:
        converted = convert_agent(source, filename)
        frontmatter_text = _frontmatter_text(converted)
        reparsed = parse_document(converted).frontmatter
        assert serialize_frontmatter(reparsed) == frontmatter_text

    def test_minimal(self) -> None:
        self._assert_stable("---\ndescription: X\n---\nBody", "x.md")

    def test_quoted_description(self) -> None:
        self._assert_stable('---\ndescription: Use when: "fixing" #bugs\n---\n', "x.md")

    def test_long_description(self) -> None:
        self._assert_stable(f"---\ndescription: Expert: {'detail ' * 30}\n---\n", "x.md")

    def test_model_and_tools(self) -> None:
        source = "---\ndescription: X\nmodel: claude-3-haiku\ntools: Bash, Task\n---\n"
        self._assert_stable(source, "x.md")

    def test_fallback_description(self) -> None:
        self._assert_stable("", "empty-agent.md")

    def test_unusual_temperature(self) -> None:
        self._assert_stable("---\ndescription: X\ntemperature: 1.25\n---\n", "x.md")
