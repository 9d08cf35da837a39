"""Integration tests for RealAgentFiles against a temporary directory."""

from pathlib import Path

import pytest

from agent_converter.gateway.real import RealAgentFiles
from agent_converter.operations import convert_all_agents


@pytest.mark.integration
def test_list_markdown_files_is_sorted_and_non_recursive(tmp_path: Path) -> None:
    (tmp_path / "b.md").write_text("B", encoding="utf-8")
    (tmp_path / "a.md").write_text("A", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("N", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "c.md").write_text("C", encoding="utf-8")

    assert RealAgentFiles().list_markdown_files(tmp_path) == ["a.md", "b.md"]


@pytest.mark.integration
def test_list_markdown_files_missing_dir(tmp_path: Path) -> None:
    assert RealAgentFiles().list_markdown_files(tmp_path / "missing") == []


@pytest.mark.integration
def test_is_dir(tmp_path: Path) -> None:
    agent_files = RealAgentFiles()
    (tmp_path / "file.md").write_text("x", encoding="utf-8")

    assert agent_files.is_dir(tmp_path) is True
    assert agent_files.is_dir(tmp_path / "file.md") is False
    assert agent_files.is_dir(tmp_path / "missing") is False


@pytest.mark.integration
def test_write_and_read_round_trip_utf8(tmp_path: Path) -> None:
    agent_files = RealAgentFiles()
    path = tmp_path / "agent.md"

    agent_files.write_text(path, "# Agent ✅\n")

    assert agent_files.read_text(path) == "# Agent ✅\n"


@pytest.mark.integration
def test_ensure_dir_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / ".opencode" / "agent"
    RealAgentFiles().ensure_dir(target)
    RealAgentFiles().ensure_dir(target)
    assert target.is_dir()


@pytest.mark.integration
def test_convert_skips_undecodable_file(tmp_path: Path) -> None:
    source = tmp_path / "source"
    output = tmp_path / "output"
    source.mkdir()
    (source / "good.md").write_text("---\ndescription: Good\n---\nBody", encoding="utf-8")
    (source / "binary.md").write_bytes(b"\xff\xfe\x00invalid")

    result = convert_all_agents(RealAgentFiles(), source, output, ("README.md",))

    assert result.converted == ["good.md"]
    assert [s.filename for s in result.skipped] == ["binary.md"]
    assert (output / "good.md").exists()
    assert not (output / "binary.md").exists()
