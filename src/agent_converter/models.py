"""Models for agent definition frontmatter and conversion results."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Scalar:
    """Plain string value."""

    text: str


@dataclass(frozen=True)
class Number:
    """Numeric value (only produced for `temperature`)."""

    value: float


@dataclass(frozen=True)
class BoolMap:
    """Nested `name: true|false` mapping (only produced for `tools`)."""

    flags: dict[str, bool]


@dataclass(frozen=True)
class StringList:
    """Legacy comma-separated list (only produced for `tools`)."""

    items: list[str]


FrontmatterValue = Scalar | Number | BoolMap | StringList

FrontmatterBlock = dict[str, FrontmatterValue]


@dataclass(frozen=True)
class ParsedDocument:
    """An agent document split into frontmatter and body.

    Attributes:
        frontmatter: Parsed key/value pairs, empty when the document has none.
        body: Content after the frontmatter, never parsed or rewritten.
        has_frontmatter: Whether the document opened with a `---` line.
    """

    frontmatter: FrontmatterBlock
    body: str
    has_frontmatter: bool


@dataclass(frozen=True)
class ValidationResult:
    """Findings for a single converted agent.

    Attributes:
        filename: Name of the validated file.
        errors: Schema violations that should block adoption.
        warnings: Compatibility concerns that do not block adoption.
    """

    filename: str
    errors: list[str]
    warnings: list[str]

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_findings(self) -> bool:
        return len(self.errors) > 0 or len(self.warnings) > 0


@dataclass(frozen=True)
class ValidationSummary:
    """Aggregated validation results for a directory of converted agents."""

    results: list[ValidationResult]

    @property
    def valid_count(self) -> int:
        return sum(1 for r in self.results if not r.has_findings)

    @property
    def total_errors(self) -> int:
        return sum(len(r.errors) for r in self.results)

    @property
    def total_warnings(self) -> int:
        return sum(len(r.warnings) for r in self.results)

    @property
    def passed(self) -> bool:
        return self.total_errors == 0


@dataclass(frozen=True)
class SkippedAgent:
    """An agent file that could not be converted."""

    filename: str
    error: str


@dataclass(frozen=True)
class ConversionResult:
    """Result of converting a directory of agents.

    Attributes:
        found: Agent filenames discovered in the source directory.
        converted: Filenames written to the output directory.
        skipped: Files that failed to convert, with the error text.
    """

    found: list[str]
    converted: list[str] = field(default_factory=list)
    skipped: list[SkippedAgent] = field(default_factory=list)


class AgentCategory(Enum):
    """Sections of the generated AGENTS.md, in display order."""

    CORE_ARCHITECTURE = "Core Architecture"
    DEVELOPMENT_INTEGRATION = "Development & Integration"
    UI_STYLING = "UI & Styling"
    MIGRATION_QUALITY = "Migration & Quality"


@dataclass(frozen=True)
class AgentEntry:
    """An agent listed in AGENTS.md."""

    name: str
    description: str
    category: AgentCategory
