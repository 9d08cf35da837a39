"""Generate AGENTS.md, the categorized index of available agents."""

from collections.abc import Iterable
from datetime import datetime

from agent_converter.constants import CATEGORY_RULES, DEFAULT_CATEGORY
from agent_converter.models import AgentCategory, AgentEntry, FrontmatterBlock, Scalar

AGENTS_MD_HEADER = """\
# UIx Agents for opencode.ai

Specialized agents for comprehensive UIx ClojureScript development with React 19 support.

## Available Agents
"""

AGENTS_MD_BOILERPLATE = """\
## Usage

These agents work together to provide comprehensive UIx development support, from initial \
project setup through advanced React integration and performance optimization.

### Getting Started
1. Use `uix-setup-specialist` for new project initialization with Shadow-cljs or Leiningen
2. Employ `uix-component-architect` and `uix-state-manager` for core UI architecture and \
modern state management
3. Leverage `uix-lifecycle-coordinator` and `uix-react-integrator` for React hooks and \
modern features
4. Apply modern testing and debugging patterns for quality assurance

### UI & Interaction Development
- Use `uix-ui-designer` for modern component library integration and contemporary styling \
approaches
- Apply `uix-forms-expert` for modern form handling with React Hook Form and validation
- Employ `uix-animation-coordinator` for smooth animations with Framer Motion and React Spring

### Advanced Development
- Use `uix-routing-navigator` for modern React Router v6+ navigation patterns
- Apply `uix-async-handler` for modern HTTP requests with fetch API and async patterns
- Employ `uix-interop-specialist` for modern JavaScript interop and ES6+ module integration
- Leverage `uix-migration-specialist` for comprehensive migration assistance from Reagent to UIx

## Agent Architecture

Each agent follows opencode.ai sub-agent conventions:
- **Focused Expertise**: Single-responsibility specialization for specific UIx development areas
- **Comprehensive Background**: Deep UIx and modern React knowledge with ClojureScript context
- **Practical Implementation**: Real-world patterns and contemporary tooling integration
- **Quality Focus**: Modern testing strategies, performance optimization, and debugging techniques

## React 19 Support

All agents are designed to work with **React 19** and its latest features:
- React Compiler for automatic optimization
- Improved concurrent rendering
- Modern hook patterns
- Enhanced developer experience

## Installation

1. Copy the agent files from `.claude/agents/` to your project's `.opencode/agent/` directory
2. Run the conversion script: `convert-agents`
3. The script will generate opencode.ai compatible agents and this AGENTS.md file

## Migration from Reagent

This collection has been comprehensively refactored from Reagent to UIx. UIx provides:

- **Modern React Patterns**: Full support for React 19 concurrent features, hooks, and \
contemporary patterns
- **Enhanced Developer Experience**: Better hot reloading, improved debugging, and modern \
tooling integration
- **Performance Optimizations**: Smaller bundle size, improved tree shaking, and optimized \
rendering
- **Future-Proof Architecture**: Built for the modern React ecosystem

### Key Differences from Reagent
- `defui` instead of Form-1/2/3 components
- `$` macro HyperScript syntax instead of Hiccup vectors
- React hooks (`use-state`, `use-effect`) instead of ratoms
- Modern async patterns with fetch API
- Contemporary styling with CSS-in-JS libraries
- Modern form handling with React Hook Form
- Advanced animations with Framer Motion

## Resources

- [UIx Documentation](https://uix-cljs.dev/)
- [ClojureScript](https://clojurescript.org/)
- [React Documentation](https://react.dev/)
- [Shadow CLJS](https://shadow-cljs.github.io/docs/UsersGuide.html)
- [Learn ClojureScript](https://www.learn-clojurescript.com/)
- [Modern React Patterns](https://react.dev/learn)
- [React Router](https://reactrouter.com/)
- [Framer Motion](https://www.framer.com/motion/)
"""


def categorize_agent(agent_name: str) -> AgentCategory:
    """Return the first category whose patterns occur in the agent name."""
    for category, patterns in CATEGORY_RULES:
        if any(pattern in agent_name for pattern in patterns):
            return category
    return DEFAULT_CATEGORY


def agent_entry(agent_name: str, frontmatter: FrontmatterBlock) -> AgentEntry:
    """Build the AGENTS.md entry for one agent from its source frontmatter."""
    description = frontmatter.get("description")
    if isinstance(description, Scalar) and description.text:
        text = description.text
    else:
        text = f"Agent for {agent_name.replace('-', ' ')}"
    return AgentEntry(name=agent_name, description=text, category=categorize_agent(agent_name))


def group_by_category(entries: Iterable[AgentEntry]) -> dict[AgentCategory, list[AgentEntry]]:
    """Group entries under every category, in display order."""
    grouped: dict[AgentCategory, list[AgentEntry]] = {category: [] for category in AgentCategory}
    for entry in entries:
        grouped[entry.category].append(entry)
    return grouped


def generate_agents_md(entries: Iterable[AgentEntry], *, generated_at: datetime) -> str:
    """Render AGENTS.md content.

    Args:
        entries: Agents in listing order.
        generated_at: Timestamp written in the footer.

    Returns:
        Markdown with one section per non-empty category followed by usage
        guidance and resource links.
    """
    lines = [AGENTS_MD_HEADER]

    for category, agents in group_by_category(entries).items():
        if not agents:
            continue
        lines.append(f"### {category.value}")
        lines.append("")
        for agent in agents:
            lines.append(f"- **{agent.name}** - {agent.description}")
        lines.append("")

    lines.append(AGENTS_MD_BOILERPLATE)
    lines.append("---")
    lines.append("")
    lines.append(f"*Generated by convert-agents on {generated_at.isoformat()}*")
    lines.append("")

    return "\n".join(lines)
