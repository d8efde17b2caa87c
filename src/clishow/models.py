"""Render records for command-line documentation.

This module defines the flattened, renderer-agnostic records built from a
command tree. Every emitter (Markdown, Jinja2 template, terminal) consumes
the same records.

Philosophy:
- Ruthlessly simple dataclasses
- Frozen records with tuple fields (safe to share, never mutated)
- Derived values computed once at construction
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PossibleValueRecord:
    """One enumerated value accepted by an argument.

    Attributes:
        name: Value as typed on the command line
        help: Optional help text for the value
    """

    name: str
    help: str | None = None


@dataclass(frozen=True)
class FlagRecord:
    """Display record for a positional argument or an option.

    Attributes:
        flags: Formatted flag string (e.g., "-f, --flag <VALUE>")
        description: Best available help text ("" when none)
        default_values: Default values rendered as strings
        possible_values: Non-hidden enumerated values
    """

    flags: str
    description: str = ""
    default_values: tuple[str, ...] = ()
    possible_values: tuple[PossibleValueRecord, ...] = ()

    @property
    def possible_values_have_help(self) -> bool:
        """Whether any possible value carries its own help text."""
        return any(pv.help for pv in self.possible_values)


@dataclass(frozen=True)
class CommandSummary:
    """Shallow summary of a direct subcommand."""

    name: str
    description: str = ""


@dataclass(frozen=True)
class CommandRecord:
    """Display record for one command of the tree.

    Attributes:
        title: Command name
        usage: Usage string with "Usage:" and the program name stripped
        cmd_chain: Ancestor chain including this command, joined by spaces
        description: Long description, else short description, else ""
        commands: Summaries of direct, non-hidden subcommands
        arguments: Records for positional arguments
        options: Records for flags and options
    """

    title: str
    usage: str
    cmd_chain: str
    description: str = ""
    commands: tuple[CommandSummary, ...] = ()
    arguments: tuple[FlagRecord, ...] = ()
    options: tuple[FlagRecord, ...] = ()

    @property
    def anchor(self) -> str:
        """Document-internal link target (e.g., "app-build")."""
        return self.cmd_chain.replace(" ", "-")

    @property
    def depth(self) -> int:
        """Nesting depth, 0 for the root command."""
        return self.cmd_chain.count(" ")

    @property
    def full_usage(self) -> str:
        """Usage line prefixed with the full command path."""
        return f"{self.cmd_chain} {self.usage}".strip()


@dataclass(frozen=True)
class PageModel:
    """Everything an emitter needs to render one document.

    Attributes:
        title: Document title (display name or `name`)
        name: Program name
        main: Record of the root command
        commands: Records of all non-hidden descendants, in pre-order
    """

    title: str
    name: str
    main: CommandRecord
    commands: tuple[CommandRecord, ...] = field(default_factory=tuple)

    @property
    def all_commands(self) -> tuple[CommandRecord, ...]:
        """Root record followed by every descendant (the table of contents)."""
        return (self.main, *self.commands)


__all__ = [
    "CommandRecord",
    "CommandSummary",
    "FlagRecord",
    "PageModel",
    "PossibleValueRecord",
]
