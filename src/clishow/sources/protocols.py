"""Read-only capability interface over an argument parser's metadata.

The walker, record builder and flag formatter only ever talk to these
protocols. Adapters (Click commands, static YAML/JSON descriptions) expose
exactly this accessor set and nothing else.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class PossibleValueSource(Protocol):
    """One enumerated value accepted by an argument."""

    name: str
    help: str | None
    hidden: bool


@runtime_checkable
class ArgumentSource(Protocol):
    """Protocol for a declared positional argument, flag or option.

    Attributes:
        id: Argument identifier (used as value name fallback)
        short: Short flag character without the dash, or None
        long: Long flag name without the dashes, or None
        value_names: Declared value names, or None when none were declared
        takes_value: Whether the argument consumes a value
        positional: Whether the argument is positional
        required: Whether the argument must be supplied
        max_occurrences: Maximum number of occurrences (None = unbounded)
        nargs: Number of values taken per occurrence
        help: Short help text
        long_help: Long help text
        hidden: Whether the argument is hidden from help output
        default_values: Default values rendered as strings
        possible_values: Enumerated accepted values
    """

    id: str
    short: str | None
    long: str | None
    value_names: tuple[str, ...] | None
    takes_value: bool
    positional: bool
    required: bool
    max_occurrences: int | None
    nargs: int
    help: str | None
    long_help: str | None
    hidden: bool
    default_values: tuple[str, ...]
    possible_values: Sequence[PossibleValueSource]


@runtime_checkable
class CommandSource(Protocol):
    """Protocol for one node of a command tree.

    Attributes:
        name: Command name
        display_name: Optional human-friendly program name
        about: Short description
        long_about: Long description
        usage: Rendered usage line, starting with "Usage: <name>"
        before_help: Text shown before the help (unsupported when set)
        after_help: Text shown after the help (unsupported when set)
        hidden: Whether the command is hidden from help output
    """

    name: str
    display_name: str | None
    about: str | None
    long_about: str | None
    usage: str
    before_help: str | None
    after_help: str | None
    hidden: bool

    def get_arguments(self) -> Sequence[ArgumentSource]:
        """Return all arguments (positional and options) in declaration order."""
        ...

    def get_positionals(self) -> Sequence[ArgumentSource]:
        """Return positional arguments in declaration order."""
        ...

    def get_subcommands(self) -> Sequence["CommandSource"]:
        """Return direct subcommands in declaration order."""
        ...


__all__ = ["ArgumentSource", "CommandSource", "PossibleValueSource"]
