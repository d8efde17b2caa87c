"""Command sources: adapters from argument parsers to the walker.

Public API:
    - CommandSource / ArgumentSource / PossibleValueSource: read-only protocols
    - ClickCommand / ClickArgument: adapters for Click commands
    - CommandSpec / ArgumentSpec / PossibleValueSpec: static descriptions
    - load_spec: load a static description from YAML or JSON
    - load_click_command: import a Click command by "module:attribute"
    - as_source: wrap any supported object as a CommandSource
"""

from typing import Any

import click

from clishow.exceptions import SourceError
from clishow.sources.click_source import ClickArgument, ClickCommand, load_click_command
from clishow.sources.protocols import ArgumentSource, CommandSource, PossibleValueSource
from clishow.sources.spec_source import ArgumentSpec, CommandSpec, PossibleValueSpec, load_spec


def as_source(obj: Any) -> CommandSource:
    """Wrap a Click command, or pass through an existing CommandSource.

    Raises:
        SourceError: If the object is neither
    """
    if isinstance(obj, click.Command):
        return ClickCommand(obj)
    if isinstance(obj, CommandSource):
        return obj
    raise SourceError(f"Cannot document object of type {type(obj).__name__}")


__all__ = [
    "ArgumentSource",
    "ArgumentSpec",
    "ClickArgument",
    "ClickCommand",
    "CommandSource",
    "CommandSpec",
    "PossibleValueSource",
    "PossibleValueSpec",
    "as_source",
    "load_click_command",
    "load_spec",
]
