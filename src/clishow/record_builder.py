"""Build render records from command sources.

This module converts one CommandSource (and its arguments) into an
immutable CommandRecord. Child lists are built first and the record is
constructed once.
"""

import logging
from collections.abc import Sequence

from clishow.exceptions import UnsupportedFeatureError
from clishow.flags import format_flags
from clishow.models import CommandRecord, CommandSummary, FlagRecord, PossibleValueRecord
from clishow.sources.protocols import ArgumentSource, CommandSource

logger = logging.getLogger(__name__)


def strip_usage(usage: str) -> str:
    """Remove the "Usage:" token and the program name from a usage line.

    Example:
        >>> strip_usage("Usage: build [OPTIONS] TARGET")
        '[OPTIONS] TARGET'
    """
    return " ".join(usage.split()[2:])


def build_flag_record(argument: ArgumentSource) -> FlagRecord:
    """Build the display record for one argument."""
    return FlagRecord(
        flags=format_flags(argument),
        description=argument.long_help or argument.help or "",
        default_values=tuple(argument.default_values),
        possible_values=tuple(
            PossibleValueRecord(name=pv.name, help=pv.help)
            for pv in argument.possible_values
            if not pv.hidden
        ),
    )


def build_record(node: CommandSource, ancestors: Sequence[str] = ()) -> CommandRecord:
    """Build the render record for one command.

    Args:
        node: Command to describe
        ancestors: Names of the parent commands, root first

    Returns:
        CommandRecord for the command

    Raises:
        UnsupportedFeatureError: If the command defines before/after help text
        MalformedMetadataError: If an argument breaks the value-name contract
    """
    cmd_chain = " ".join([*ancestors, node.name])

    if node.before_help or node.after_help:
        raise UnsupportedFeatureError(
            f"Command '{cmd_chain}' defines before/after help text, which cannot be documented"
        )

    commands = tuple(
        CommandSummary(name=child.name, description=child.about or "")
        for child in node.get_subcommands()
        if not child.hidden
    )

    arguments: list[FlagRecord] = []
    options: list[FlagRecord] = []
    for argument in node.get_arguments():
        if argument.hidden:
            continue
        record = build_flag_record(argument)
        if argument.positional:
            arguments.append(record)
        else:
            options.append(record)

    return CommandRecord(
        title=node.name,
        usage=strip_usage(node.usage),
        cmd_chain=cmd_chain,
        description=node.long_about or node.about or "",
        commands=commands,
        arguments=tuple(arguments),
        options=tuple(options),
    )


__all__ = ["build_flag_record", "build_record", "strip_usage"]
