"""Flag formatting for arguments and options.

Turns an ArgumentSource into the display string used by every emitter,
e.g. "-f, --flag <VALUE>", "    --name [NAME]" or "<TARGET>...".

Conventions:
- <VALUE> marks a required value, [VALUE] an optional one
- a trailing "..." marks an argument accepted more than once
- the short column is padded to 2 characters so long flags line up
"""

from clishow.exceptions import MalformedMetadataError
from clishow.sources.protocols import ArgumentSource

SHORT_COLUMN_WIDTH = 2
REPEAT_MARKER = "..."


def is_repeatable(argument: ArgumentSource) -> bool:
    """Whether the argument accepts more than one occurrence."""
    return argument.max_occurrences is None or argument.max_occurrences > 1


def value_placeholders(argument: ArgumentSource) -> list[str]:
    """Return the bracketed value placeholders for an argument.

    Args:
        argument: Argument to describe

    Returns:
        Placeholders such as ["<TARGET>"] or ["[NAME]", "..."]; empty for
        arguments that take no value

    Raises:
        MalformedMetadataError: If the argument takes a value but declares
            an empty list of value names
    """
    if not argument.takes_value:
        return []

    if argument.value_names is None:
        names = [argument.id.upper()]
    elif not argument.value_names:
        raise MalformedMetadataError(
            f"Argument '{argument.id}' takes a value but reported an empty list of value names"
        )
    else:
        names = list(argument.value_names)

    if len(names) == 1 and argument.nargs > 1:
        names = names * argument.nargs

    open_bracket, close_bracket = ("<", ">") if argument.required else ("[", "]")
    placeholders = [f"{open_bracket}{name}{close_bracket}" for name in names]

    if is_repeatable(argument):
        placeholders.append(REPEAT_MARKER)

    return placeholders


def format_flags(argument: ArgumentSource) -> str:
    """Format the flag column for an argument.

    Pure function: the same argument always yields the same string.

    Example:
        >>> format_flags(ArgumentSpec(id="flag", short="f", long="flag", required=True))
        '-f, --flag <FLAG>'
        >>> format_flags(ArgumentSpec(id="name", long="name"))
        '    --name [NAME]'
    """
    short = f"-{argument.short}" if argument.short else ""
    long = f"--{argument.long}" if argument.long else ""
    values = " ".join(value_placeholders(argument))

    if not short and not long:
        return values

    text = short.ljust(SHORT_COLUMN_WIDTH)
    if long:
        text += (", " if short else "  ") + long
    if values:
        text += f" {values}"
    return text


__all__ = ["format_flags", "is_repeatable", "value_placeholders"]
