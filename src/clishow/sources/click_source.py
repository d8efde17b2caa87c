"""Click adapter for the source protocols.

This module wraps Click commands and parameters so the walker can inspect
them through the narrow CommandSource/ArgumentSource interface. The wrapped
Click objects are never mutated.

Philosophy:
- Runtime inspection of Click commands
- Standard library + Click only
- Registration order preserved (no sorting)
"""

import importlib
import inspect
import logging

import click

from clishow.exceptions import SourceError
from clishow.sources.spec_source import PossibleValueSpec

logger = logging.getLogger(__name__)


def _clean_help(text: str | None) -> str:
    """Strip Click's formatting markers from help text.

    Dedents the text, drops everything after a form feed (Click's help
    truncation marker) and the "\\b" lines that disable rewrapping.
    """
    if not text:
        return ""
    text = inspect.cleandoc(text).split("\f", 1)[0]
    lines = [line for line in text.splitlines() if line.strip() != "\b"]
    return "\n".join(lines).strip()


def _first_paragraph(text: str) -> str:
    return text.split("\n\n", 1)[0].replace("\n", " ").strip()


class ClickArgument:
    """Expose a click.Parameter as an ArgumentSource."""

    def __init__(self, param: click.Parameter):
        self.param = param

    @property
    def id(self) -> str:
        return self.param.name or ""

    @property
    def positional(self) -> bool:
        return isinstance(self.param, click.Argument)

    @property
    def short(self) -> str | None:
        if self.positional:
            return None
        for opt in self.param.opts:
            if len(opt) == 2 and opt.startswith("-") and opt != "--":
                return opt[1]
        return None

    @property
    def long(self) -> str | None:
        if self.positional:
            return None
        for opt in self.param.opts:
            if opt.startswith("--") and len(opt) > 2:
                return opt[2:]
        return None

    @property
    def takes_value(self) -> bool:
        if isinstance(self.param, click.Option):
            return not (self.param.is_flag or self.param.count)
        return True

    @property
    def value_names(self) -> tuple[str, ...] | None:
        if self.param.metavar:
            return (self.param.metavar,)
        return None

    @property
    def required(self) -> bool:
        return bool(self.param.required)

    @property
    def max_occurrences(self) -> int | None:
        if isinstance(self.param, click.Option) and (self.param.multiple or self.param.count):
            return None
        if self.param.nargs == -1:
            return None
        return 1

    @property
    def nargs(self) -> int:
        return self.param.nargs if self.param.nargs > 1 else 1

    @property
    def help(self) -> str | None:
        return getattr(self.param, "help", None)

    @property
    def long_help(self) -> str | None:
        return None

    @property
    def hidden(self) -> bool:
        return bool(getattr(self.param, "hidden", False))

    @property
    def default_values(self) -> tuple[str, ...]:
        if isinstance(self.param, click.Option) and (self.param.is_flag or self.param.count):
            return ()

        default = self.param.default
        if default is None or callable(default):
            return ()
        if isinstance(default, (list, tuple)):
            return tuple(str(value) for value in default)
        return (str(default),)

    @property
    def possible_values(self) -> tuple[PossibleValueSpec, ...]:
        if isinstance(self.param.type, click.Choice):
            return tuple(PossibleValueSpec(name=str(choice)) for choice in self.param.type.choices)
        return ()

    def __repr__(self) -> str:
        return f"ClickArgument({self.id!r})"


class ClickCommand:
    """Expose a click.Command (or click.Group) as a CommandSource.

    Args:
        command: Click command or group
        info_name: Name the command is registered under (defaults to command.name)
        parent: Context of the parent group, so inherited settings such as
            help_option_names apply to subcommands
    """

    def __init__(
        self,
        command: click.Command,
        info_name: str | None = None,
        parent: click.Context | None = None,
    ):
        self.command = command
        self.name = info_name or command.name or ""
        self._ctx = click.Context(
            command, info_name=self.name, parent=parent, **command.context_settings
        )

    @property
    def display_name(self) -> str | None:
        return None

    @property
    def about(self) -> str | None:
        if self.command.short_help:
            return inspect.cleandoc(self.command.short_help)
        help_text = _clean_help(self.command.help)
        return _first_paragraph(help_text) or None

    @property
    def long_about(self) -> str | None:
        return _clean_help(self.command.help) or None

    @property
    def usage(self) -> str:
        pieces = self.command.collect_usage_pieces(self._ctx)
        return " ".join(["Usage:", self.name, *pieces])

    @property
    def before_help(self) -> str | None:
        return None

    @property
    def after_help(self) -> str | None:
        return self.command.epilog or None

    @property
    def hidden(self) -> bool:
        return bool(self.command.hidden)

    def get_arguments(self) -> list[ClickArgument]:
        return [ClickArgument(param) for param in self.command.get_params(self._ctx)]

    def get_positionals(self) -> list[ClickArgument]:
        return [arg for arg in self.get_arguments() if arg.positional]

    def get_subcommands(self) -> list["ClickCommand"]:
        if not isinstance(self.command, click.Group):
            return []
        if self.command.commands:
            items = list(self.command.commands.items())
        else:
            # Lazily loaded groups only expose their commands by name
            items = []
            for name in self.command.list_commands(self._ctx):
                cmd = self.command.get_command(self._ctx, name)
                if cmd is not None:
                    items.append((name, cmd))
        return [ClickCommand(cmd, name, parent=self._ctx) for name, cmd in items]

    def __repr__(self) -> str:
        return f"ClickCommand({self.name!r})"


def load_click_command(import_path: str) -> click.Command:
    """Import a Click command from a "module:attribute" path.

    Args:
        import_path: Import path such as "myapp.cli:main"; a dotted attribute
            path after the colon is followed (e.g., "myapp.cli:app.group")

    Returns:
        The Click command object

    Raises:
        SourceError: If the module or attribute cannot be found, or the
            attribute is not a Click command

    Example:
        >>> command = load_click_command("clishow.cli:main")
        >>> command.name
        'clishow'
    """
    module_path, _, attr_path = import_path.partition(":")
    if not module_path or not attr_path:
        raise SourceError(f"Invalid import path '{import_path}': expected 'module:attribute'")

    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise SourceError(f"Failed to import module '{module_path}': {e}") from e

    obj = module
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise SourceError(f"Module '{module_path}' has no attribute '{attr_path}'") from e

    if not isinstance(obj, click.Command):
        raise SourceError(
            f"'{import_path}' is not a Click command (got {type(obj).__name__})"
        )

    logger.debug(f"Loaded Click command '{obj.name}' from {import_path}")
    return obj


__all__ = ["ClickArgument", "ClickCommand", "load_click_command"]
