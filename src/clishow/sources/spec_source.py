"""Static command descriptions loaded from YAML or JSON.

A command description is a nested mapping (the shape produced by
"describe"-style schema dumps) turned into frozen dataclasses implementing
the source protocols. Useful for documenting CLIs written with other parser
libraries and for tests.

Example description (YAML):

    name: app
    about: Example application
    commands:
      - name: build
        about: Build a target
        arguments:
          - id: target
            positional: true
            required: true
            help: Target to build
          - id: verbose
            short: v
            long: verbose
            takes_value: false
            help: Verbose output
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from clishow.exceptions import SourceError

logger = logging.getLogger(__name__)


def _as_list(data: dict[str, Any], key: str) -> list[Any]:
    """Read a list field; a single scalar counts as a one-item list."""
    value = data.get(key)
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, dict):
        raise SourceError(f"Field '{key}' must be a list, got a mapping: {value!r}")
    return [value]


def _as_int(data: dict[str, Any], key: str, default: int | None) -> int | None:
    """Read an integer field (None allowed, meaning unbounded)."""
    value = data.get(key, default)
    if value is None:
        return None
    if isinstance(value, bool):
        raise SourceError(f"Field '{key}' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise SourceError(f"Field '{key}' must be an integer, got {value!r}") from e


def _as_flag_name(data: dict[str, Any], key: str) -> str | None:
    """Read a short/long flag name without its leading dashes."""
    value = data.get(key)
    if value is None or value == "":
        return None
    if isinstance(value, (dict, list, bool)):
        raise SourceError(f"Field '{key}' must be a string, got {value!r}")
    return str(value).lstrip("-")


@dataclass(frozen=True)
class PossibleValueSpec:
    """Enumerated argument value."""

    name: str
    help: str | None = None
    hidden: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "PossibleValueSpec":
        """Create from a plain string or a mapping with name/help/hidden."""
        if isinstance(data, dict):
            if "name" not in data:
                raise SourceError(f"Possible value is missing 'name': {data!r}")
            return cls(
                name=str(data["name"]),
                help=data.get("help"),
                hidden=bool(data.get("hidden", False)),
            )
        return cls(name=str(data))


@dataclass(frozen=True)
class ArgumentSpec:
    """Static argument description implementing ArgumentSource."""

    id: str
    short: str | None = None
    long: str | None = None
    value_names: tuple[str, ...] | None = None
    takes_value: bool = True
    positional: bool = False
    required: bool = False
    max_occurrences: int | None = 1
    nargs: int = 1
    help: str | None = None
    long_help: str | None = None
    hidden: bool = False
    default_values: tuple[str, ...] = ()
    possible_values: tuple[PossibleValueSpec, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ArgumentSpec":
        """Create from dictionary.

        Accepts "name" as an alias of "id", "default" for a single default,
        a string "value_name" for a single value name, and "multiple: true"
        for an unbounded number of occurrences.

        Raises:
            SourceError: If the mapping has no identifier or a field has the
                wrong type
        """
        if not isinstance(data, dict):
            raise SourceError(f"Argument description must be a mapping, got {data!r}")

        arg_id = data.get("id", data.get("name"))
        if not arg_id:
            raise SourceError(f"Argument is missing 'id': {data!r}")

        value_names = None
        if data.get("value_names") is not None:
            value_names = _as_list(data, "value_names")
        elif data.get("value_name"):
            value_names = _as_list(data, "value_name")

        if "default_values" in data:
            defaults = _as_list(data, "default_values")
        else:
            defaults = _as_list(data, "default")

        if data.get("multiple"):
            max_occurrences = None
        else:
            max_occurrences = _as_int(data, "max_occurrences", 1)

        return cls(
            id=str(arg_id),
            short=_as_flag_name(data, "short"),
            long=_as_flag_name(data, "long"),
            value_names=tuple(str(v) for v in value_names) if value_names is not None else None,
            takes_value=bool(data.get("takes_value", True)),
            positional=bool(data.get("positional", False)),
            required=bool(data.get("required", False)),
            max_occurrences=max_occurrences,
            nargs=_as_int(data, "nargs", 1) or 1,
            help=data.get("help"),
            long_help=data.get("long_help"),
            hidden=bool(data.get("hidden", False)),
            default_values=tuple(str(v) for v in defaults),
            possible_values=tuple(
                PossibleValueSpec.from_dict(pv) for pv in _as_list(data, "possible_values")
            ),
        )


@dataclass(frozen=True)
class CommandSpec:
    """Static command description implementing CommandSource.

    When no usage line is given one is derived from the arguments, e.g.
    "Usage: build [OPTIONS] <TARGET>".
    """

    name: str
    about: str | None = None
    long_about: str | None = None
    usage: str = ""
    display_name: str | None = None
    before_help: str | None = None
    after_help: str | None = None
    hidden: bool = False
    arguments: tuple[ArgumentSpec, ...] = ()
    subcommands: tuple["CommandSpec", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.usage:
            object.__setattr__(self, "usage", self._default_usage())

    def _default_usage(self) -> str:
        from clishow.flags import value_placeholders

        parts = ["Usage:", self.name]
        if any(not arg.positional for arg in self.arguments):
            parts.append("[OPTIONS]")
        for arg in self.get_positionals():
            parts.extend(value_placeholders(arg))
        if self.subcommands:
            parts.append("[COMMAND]")
        return " ".join(parts)

    def get_arguments(self) -> tuple[ArgumentSpec, ...]:
        return self.arguments

    def get_positionals(self) -> tuple[ArgumentSpec, ...]:
        return tuple(arg for arg in self.arguments if arg.positional)

    def get_subcommands(self) -> tuple["CommandSpec", ...]:
        return self.subcommands

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CommandSpec":
        """Create from dictionary.

        Accepts "description" as an alias of "about", "options" entries
        alongside "arguments", and "commands" as an alias of "subcommands".

        Raises:
            SourceError: If the mapping is malformed
        """
        if not isinstance(data, dict):
            raise SourceError(f"Command description must be a mapping, got {data!r}")

        name = data.get("name")
        if not name:
            raise SourceError(f"Command is missing 'name': {data!r}")

        raw_arguments = _as_list(data, "arguments") + _as_list(data, "options")
        children_key = "subcommands" if "subcommands" in data else "commands"
        raw_children = _as_list(data, children_key)

        return cls(
            name=str(name),
            about=data.get("about", data.get("description")),
            long_about=data.get("long_about"),
            usage=data.get("usage") or "",
            display_name=data.get("display_name"),
            before_help=data.get("before_help"),
            after_help=data.get("after_help"),
            hidden=bool(data.get("hidden", False)),
            arguments=tuple(ArgumentSpec.from_dict(arg) for arg in raw_arguments),
            subcommands=tuple(cls.from_dict(child) for child in raw_children),
        )


def load_spec(path: str | Path) -> CommandSpec:
    """Load a command description from a YAML or JSON file.

    Args:
        path: File path; ".json" files are parsed as JSON, anything else as YAML

    Returns:
        Root CommandSpec

    Raises:
        SourceError: If the file cannot be read or parsed
    """
    spec_path = Path(path)
    logger.debug(f"Loading command description from {spec_path}")

    try:
        content = spec_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SourceError(f"Failed to read command description {spec_path}: {e}") from e

    try:
        if spec_path.suffix.lower() == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SourceError(f"Failed to parse command description {spec_path}: {e}") from e

    return CommandSpec.from_dict(data)


__all__ = ["ArgumentSpec", "CommandSpec", "PossibleValueSpec", "load_spec"]
