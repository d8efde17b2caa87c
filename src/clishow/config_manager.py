"""Configuration management module.

This module handles project configuration stored in TOML format, either in
a dedicated clishow.toml or in the [tool.clishow] table of pyproject.toml.
Stores rendering preferences like output format, template and title.

Lookup order:
1. Explicit --config path (must exist)
2. ./clishow.toml
3. [tool.clishow] in ./pyproject.toml
4. Built-in defaults
"""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

try:
    import tomli  # type: ignore[import]
except ImportError:
    # Fallback for newer Python versions
    try:
        import tomllib as tomli  # type: ignore[import]
    except ImportError as e:
        raise ImportError("toml library not available. Install with: pip install tomli") from e

try:
    import tomlkit
except ImportError as e:
    raise ImportError("tomlkit library not available. Install with: pip install tomlkit") from e

from clishow.emitters import FORMATS

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "clishow.toml"
PYPROJECT_FILE_NAME = "pyproject.toml"


class ConfigError(Exception):
    """Raised when configuration operations fail."""

    pass


@dataclass
class ClishowConfig:
    """clishow configuration data."""

    format: str = "markdown"
    template: str | None = None  # Jinja2 template path, overrides format
    title: str | None = None
    footer: bool = False
    output: str | None = None  # stdout when unset

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        data = asdict(self)
        # Filter out None values as TOML doesn't support them
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClishowConfig":
        """Create from dictionary.

        Raises:
            ConfigError: If a value is invalid
        """
        output_format = data.get("format", "markdown")
        if output_format not in FORMATS:
            raise ConfigError(
                f"Invalid format: '{output_format}'. Choose from: {', '.join(FORMATS)}"
            )

        footer = data.get("footer", False)
        if not isinstance(footer, bool):
            raise ConfigError(f"Invalid footer value: {footer!r} (expected true or false)")

        return cls(
            format=output_format,
            template=data.get("template"),
            title=data.get("title"),
            footer=footer,
            output=data.get("output"),
        )


class ConfigManager:
    """Manage clishow configuration files."""

    @classmethod
    def get_config_path(cls, custom_path: str | None = None) -> Path | None:
        """Get configuration file path.

        Args:
            custom_path: Custom config file path (optional)

        Returns:
            Path to config file, or None when no config file exists

        Raises:
            ConfigError: If the custom path does not exist
        """
        if custom_path:
            path = Path(custom_path).expanduser().resolve()
            if not path.exists():
                raise ConfigError(f"Config file not found: {path}")
            return path

        for candidate in (CONFIG_FILE_NAME, PYPROJECT_FILE_NAME):
            path = Path.cwd() / candidate
            if path.exists():
                return path

        return None

    @classmethod
    def load_config(cls, custom_path: str | None = None) -> ClishowConfig:
        """Load configuration from file.

        Args:
            custom_path: Custom config file path (optional)

        Returns:
            ClishowConfig object (defaults when no file exists)

        Raises:
            ConfigError: If loading fails
        """
        config_path = cls.get_config_path(custom_path)

        if config_path is None:
            logger.debug("Config file not found, using defaults")
            return ClishowConfig()

        try:
            with open(config_path, "rb") as f:
                data = tomli.load(f)  # type: ignore[attr-defined]
        except tomli.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse config {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read config {config_path}: {e}") from e

        if config_path.name == PYPROJECT_FILE_NAME:
            data = data.get("tool", {}).get("clishow", {})

        logger.debug(f"Loaded config from: {config_path}")
        return ClishowConfig.from_dict(data)

    @classmethod
    def save_config(cls, config: ClishowConfig, custom_path: str | None = None) -> Path:
        """Save configuration to a clishow.toml file.

        Existing files are updated in place, preserving comments and formatting.

        Args:
            config: Configuration to save
            custom_path: Target file (defaults to ./clishow.toml)

        Returns:
            Path of the written file

        Raises:
            ConfigError: If saving fails
        """
        config_path = Path(custom_path).expanduser() if custom_path else Path.cwd() / CONFIG_FILE_NAME
        temp_path = config_path.with_suffix(".tmp")

        try:
            if config_path.exists():
                with open(config_path) as f:
                    doc = tomlkit.load(f)
            else:
                doc = tomlkit.document()
                doc.add(tomlkit.comment("clishow configuration"))

            for key, value in config.to_dict().items():
                doc[key] = value

            # Atomic rename
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_path, "w") as f:
                tomlkit.dump(doc, f)
            temp_path.replace(config_path)

        except (OSError, tomlkit.exceptions.ParseError) as e:
            if temp_path.exists():
                temp_path.unlink()
            raise ConfigError(f"Failed to save config: {e}") from e

        logger.debug(f"Saved config to: {config_path}")
        return config_path


__all__ = ["ClishowConfig", "ConfigError", "ConfigManager"]
