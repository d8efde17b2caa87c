"""Public rendering API.

Example Usage:
    >>> from clishow.render import help_markdown_command
    >>> print(help_markdown_command(cli))

    >>> from clishow.render import print_help_markdown
    >>> print_help_markdown(cli)
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from clishow.emitters import Emitter, MarkdownEmitter, TemplateEmitter
from clishow.sources import as_source
from clishow.walker import build_page


def render_page(command: Any, emitter: Emitter, title: str | None = None) -> str:
    """Render a command tree with the given emitter.

    Args:
        command: Click command or CommandSource
        emitter: Emitter producing the output format
        title: Optional document title

    Returns:
        Rendered document
    """
    page = build_page(as_source(command), title=title)
    return emitter.render(page)


def help_markdown_command(command: Any) -> str:
    """Format the help information for `command` as Markdown."""
    return render_page(command, MarkdownEmitter())


def help_markdown(command_factory: Callable[[], Any] | click.Command) -> str:
    """Format the help information as Markdown.

    Args:
        command_factory: Zero-argument callable returning the command to
            document, or a Click command itself
    """
    if isinstance(command_factory, click.Command):
        return help_markdown_command(command_factory)
    return help_markdown_command(command_factory())


def print_help_markdown(command: Any) -> None:
    """Format the help information as Markdown and print it to stdout."""
    click.echo(help_markdown_command(command), nl=False)


def help_html(command: Any, template: str | Path | None = None) -> str:
    """Format the help information as HTML.

    Args:
        command: Click command or CommandSource
        template: Optional Jinja2 template file (bundled HTML template by default)
    """
    return render_page(command, TemplateEmitter(path=template))


__all__ = [
    "help_html",
    "help_markdown",
    "help_markdown_command",
    "print_help_markdown",
    "render_page",
]
