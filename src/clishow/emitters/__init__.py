"""Output emitters for rendered command documentation.

Every emitter consumes the same PageModel; only the output format differs.
"""

from pathlib import Path
from typing import Protocol

from clishow.emitters.markdown import MarkdownEmitter
from clishow.emitters.template import TemplateEmitter
from clishow.emitters.terminal import TerminalEmitter
from clishow.exceptions import ClishowError
from clishow.models import PageModel

FORMATS = ("markdown", "html", "terminal")


class Emitter(Protocol):
    """Protocol for document emitters."""

    def render(self, page: PageModel) -> str:
        """Render the page model to text."""
        ...


def get_emitter(
    output_format: str = "markdown",
    template: str | Path | None = None,
    footer: bool = False,
) -> Emitter:
    """Create the emitter for an output format.

    A template path always selects the Jinja2 emitter, whatever the format.

    Args:
        output_format: One of "markdown", "html", "terminal"
        template: Optional Jinja2 template file
        footer: Append a generated-by footer (Markdown only)

    Raises:
        ClishowError: If the format is unknown
        TemplateError: If the template cannot be loaded
    """
    if template is not None:
        return TemplateEmitter(path=template)
    if output_format == "markdown":
        return MarkdownEmitter(footer=footer)
    if output_format == "html":
        return TemplateEmitter()
    if output_format == "terminal":
        return TerminalEmitter()
    raise ClishowError(f"Unknown output format '{output_format}'. Choose from: {', '.join(FORMATS)}")


__all__ = ["FORMATS", "Emitter", "MarkdownEmitter", "TemplateEmitter", "TerminalEmitter", "get_emitter"]
