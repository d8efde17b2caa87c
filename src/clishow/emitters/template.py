"""Jinja2 template emitter.

Renders a PageModel through a Jinja2 template. The template is passed in
explicitly (a file path or an in-memory string); the bundled default
produces a standalone HTML page.

Template context:
    title, name, main, commands (descendants), all_commands, page

Filters:
    paragraph: newlines to <br/> line breaks (escaped when autoescaping)
    anchor: spaces to hyphens, for link targets
"""

import logging
from collections.abc import Callable
from importlib import resources
from pathlib import Path

import jinja2
from markupsafe import Markup, escape

from clishow.exceptions import TemplateError
from clishow.models import PageModel

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "help.html.j2"
AUTOESCAPE_EXTENSIONS = ("html", "htm", "xml", "html.j2", "htm.j2", "xml.j2")


@jinja2.pass_eval_context
def paragraph(eval_ctx: jinja2.nodes.EvalContext, text: str | None) -> str:
    """Convert newlines to <br/> line breaks."""
    lines = (text or "").split("\n")
    if eval_ctx.autoescape:
        return Markup("<br/>\n").join(escape(line) for line in lines)
    return "<br/>\n".join(lines)


def anchor(text: str | None) -> str:
    """Convert a command path to a link target ("app build" -> "app-build")."""
    return (text or "").replace(" ", "-")


def _default_template_source() -> str:
    template_file = resources.files("clishow") / "templates" / DEFAULT_TEMPLATE
    return template_file.read_text(encoding="utf-8")


class TemplateEmitter:
    """Renders a PageModel with a Jinja2 template.

    The template is loaded and compiled at construction, so a missing or
    malformed template fails before any output is produced.

    Args:
        path: Template file path
        source: In-memory template text (used when no path is given)
        autoescape: Force autoescaping on/off; by default it is enabled for
            HTML/XML template files and for in-memory templates

    Raises:
        TemplateError: If the template cannot be found or parsed
    """

    def __init__(
        self,
        path: str | Path | None = None,
        source: str | None = None,
        autoescape: bool | None = None,
    ):
        if autoescape is None:
            autoescape_setting = jinja2.select_autoescape(
                enabled_extensions=AUTOESCAPE_EXTENSIONS, default_for_string=True
            )
        else:
            autoescape_setting = autoescape

        try:
            if path is not None:
                template_path = Path(path)
                logger.debug(f"Loading template from {template_path}")
                self.env = self._create_environment(
                    jinja2.FileSystemLoader(str(template_path.parent)), autoescape_setting
                )
                self.template = self.env.get_template(template_path.name)
            else:
                if source is None:
                    logger.debug(f"Loading bundled template {DEFAULT_TEMPLATE}")
                    source = _default_template_source()
                    if autoescape is None:
                        autoescape_setting = True
                self.env = self._create_environment(None, autoescape_setting)
                self.template = self.env.from_string(source)
        except jinja2.TemplateNotFound as e:
            raise TemplateError(f"Template not found: {path}") from e
        except jinja2.TemplateSyntaxError as e:
            raise TemplateError(f"Failed to parse template (line {e.lineno}): {e.message}") from e
        except OSError as e:
            raise TemplateError(f"Failed to read template: {e}") from e

    @staticmethod
    def _create_environment(
        loader: jinja2.BaseLoader | None, autoescape: bool | Callable[[str | None], bool]
    ) -> jinja2.Environment:
        env = jinja2.Environment(
            loader=loader,
            autoescape=autoescape,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.filters["paragraph"] = paragraph
        env.filters["anchor"] = anchor
        return env

    def render(self, page: PageModel) -> str:
        """Render the page through the template.

        Raises:
            TemplateError: If the template fails while rendering
        """
        try:
            return self.template.render(
                page=page,
                title=page.title,
                name=page.name,
                main=page.main,
                commands=page.commands,
                all_commands=page.all_commands,
            )
        except jinja2.TemplateError as e:
            raise TemplateError(f"Failed to render template: {e}") from e


__all__ = ["TemplateEmitter", "anchor", "paragraph"]
