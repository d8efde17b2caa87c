"""Tests for the public rendering API."""

import pytest

from clishow.emitters import TerminalEmitter
from clishow.exceptions import SourceError, TemplateError
from clishow.render import (
    help_html,
    help_markdown,
    help_markdown_command,
    print_help_markdown,
    render_page,
)


class TestHelpMarkdown:
    """Tests for the Markdown helpers."""

    def test_click_command(self, click_app):
        """Click commands are documented directly."""
        markdown = help_markdown_command(click_app)

        assert markdown.startswith("# Command-Line Help for `tool`\n")
        assert "## `tool db migrate`" in markdown
        assert "debug-dump" not in markdown

    def test_spec_source(self, app_spec):
        """CommandSpec trees are documented too."""
        markdown = help_markdown_command(app_spec)
        assert "* [`app build`↴](#app-build)" in markdown

    def test_factory(self, click_app):
        """help_markdown accepts a zero-argument factory."""
        assert help_markdown(lambda: click_app) == help_markdown_command(click_app)

    def test_command_passed_directly(self, click_app):
        """help_markdown also accepts the command itself."""
        assert help_markdown(click_app) == help_markdown_command(click_app)

    def test_print(self, capsys, app_spec):
        """print_help_markdown writes the document to stdout unchanged."""
        print_help_markdown(app_spec)
        assert capsys.readouterr().out == help_markdown_command(app_spec)

    def test_unsupported_object(self):
        """Objects that are not commands are rejected."""
        with pytest.raises(SourceError):
            help_markdown_command(object())


class TestHelpHtml:
    """Tests for the HTML helper."""

    def test_default_template(self, click_app):
        """The bundled template is used by default."""
        html = help_html(click_app)

        assert html.startswith("<!DOCTYPE html>")
        assert 'id="tool-deploy"' in html

    def test_missing_template(self, tmp_path, click_app):
        """A missing template raises TemplateError."""
        with pytest.raises(TemplateError):
            help_html(click_app, template=tmp_path / "missing.html.j2")


class TestRenderPage:
    """Tests for render_page()."""

    def test_custom_emitter_and_title(self, app_spec):
        """Any emitter can be plugged in, with a custom title."""
        output = render_page(app_spec, TerminalEmitter(), title="Reference")
        assert "Usage: app build [OPTIONS] <TARGET>" in output
