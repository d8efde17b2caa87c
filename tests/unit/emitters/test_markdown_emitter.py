"""Tests for the Markdown emitter."""

from clishow.emitters import MarkdownEmitter
from clishow.models import FlagRecord, PossibleValueRecord
from clishow.sources import ArgumentSpec, CommandSpec
from clishow.walker import build_page


def render(spec, **kwargs):
    return MarkdownEmitter(**kwargs).render(build_page(spec))


class TestMarkdownDocument:
    """Tests for the overall document layout."""

    def test_full_document(self, build_spec):
        """A small tree renders to the exact expected document."""
        spec = CommandSpec(name="app", about="Example", subcommands=(build_spec,))

        expected = (
            "# Command-Line Help for `app`\n"
            "\n"
            "This document contains the help content for the `app` command-line program.\n"
            "\n"
            "**Command Overview:**\n"
            "\n"
            "* [`app`↴](#app)\n"
            "* [`app build`↴](#app-build)\n"
            "\n"
            "## `app`\n"
            "\n"
            "Example\n"
            "\n"
            "**Usage:** `app [COMMAND]`\n"
            "\n"
            "###### **Subcommands:**\n"
            "\n"
            "* `build` — Build a target\n"
            "\n"
            "\n"
            "\n"
            "## `app build`\n"
            "\n"
            "Build a target\n"
            "\n"
            "**Usage:** `app build [OPTIONS] <TARGET>`\n"
            "\n"
            "###### **Arguments:**\n"
            "\n"
            "* `<TARGET>` — Target to build\n"
            "\n"
            "###### **Options:**\n"
            "\n"
            "* `-v, --verbose` — Verbose output\n"
        )

        assert render(spec) == expected

    def test_table_of_contents_excludes_hidden(self, app_spec):
        """Exactly one TOC entry per non-hidden command."""
        markdown = render(app_spec)
        toc_entries = [line for line in markdown.splitlines() if line.startswith("* [`")]

        assert toc_entries == ["* [`app`↴](#app)", "* [`app build`↴](#app-build)"]
        assert "internal" not in markdown
        assert "reindex" not in markdown

    def test_idempotent(self, app_spec):
        """Rendering the same tree twice gives identical output."""
        assert render(app_spec) == render(app_spec)

    def test_footer(self, build_spec):
        """The footer is only added on request."""
        assert "generated automatically" not in render(build_spec)
        assert "generated automatically by <code>clishow</code>" in render(build_spec, footer=True)

    def test_custom_title_not_code(self, app_spec):
        """Display names and explicit titles are shown as plain text."""
        named = CommandSpec(name="app", display_name="My App")

        assert render(named).startswith("# Command-Line Help for My App\n")
        titled = MarkdownEmitter().render(build_page(app_spec, title="App Reference"))
        assert titled.startswith("# Command-Line Help for App Reference\n")

    def test_sections_skipped_when_empty(self):
        """Commands without subcommands/arguments/options have no such headings."""
        markdown = render(CommandSpec(name="bare"))

        assert "Subcommands" not in markdown
        assert "Arguments" not in markdown
        assert "Options" not in markdown


class TestMarkdownFlags:
    """Tests for argument and option entries."""

    def test_default_and_possible_values(self, app_spec):
        """Single default and inline possible values; hidden values dropped."""
        markdown = render(app_spec)

        assert "* `--color [COLOR]` — When to use colors" in markdown
        assert "  Default value: `auto`" in markdown
        assert "  Possible values: `auto`, `always`, `never`" in markdown
        assert "`debug`" not in markdown

    def test_plural_default_values(self):
        """More than one default uses the plural label."""
        spec = CommandSpec(
            name="app",
            arguments=(
                ArgumentSpec(id="tag", long="tag", max_occurrences=None, default_values=("a", "b")),
            ),
        )
        assert "  Default values: `a`, `b`" in render(spec)

    def test_possible_values_with_help(self):
        """Possible values with help become a nested list."""
        flag = FlagRecord(
            flags="--mode [MODE]",
            possible_values=(
                PossibleValueRecord(name="fast", help="Go fast"),
                PossibleValueRecord(name="slow"),
            ),
        )
        lines = MarkdownEmitter()._generate_flag(flag)

        assert lines == [
            "* `--mode [MODE]`",
            "",
            "  Possible values:",
            "  - `fast`:",
            "    Go fast",
            "  - `slow`",
            "",
        ]

    def test_multiline_help_indented(self):
        """Continuation lines of help text stay inside the list item."""
        flag = FlagRecord(flags="-x", description="First line\nSecond line")
        assert MarkdownEmitter()._generate_flag(flag) == ["* `-x` — First line\n  Second line"]
