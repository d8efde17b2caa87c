"""Terminal help emitter using Rich tables.

Prints the command tree the way a CLI prints its own --help: per command a
heading, usage line and aligned columns for subcommands, arguments and
options. Also builds a compact tree view of the whole program.

Example Usage:
    >>> emitter = TerminalEmitter()
    >>> emitter.print(page)
"""

import logging

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from clishow.models import CommandRecord, FlagRecord, PageModel

logger = logging.getLogger(__name__)


class TerminalEmitter:
    """Render a PageModel for the terminal.

    Args:
        console: Optional Rich console (creates new one if None)
        width: Console width used when rendering to a string
    """

    def __init__(self, console: Console | None = None, width: int = 100):
        self.console = console or Console()
        self.width = width

    def render(self, page: PageModel) -> str:
        """Render the page to plain text (no colors)."""
        console = Console(width=self.width, color_system=None, force_terminal=False)
        with console.capture() as capture:
            self._print_page(console, page)
        return capture.get()

    def print(self, page: PageModel) -> None:
        """Print the page on the emitter's console."""
        self._print_page(self.console, page)

    def render_tree(self, page: PageModel) -> Tree:
        """Build a tree view of every documented command.

        Example:
            >>> console.print(emitter.render_tree(page))
            app
            ├── build  Build a target
            └── test   Run the tests
        """
        root = Tree(self._tree_label(page.main))
        nodes = {page.main.cmd_chain: root}

        for record in page.commands:
            parent_chain = record.cmd_chain.rsplit(" ", 1)[0]
            parent = nodes.get(parent_chain, root)
            nodes[record.cmd_chain] = parent.add(self._tree_label(record))

        return root

    def _tree_label(self, record: CommandRecord) -> str:
        label = f"[bold cyan]{escape(record.title)}[/bold cyan]"
        summary = record.description.split("\n", 1)[0] if record.description else ""
        if summary:
            label += f"  {escape(summary)}"
        return label

    def _print_page(self, console: Console, page: PageModel) -> None:
        for record in page.all_commands:
            self._print_command(console, record)

    def _print_command(self, console: Console, record: CommandRecord) -> None:
        console.print(f"[bold cyan]{escape(record.cmd_chain)}[/bold cyan]")
        if record.description:
            console.print(escape(record.description))
        console.print()
        console.print(f"[bold]Usage:[/bold] {escape(record.full_usage)}")
        console.print()

        if record.commands:
            table = self._create_table("Commands")
            for summary in record.commands:
                table.add_row(escape(summary.name), escape(summary.description))
            console.print(table)
            console.print()

        if record.arguments:
            console.print(self._flag_table("Arguments", record.arguments))
            console.print()

        if record.options:
            console.print(self._flag_table("Options", record.options))
            console.print()

    def _create_table(self, title: str) -> Table:
        table = Table(
            title=f"[bold]{title}[/bold]",
            title_justify="left",
            show_header=False,
            box=None,
            padding=(0, 2),
        )
        table.add_column(style="green", no_wrap=True)
        table.add_column()
        return table

    def _flag_table(self, title: str, flags: tuple[FlagRecord, ...]) -> Table:
        table = self._create_table(title)
        for flag in flags:
            table.add_row(escape(flag.flags), escape(self._describe(flag)))
        return table

    def _describe(self, flag: FlagRecord) -> str:
        parts = [flag.description] if flag.description else []
        if flag.default_values:
            parts.append(f"[default: {', '.join(flag.default_values)}]")
        if flag.possible_values:
            names = ", ".join(pv.name for pv in flag.possible_values)
            parts.append(f"[possible values: {names}]")
        return " ".join(parts)


__all__ = ["TerminalEmitter"]
