"""Markdown documentation emitter.

Generates a single Markdown document from a PageModel: title, overview
paragraph, table of contents, then one section per command with usage,
subcommands, arguments and options.

Philosophy:
- Simple string formatting (sections joined by newlines)
- Standard library only
- Same input always yields byte-identical output
"""

from clishow.models import CommandRecord, FlagRecord, PageModel

FOOTER = """<hr/>

<small><i>
    This document was generated automatically by <code>clishow</code>.
</i></small>
"""


class MarkdownEmitter:
    """Renders a PageModel as Markdown.

    Args:
        footer: Append a "generated automatically" footer
    """

    def __init__(self, footer: bool = False):
        self.footer = footer

    def render(self, page: PageModel) -> str:
        """Render the complete document.

        Example:
            >>> emitter = MarkdownEmitter()
            >>> markdown = emitter.render(build_page(source))
            >>> markdown.splitlines()[0]
            '# Command-Line Help for `app`'
        """
        sections = [
            self._generate_header(page),
            self._generate_table_of_contents(page),
        ]

        for record in page.all_commands:
            sections.append(self._generate_command(record))

        if self.footer:
            sections.append(FOOTER)

        return "\n".join(sections).rstrip("\n") + "\n"

    def _generate_header(self, page: PageModel) -> str:
        # A bare program name is shown as code
        title = f"`{page.title}`" if page.title == page.name else page.title
        return (
            f"# Command-Line Help for {title}\n\n"
            f"This document contains the help content for the `{page.name}` "
            f"command-line program.\n"
        )

    def _generate_table_of_contents(self, page: PageModel) -> str:
        lines = ["**Command Overview:**\n"]
        for record in page.all_commands:
            lines.append(f"* [`{record.cmd_chain}`↴](#{record.anchor})")
        lines.append("")
        return "\n".join(lines)

    def _generate_command(self, record: CommandRecord) -> str:
        lines = [f"## `{record.cmd_chain}`\n"]

        if record.description:
            lines.append(f"{record.description}\n")

        lines.append(f"**Usage:** `{record.full_usage}`\n")

        if record.commands:
            lines.append("###### **Subcommands:**\n")
            for summary in record.commands:
                lines.append(f"* `{summary.name}` — {summary.description}".rstrip())
            lines.append("")

        if record.arguments:
            lines.append("###### **Arguments:**\n")
            for arg in record.arguments:
                lines.extend(self._generate_flag(arg))
            lines.append("")

        if record.options:
            lines.append("###### **Options:**\n")
            for opt in record.options:
                lines.extend(self._generate_flag(opt))
            lines.append("")

        # Extra space between commands, for readers of the .md source
        lines.append("\n")
        return "\n".join(lines)

    def _generate_flag(self, flag: FlagRecord) -> list[str]:
        item = f"* `{flag.flags.strip()}`"
        if flag.description:
            item += " — " + flag.description.replace("\n", "\n  ")
        lines = [item]

        if flag.default_values:
            label = "Default values" if len(flag.default_values) > 1 else "Default value"
            values = ", ".join(f"`{value}`" for value in flag.default_values)
            lines.extend(["", f"  {label}: {values}"])

        if flag.possible_values:
            if flag.possible_values_have_help:
                lines.extend(["", "  Possible values:"])
                for pv in flag.possible_values:
                    if pv.help:
                        lines.append(f"  - `{pv.name}`:")
                        lines.append(f"    {pv.help}")
                    else:
                        lines.append(f"  - `{pv.name}`")
                lines.append("")
            else:
                values = ", ".join(f"`{pv.name}`" for pv in flag.possible_values)
                lines.extend(["", f"  Possible values: {values}", ""])

        return lines


__all__ = ["MarkdownEmitter"]
