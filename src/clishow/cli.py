"""clishow command-line interface.

Commands:
    render  Render documentation for a Click application or a description file
    tree    Show the command tree of an application
    init    Write a clishow.toml configuration file
    help    Show help for commands
"""

import logging
import sys
from pathlib import Path

import click

from clishow.config_manager import ClishowConfig, ConfigError, ConfigManager
from clishow.emitters import FORMATS, TerminalEmitter, get_emitter
from clishow.exceptions import ClishowError
from clishow.sources import ClickCommand, CommandSource, load_click_command, load_spec
from clishow.walker import build_page

logger = logging.getLogger(__name__)


def _load_source(source: str, spec: bool, app_dir: str) -> CommandSource:
    """Load the command tree to document.

    Args:
        source: "module:attribute" of a Click command, or a description file
        spec: Treat source as a YAML/JSON description file
        app_dir: Directory prepended to the module search path
    """
    if spec:
        return load_spec(source)

    app_path = str(Path(app_dir).resolve())
    if app_path not in sys.path:
        sys.path.insert(0, app_path)
    return ClickCommand(load_click_command(source))


source_argument = click.argument("source", type=str)
spec_option = click.option(
    "--spec",
    is_flag=True,
    help="Treat SOURCE as a YAML/JSON command description instead of module:attribute",
)
app_dir_option = click.option(
    "--app-dir",
    default=".",
    show_default=True,
    help="Directory added to the module search path before importing SOURCE",
)


@click.group(name="clishow")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="clishow")
def main(verbose: bool) -> None:
    """Generate command-line help documentation.

    clishow walks the command tree of a Click application (or a YAML/JSON
    command description) and renders it as Markdown, HTML or a terminal
    overview.

    \b
    EXAMPLES:
        # Markdown for a Click application
        $ clishow render myapp.cli:main > docs/cli.md

        # HTML through the bundled template
        $ clishow render myapp.cli:main --format html -o docs/cli.html

        # Render a static description with a custom template
        $ clishow render --spec cli.yaml --template page.md.j2

        # Overview of all commands
        $ clishow tree myapp.cli:main

    \b
    CONFIGURATION:
        Config file: ./clishow.toml or [tool.clishow] in ./pyproject.toml
        Keys: format, template, title, footer, output
    """
    # Set up logging
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")


@main.command(name="render")
@source_argument
@spec_option
@app_dir_option
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMATS, case_sensitive=False),
    help="Output format (default: markdown)",
)
@click.option("--template", "-t", type=click.Path(path_type=Path), help="Jinja2 template file")
@click.option("--title", help="Document title (default: program name)")
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Write output to file")
@click.option("--footer/--no-footer", default=None, help="Append a generated-by footer")
@click.option("--config", "config_path", type=str, help="Config file path")
def render_command(
    source: str,
    spec: bool,
    app_dir: str,
    output_format: str | None,
    template: Path | None,
    title: str | None,
    output: Path | None,
    footer: bool | None,
    config_path: str | None,
) -> None:
    """Render documentation for SOURCE.

    SOURCE is the import path of a Click command ("package.module:attribute"),
    or with --spec a YAML/JSON command description file.

    \b
    Examples:
        clishow render myapp.cli:main
        clishow render myapp.cli:main --format html --output cli.html
        clishow render --spec cli.yaml --title "My App"
    """
    try:
        config = ConfigManager.load_config(config_path)

        output_format = (output_format or config.format).lower()
        template = template or (Path(config.template) if config.template else None)
        title = title or config.title
        footer = config.footer if footer is None else footer
        output = output or (Path(config.output) if config.output else None)

        # Load the template first: a broken template must fail before any output
        emitter = get_emitter(output_format, template=template, footer=footer)

        page = build_page(_load_source(source, spec, app_dir), title=title)

        if isinstance(emitter, TerminalEmitter) and output is None:
            emitter.print(page)
            return

        document = emitter.render(page)

    except (ClishowError, ConfigError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output is None:
        click.echo(document, nl=False)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(document, encoding="utf-8")
    except OSError as e:
        click.echo(f"Error: Failed to write {output}: {e}", err=True)
        sys.exit(1)

    logger.info(f"Wrote {len(page.all_commands)} command(s) to {output}")


@main.command(name="tree")
@source_argument
@spec_option
@app_dir_option
def tree_command(source: str, spec: bool, app_dir: str) -> None:
    """Show the command tree of SOURCE.

    Hidden commands and their subcommands are left out.

    \b
    Examples:
        clishow tree myapp.cli:main
        clishow tree --spec cli.yaml
    """
    try:
        page = build_page(_load_source(source, spec, app_dir))
    except ClishowError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    emitter = TerminalEmitter()
    emitter.console.print(emitter.render_tree(page))


@main.command(name="init")
@click.option("--config", "config_path", type=str, help="Config file path (default: ./clishow.toml)")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMATS, case_sensitive=False),
    default="markdown",
    show_default=True,
    help="Default output format",
)
@click.option("--title", help="Default document title")
def init_command(config_path: str | None, output_format: str, title: str | None) -> None:
    """Write a clishow.toml configuration file.

    Existing files are updated in place (comments are preserved).

    \b
    Examples:
        clishow init
        clishow init --format html --title "My App"
    """
    config = ClishowConfig(format=output_format.lower(), title=title)

    try:
        path = ConfigManager.save_config(config, config_path)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Saved configuration to {path}")


@main.command(name="help")
@click.argument("command_name", required=False, type=str)
@click.pass_context
def help_command(ctx: click.Context, command_name: str | None) -> None:
    """Show help for commands.

    \b
    Examples:
        clishow help              # Show general help
        clishow help render       # Show help for render command
    """
    if command_name is None:
        click.echo(ctx.parent.get_help())
        return

    cmd = main.commands.get(command_name)
    if cmd is None:
        click.echo(f"Error: No such command '{command_name}'.", err=True)
        ctx.exit(1)

    cmd_ctx = click.Context(cmd, info_name=command_name, parent=ctx.parent)
    click.echo(cmd.get_help(cmd_ctx))


if __name__ == "__main__":
    main()
