"""
Shared test fixtures and configuration for clishow tests.

This module provides common fixtures used across all test types:
- Static command descriptions (CommandSpec trees)
- A sample Click application
"""

import click
import pytest

from clishow.sources import ArgumentSpec, CommandSpec, PossibleValueSpec

# ============================================================================
# STATIC DESCRIPTION FIXTURES
# ============================================================================


@pytest.fixture
def build_spec():
    """`build` subcommand with a required positional and a verbose flag."""
    return CommandSpec(
        name="build",
        about="Build a target",
        arguments=(
            ArgumentSpec(id="target", positional=True, required=True, help="Target to build"),
            ArgumentSpec(
                id="verbose",
                short="v",
                long="verbose",
                takes_value=False,
                help="Verbose output",
            ),
        ),
    )


@pytest.fixture
def app_spec(build_spec):
    """Root `app` with a visible `build` and a hidden `internal` subtree."""
    internal = CommandSpec(
        name="internal",
        about="Internal maintenance commands",
        hidden=True,
        subcommands=(CommandSpec(name="reindex", about="Rebuild the index"),),
    )
    return CommandSpec(
        name="app",
        about="Example application",
        long_about="Example application\n\nBuilds and tests projects.",
        arguments=(
            ArgumentSpec(
                id="color",
                long="color",
                help="When to use colors",
                default_values=("auto",),
                possible_values=(
                    PossibleValueSpec(name="auto"),
                    PossibleValueSpec(name="always"),
                    PossibleValueSpec(name="never"),
                    PossibleValueSpec(name="debug", hidden=True),
                ),
            ),
        ),
        subcommands=(build_spec, internal),
    )


@pytest.fixture
def nested_spec():
    """Three-level tree root -> A -> B."""
    return CommandSpec(
        name="root",
        subcommands=(CommandSpec(name="A", subcommands=(CommandSpec(name="B"),)),),
    )


# ============================================================================
# CLICK FIXTURES
# ============================================================================


@pytest.fixture
def click_app():
    """Sample Click application with groups, hidden commands and choices."""

    @click.group(name="tool")
    @click.option("--config", "-c", metavar="PATH", help="Config file path")
    def tool(config):
        """Project tool.

        Manages projects from the command line.
        """

    @tool.command(name="deploy")
    @click.argument("environment")
    @click.argument("services", nargs=-1)
    @click.option(
        "--region",
        "-r",
        type=click.Choice(["eastus", "westus2"]),
        default="westus2",
        help="Target region",
    )
    @click.option("--tag", multiple=True, help="Tags to apply")
    @click.option("--force", is_flag=True, help="Skip confirmation")
    def deploy(environment, services, region, tag, force):
        """Deploy services to an environment."""

    @tool.group(name="db")
    def db():
        """Database commands."""

    @db.command(name="migrate")
    @click.option("--dry-run", is_flag=True, help="Show what would run")
    def migrate(dry_run):
        """Run database migrations."""

    @tool.command(name="debug-dump", hidden=True)
    def debug_dump():
        """Dump internal state."""

    return tool
