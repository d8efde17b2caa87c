"""Command-tree traversal.

Walks a command tree in pre-order and produces one CommandRecord per
non-hidden command. Hidden commands are skipped together with their whole
subtree. Children are visited in declaration order.
"""

import logging
from collections.abc import Sequence

from clishow.models import CommandRecord, PageModel
from clishow.record_builder import build_record
from clishow.sources.protocols import CommandSource

logger = logging.getLogger(__name__)


def walk(root: CommandSource, ancestors: Sequence[str] = ()) -> list[CommandRecord]:
    """Build records for a command and all of its non-hidden descendants.

    Uses an explicit stack, so deep trees never hit the recursion limit.

    Args:
        root: Command to start from
        ancestors: Names of the commands above root

    Returns:
        Records in pre-order (root first); empty when root is hidden

    Example:
        >>> [record.cmd_chain for record in walk(app)]
        ['app', 'app build', 'app build docs', 'app test']
    """
    records: list[CommandRecord] = []
    stack: list[tuple[CommandSource, tuple[str, ...]]] = [(root, tuple(ancestors))]

    while stack:
        node, parents = stack.pop()
        if node.hidden:
            logger.debug(f"Skipping hidden command: {' '.join([*parents, node.name])}")
            continue

        logger.debug(f"Visiting command: {' '.join([*parents, node.name])}")
        records.append(build_record(node, parents))

        chain = (*parents, node.name)
        for child in reversed(list(node.get_subcommands())):
            stack.append((child, chain))

    return records


def build_page(root: CommandSource, title: str | None = None) -> PageModel:
    """Assemble the page model for a whole command tree.

    The root is always documented (it is the program itself); its
    descendants follow the hidden-command rules of walk().

    Args:
        root: Root command of the program
        title: Document title as plain text (defaults to the display name,
            else the program name)

    Returns:
        PageModel with the root record and every descendant record
    """
    main = build_record(root)

    descendants: list[CommandRecord] = []
    for child in root.get_subcommands():
        descendants.extend(walk(child, (root.name,)))

    if title is None:
        title = root.display_name or root.name

    return PageModel(title=title, name=root.name, main=main, commands=tuple(descendants))


__all__ = ["build_page", "walk"]
