"""Subcommand modules for gratuityctl.

Provides register_commands() which uses deferred imports to keep
``gratuityctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from gratuityctl.commands.calculate import calculate

    cli.add_command(calculate)
