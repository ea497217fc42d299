"""guardkit is a CLI for inspecting how guardkit constructs error kinds.

This module implements commands available from the guardkit CLI.
"""

from __future__ import annotations

from collections import defaultdict

import click

from guardkit import __version__ as version
from guardkit.framework.cli.kinds import kinds
from guardkit.framework.cli.utils import (
    CONTEXT_SETTINGS,
    ENTRY_POINT_GROUPS,
    GuardkitCliError,
    _get_entry_points,
)
from guardkit.framework.project import LOGGING  # noqa: F401


@click.group(context_settings=CONTEXT_SETTINGS, name="guardkit")
@click.version_option(version, "--version", "-V", help="Show version and exit")
@click.option(
    "--verbose", "-v", is_flag=True, help="See extensive logging and error stack traces."
)
def cli(verbose: bool) -> None:
    """guardkit is a CLI for inspecting error kinds and the plugins that
    register them. For more information, type ``guardkit info``.
    """
    GuardkitCliError.VERBOSE_ERROR = verbose


@cli.command()
def info() -> None:
    """Get more information about guardkit."""
    click.secho(f"guardkit v{version}", fg="green")
    click.echo(
        "guardkit raises errors of a caller-chosen kind\n"
        "from guard clauses, whatever the shape of\n"
        "that kind's constructor."
    )

    plugin_versions = {}
    plugin_entry_points = defaultdict(set)
    for plugin_entry_point in ENTRY_POINT_GROUPS:
        for entry_point in _get_entry_points(plugin_entry_point):
            module_name = entry_point.module.split(".")[0]
            plugin_versions[module_name] = entry_point.dist.version
            plugin_entry_points[module_name].add(plugin_entry_point)

    click.echo()
    if plugin_versions:
        click.echo("Installed plugins:")
        for plugin_name, plugin_version in sorted(plugin_versions.items()):
            entrypoints_str = ",".join(sorted(plugin_entry_points[plugin_name]))
            click.echo(
                f"{plugin_name}: {plugin_version} (entry points:{entrypoints_str})"
            )
    else:
        click.echo("No plugins installed")


cli.add_command(kinds)


def main() -> None:  # pragma: no cover
    """Main entry point of the guardkit CLI."""
    cli(prog_name="guardkit")
