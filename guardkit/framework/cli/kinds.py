"""A collection of CLI commands for working with error kinds."""

import click
import yaml

from guardkit.factory import get_error_factory
from guardkit.framework.cli.utils import GuardkitCliError
from guardkit.utils import load_obj


@click.group(name="guardkit")
def kinds_cli() -> None:  # pragma: no cover
    pass


@kinds_cli.group()
def kinds() -> None:
    """Commands for working with error kinds."""


@kinds.command("list")
def list_error_kinds() -> None:
    """List the well-known and registered error kinds with their construction paths."""
    registry = get_error_factory().registry
    result = {}
    for kind in registry.kinds():
        description = registry.describe(kind)
        result[description["kind"]] = description["paths"]
    click.echo(yaml.dump(result))


@kinds.command("describe")
@click.argument("kind_path", nargs=1)
def describe_error_kind(kind_path: str) -> None:
    """Describe how an error kind is constructed, given its dotted import path."""
    try:
        kind = load_obj(kind_path)
    except (ImportError, AttributeError, ValueError) as exc:
        raise GuardkitCliError(f"Unable to load error kind '{kind_path}': {exc}") from exc

    try:
        description = get_error_factory().registry.describe(kind)
    except TypeError as exc:
        raise GuardkitCliError(str(exc)) from exc

    click.echo(yaml.dump(description))
