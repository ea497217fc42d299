"""Utilities for use with click."""

from __future__ import annotations

import traceback
from typing import IO, Any

import click
import importlib_metadata

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

ENTRY_POINT_GROUPS = {
    "hooks": "guardkit.hooks",
}


class GuardkitCliError(click.exceptions.ClickException):
    """Exceptions generated from the guardkit CLI.

    Users should pass an appropriate message at the constructor.
    """

    VERBOSE_ERROR = False

    def show(self, file: IO | None = None) -> None:
        if self.VERBOSE_ERROR:
            click.secho(traceback.format_exc(), nl=False, fg="yellow")
        super().show(file)


def _get_entry_points(name: str) -> Any:
    """Get all guardkit related entry points"""
    return importlib_metadata.entry_points().select(  # type: ignore[no-untyped-call]
        group=ENTRY_POINT_GROUPS[name]
    )
