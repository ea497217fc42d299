"""``guardkit.framework.cli`` implements commands available from guardkit's CLI."""

from .cli import main

__all__ = ["main"]
