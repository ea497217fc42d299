"""``guardkit.logging`` provides the handler used by guardkit's default logging
configuration."""

import copy
import sys
from logging import LogRecord
from pathlib import Path
from typing import Any

import click
import rich.logging
import rich.traceback

from guardkit.utils import _format_rich

_TRACEBACK_PREFIX = "tracebacks_"


def _traceback_options(handler_kwargs: dict[str, Any]) -> dict[str, Any]:
    """Collect the ``tracebacks_*`` handler options as ``rich.traceback.install``
    arguments. Frames from click and the interpreter's own directory are always
    suppressed; a ``tracebacks_suppress`` option extends that list.
    """
    options: dict[str, Any] = {"suppress": [click, str(Path(sys.executable).parent)]}
    for key, value in handler_kwargs.items():
        if not key.startswith(_TRACEBACK_PREFIX):
            continue
        option = key[len(_TRACEBACK_PREFIX) :]
        if option == "suppress":
            options["suppress"].extend(value)
        else:
            options[option] = value
    return options


class RichHandler(rich.logging.RichHandler):
    """A ``rich.logging.RichHandler`` for guardkit's loggers.

    Markup is on unless ``markup=False`` is passed. When ``rich_tracebacks`` is
    set, the ``tracebacks_*`` options are handed to ``rich.traceback.install``.
    Records logged with ``extra={"rich_format": [...]}`` have their leading
    arguments wrapped in the listed markup, for example
    ``logger.debug("Guard '%s' failed", name, extra={"rich_format": ["yellow"]})``.
    """

    def __init__(self, *args: Any, **kwargs: Any):
        kwargs.setdefault("markup", True)
        super().__init__(*args, **kwargs)

        if self.rich_tracebacks:
            rich.traceback.install(**_traceback_options(kwargs))

    def emit(self, record: LogRecord) -> None:
        markup = getattr(record, "rich_format", None)
        if markup is None or not record.args:
            super().emit(record)
            return

        if not markup or not isinstance(markup, list):
            raise TypeError("rich_format only accept non-empty list as an argument")

        # Other handlers receive the same record, so only a copy is marked up.
        styled = copy.copy(record)
        args = list(record.args)  # type: ignore[arg-type]
        for position, style in enumerate(markup[: len(args)]):
            args[position] = _format_rich(str(args[position]), style)
        styled.args = tuple(args)
        super().emit(styled)
