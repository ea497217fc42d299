"""``guardkit.factory.factory`` builds populated instances of error kinds from an
optional parameter name and an optional message.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, TypeVar

from guardkit.errors import ConstructionFailure
from guardkit.normalization import normalize

from .registry import (
    NO_ARGS,
    SINGLE_STRING,
    TWO_STRINGS,
    ConstructionHooks,
    ErrorKindRegistry,
)

E = TypeVar("E", bound=BaseException)

logger = logging.getLogger(__name__)


def _construction_ladder(
    parameter: str | None, message: str | None
) -> list[tuple[str, tuple[str, ...]]]:
    """Order the construction attempts for a kind that is not well-known.

    The first entry is the intended path for the given inputs. It is followed
    by the single-string path with the message, or the parameter when there
    is no message, and finally the no-argument path. Each path appears once.
    """
    if parameter is None and message is None:
        intended: tuple[str, tuple[str, ...]] = (NO_ARGS, ())
    elif message is None:
        intended = (SINGLE_STRING, (parameter,))  # type: ignore[assignment]
    elif parameter is None:
        intended = (SINGLE_STRING, (message,))
    else:
        intended = (TWO_STRINGS, (parameter, message))

    ladder = [intended]
    text = message if message is not None else parameter
    if text is not None:
        ladder.append((SINGLE_STRING, (text,)))
    ladder.append((NO_ARGS, ()))

    seen: set[str] = set()
    unique = []
    for path, args in ladder:
        if path not in seen:
            seen.add(path)
            unique.append((path, args))
    return unique


class ErrorFactory:
    """``ErrorFactory`` creates an instance of a caller-chosen error kind.

    The four well-known argument errors are built with their own argument
    order. Every other kind is built through the construction hooks held by
    the registry, falling back to weaker construction paths when the intended
    one is not available.

    Example:
    ::

        >>> factory = ErrorFactory()
        >>> error = factory.create(ArgumentError, "name", "Name is required.")
        >>> error.param_name
        'name'
    """

    def __init__(self, registry: ErrorKindRegistry | None = None):
        self._registry = registry if registry is not None else ErrorKindRegistry()

    @property
    def registry(self) -> ErrorKindRegistry:
        return self._registry

    def create(
        self,
        kind: type[E],
        parameter: str | None = None,
        message: str | None = None,
    ) -> E:
        """Create an instance of ``kind``.

        Args:
            kind: The error class to instantiate.
            parameter: Name of the offending parameter. Empty or whitespace
                only values count as absent.
            message: Text describing the problem. Empty or whitespace only
                values count as absent.

        Returns:
            A fully constructed instance of ``kind``.

        Raises:
            ConstructionFailure: If ``kind`` offers no usable construction path.
            TypeError: If ``kind`` is not an exception class.
        """
        parameter = normalize(parameter)
        message = normalize(message)
        hooks = self._registry.hooks_for(kind)

        if hooks.well_known:
            return self._create_well_known(hooks, parameter, message)  # type: ignore[return-value]
        return self._create_arbitrary(kind, hooks, parameter, message)

    @staticmethod
    def _create_well_known(
        hooks: ConstructionHooks, parameter: str | None, message: str | None
    ) -> BaseException:
        if parameter is None and message is None:
            return hooks.no_args()  # type: ignore[misc]
        if message is None:
            return hooks.parameter_only(parameter)  # type: ignore[misc,arg-type]
        if parameter is None:
            return hooks.message_only(message)  # type: ignore[misc]
        return hooks.two_strings(parameter, message)  # type: ignore[misc]

    @staticmethod
    def _create_arbitrary(
        kind: type[E],
        hooks: ConstructionHooks,
        parameter: str | None,
        message: str | None,
    ) -> E:
        attempted = []
        for path, args in _construction_ladder(parameter, message):
            attempted.append(path)
            hook = getattr(hooks, path)
            if hook is None:
                continue

            if len(attempted) > 1:
                logger.debug(
                    "Constructing '%s' through the %s path after %s was unavailable",
                    kind.__qualname__,
                    path,
                    ", ".join(attempted[:-1]),
                    extra={"rich_format": ["cyan", "bold"]},
                )
            error = hook(*args)
            if not isinstance(error, kind):
                raise ConstructionFailure(kind, tuple(attempted)) from TypeError(
                    f"The {path} hook returned '{type(error).__qualname__}' "
                    f"instead of '{kind.__qualname__}'."
                )
            return error

        raise ConstructionFailure(kind, tuple(attempted))


_factory: ErrorFactory | None = None
_factory_lock = threading.RLock()


def get_error_factory() -> ErrorFactory:
    """Return the process-wide factory, building it on first use.

    Its registry is an instance of ``settings.ERROR_KIND_REGISTRY_CLASS`` and
    is handed to every ``register_error_kinds`` hook implementation before
    the factory is returned. Hook implementations running on the building
    thread already see the new factory, so they may call
    ``register_error_kind``; other threads wait until population is done.
    """
    global _factory  # noqa: PLW0603
    with _factory_lock:
        if _factory is None:
            # Imported here to avoid circular imports
            from guardkit.framework.hooks.manager import get_hook_manager
            from guardkit.framework.project import settings

            registry = settings.ERROR_KIND_REGISTRY_CLASS()
            _factory = ErrorFactory(registry)
            try:
                get_hook_manager().hook.register_error_kinds(registry=registry)
            except Exception:
                _factory = None
                raise
            logger.debug("Error kind registry populated with %d kind(s)", len(registry))
        return _factory


def _reset_error_factory() -> None:
    global _factory  # noqa: PLW0603
    with _factory_lock:
        _factory = None


def create_error(
    kind: type[E], parameter: str | None = None, message: str | None = None
) -> E:
    """Create an instance of ``kind`` with the process-wide factory.

    See ``ErrorFactory.create`` for the meaning of the arguments.
    """
    return get_error_factory().create(kind, parameter, message)


def register_error_kind(kind: Any = None, **hooks: Any) -> Any:
    """Register construction hooks on the process-wide registry.

    Accepts the same arguments as ``ErrorKindRegistry.register`` and can be
    used as a class decorator, with or without hook arguments.
    """
    return get_error_factory().registry.register(kind, **hooks)
