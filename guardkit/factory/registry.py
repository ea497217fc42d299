"""``guardkit.factory.registry`` maps error kinds to the hooks that construct them."""

from __future__ import annotations

import inspect
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from guardkit.errors import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    ArgumentVerifyError,
)

logger = logging.getLogger(__name__)

PARAMETER = "parameter"
MESSAGE = "message"

NO_ARGS = "no_args"
SINGLE_STRING = "single_string"
TWO_STRINGS = "two_strings"
PARAMETER_ONLY = "parameter_only"
MESSAGE_ONLY = "message_only"

# Positional order of the two-string constructor of every well-known kind.
# ``ArgumentError`` takes the message first, the others take the parameter first.
WELL_KNOWN_ARGUMENT_ORDER: dict[type[BaseException], tuple[str, str]] = {
    ArgumentError: (MESSAGE, PARAMETER),
    ArgumentNullError: (PARAMETER, MESSAGE),
    ArgumentOutOfRangeError: (PARAMETER, MESSAGE),
    ArgumentVerifyError: (PARAMETER, MESSAGE),
}


@dataclass(frozen=True)
class ConstructionHooks:
    """The construction paths available for one error kind.

    A path that a kind does not support is left as ``None``. Well-known kinds
    additionally provide ``parameter_only`` and ``message_only``, which take
    precedence over ``single_string`` because their one-string constructors
    do not agree on what the single argument means.
    """

    no_args: Callable[[], BaseException] | None = None
    single_string: Callable[[str], BaseException] | None = None
    two_strings: Callable[[str, str], BaseException] | None = None
    parameter_only: Callable[[str], BaseException] | None = None
    message_only: Callable[[str], BaseException] | None = None
    well_known: bool = False

    @property
    def paths(self) -> list[str]:
        """Names of the construction paths this kind supports."""
        names = (NO_ARGS, SINGLE_STRING, TWO_STRINGS, PARAMETER_ONLY, MESSAGE_ONLY)
        return [name for name in names if getattr(self, name) is not None]


def _well_known_hooks(
    kind: type[BaseException], order: tuple[str, str]
) -> ConstructionHooks:
    def build(parameter: str | None, message: str | None) -> BaseException:
        values = {PARAMETER: parameter, MESSAGE: message}
        return kind(*(values[name] for name in order))

    return ConstructionHooks(
        no_args=kind,
        parameter_only=lambda parameter: build(parameter, None),
        message_only=lambda message: build(None, message),
        two_strings=build,
        well_known=True,
    )


def _accepts_positional(signature: inspect.Signature, count: int) -> bool:
    try:
        signature.bind(*[""] * count)
    except TypeError:
        return False
    return True


def derive_hooks(kind: type[BaseException]) -> ConstructionHooks:
    """Work out which construction paths ``kind`` supports from its signature.

    Exception types whose signature cannot be inspected (those relying on the
    constructor inherited from ``BaseException``) accept any positional
    arguments, so every path is assumed available for them.

    Args:
        kind: The error class to inspect.

    Returns:
        The construction hooks of ``kind``, calling the class directly.
    """
    try:
        signature = inspect.signature(kind)
    except (TypeError, ValueError):
        return ConstructionHooks(no_args=kind, single_string=kind, two_strings=kind)

    return ConstructionHooks(
        no_args=kind if _accepts_positional(signature, 0) else None,
        single_string=kind if _accepts_positional(signature, 1) else None,
        two_strings=kind if _accepts_positional(signature, 2) else None,
    )


def _validate_kind(kind: Any) -> None:
    if not inspect.isclass(kind) or not issubclass(kind, BaseException):
        raise TypeError(
            f"Error kinds must be exception classes, got '{kind!r}' instead."
        )


def _qualified_name(kind: type) -> str:
    return f"{kind.__module__}.{kind.__qualname__}"


class ErrorKindRegistry:
    """Registry of construction hooks, keyed by error kind.

    The well-known argument errors are always present and cannot be replaced.
    Any other kind is either registered explicitly, with hooks supplied by its
    author, or has its hooks derived from its constructor signature the first
    time it is looked up.

    Example:
    ::

        >>> registry = ErrorKindRegistry()
        >>>
        >>> class QuotaError(Exception):
        >>>     def __init__(self, resource, message):
        >>>         super().__init__(message)
        >>>         self.resource = resource
        >>>
        >>> registry.register(
        >>>     QuotaError,
        >>>     no_args=lambda: QuotaError(None, "Quota exceeded."),
        >>>     two_strings=QuotaError,
        >>> )
    """

    def __init__(self) -> None:
        self._hooks: dict[type[BaseException], ConstructionHooks] = {
            kind: _well_known_hooks(kind, order)
            for kind, order in WELL_KNOWN_ARGUMENT_ORDER.items()
        }
        self._derived: dict[type[BaseException], ConstructionHooks] = {}
        self._lock = threading.Lock()

    def register(
        self,
        kind: type[BaseException] | None = None,
        *,
        no_args: Callable[[], BaseException] | None = None,
        single_string: Callable[[str], BaseException] | None = None,
        two_strings: Callable[[str, str], BaseException] | None = None,
    ) -> Any:
        """Register construction hooks for an error kind.

        When no hook is given, the hooks are derived from the constructor
        signature of ``kind`` right away. Used without a kind, this returns a
        class decorator.

        Args:
            kind: The error class to register.
            no_args: Builds an instance without any text.
            single_string: Builds an instance from a single string, which is
                the message when one was given and the parameter name otherwise.
            two_strings: Builds an instance from ``(parameter, message)``.

        Returns:
            ``kind`` itself, or a decorator when ``kind`` is omitted.

        Raises:
            TypeError: If ``kind`` is not an exception class or a hook is not
                callable.
            ValueError: If ``kind`` is one of the well-known kinds.
        """
        if kind is None:

            def decorator(cls: type[BaseException]) -> type[BaseException]:
                return self.register(
                    cls,
                    no_args=no_args,
                    single_string=single_string,
                    two_strings=two_strings,
                )

            return decorator

        _validate_kind(kind)
        if kind in WELL_KNOWN_ARGUMENT_ORDER:
            raise ValueError(
                f"'{_qualified_name(kind)}' is a well-known error kind "
                f"and cannot be registered again."
            )

        supplied = {
            NO_ARGS: no_args,
            SINGLE_STRING: single_string,
            TWO_STRINGS: two_strings,
        }
        for name, hook in supplied.items():
            if hook is not None and not callable(hook):
                raise TypeError(
                    f"Hook '{name}' for '{_qualified_name(kind)}' is not callable."
                )

        if any(hook is not None for hook in supplied.values()):
            hooks = ConstructionHooks(**supplied)
        else:
            hooks = derive_hooks(kind)

        with self._lock:
            if kind in self._hooks:
                logger.warning(
                    "Overwriting existing construction hooks for '%s'",
                    _qualified_name(kind),
                )
            self._hooks[kind] = hooks
            self._derived.pop(kind, None)

        logger.debug(
            "Registered error kind '%s' with construction paths: %s",
            _qualified_name(kind),
            ", ".join(hooks.paths) or "none",
        )
        return kind

    def unregister(self, kind: type[BaseException]) -> None:
        """Remove the explicitly registered hooks of ``kind``.

        Raises:
            ValueError: If ``kind`` is well-known or was never registered.
        """
        if kind in WELL_KNOWN_ARGUMENT_ORDER:
            raise ValueError(
                f"'{_qualified_name(kind)}' is a well-known error kind "
                f"and cannot be unregistered."
            )
        with self._lock:
            if kind not in self._hooks:
                raise ValueError(f"'{_qualified_name(kind)}' is not registered.")
            del self._hooks[kind]

    def hooks_for(self, kind: type[BaseException]) -> ConstructionHooks:
        """Return the construction hooks of ``kind``, deriving them if needed.

        Raises:
            TypeError: If ``kind`` is not an exception class.
        """
        hooks = self._hooks.get(kind) or self._derived.get(kind)
        if hooks is not None:
            return hooks

        _validate_kind(kind)
        hooks = derive_hooks(kind)
        with self._lock:
            hooks = self._derived.setdefault(kind, hooks)
        logger.debug(
            "Derived construction paths for '%s': %s",
            _qualified_name(kind),
            ", ".join(hooks.paths) or "none",
        )
        return hooks

    @staticmethod
    def is_well_known(kind: type[BaseException]) -> bool:
        return kind in WELL_KNOWN_ARGUMENT_ORDER

    def is_registered(self, kind: type[BaseException]) -> bool:
        """Check whether ``kind`` is well-known or was registered explicitly."""
        return kind in self._hooks

    def kinds(self) -> list[type[BaseException]]:
        """List the well-known and explicitly registered kinds by qualified name."""
        return sorted(self._hooks, key=_qualified_name)

    def describe(self, kind: type[BaseException]) -> dict[str, Any]:
        """Summarise how ``kind`` is constructed."""
        hooks = self.hooks_for(kind)
        order = WELL_KNOWN_ARGUMENT_ORDER.get(kind)
        return {
            "kind": _qualified_name(kind),
            "well_known": hooks.well_known,
            "registered": self.is_registered(kind),
            "argument_order": list(order) if order else None,
            "paths": hooks.paths,
        }

    def __contains__(self, kind: type[BaseException]) -> bool:
        return self.is_registered(kind)

    def __len__(self) -> int:
        return len(self._hooks)
