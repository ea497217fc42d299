"""``guardkit.guards`` provides guard clauses: precondition checks that hand the
value back when it is acceptable and raise an error of a caller-chosen kind
when it is not.

Every guard accepts an optional ``parameter`` name and ``message`` that are
passed on to the error, and a keyword-only ``error_kind`` selecting the class
of the error to raise.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from guardkit.errors import (
    ArgumentNullError,
    ArgumentOutOfRangeError,
    ArgumentVerifyError,
)
from guardkit.factory.factory import create_error
from guardkit.framework.hooks.manager import get_hook_manager

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _violation(
    guard: str,
    error_kind: type[BaseException],
    parameter: str | None,
    message: str | None,
) -> BaseException:
    error = create_error(error_kind, parameter, message)
    logger.debug(
        "Guard '%s' failed, raising '%s'",
        guard,
        type(error).__qualname__,
        extra={"rich_format": ["yellow", "red"]},
    )
    get_hook_manager().hook.on_guard_violation(
        error=error, guard=guard, parameter=parameter, message=message
    )
    return error


def throw_if_null(
    value: T,
    parameter: str | None = None,
    message: str | None = None,
    *,
    error_kind: type[BaseException] = ArgumentNullError,
) -> T:
    """Raise if ``value`` is ``None``.

    Example:
    ::

        >>> def rename(user, name):
        >>>     user.name = throw_if_null(name, "name")
    """
    if value is None:
        raise _violation("throw_if_null", error_kind, parameter, message)
    return value


def throw_if_null_or_empty(
    value: str | None,
    parameter: str | None = None,
    message: str | None = None,
    *,
    error_kind: type[BaseException] = ArgumentOutOfRangeError,
) -> str:
    """Raise if ``value`` is ``None`` or the empty string."""
    if value is None or value == "":
        raise _violation("throw_if_null_or_empty", error_kind, parameter, message)
    return value


def throw_if_null_or_whitespace(
    value: str | None,
    parameter: str | None = None,
    message: str | None = None,
    *,
    error_kind: type[BaseException] = ArgumentOutOfRangeError,
) -> str:
    """Raise if ``value`` is ``None``, empty or made only of whitespace."""
    if value is None or not value.strip():
        raise _violation("throw_if_null_or_whitespace", error_kind, parameter, message)
    return value


def throw_if_equal_to(
    value: T,
    other: T,
    parameter: str | None = None,
    message: str | None = None,
    *,
    error_kind: type[BaseException] = ArgumentOutOfRangeError,
) -> T:
    """Raise if ``value`` equals ``other``."""
    if value == other:
        raise _violation("throw_if_equal_to", error_kind, parameter, message)
    return value


def throw_if_not_equal_to(
    value: T,
    other: T,
    parameter: str | None = None,
    message: str | None = None,
    *,
    error_kind: type[BaseException] = ArgumentOutOfRangeError,
) -> T:
    """Raise if ``value`` does not equal ``other``."""
    if value != other:
        raise _violation("throw_if_not_equal_to", error_kind, parameter, message)
    return value


def throw_if_less_than(
    value: Any,
    minimum: Any,
    parameter: str | None = None,
    message: str | None = None,
    *,
    error_kind: type[BaseException] = ArgumentOutOfRangeError,
) -> Any:
    """Raise if ``value`` is ``None`` or below ``minimum``."""
    if value is None or value < minimum:
        raise _violation("throw_if_less_than", error_kind, parameter, message)
    return value


def throw_if_less_than_or_equal_to(
    value: Any,
    other: Any,
    parameter: str | None = None,
    message: str | None = None,
    *,
    error_kind: type[BaseException] = ArgumentOutOfRangeError,
) -> Any:
    """Raise if ``value`` is ``None`` or not above ``other``."""
    if value is None or value <= other:
        raise _violation(
            "throw_if_less_than_or_equal_to", error_kind, parameter, message
        )
    return value


def throw_if_greater_than(
    value: Any,
    maximum: Any,
    parameter: str | None = None,
    message: str | None = None,
    *,
    error_kind: type[BaseException] = ArgumentOutOfRangeError,
) -> Any:
    """Raise if ``value`` is ``None`` or above ``maximum``."""
    if value is None or value > maximum:
        raise _violation("throw_if_greater_than", error_kind, parameter, message)
    return value


def throw_if_greater_than_or_equal_to(
    value: Any,
    other: Any,
    parameter: str | None = None,
    message: str | None = None,
    *,
    error_kind: type[BaseException] = ArgumentOutOfRangeError,
) -> Any:
    """Raise if ``value`` is ``None`` or not below ``other``."""
    if value is None or value >= other:
        raise _violation(
            "throw_if_greater_than_or_equal_to", error_kind, parameter, message
        )
    return value


def throw_if_out_of_range(  # noqa: PLR0913
    value: Any,
    minimum: Any,
    maximum: Any,
    parameter: str | None = None,
    message: str | None = None,
    *,
    error_kind: type[BaseException] = ArgumentOutOfRangeError,
) -> Any:
    """Raise if ``value`` is ``None`` or outside ``[minimum, maximum]``.

    Both bounds are inclusive.
    """
    if value is None or value < minimum or value > maximum:
        raise _violation("throw_if_out_of_range", error_kind, parameter, message)
    return value


def _takes_value(verifier: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(verifier)
    except (TypeError, ValueError):
        # Built-in callables without a signature are given the value.
        return True
    try:
        signature.bind(None)
    except TypeError:
        return False
    return True


def throw_if_not_verified(
    value: T,
    verifier: Callable[[T], Any] | Callable[[], Any],
    parameter: str | None = None,
    message: str | None = None,
    *,
    error_kind: type[BaseException] = ArgumentVerifyError,
) -> T:
    """Raise if ``value`` is ``None`` or ``verifier`` does not accept it.

    ``verifier`` is called with ``value`` when it takes one positional
    argument and without arguments otherwise; a falsy result is a violation.
    Exceptions raised by the verifier itself are not caught.

    Args:
        value: The value to check.
        verifier: The verification callback.
        parameter: Name of the checked parameter.
        message: Text describing the violation.
        error_kind: The class of the error to raise.

    Returns:
        ``value``, unchanged.

    Raises:
        error_kind: If ``value`` is ``None`` or fails verification. When
            ``verifier`` is not callable the error names ``"verifier"`` as
            its parameter instead.
    """
    if value is None:
        raise _violation("throw_if_not_verified", error_kind, parameter, message)

    if not callable(verifier):
        raise _violation(
            "throw_if_not_verified",
            error_kind,
            "verifier",
            f"'{type(verifier).__name__}' object is not callable.",
        )

    verified = verifier(value) if _takes_value(verifier) else verifier()  # type: ignore[call-arg]
    if not verified:
        raise _violation("throw_if_not_verified", error_kind, parameter, message)
    return value
