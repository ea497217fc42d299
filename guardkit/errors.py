"""Error kinds raised by guard clauses and by the error construction engine."""

from __future__ import annotations

from .normalization import normalize


class ArgumentError(ValueError):
    """Raised when an argument supplied to an operation is not valid.

    Unlike the other argument errors, its positional order is
    ``(message, param_name)``; a single positional argument is the message.

    Args:
        message: Text describing the problem. Falls back to ``default_message``
            when absent, empty or whitespace only.
        param_name: Name of the offending parameter, if known.
        cause: The underlying error that led to this one, if any.
    """

    default_message = "Value does not fall within the expected range."

    def __init__(
        self,
        message: str | None = None,
        param_name: str | None = None,
        cause: BaseException | None = None,
    ):
        self.message = normalize(message) or self.default_message
        self.param_name = normalize(param_name)
        self.inner_cause = cause
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.param_name is None:
            return self.message
        return f"{self.message} (Parameter '{self.param_name}')"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"param_name={self.param_name!r})"
        )


class _ParameterFirstArgumentError(ArgumentError):
    """Base for argument errors taking ``(param_name, message)`` positionally."""

    def __init__(
        self,
        param_name: str | None = None,
        message: str | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message, param_name, cause)


class ArgumentNullError(_ParameterFirstArgumentError):
    """Raised when a required argument was not supplied."""

    default_message = "A required argument was not supplied."


class ArgumentOutOfRangeError(_ParameterFirstArgumentError):
    """Raised when an argument value is outside the permitted range."""

    default_message = "An argument value was outside the permitted range."


class ArgumentVerifyError(_ParameterFirstArgumentError):
    """Raised when an argument is missing or its verification callback fails."""

    default_message = "The argument is null or could not be verified."


class UserNotQualifiedError(Exception):
    """Raised when the current user may not perform the requested action.

    It carries no parameter name; an absent message is replaced by the
    default text. The cause is keyword-only, so the constructor only ever
    takes a single positional string.
    """

    default_message = (
        "The user does not seem to be qualified to perform such an action."
    )

    def __init__(
        self, message: str | None = None, *, cause: BaseException | None = None
    ):
        self.message = normalize(message) or self.default_message
        self.param_name = None
        self.inner_cause = cause
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause


class ConstructionFailure(TypeError):
    """Raised when no construction path exists for an error kind.

    This signals a defect in how the error kind is defined, not a failed
    precondition, and does not derive from ``ArgumentError``.
    """

    def __init__(self, kind: type, attempted: tuple[str, ...] = ()):
        self.kind = kind
        self.attempted = attempted
        tried = ", ".join(attempted) if attempted else "none available"
        super().__init__(
            f"Unable to construct an instance of "
            f"'{kind.__module__}.{kind.__qualname__}'. "
            f"Construction paths tried: {tried}."
        )
