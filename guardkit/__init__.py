"""guardkit is a toolkit of guard clauses that raise errors of a caller-chosen
kind, built on a construction engine that knows how to populate both the
well-known argument errors and arbitrary user-defined error types.
"""

from .errors import (
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    ArgumentVerifyError,
    ConstructionFailure,
    UserNotQualifiedError,
)
from .factory import ErrorFactory, ErrorKindRegistry, create_error
from .guards import (
    throw_if_equal_to,
    throw_if_greater_than,
    throw_if_greater_than_or_equal_to,
    throw_if_less_than,
    throw_if_less_than_or_equal_to,
    throw_if_not_equal_to,
    throw_if_not_verified,
    throw_if_null,
    throw_if_null_or_empty,
    throw_if_null_or_whitespace,
    throw_if_out_of_range,
)
from .normalization import normalize

__version__ = "0.1.0"

__all__ = [
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "ArgumentVerifyError",
    "ConstructionFailure",
    "ErrorFactory",
    "ErrorKindRegistry",
    "UserNotQualifiedError",
    "create_error",
    "normalize",
    "throw_if_equal_to",
    "throw_if_greater_than",
    "throw_if_greater_than_or_equal_to",
    "throw_if_less_than",
    "throw_if_less_than_or_equal_to",
    "throw_if_not_equal_to",
    "throw_if_not_verified",
    "throw_if_null",
    "throw_if_null_or_empty",
    "throw_if_null_or_whitespace",
    "throw_if_out_of_range",
]
