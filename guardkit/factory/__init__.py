"""``guardkit.factory`` provides the engine that constructs error instances of a
caller-chosen kind, and the registry of construction hooks it relies on.
"""

from .factory import (
    ErrorFactory,
    create_error,
    get_error_factory,
    register_error_kind,
)
from .registry import (
    WELL_KNOWN_ARGUMENT_ORDER,
    ConstructionHooks,
    ErrorKindRegistry,
    derive_hooks,
)

__all__ = [
    "WELL_KNOWN_ARGUMENT_ORDER",
    "ConstructionHooks",
    "ErrorFactory",
    "ErrorKindRegistry",
    "create_error",
    "derive_hooks",
    "get_error_factory",
    "register_error_kind",
]
