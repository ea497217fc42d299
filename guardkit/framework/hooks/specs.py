"""A module containing specifications for all callable hooks in guardkit.
For more information about these specifications, please visit
[Pluggy's documentation](https://pluggy.readthedocs.io/en/stable/#specs)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .markers import hook_spec

if TYPE_CHECKING:
    from guardkit.factory.registry import ErrorKindRegistry


class ErrorKindSpecs:
    """Namespace that defines all specifications for the error kind registry."""

    @hook_spec
    def register_error_kinds(self, registry: ErrorKindRegistry) -> None:
        """Hook to be invoked once, when the process-wide error kind registry is
        created. Implementations register construction hooks for the error
        kinds they own.

        Args:
            registry: The registry being populated. Registering on it directly
                and calling ``guardkit.factory.register_error_kind`` are
                equivalent here.
        """
        pass


class GuardSpecs:
    """Namespace that defines all specifications for guard clause violations."""

    @hook_spec
    def on_guard_violation(
        self,
        error: BaseException,
        guard: str,
        parameter: str | None,
        message: str | None,
    ) -> None:
        """Hook to be invoked when a guard clause fails, after its error has
        been constructed and before it is raised.

        Args:
            error: The error about to be raised.
            guard: The name of the guard clause that failed.
            parameter: The parameter name passed to the guard, as given.
            message: The message passed to the guard, as given.
        """
        pass
