from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeGuard

from stubwire._internal.type_checks import is_runtime_class
from stubwire.defaults import DEFAULT_IGNORED_VALUE_TYPES


@dataclass(frozen=True, slots=True)
class StandInEligibilityPolicy:
    """Internal policy deciding which annotations can be replaced by stand-ins."""

    ignored_base_types: tuple[type[Any], ...] = DEFAULT_IGNORED_VALUE_TYPES

    def is_eligible(self, candidate: object) -> TypeGuard[type[Any]]:
        """Return true when a stand-in can be synthesized for the candidate.

        Any user or library class qualifies, abstract classes and protocols
        included. Builtins such as ``int`` and metaclasses do not.

        Args:
            candidate: Normalized parameter annotation.

        """
        if not is_runtime_class(candidate):
            return False
        if candidate.__module__ == "builtins":
            return False
        return not issubclass(candidate, type)

    def is_value_type(self, candidate: type[Any]) -> bool:
        """Return true for value types that keep their default instead of a stand-in.

        Args:
            candidate: Eligible parameter annotation.

        """
        return issubclass(candidate, self.ignored_base_types)
