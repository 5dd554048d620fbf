from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable
from unittest.mock import MagicMock, create_autospec

from stubwire.defaults import DEFAULT_STAND_IN_POLICY
from stubwire.policies import StandInPolicy

logger = logging.getLogger(__name__)


@runtime_checkable
class StandInProvider(Protocol):
    """Synthesize a stand-in object for a dependency type.

    The returned object must look like an instance of ``provides`` and record
    the calls made on it so tests can configure and verify them.
    """

    def create_stand_in(self, provides: type[Any]) -> Any: ...


@dataclass(frozen=True, slots=True)
class AutospecStandInProvider:
    """Create stand-ins with ``unittest.mock.create_autospec``.

    Methods of the stand-in enforce the real call signatures, ``async def``
    methods become ``AsyncMock`` attributes, and ``isinstance`` checks against
    ``provides`` pass.
    """

    spec_set: bool = False
    """Forbid setting attributes that do not exist on ``provides``."""

    def create_stand_in(self, provides: type[Any]) -> Any:
        """Return an autospecced instance stand-in for ``provides``.

        Args:
            provides: Dependency type to mimic.

        """
        return create_autospec(provides, instance=True, spec_set=self.spec_set)


@dataclass(frozen=True, slots=True)
class MagicMockStandInProvider:
    """Create stand-ins with ``MagicMock(spec=...)``."""

    def create_stand_in(self, provides: type[Any]) -> Any:
        """Return a ``MagicMock`` restricted to the attributes of ``provides``.

        Args:
            provides: Dependency type to mimic.

        """
        return MagicMock(spec=provides)


@dataclass(frozen=True, slots=True)
class CallableStandInProvider:
    """Adapt a plain ``factory(provides) -> stand-in`` callable."""

    factory: Callable[[type[Any]], Any]

    def create_stand_in(self, provides: type[Any]) -> Any:
        """Delegate to the wrapped factory.

        Args:
            provides: Dependency type to mimic.

        """
        return self.factory(provides)


_PROVIDERS_BY_POLICY: dict[StandInPolicy, StandInProvider] = {
    StandInPolicy.AUTOSPEC: AutospecStandInProvider(),
    StandInPolicy.MAGIC_MOCK: MagicMockStandInProvider(),
}


def stand_in_provider_for(
    stand_ins: StandInProvider | StandInPolicy | str | Callable[[type[Any]], Any] | None = None,
) -> StandInProvider:
    """Normalize the ``stand_ins`` configuration value into a provider.

    Args:
        stand_ins: A provider, a ``StandInPolicy`` (or its string value), a
            ``factory(provides)`` callable, or ``None`` for the default policy.

    """
    if stand_ins is None:
        return _PROVIDERS_BY_POLICY[DEFAULT_STAND_IN_POLICY]
    if isinstance(stand_ins, str):
        return _PROVIDERS_BY_POLICY[StandInPolicy(stand_ins)]
    if isinstance(stand_ins, StandInProvider):
        return stand_ins
    if callable(stand_ins):
        return CallableStandInProvider(stand_ins)

    msg = f"Unsupported stand-in configuration: {stand_ins!r}."
    raise TypeError(msg)
