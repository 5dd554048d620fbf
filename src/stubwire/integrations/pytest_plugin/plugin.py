from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from stubwire.bindings import TargetIdentifier
from stubwire.builder import Builder
from stubwire.context import TestContext
from stubwire.exceptions import StubWireContextNotConfiguredError
from stubwire.stand_ins import StandInProvider, stand_in_provider_for

_TARGET_MARKER = "stubwire_target"


def pytest_configure(config: pytest.Config) -> None:
    """Register the ``stubwire_target`` marker."""
    config.addinivalue_line(
        "markers",
        f"{_TARGET_MARKER}(target): class under test built by the stubwire 'make' fixture",
    )


@pytest.fixture()
def stubwire_target(request: pytest.FixtureRequest) -> TargetIdentifier:
    """Return the class under test for the current test.

    Taken from the closest ``@pytest.mark.stubwire_target(...)`` marker. Test
    suites can override this fixture instead of using the marker.

    """
    marker = request.node.get_closest_marker(_TARGET_MARKER)
    if marker is None or not marker.args:
        msg = (
            "The stubwire pytest plugin needs a target class. Mark the test with "
            "@pytest.mark.stubwire_target(MyService) or override the 'stubwire_target' fixture."
        )
        raise StubWireContextNotConfiguredError(msg)
    return marker.args[0]


@pytest.fixture()
def stubwire_stand_ins() -> StandInProvider:
    """Return the stand-in provider used by ``stubwire_builder``.

    Override to switch policy, for example to ``MagicMockStandInProvider()``.

    """
    return stand_in_provider_for(None)


@pytest.fixture()
def stubwire_builder(stubwire_stand_ins: StandInProvider) -> Builder:
    """Create the per-test builder."""
    return Builder(stand_ins=stubwire_stand_ins)


@pytest.fixture()
def stubwire_context(stubwire_target: TargetIdentifier, stubwire_builder: Builder) -> TestContext:
    """Create a fresh test context with empty slots.

    Pre-populate slots with ``stubwire_context["name"] = fake`` before calling
    ``make``; after the build each slot holds the dependency the target got.

    """
    return TestContext(target=stubwire_target, builder=stubwire_builder)


@pytest.fixture()
def make(stubwire_context: TestContext) -> Callable[..., Any]:
    """Return a callable building the target from ``stubwire_context``."""
    return stubwire_context.make
