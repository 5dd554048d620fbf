from __future__ import annotations

from typing import Any, ClassVar

from stubwire.bindings import Binding, TargetIdentifier
from stubwire.builder import Builder
from stubwire.context import TestContext
from stubwire.exceptions import StubWireContextNotConfiguredError
from stubwire.slots import AttributeSlots

_CONFIGURATION_NAMES = frozenset({"target_type", "stubwire_builder"})


class InjectedTestCase:
    """Mixin giving a test class a ``make()`` for its ``target_type``.

    Dependencies live as attributes of the test instance: assign
    ``self.service = fake`` before ``make()`` to supply one, or read
    ``self.service`` afterwards to configure and verify the stand-in::

        class UserControllerTest(InjectedTestCase, unittest.TestCase):
            target_type = UserController

            def test_sign_up(self) -> None:
                controller = self.make()
                controller.sign_up("email@test.me")
                self.service.email.assert_called_once_with(
                    "email@test.me",
                    "Thanks for signing up!",
                )
    """

    target_type: ClassVar[TargetIdentifier | None] = None
    stubwire_builder: ClassVar[Builder | None] = None

    def make(self, **overrides: Any) -> Any:
        """Build ``target_type``, storing stand-ins on ``self``.

        Args:
            **overrides: Values replacing the binding of the same name.

        """
        return self.stubwire_context().make(**overrides)

    def mock_dependencies(self) -> dict[Binding, Any]:
        """Fill every unset dependency attribute with a stand-in without building."""
        context = self.stubwire_context()
        return context.builder.resolve_dependencies(context)

    def get_dependencies(self) -> list[Binding]:
        """Return the bindings of ``target_type`` in constructor order."""
        context = self.stubwire_context()
        return context.builder.derive_bindings(context.target)

    def stubwire_context(self) -> TestContext:
        target = type(self).target_type
        if target is None:
            msg = (
                f"{type(self).__qualname__} must set 'target_type' to the class under test "
                "before calling make()."
            )
            raise StubWireContextNotConfiguredError(msg)
        return TestContext(
            target=target,
            slots=AttributeSlots(self, reserved=_CONFIGURATION_NAMES),
            builder=type(self).stubwire_builder or Builder(),
        )
