from __future__ import annotations

import unittest

import pytest

from stubwire import Binding, Builder, InjectedTestCase, StandInPolicy
from stubwire.exceptions import StubWireContextNotConfiguredError, StubWireSlotError
from tests.helpers import EmailService, FakeEmailService, UserController


class UserControllerTest(InjectedTestCase, unittest.TestCase):
    target_type = UserController
    service: EmailService

    def test_sign_up(self) -> None:
        controller = self.make()
        address = "email@test.me"

        result = controller.sign_up(address)

        self.assertEqual(address, result)
        self.service.email.assert_called_once_with(  # type: ignore[attr-defined]
            address,
            "Thanks for signing up!",
        )

    def test_stand_in_is_stored_on_the_test(self) -> None:
        controller = self.make()

        self.assertIs(controller.service, self.service)
        self.assertIsInstance(self.service, EmailService)

    def test_preset_attribute_is_used(self) -> None:
        fake = FakeEmailService()
        self.service = fake

        controller = self.make()
        controller.sign_up("email@test.me")

        self.assertIs(controller.service, fake)
        self.assertEqual(fake.sent, [("email@test.me", "Thanks for signing up!")])

    def test_get_dependencies(self) -> None:
        self.assertEqual(self.get_dependencies(), [Binding(provides=EmailService, name="service")])

    def test_mock_dependencies_without_building(self) -> None:
        resolved = self.mock_dependencies()

        self.assertIs(resolved[Binding(provides=EmailService, name="service")], self.service)


class ImportStringTargetTest(InjectedTestCase, unittest.TestCase):
    target_type = "tests.helpers:UserController"
    stubwire_builder = Builder(stand_ins=StandInPolicy.MAGIC_MOCK)

    def test_builds_from_import_string(self) -> None:
        controller = self.make()

        self.assertIsInstance(controller, UserController)
        controller.sign_up("a@b.c")
        self.service.email.assert_called_once_with(  # type: ignore[attr-defined]
            "a@b.c",
            "Thanks for signing up!",
        )


class _Unconfigured(InjectedTestCase):
    pass


def test_make_without_target_type_fails() -> None:
    with pytest.raises(StubWireContextNotConfiguredError, match="must set 'target_type'"):
        _Unconfigured().make()


class NamedLikeConfiguration:
    def __init__(self, target_type: EmailService) -> None:
        self.target_type = target_type


class ConfigurationNameCollisionTest(InjectedTestCase, unittest.TestCase):
    target_type = NamedLikeConfiguration

    def test_configuration_attribute_is_not_injected(self) -> None:
        with pytest.raises(StubWireSlotError, match="reserved"):
            self.make()

        self.assertIs(type(self).target_type, NamedLikeConfiguration)
