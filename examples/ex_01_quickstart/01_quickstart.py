"""Quickstart: build a class under test with stand-ins for its dependencies.

``TestContext.make()`` reads the constructor of ``UserController``, finds the
``EmailService`` dependency, stores an autospecced stand-in in the ``service``
slot and passes the same object to the controller.
"""

from __future__ import annotations

from stubwire import TestContext


class EmailService:
    def email(self, address: str, content: str) -> None:
        raise NotImplementedError


class UserController:
    def __init__(self, service: EmailService) -> None:
        self.service = service

    def sign_up(self, email_address: str) -> str:
        self.service.email(email_address, "Thanks for signing up!")
        return email_address


def main() -> None:
    context = TestContext(target=UserController)
    controller = context.make()

    controller.sign_up("email@test.me")

    context["service"].email.assert_called_once_with("email@test.me", "Thanks for signing up!")
    print(controller.service is context["service"])  # => True


if __name__ == "__main__":
    main()
