from __future__ import annotations

from typing import Any
from unittest.mock import create_autospec


class EmailService:
    def email(self, address: str, content: str) -> None:
        raise NotImplementedError


class AuditLog:
    def record(self, event: str) -> None:
        raise NotImplementedError


class UserController:
    def __init__(self, service: EmailService) -> None:
        self.service = service

    def sign_up(self, email_address: str) -> str:
        self.service.email(email_address, "Thanks for signing up!")
        return email_address


class FakeEmailService(EmailService):
    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    def email(self, address: str, content: str) -> None:
        self.sent.append((address, content))


class RecordingStandIns:
    """Stand-in provider that remembers every type it was asked for."""

    def __init__(self) -> None:
        self.requested: list[type[Any]] = []

    def create_stand_in(self, provides: type[Any]) -> Any:
        self.requested.append(provides)
        return create_autospec(provides, instance=True)
