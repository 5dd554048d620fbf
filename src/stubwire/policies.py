from __future__ import annotations

from enum import Enum


class StandInPolicy(str, Enum):
    """Select how stand-ins are synthesized for unset dependency slots."""

    AUTOSPEC = "autospec"
    """Use ``create_autospec(..., instance=True)``; call signatures are enforced."""

    MAGIC_MOCK = "magic_mock"
    """Use ``MagicMock(spec=...)``; only attribute names are enforced."""
