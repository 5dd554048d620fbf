from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from stubwire.bindings import TargetIdentifier
from stubwire.builder import Builder
from stubwire.slots import MappingSlots, SlotStore


@dataclass(slots=True)
class TestContext:
    """Pair the class under test with the slots its dependencies live in.

    Pre-populate a slot to hand the target a real or fake collaborator;
    every slot left empty receives a stand-in during ``make``.
    """

    __test__ = False

    target: TargetIdentifier
    slots: SlotStore = field(default_factory=MappingSlots)
    builder: Builder = field(default_factory=Builder)

    def __getitem__(self, name: str) -> Any:
        return self.slots.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.slots.set(name, value)

    def make(self, **overrides: Any) -> Any:
        """Build the target, synthesizing stand-ins for unset slots.

        Args:
            **overrides: Values replacing the binding of the same name; other
                names are forwarded to the constructor when it accepts them.

        """
        return self.builder.build(self, overrides)
