from stubwire.bindings import Binding, BindingsExtractor
from stubwire.builder import Builder
from stubwire.context import TestContext
from stubwire.exceptions import (
    StubWireConstructionError,
    StubWireContextNotConfiguredError,
    StubWireError,
    StubWireSlotError,
    StubWireTypeResolutionError,
)
from stubwire.policies import StandInPolicy
from stubwire.slots import AttributeSlots, MappingSlots, SlotStore
from stubwire.stand_ins import (
    AutospecStandInProvider,
    CallableStandInProvider,
    MagicMockStandInProvider,
    StandInProvider,
)
from stubwire.testcase import InjectedTestCase

__all__ = [
    "AttributeSlots",
    "AutospecStandInProvider",
    "Binding",
    "BindingsExtractor",
    "Builder",
    "CallableStandInProvider",
    "InjectedTestCase",
    "MagicMockStandInProvider",
    "MappingSlots",
    "SlotStore",
    "StandInPolicy",
    "StandInProvider",
    "StubWireConstructionError",
    "StubWireContextNotConfiguredError",
    "StubWireError",
    "StubWireSlotError",
    "StubWireTypeResolutionError",
    "TestContext",
]
