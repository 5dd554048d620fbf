from stubwire.integrations.pytest_plugin.plugin import (
    make,
    pytest_configure,
    stubwire_builder,
    stubwire_context,
    stubwire_stand_ins,
    stubwire_target,
)

__all__ = [
    "make",
    "pytest_configure",
    "stubwire_builder",
    "stubwire_context",
    "stubwire_stand_ins",
    "stubwire_target",
]
