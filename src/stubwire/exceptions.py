from __future__ import annotations

from typing import Any


class StubWireError(Exception):
    """Represent a base class for all stubwire-specific failures.

    Catch this type when you want to handle any stubwire error path without
    matching each concrete exception class individually.
    """


class StubWireTypeResolutionError(StubWireError):
    """Signal that a target type or one of its dependencies cannot be resolved.

    Raised by ``BindingsExtractor.extract`` and ``Builder.derive_bindings`` when
    the target identifier does not import or is not a class, and when a required
    constructor parameter has no class annotation a stand-in can be created for.

    Typical fixes include annotating the parameter with a concrete class,
    giving primitive parameters a default value, or correcting the import
    string of the target.
    """

    def __init__(
        self,
        message: str,
        *,
        target: Any,
        parameter_name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.target = target
        self.parameter_name = parameter_name


class StubWireConstructionError(StubWireError):
    """Signal that the target could not be instantiated.

    Raised by ``Builder.build`` when the resolved values do not fit the
    constructor signature, when a type-keyed override matches more than one
    binding, or when the constructor body itself raises. The original error is
    chained as ``__cause__``.
    """

    def __init__(self, message: str, *, target: Any) -> None:
        super().__init__(message)
        self.target = target


class StubWireSlotError(StubWireError):
    """Signal that a dependency slot cannot be read or written.

    Raised by ``AttributeSlots`` when a binding name collides with a read-only
    attribute of the test object, for example a method or a property without
    a setter.
    """


class StubWireContextNotConfiguredError(StubWireError):
    """Signal use of a test context that has no target type.

    Raised by ``InjectedTestCase.make`` when the test class does not define
    ``target_type``.

    Typical fix is setting ``target_type = MyService`` on the test class.
    """
