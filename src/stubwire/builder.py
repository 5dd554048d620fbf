from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from inspect import Parameter
from typing import TYPE_CHECKING, Any, TypeAlias

from stubwire.bindings import Binding, BindingsExtractor, TargetIdentifier
from stubwire.exceptions import StubWireConstructionError
from stubwire.policies import StandInPolicy
from stubwire.stand_ins import StandInProvider, stand_in_provider_for

if TYPE_CHECKING:
    from stubwire.context import TestContext

logger = logging.getLogger(__name__)

OverrideKey: TypeAlias = str | type[Any]
"""An override is addressed by parameter name or by dependency type."""


class Builder:
    """Construct a class under test, stubbing every dependency the test left unset.

    A build is a single pass: derive the constructor bindings, resolve each one
    from its slot or from a fresh stand-in, merge caller overrides, then call
    the constructor. Nothing is cached between builds.

    Args:
        stand_ins: How stand-ins are synthesized. A ``StandInProvider``, a
            ``StandInPolicy`` or a ``factory(provides)`` callable. Defaults to
            ``StandInPolicy.AUTOSPEC``.
        extractor: Constructor introspection used to derive bindings.

    """

    def __init__(
        self,
        *,
        stand_ins: StandInProvider | StandInPolicy | Callable[[type[Any]], Any] | None = None,
        extractor: BindingsExtractor | None = None,
    ) -> None:
        self._stand_ins = stand_in_provider_for(stand_ins)
        self._extractor = extractor or BindingsExtractor()

    @property
    def stand_ins(self) -> StandInProvider:
        return self._stand_ins

    def derive_bindings(self, target: TargetIdentifier) -> list[Binding]:
        """Return the target's constructor bindings in declaration order.

        Args:
            target: Class or import string naming the class under test.

        """
        return self._extractor.extract(target)

    def resolve_dependencies(
        self,
        context: TestContext,
        bindings: list[Binding] | None = None,
    ) -> dict[Binding, Any]:
        """Resolve every binding from its slot, filling unset slots with stand-ins.

        Populated slots are reused as-is. Each unset slot receives exactly one
        stand-in, which is written back so the test and the target share it.

        Args:
            context: Test context owning the slots.
            bindings: Bindings to resolve; derived from ``context.target`` when omitted.

        Returns:
            Resolved instances keyed by binding, in binding order.

        """
        if bindings is None:
            bindings = self.derive_bindings(context.target)

        resolved: dict[Binding, Any] = {}
        for binding in bindings:
            if context.slots.is_set(binding.name):
                logger.debug(
                    "Reusing slot '%s' for %s",
                    binding.name,
                    binding.provides.__qualname__,
                )
            else:
                stand_in = self._stand_ins.create_stand_in(binding.provides)
                context.slots.set(binding.name, stand_in)
                logger.debug(
                    "Stored stand-in for %s in slot '%s'",
                    binding.provides.__qualname__,
                    binding.name,
                )
            resolved[binding] = context.slots.get(binding.name)

        return resolved

    def build(
        self,
        context: TestContext,
        overrides: Mapping[OverrideKey, Any] | None = None,
    ) -> Any:
        """Create one instance of ``context.target``.

        Args:
            context: Test context naming the target and owning the slots.
            overrides: Values taking precedence over resolved bindings. Keys are
                binding names or dependency types. Other names are forwarded
                as keyword arguments when the constructor accepts them.
                Overrides are never written to slots.

        """
        target_type = self._extractor.resolve_target(context.target)
        bindings = self.derive_bindings(target_type)
        resolved = self.resolve_dependencies(context, bindings)

        values = {binding.name: value for binding, value in resolved.items()}
        extras = self._merge_overrides(
            target_type=target_type,
            bindings=bindings,
            values=values,
            overrides=overrides or {},
        )

        signature = self._extractor.signature(target_type)
        values.update(self._accepted_extras(target_type, signature, extras))
        args, kwargs = self._arguments(target_type, signature, values)

        try:
            instance = target_type(*args, **kwargs)
        except Exception as error:
            msg = f"Constructing '{target_type.__qualname__}' failed: {error}"
            raise StubWireConstructionError(msg, target=target_type) from error

        logger.debug("Built %s with %d argument(s)", target_type.__qualname__, len(values))
        return instance

    def _merge_overrides(
        self,
        *,
        target_type: type[Any],
        bindings: list[Binding],
        values: dict[str, Any],
        overrides: Mapping[OverrideKey, Any],
    ) -> dict[str, Any]:
        extras: dict[str, Any] = {}
        for key, value in overrides.items():
            if isinstance(key, str):
                if key in values:
                    values[key] = value
                else:
                    extras[key] = value
                continue

            if not isinstance(key, type):
                msg = (
                    f"Override key {key!r} for '{target_type.__qualname__}' must be "
                    "a parameter name or a dependency type."
                )
                raise StubWireConstructionError(msg, target=target_type)

            matching = [binding for binding in bindings if binding.provides is key]
            if len(matching) > 1:
                names = ", ".join(f"'{binding.name}'" for binding in matching)
                msg = (
                    f"Override for {key.__qualname__} is ambiguous: '{target_type.__qualname__}' "
                    f"takes it as {names}. Override by parameter name instead."
                )
                raise StubWireConstructionError(msg, target=target_type)
            if not matching:
                logger.warning(
                    "Dropping override for %s: '%s' has no dependency of that type",
                    key.__qualname__,
                    target_type.__qualname__,
                )
                continue
            values[matching[0].name] = value

        return extras

    def _accepted_extras(
        self,
        target_type: type[Any],
        signature: inspect.Signature,
        extras: dict[str, Any],
    ) -> dict[str, Any]:
        parameters = signature.parameters
        accepts_any_keyword = any(
            parameter.kind is Parameter.VAR_KEYWORD for parameter in parameters.values()
        )

        accepted: dict[str, Any] = {}
        for name, value in extras.items():
            parameter = parameters.get(name)
            is_named_parameter = parameter is not None and parameter.kind not in (
                Parameter.VAR_POSITIONAL,
                Parameter.VAR_KEYWORD,
            )
            if is_named_parameter or accepts_any_keyword:
                accepted[name] = value
            else:
                logger.warning(
                    "Dropping override '%s': '%s' does not accept it",
                    name,
                    target_type.__qualname__,
                )
        return accepted

    def _arguments(
        self,
        target_type: type[Any],
        signature: inspect.Signature,
        values: dict[str, Any],
    ) -> tuple[tuple[Any, ...], dict[str, Any]]:
        remaining = dict(values)
        positional: list[Any] = []

        for parameter in signature.parameters.values():
            if parameter.kind is not Parameter.POSITIONAL_ONLY:
                break
            if parameter.name in remaining:
                positional.append(remaining.pop(parameter.name))
            elif parameter.default is not Parameter.empty:
                positional.append(parameter.default)
            else:
                break

        try:
            bound = signature.bind(*positional, **remaining)
        except TypeError as error:
            msg = f"Arguments do not match the constructor of '{target_type.__qualname__}': {error}"
            raise StubWireConstructionError(msg, target=target_type) from error

        return bound.args, bound.kwargs
