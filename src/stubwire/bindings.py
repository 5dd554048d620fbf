from __future__ import annotations

import importlib
import inspect
import logging
import sys
from dataclasses import dataclass, field
from inspect import Parameter
from typing import Any, TypeAlias, get_type_hints

from stubwire._internal.stand_in_eligibility import StandInEligibilityPolicy
from stubwire._internal.type_checks import is_runtime_class, unwrap_annotation
from stubwire.exceptions import StubWireTypeResolutionError

logger = logging.getLogger(__name__)

TargetIdentifier: TypeAlias = type[Any] | str
"""A target class, or an import string such as ``"app.users:UserController"``."""

_MISSING_ANNOTATION: Any = object()
_VARIADIC_KINDS = (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)


@dataclass(frozen=True, slots=True)
class Binding:
    """Represent one constructor parameter that is satisfied from a slot."""

    provides: type[Any]
    """The dependency type a stand-in is synthesized from."""

    name: str
    """The parameter name, used as the slot name on the test context."""


@dataclass(slots=True)
class BindingsExtractor:
    """Derive ordered bindings from a target type's constructor."""

    eligibility: StandInEligibilityPolicy = field(default_factory=StandInEligibilityPolicy)

    def resolve_target(self, target: TargetIdentifier) -> type[Any]:
        """Resolve a target identifier to a runtime class.

        Accepts a class, ``"package.module:QualName"`` or ``"package.module.Name"``.

        Args:
            target: Class or import string naming the class under test.

        """
        resolved: object = target
        if isinstance(target, str):
            resolved = self._import_target(target)

        if not is_runtime_class(resolved):
            msg = f"Target {target!r} is not a class."
            raise StubWireTypeResolutionError(msg, target=target)
        return resolved

    def extract(self, target: TargetIdentifier) -> list[Binding]:
        """Return the bindings of a target's constructor in declaration order.

        Classes without their own constructor yield an empty list.

        Args:
            target: Class or import string naming the class under test.

        """
        target_type = self.resolve_target(target)
        if not self.has_constructor(target_type):
            return []

        parameters = self._constructor_parameters(target_type)
        annotations, annotation_error = self._resolved_type_hints(target_type)
        bindings: list[Binding] = []

        for parameter in parameters:
            if parameter.kind in _VARIADIC_KINDS:
                continue

            provides = self._resolve_parameter_type(
                target_type=target_type,
                parameter=parameter,
                annotations=annotations,
                annotation_error=annotation_error,
            )
            if provides is _MISSING_ANNOTATION:
                continue

            bindings.append(Binding(provides=provides, name=parameter.name))

        logger.debug(
            "Derived %d binding(s) for %s: %s",
            len(bindings),
            target_type.__qualname__,
            ", ".join(f"{binding.name}: {binding.provides.__qualname__}" for binding in bindings),
        )
        return bindings

    def signature(self, target_type: type[Any]) -> inspect.Signature:
        """Return the constructor signature of an already resolved target type.

        Args:
            target_type: Resolved class under test.

        """
        if not self.has_constructor(target_type):
            return inspect.Signature()
        try:
            return inspect.signature(target_type)
        except (TypeError, ValueError) as error:
            msg = f"Unable to read the constructor signature of '{target_type.__qualname__}'."
            raise StubWireTypeResolutionError(msg, target=target_type) from error

    def has_constructor(self, target_type: type[Any]) -> bool:
        """Return true when the class defines or inherits a non-default constructor.

        Args:
            target_type: Resolved class under test.

        """
        return (
            target_type.__init__ is not object.__init__
            or target_type.__new__ is not object.__new__
        )

    def _import_target(self, target: str) -> object:
        module_name, separator, qualname = target.partition(":")
        if not separator:
            module_name, _, qualname = target.rpartition(".")
        if not module_name or not qualname:
            msg = f"Target '{target}' must look like 'package.module:ClassName'."
            raise StubWireTypeResolutionError(msg, target=target)

        try:
            resolved: object = importlib.import_module(module_name)
        except ImportError as error:
            msg = f"Unable to import module '{module_name}' for target '{target}'."
            raise StubWireTypeResolutionError(msg, target=target) from error

        for attribute in qualname.split("."):
            try:
                resolved = getattr(resolved, attribute)
            except AttributeError as error:
                msg = f"Module '{module_name}' has no attribute '{qualname}' (target '{target}')."
                raise StubWireTypeResolutionError(msg, target=target) from error
        return resolved

    def _constructor_parameters(self, target_type: type[Any]) -> tuple[Parameter, ...]:
        return tuple(self.signature(target_type).parameters.values())

    def _resolve_parameter_type(
        self,
        *,
        target_type: type[Any],
        parameter: Parameter,
        annotations: dict[str, Any],
        annotation_error: Exception | None,
    ) -> Any:
        annotation = annotations.get(parameter.name, _MISSING_ANNOTATION)
        if annotation is _MISSING_ANNOTATION:
            raw_annotation = parameter.annotation
            if isinstance(raw_annotation, str):
                annotation, annotation_error = self._evaluate_annotation(
                    target_type,
                    raw_annotation,
                )
            elif raw_annotation is not Parameter.empty:
                annotation = raw_annotation

        provides = unwrap_annotation(annotation)
        has_default = parameter.default is not Parameter.empty
        if self.eligibility.is_eligible(provides):
            if has_default and self.eligibility.is_value_type(provides):
                return _MISSING_ANNOTATION
            return provides

        if has_default:
            return _MISSING_ANNOTATION

        if annotation is _MISSING_ANNOTATION:
            reason = "has no usable type annotation"
        else:
            reason = f"is annotated with {annotation!r}, which cannot be replaced by a stand-in"
        error_message = (
            f"Required parameter '{parameter.name}' of '{target_type.__qualname__}' {reason}. "
            "Annotate it with a class or give it a default value."
        )
        if annotation_error is not None and annotation is _MISSING_ANNOTATION:
            msg = f"{error_message} Original annotation error: {annotation_error}"
            raise StubWireTypeResolutionError(
                msg,
                target=target_type,
                parameter_name=parameter.name,
            ) from annotation_error
        raise StubWireTypeResolutionError(
            error_message,
            target=target_type,
            parameter_name=parameter.name,
        )

    def _evaluate_annotation(
        self,
        target_type: type[Any],
        raw_annotation: str,
    ) -> tuple[Any, Exception | None]:
        # One unresolvable name must not hide the annotations of other parameters.
        module = sys.modules.get(target_type.__module__)
        global_namespace = dict(vars(module)) if module is not None else {}
        global_namespace.update(getattr(target_type.__init__, "__globals__", {}))
        local_namespace = dict(vars(target_type))

        try:
            return eval(raw_annotation, global_namespace, local_namespace), None  # noqa: S307
        except (AttributeError, NameError, SyntaxError, TypeError) as error:
            return _MISSING_ANNOTATION, error

    def _resolved_type_hints(
        self,
        target_type: type[Any],
    ) -> tuple[dict[str, Any], Exception | None]:
        annotations: dict[str, Any] = {}
        annotation_error: Exception | None = None

        # Class-level field annotations cover dataclasses and attrs classes;
        # constructor annotations take precedence.
        hint_sources = (target_type, target_type.__new__, target_type.__init__)
        for callable_member in hint_sources:
            try:
                member_annotations = get_type_hints(callable_member, include_extras=True)
            except (AttributeError, NameError, TypeError) as error:
                if annotation_error is None:
                    annotation_error = error
                continue
            member_annotations.pop("return", None)
            annotations.update(member_annotations)

        return annotations, annotation_error
