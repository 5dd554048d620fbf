from __future__ import annotations

import types
from typing import Annotated, Any, TypeGuard, Union, get_args, get_origin

_NONE_TYPE = type(None)
_UNION_ORIGINS: tuple[Any, ...] = (Union, types.UnionType)


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def unwrap_annotation(annotation: Any) -> Any:
    """Strip ``Annotated`` metadata and a single ``None`` member from an annotation.

    ``Annotated[T, ...]`` becomes ``T`` and ``T | None`` becomes ``T``. Unions
    with more than one non-``None`` member are returned unchanged.

    Args:
        annotation: Parameter annotation to normalize.

    """
    while get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]

    if get_origin(annotation) in _UNION_ORIGINS:
        members = [member for member in get_args(annotation) if member is not _NONE_TYPE]
        if len(members) == 1:
            return unwrap_annotation(members[0])

    return annotation


__all__ = ["is_runtime_class", "unwrap_annotation"]
