from __future__ import annotations

import inspect
from collections.abc import Iterator, MutableMapping
from typing import Any, Protocol, runtime_checkable

from stubwire.exceptions import StubWireSlotError


@runtime_checkable
class SlotStore(Protocol):
    """Named storage for dependency instances owned by a test.

    A slot holding ``None`` counts as unset.
    """

    def get(self, name: str) -> Any: ...

    def set(self, name: str, value: Any) -> None: ...

    def is_set(self, name: str) -> bool: ...


class MappingSlots(MutableMapping[str, Any]):
    """Keep dependency slots in a plain dictionary.

    Besides the ``SlotStore`` methods the store behaves as a mutable mapping,
    so tests can write ``slots["service"] = fake`` before building.
    """

    def __init__(self, initial: dict[str, Any] | None = None, /, **values: Any) -> None:
        self._values: dict[str, Any] = dict(initial or {})
        self._values.update(values)

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def set(self, name: str, value: Any) -> None:
        self._values[name] = value

    def is_set(self, name: str) -> bool:
        return self._values.get(name) is not None

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._values[name] = value

    def __delitem__(self, name: str) -> None:
        del self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"


class AttributeSlots:
    """Use the attributes of an owner object as dependency slots.

    This is the shape of a ``unittest.TestCase`` that keeps its collaborators
    on ``self``: after a build, ``self.service`` holds the stand-in the
    target was constructed with. Names taken by methods, and the ``reserved``
    names the owner uses for its own configuration, are never slots.
    """

    __slots__ = ("_owner", "_reserved")

    def __init__(self, owner: object, *, reserved: frozenset[str] = frozenset()) -> None:
        self._owner = owner
        self._reserved = reserved

    @property
    def owner(self) -> object:
        return self._owner

    def get(self, name: str) -> Any:
        if self._is_reserved(name):
            return None
        return getattr(self._owner, name, None)

    def set(self, name: str, value: Any) -> None:
        if self._is_reserved(name):
            msg = (
                f"Cannot store dependency '{name}' on {type(self._owner).__qualname__}: "
                "the name is taken by a method or reserved. Rename the constructor parameter "
                "or use MappingSlots."
            )
            raise StubWireSlotError(msg)
        try:
            setattr(self._owner, name, value)
        except AttributeError as error:
            msg = f"Cannot store dependency '{name}' on {type(self._owner).__qualname__}."
            raise StubWireSlotError(msg) from error

    def is_set(self, name: str) -> bool:
        return self.get(name) is not None

    def _is_reserved(self, name: str) -> bool:
        if name in self._reserved:
            return True
        static_value = inspect.getattr_static(self._owner, name, None)
        return inspect.isfunction(static_value) or isinstance(
            static_value,
            (staticmethod, classmethod),
        )
