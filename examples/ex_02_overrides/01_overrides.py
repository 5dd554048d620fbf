"""Prefilled slots and overrides.

A prefilled slot is reused as-is. An override replaces a binding for one
build only and is not written back to the slot.
"""

from __future__ import annotations

from stubwire import MappingSlots, TestContext


class Clock:
    def now(self) -> float:
        raise NotImplementedError


class FixedClock(Clock):
    def now(self) -> float:
        return 1700000000.0


class Cache:
    def __init__(self, clock: Clock, ttl: float = 60.0) -> None:
        self.clock = clock
        self.ttl = ttl


def main() -> None:
    fixed = FixedClock()
    context = TestContext(target=Cache, slots=MappingSlots(clock=fixed))

    cache = context.make()
    print(cache.clock is fixed)  # => True

    short_lived = context.make(ttl=1.0)
    print(short_lived.ttl)  # => 1.0

    other = FixedClock()
    overridden = context.make(clock=other)
    print(context["clock"] is fixed)  # => True
    print(overridden.clock is other)  # => True


if __name__ == "__main__":
    main()
