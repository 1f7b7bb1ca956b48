"""Counting allocations and releases of tracked types to spot leaks."""

from __future__ import annotations

import functools
from collections import Counter
from typing import TypeVar

T = TypeVar("T", bound=type)


class AllocationTracker:
    """Keeps a per-type balance of creations minus releases."""

    def __init__(self) -> None:
        self._allocations: Counter[str] = Counter()
        self._registered: set[str] = set()

    def register(self, name: str) -> None:
        """Make ``name`` eligible for reporting by :meth:`types_with_errors`."""
        self._registered.add(name)

    def record_new(self, name: str) -> None:
        self._allocations[name] += 1

    def record_delete(self, name: str) -> None:
        self._allocations[name] -= 1

    def clear(self) -> None:
        """Reset every balance to zero."""
        self._allocations.clear()

    def types_with_errors(self) -> dict[str, int]:
        """Registered types whose balance is not zero, keyed by name."""
        return {
            name: self._allocations[name]
            for name in sorted(self._registered)
            if self._allocations[name] != 0
        }

    def track(self, cls: T) -> T:
        """Class decorator counting each instance's creation and release."""
        name = cls.__name__
        self.register(name)
        tracker = self
        original_init = cls.__init__
        original_del = getattr(cls, "__del__", None)

        @functools.wraps(original_init)
        def __init__(self, *args, **kwargs):
            tracker.record_new(name)
            original_init(self, *args, **kwargs)

        def __del__(self):
            tracker.record_delete(name)
            if original_del is not None:
                original_del(self)

        cls.__init__ = __init__
        cls.__del__ = __del__
        return cls