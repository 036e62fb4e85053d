"""A fixed-size key-value cache with a choice of eviction policy."""

from __future__ import annotations

import enum
import random
import sys
from collections import OrderedDict
from typing import Any, Hashable, List, Optional, Sequence, Tuple


class Policy(enum.Enum):
    """Which entry a full cache evicts to make room."""

    LRU = "lru"
    FIFO = "fifo"
    RANDOM = "random"


class Cache:
    """A cache that holds at most ``capacity`` entries."""

    def __init__(
        self,
        capacity: int,
        policy: Policy = Policy.LRU,
        rng: Optional[random.Random] = None,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.policy = Policy(policy)
        self._rng = rng if rng is not None else random.Random()
        # For LRU the order runs from least to most recently used; otherwise
        # it is the order in which keys were first stored.
        self._data: "OrderedDict[Hashable, Any]" = OrderedDict()

    def _touch(self, key: Hashable) -> None:
        if self.policy is Policy.LRU:
            self._data.move_to_end(key)

    def _victim(self) -> Hashable:
        if self.policy is Policy.RANDOM:
            return self._rng.choice(list(self._data))
        return next(iter(self._data))

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting an entry if the cache is full."""
        if key in self._data:
            self._data[key] = value
            self._touch(key)
            return
        if len(self._data) >= self.capacity:
            del self._data[self._victim()]
        self._data[key] = value

    def get(self, key: Hashable) -> Any:
        """Return the value under ``key``, or None if it is not cached."""
        if key not in self._data:
            return None
        self._touch(key)
        return self._data[key]

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def items(self) -> List[Tuple[Hashable, Any]]:
        """Return the cached key-value pairs."""
        return list(self._data.items())

    def __str__(self) -> str:
        entries = " ".join(f"{key}:{value}" for key, value in self._data.items())
        return f"Cache content: {entries}".rstrip()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show an LRU cache of three entries at work."""
    cache = Cache(3, Policy.LRU)
    cache.put(1, 100)
    cache.put(2, 200)
    cache.put(3, 300)
    print(cache)
    cache.get(2)
    cache.put(4, 400)
    print(cache)
    cache.put(5, 500)
    print(cache)
    return 0


if __name__ == "__main__":
    sys.exit(main())