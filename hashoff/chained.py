"""A hash table of strings that resolves collisions by chaining."""

from __future__ import annotations

from hashoff.hashing import HashFunction


class ChainedHashTable:
    """A set of strings stored in per-slot buckets."""

    def __init__(self, hash_fn: HashFunction) -> None:
        self._hash_fn = hash_fn
        self._buckets: list[list[str]] = [[] for _ in range(hash_fn.num_slots)]
        self._size = 0

    def _bucket(self, key: str) -> list[str]:
        return self._buckets[self._hash_fn(key)]

    def insert(self, key: str) -> bool:
        """Add ``key``; return whether it was not already present."""
        if key in self:
            return False
        self._bucket(key).append(key)
        self._size += 1
        return True

    def remove(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        bucket = self._bucket(key)
        try:
            bucket.remove(key)
        except ValueError:
            return False
        self._size -= 1
        return True

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._bucket(key)

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0