"""Hash functions mapping strings onto a fixed number of table slots."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable

_STABLE_SEED = 137
_MASK32 = 0xFFFFFFFF
_MASK31 = 0x7FFFFFFF


@dataclass(frozen=True)
class HashFunction:
    """A hash function bound to a table size.

    Calling it returns a slot index in ``range(num_slots)``.
    """

    num_slots: int
    function: Callable[[str], int]

    def __post_init__(self) -> None:
        if self.num_slots <= 0:
            raise ValueError(f"a hash function needs at least one slot, got {self.num_slots}")

    def __call__(self, key: str) -> int:
        return self.function(key) % self.num_slots


def hash_code(text: str) -> int:
    """Return a deterministic, non-negative 31-bit hash code for a string."""
    result = 5381
    for byte in text.encode("utf-8"):
        result = (result * 33 + byte) & _MASK31
    return result


def tabulation_hash(seed: int) -> Callable[[int], int]:
    """Build a 32-bit tabulation hash whose tables are drawn from ``seed``."""
    engine = random.Random(seed & _MASK32)
    tables = tuple(
        tuple(engine.getrandbits(32) for _ in range(256)) for _ in range(4)
    )

    def scramble(key: int) -> int:
        key &= _MASK32
        result = 0
        for position, table in enumerate(tables):
            result ^= table[(key >> (position * 8)) & 0xFF]
        return result

    return scramble


def _scrambled(num_slots: int, seed: int) -> HashFunction:
    scrambler = tabulation_hash(seed)
    return HashFunction(num_slots, lambda text: scrambler(hash_code(text)))


def random_hash(num_slots: int) -> HashFunction:
    """A freshly randomised hash function."""
    return _scrambled(num_slots, random.randint(0, _MASK31))


def consistent_random(num_slots: int) -> HashFunction:
    """A random-looking hash function that is the same on every run."""
    return _scrambled(num_slots, _STABLE_SEED)


def zero(num_slots: int) -> HashFunction:
    """A hash function that sends every key to slot zero."""
    return constant(num_slots, 0)


def constant(num_slots: int, value: int) -> HashFunction:
    """A hash function that sends every key to the same slot."""
    return HashFunction(num_slots, lambda _text: value)


def _leading_integer(text: str) -> int:
    """Parse a base-10 integer prefix after optional whitespace; 0 if none."""
    stripped = text.lstrip()
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def identity(num_slots: int) -> HashFunction:
    """Treat the key as an integer; keys that are not numbers hash to zero."""
    return HashFunction(num_slots, _leading_integer)