"""Generic set-associative cache with exact LRU replacement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from operator import attrgetter

WORD_BYTES = 4
"""Number of bytes in a memory word."""


class AccessResult(IntEnum):
    """Outcome of a cache lookup."""

    HIT = 0
    MISS = 1
    MISS_REPLACE = 2

    @property
    def is_miss(self) -> bool:
        return self is not AccessResult.HIT


@dataclass
class Line:
    """One way of a cache set."""

    valid: bool = False
    tag: int = 0
    order: int = 0


class Cache:
    """A cache of ``n_blocks`` blocks grouped into sets of ``associativity`` ways."""

    def __init__(self, n_blocks: int, associativity: int, words_per_block: int) -> None:
        for name, value in (
            ("n_blocks", n_blocks),
            ("associativity", associativity),
            ("words_per_block", words_per_block),
        ):
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if n_blocks < associativity:
            raise ValueError(
                f"associativity {associativity} exceeds the number of blocks {n_blocks}"
            )
        self.n_blocks = n_blocks
        self.associativity = associativity
        self.words_per_block = words_per_block
        self.n_sets = n_blocks // associativity
        self.sets: list[list[Line]] = [
            [Line() for _ in range(associativity)] for _ in range(self.n_sets)
        ]

    def __repr__(self) -> str:
        return (
            f"Cache(n_blocks={self.n_blocks}, associativity={self.associativity}, "
            f"words_per_block={self.words_per_block})"
        )

    def decompose(self, address: int) -> tuple[int, int]:
        """Return the ``(index, tag)`` pair of a byte address."""
        if address < 0:
            raise ValueError(f"address must not be negative, got {address}")
        block = address // WORD_BYTES // self.words_per_block
        return block % self.n_sets, block // self.n_sets

    def lookup(self, address: int) -> AccessResult:
        """Look the address up, loading its block on a miss."""
        index, tag = self.decompose(address)
        ways = self.sets[index]
        valid = [line for line in ways if line.valid]
        next_order = max((line.order for line in valid), default=-1) + 1

        hit = next((line for line in valid if line.tag == tag), None)
        if hit is not None:
            hit.order = next_order
            return AccessResult.HIT

        free = next((line for line in ways if not line.valid), None)
        if free is not None:
            free.valid = True
            free.tag = tag
            free.order = next_order
            return AccessResult.MISS

        victim = min(valid, key=attrgetter("order"))
        victim.tag = tag
        victim.order = next_order
        return AccessResult.MISS_REPLACE