"""Trace-driven simulations of unified, split and two-level cache hierarchies."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from cachesim.cache import Cache
from cachesim.trace import Access, CacheConfig


def _build(config: CacheConfig) -> Cache:
    return Cache(config.n_blocks, config.associativity, config.words_per_block)


@dataclass
class BasicStats:
    """Counters of a single unified L1 cache."""

    instruction_accesses: int = 0
    data_accesses: int = 0
    l1_misses: int = 0

    def report(self) -> str:
        return "\n".join(
            [
                f"nAcessosI: {self.instruction_accesses}",
                f"nAcessosD: {self.data_accesses}",
                f"nFalhasL1: {self.l1_misses}",
            ]
        )


@dataclass
class SplitStats:
    """Counters of separate instruction and data L1 caches."""

    instruction_accesses: int = 0
    data_accesses: int = 0
    total_misses: int = 0
    i1_misses: int = 0
    d1_misses: int = 0

    def report(self) -> str:
        return "\n".join(
            [
                f"nAcessosI: {self.instruction_accesses}",
                f"nAcessosD: {self.data_accesses}",
                f"nFalhasTotal: {self.total_misses}",
                f"Falhas I1: {self.i1_misses}",
                f"Falhas D1: {self.d1_misses}",
            ]
        )


@dataclass
class TwoLevelStats:
    """Counters of split L1 caches backed by a unified L2 cache."""

    instruction_accesses: int = 0
    data_accesses: int = 0
    l2_accesses: int = 0
    total_misses: int = 0
    i1_misses: int = 0
    d1_misses: int = 0
    l2_misses: int = 0

    def report(self) -> str:
        return "\n".join(
            [
                f"nAcessosI: {self.instruction_accesses}",
                f"nAcessosD: {self.data_accesses}",
                f"nFalhasTotal: {self.total_misses}",
                f"Falhas I1: {self.i1_misses}",
                f"Falhas D1: {self.d1_misses}",
                f"Falhas L2: {self.l2_misses}",
            ]
        )


def simulate_basic(config: CacheConfig, accesses: Iterable[Access]) -> BasicStats:
    """Run a trace through one cache shared by instructions and data."""
    cache = _build(config)
    stats = BasicStats()
    for access in accesses:
        if access.kind.is_instruction:
            stats.instruction_accesses += 1
        else:
            stats.data_accesses += 1
        if cache.lookup(access.address).is_miss:
            stats.l1_misses += 1
    return stats


def simulate_split(
    instruction_config: CacheConfig,
    data_config: CacheConfig,
    accesses: Iterable[Access],
) -> SplitStats:
    """Run a trace through separate instruction and data caches."""
    i1 = _build(instruction_config)
    d1 = _build(data_config)
    stats = SplitStats()
    for access in accesses:
        if access.kind.is_instruction:
            stats.instruction_accesses += 1
            missed = i1.lookup(access.address).is_miss
            stats.i1_misses += missed
        else:
            stats.data_accesses += 1
            missed = d1.lookup(access.address).is_miss
            stats.d1_misses += missed
        stats.total_misses += missed
    return stats


def simulate_two_level(
    instruction_config: CacheConfig,
    data_config: CacheConfig,
    l2_config: CacheConfig,
    accesses: Iterable[Access],
) -> TwoLevelStats:
    """Run a trace through split L1 caches with a unified L2 behind them."""
    i1 = _build(instruction_config)
    d1 = _build(data_config)
    l2 = _build(l2_config)
    stats = TwoLevelStats()
    for access in accesses:
        if access.kind.is_instruction:
            stats.instruction_accesses += 1
            missed = i1.lookup(access.address).is_miss
            stats.i1_misses += missed
        else:
            stats.data_accesses += 1
            missed = d1.lookup(access.address).is_miss
            stats.d1_misses += missed
        if not missed:
            continue
        stats.total_misses += 1
        stats.l2_accesses += 1
        if l2.lookup(access.address).is_miss:
            stats.l2_misses += 1
            stats.total_misses += 1
    return stats