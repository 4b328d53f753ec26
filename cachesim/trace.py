"""Reading memory access traces and cache configuration files."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path

_LINE = re.compile(r"(\S)\s*([+-]?\d+)")


class AccessKind(Enum):
    """Kind of memory access in a trace."""

    INSTRUCTION = "I"
    LOAD = "L"
    STORE = "S"

    @property
    def is_instruction(self) -> bool:
        return self is AccessKind.INSTRUCTION


@dataclass(frozen=True)
class Access:
    """One memory access: its kind and byte address."""

    kind: AccessKind
    address: int


@dataclass(frozen=True)
class CacheConfig:
    """Geometry of one cache."""

    n_blocks: int
    associativity: int
    words_per_block: int


def parse_trace(text: str) -> Iterator[Access]:
    """Yield the accesses of a trace, one per non-blank line."""
    for number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        match = _LINE.fullmatch(stripped)
        if match is None:
            raise ValueError(f"line {number}: malformed access {stripped!r}")
        letter, address = match.groups()
        try:
            kind = AccessKind(letter)
        except ValueError:
            raise ValueError(f"line {number}: unknown access kind {letter!r}") from None
        yield Access(kind, int(address))


def read_trace(path: str | PathLike[str]) -> list[Access]:
    """Read every access from a trace file."""
    return list(parse_trace(Path(path).read_text()))


def parse_config(text: str, count: int) -> list[CacheConfig]:
    """Read ``count`` cache configurations of three integers each."""
    tokens = text.split()
    needed = 3 * count
    if len(tokens) < needed:
        raise ValueError(f"expected {needed} integers, found {len(tokens)}")
    try:
        values = [int(token) for token in tokens[:needed]]
    except ValueError as exc:
        raise ValueError(f"invalid configuration value: {exc}") from None
    return [CacheConfig(*values[i:i + 3]) for i in range(0, needed, 3)]


def read_config(path: str | PathLike[str], count: int) -> list[CacheConfig]:
    """Read ``count`` cache configurations from a file."""
    return parse_config(Path(path).read_text(), count)