"""Command-line entry points for the cache simulators."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from cachesim.trace import read_config, read_trace


def _run(
    prog: str,
    count: int,
    argv: Sequence[str] | None,
    simulate: Callable,
    banner: str | None = None,
) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(f"Uso: {prog} arquivoConfiguracao arquivoAcessos", file=sys.stderr)
        return 1
    config_path, trace_path = args

    try:
        configs = read_config(config_path, count)
    except OSError:
        print(f"{prog}: configuration file not found: {config_path}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"{prog}: invalid configuration: {exc}", file=sys.stderr)
        return 1

    try:
        accesses = read_trace(trace_path)
    except OSError:
        print(f"{prog}: access file not found: {trace_path}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"{prog}: invalid access file: {exc}", file=sys.stderr)
        return 1

    try:
        stats = simulate(*configs, accesses)
    except ValueError as exc:
        print(f"{prog}: invalid configuration: {exc}", file=sys.stderr)
        return 1

    if banner is not None:
        print(banner)
    print(stats.report())
    return 0


def main_basic(argv: Sequence[str] | None = None) -> int:
    """Simulate a single unified L1 cache."""
    from cachesim.simulators import simulate_basic

    return _run("simbasica", 1, argv, simulate_basic)


def main_split(argv: Sequence[str] | None = None) -> int:
    """Simulate separate instruction and data L1 caches."""
    from cachesim.simulators import simulate_split

    return _run("simsplit", 2, argv, simulate_split, banner="Laco da Main Concluido")


def main_two_level(argv: Sequence[str] | None = None) -> int:
    """Simulate split L1 caches backed by a unified L2 cache."""
    from cachesim.simulators import simulate_two_level

    return _run("simniveis", 3, argv, simulate_two_level)