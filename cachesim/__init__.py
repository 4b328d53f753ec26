"""Trace-driven simulator for set-associative LRU caches: unified, split and two-level."""

__version__ = "0.1.0"
__all__ = ["cache", "trace", "simulators", "cli"]