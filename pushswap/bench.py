"""Benchmark report on the strategy used and the operations performed."""

from __future__ import annotations

import sys
from typing import TextIO

from pushswap.operations import OpCounts
from pushswap.parsing import Config, SortType

_STRATEGY_NAMES = {
    SortType.SIMPLE: "Simple",
    SortType.MEDIUM: "Medium",
    SortType.COMPLEX: "Complex",
}

_COMPLEXITIES = {
    SortType.SIMPLE: "O(n^2)",
    SortType.MEDIUM: "O(n\u221an)",
    SortType.COMPLEX: "O(n log n)",
}


def _disorder_line(disorder: float) -> str:
    total = int(disorder * 10000.0 + 0.5)
    whole, frac = divmod(total, 100)
    return f"[bench] disorder: {whole}.{frac:02d}%"


def _strategy_line(config: Config) -> str:
    name = _STRATEGY_NAMES.get(config.sort_type, "Adaptive")
    complexity = _COMPLEXITIES.get(config.executed, "O(?)")
    return f"[bench] strategy: {name} / {complexity}"


def format_bench(counts: OpCounts, config: Config) -> str:
    """Render the benchmark report, one line per topic, newline-terminated."""
    lines = [
        _disorder_line(config.disorder),
        _strategy_line(config),
        f"[bench] total_ops: {counts.total}",
        f"[bench] sa: {counts.sa} sb: {counts.sb} ss: {counts.ss}"
        f" pa: {counts.pa} pb: {counts.pb}",
        f"[bench] ra: {counts.ra} rb: {counts.rb} rr: {counts.rr}"
        f" rra: {counts.rra} rrb: {counts.rrb} rrr: {counts.rrr}",
    ]
    return "".join(line + "\n" for line in lines)


def display_bench(
    counts: OpCounts, config: Config, stream: TextIO | None = None
) -> None:
    """Write the benchmark report to stream, standard error by default."""
    target = sys.stderr if stream is None else stream
    target.write(format_bench(counts, config))