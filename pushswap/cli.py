"""Command that prints the operations needed to sort its integer arguments."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from pushswap.bench import display_bench
from pushswap.operations import Machine
from pushswap.parsing import Config, ParseError, SortType, parse_arguments
from pushswap.sorting import compute_disorder, complex_sort, medium_sort, simple_sort
from pushswap.stack import Stack, assign_indices, is_sorted

_EXPLICIT = (SortType.SIMPLE, SortType.MEDIUM, SortType.COMPLEX)

_SORTERS: dict[SortType, Callable[[Machine], None]] = {
    SortType.SIMPLE: simple_sort,
    SortType.MEDIUM: medium_sort,
    SortType.COMPLEX: complex_sort,
}


def choose_strategy(config: Config) -> SortType:
    """Return the strategy asked for, or pick one from the measured disorder."""
    if config.sort_type in _EXPLICIT:
        return config.sort_type
    if config.disorder < 0.2:
        return SortType.SIMPLE
    if config.disorder < 0.5:
        return SortType.MEDIUM
    return SortType.COMPLEX


def run(args: Sequence[str], out: TextIO, err: TextIO) -> int:
    """Sort the numbers in args, writing operations to out; return the exit status."""
    if not args:
        return 0
    try:
        stack, config = parse_arguments(args)
    except ParseError:
        err.write("Error\n")
        return 1
    assign_indices(stack)
    config.disorder = compute_disorder(stack)
    config.executed = choose_strategy(config)
    machine = Machine(stack, Stack(), lambda name: out.write(name + "\n"))
    if not is_sorted(stack):
        _SORTERS.get(config.executed, complex_sort)(machine)
    if config.bench:
        display_bench(machine.counts, config, err)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: arguments default to those of the running process."""
    args = sys.argv[1:] if argv is None else list(argv)
    return run(args, sys.stdout, sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())