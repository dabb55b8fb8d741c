"""Command that checks whether a list of operations sorts the given integers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from pushswap.operations import Operation, execute
from pushswap.parsing import ParseError, parse_checker_arguments
from pushswap.stack import Stack, assign_indices, is_sorted

_BY_LINE = {op.value + "\n": op for op in Operation}


def read_operations(stream: Iterable[str]) -> list[Operation]:
    """Read every line of stream as an operation, each ended by a newline.

    The whole stream is consumed even when a line is invalid; ParseError is
    raised afterwards for the first invalid line.
    """
    operations: list[Operation] = []
    bad_line: str | None = None
    for line in stream:
        if bad_line is not None:
            continue
        op = _BY_LINE.get(line)
        if op is None:
            bad_line = line
        else:
            operations.append(op)
    if bad_line is not None:
        raise ParseError(f"unknown operation: {bad_line!r}")
    return operations


def check(args: Sequence[str], stream: Iterable[str]) -> bool:
    """Apply the operations in stream to the numbers in args; True if sorted."""
    a = parse_checker_arguments(args)
    assign_indices(a)
    b = Stack()
    for op in read_operations(stream):
        execute(op, a, b)
    return is_sorted(a) and not len(b)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: operations are read from standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    stdin: TextIO = sys.stdin
    try:
        sorted_ok = check(args, stdin)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())