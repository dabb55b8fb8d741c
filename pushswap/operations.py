"""The eleven stack operations and a machine that counts and reports them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from pushswap.stack import Stack


class Operation(Enum):
    """An instruction that acts on stack a, stack b, or both."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: Stack) -> bool:
    if len(stack) < 2:
        return False
    stack.swap()
    return True


def _push(source: Stack, target: Stack) -> bool:
    if not len(source):
        return False
    target.push(source.pop())
    return True


def _rotate(stack: Stack) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate()
    return True


def _reverse_rotate(stack: Stack) -> bool:
    if len(stack) < 2:
        return False
    stack.reverse_rotate()
    return True


def _both(action: Callable[[Stack], bool], a: Stack, b: Stack) -> bool:
    # The combined operations act only when both stacks can take part.
    if len(a) < 2 or len(b) < 2:
        return False
    action(a)
    action(b)
    return True


_ACTIONS: dict[Operation, Callable[[Stack, Stack], bool]] = {
    Operation.SA: lambda a, b: _swap(a),
    Operation.SB: lambda a, b: _swap(b),
    Operation.SS: lambda a, b: _both(_swap, a, b),
    Operation.PA: lambda a, b: _push(b, a),
    Operation.PB: lambda a, b: _push(a, b),
    Operation.RA: lambda a, b: _rotate(a),
    Operation.RB: lambda a, b: _rotate(b),
    Operation.RR: lambda a, b: _both(_rotate, a, b),
    Operation.RRA: lambda a, b: _reverse_rotate(a),
    Operation.RRB: lambda a, b: _reverse_rotate(b),
    Operation.RRR: lambda a, b: _both(_reverse_rotate, a, b),
}


def execute(op: Operation, a: Stack, b: Stack) -> bool:
    """Apply op to the stacks; return False when it had nothing to act on."""
    return _ACTIONS[op](a, b)


@dataclass
class OpCounts:
    """How many times each operation was performed, and in total."""

    sa: int = 0
    sb: int = 0
    ss: int = 0
    pa: int = 0
    pb: int = 0
    ra: int = 0
    rb: int = 0
    rr: int = 0
    rra: int = 0
    rrb: int = 0
    rrr: int = 0
    total: int = 0

    def record(self, op: Operation) -> None:
        """Count one more use of op."""
        setattr(self, op.value, getattr(self, op.value) + 1)
        self.total += 1


@dataclass
class Machine:
    """Two stacks, a tally of operations, and a sink for their names."""

    a: Stack
    b: Stack
    emit: Callable[[str], object] | None = None
    counts: OpCounts = field(default_factory=OpCounts)

    def apply(self, op: Operation) -> bool:
        """Perform op; when it takes effect, count it and emit its name."""
        if not execute(op, self.a, self.b):
            return False
        self.counts.record(op)
        if self.emit is not None:
            self.emit(op.value)
        return True