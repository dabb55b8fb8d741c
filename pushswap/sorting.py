"""Sorting strategies that drive a Machine from stack a into sorted order."""

from __future__ import annotations

from pushswap.operations import Machine, Operation
from pushswap.stack import Stack, ceil_div, ceil_sqrt


def compute_disorder(stack: Stack) -> float:
    """Fraction of ordered pairs of nodes whose indices are inverted."""
    indices = stack.indices()
    size = len(indices)
    if size < 2:
        return 0.0
    total_pairs = size * (size - 1) // 2
    mistakes = sum(
        1
        for i, first in enumerate(indices)
        for second in indices[i + 1:]
        if first > second
    )
    return mistakes / total_pairs


def _sort_three(machine: Machine) -> None:
    first, second, third = machine.a.indices()
    if first > second and first > third:
        machine.apply(Operation.RA)
    elif second > first and second > third:
        machine.apply(Operation.RRA)
    top, below = machine.a.indices()[:2]
    if top > below:
        machine.apply(Operation.SA)


def _bring_to_top_and_push(machine: Machine, index: int) -> None:
    while machine.a.top.index != index:
        machine.apply(Operation.RA)
    machine.apply(Operation.PB)


def sort_small(machine: Machine) -> None:
    """Sort a stack a of at most five nodes whose indices run from zero."""
    size = len(machine.a)
    if size == 5:
        _bring_to_top_and_push(machine, 0)
        _bring_to_top_and_push(machine, 1)
        _sort_three(machine)
        machine.apply(Operation.PA)
        machine.apply(Operation.PA)
    elif size == 4:
        _bring_to_top_and_push(machine, 0)
        _sort_three(machine)
        machine.apply(Operation.PA)
    elif size == 3:
        _sort_three(machine)
    elif size == 2:
        machine.apply(Operation.SA)


def _handled_as_small(machine: Machine) -> bool:
    size = len(machine.a)
    if size < 2:
        return True
    if size <= 5:
        sort_small(machine)
        return True
    return False


def _rotate_b_to(machine: Machine, pos: int) -> None:
    size = len(machine.b)
    if size < 2 or pos == 0:
        return
    if pos <= size // 2:
        for _ in range(pos):
            machine.apply(Operation.RB)
    else:
        for _ in range(size - pos):
            machine.apply(Operation.RRB)


def _find_insert_pos(a_index: int, b: Stack) -> int:
    indices = b.indices()
    if len(indices) < 2:
        return 0
    max_index = indices[0]
    max_pos = 0
    for pos, index in enumerate(indices):
        previous = indices[pos - 1]
        if index < a_index < previous:
            return pos
        if index > max_index:
            max_index = index
            max_pos = pos
    return max_pos


def simple_sort(machine: Machine) -> None:
    """Insertion sort: keep stack b in descending cyclic order, then return all."""
    if _handled_as_small(machine):
        return
    a, b = machine.a, machine.b
    while len(a):
        _rotate_b_to(machine, _find_insert_pos(a.top.index, b))
        machine.apply(Operation.PB)
    _rotate_b_to(machine, (b.top.index + 1) % len(b))
    while len(b):
        machine.apply(Operation.PA)


def _chunk_push(machine: Machine) -> None:
    a = machine.a
    chunk_count = ceil_sqrt(len(a))
    chunk_size = ceil_div(len(a), chunk_count)
    for chunk in range(chunk_count):
        if not len(a):
            break
        low, high = chunk * chunk_size, (chunk + 1) * chunk_size
        pushed = 0
        while pushed < chunk_size and len(a):
            if low <= a.top.index < high:
                machine.apply(Operation.PB)
                pushed += 1
            else:
                machine.apply(Operation.RA)


def _bring_max_to_top(machine: Machine, cur_max: int) -> None:
    b = machine.b
    indices = b.indices()
    pos = next(
        (i for i, index in enumerate(indices) if index == cur_max), len(indices)
    )
    op = Operation.RB if pos <= len(indices) - pos else Operation.RRB
    while b.top.index != cur_max:
        machine.apply(op)


def _chunk_pull(machine: Machine) -> None:
    b = machine.b
    if not len(b):
        return
    cur_max = len(b) - 1
    while len(b):
        if b.top.index != cur_max:
            _bring_max_to_top(machine, cur_max)
        machine.apply(Operation.PA)
        if cur_max == 0:
            break
        cur_max -= 1


def medium_sort(machine: Machine) -> None:
    """Chunk sort: push square-root sized chunks to b, then pull maxima back."""
    if _handled_as_small(machine):
        return
    _chunk_push(machine)
    _chunk_pull(machine)


def complex_sort(machine: Machine) -> None:
    """Binary radix sort on the node indices."""
    if _handled_as_small(machine):
        return
    a, b = machine.a, machine.b
    bits = (len(a) - 1).bit_length()
    for bit in range(bits):
        mask = 1 << bit
        for _ in range(len(a)):
            if a.top.index & mask:
                machine.apply(Operation.RA)
            else:
                machine.apply(Operation.PB)
        for _ in range(len(b)):
            machine.apply(Operation.PA)