"""Circular stack of indexed integers used by the sorting machine."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """One element of a stack: its value and its rank among all values."""

    value: int
    index: int = 0


class Stack:
    """A stack whose first element is the top and whose last is the bottom."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(value) for value in values)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    @property
    def top(self) -> Node:
        """The node on top of the stack."""
        if not self._nodes:
            raise IndexError("top of an empty stack")
        return self._nodes[0]

    def push(self, node: Node) -> None:
        """Place a node on top of the stack."""
        self._nodes.appendleft(node)

    def pop(self) -> Node:
        """Remove and return the top node."""
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.popleft()

    def rotate(self) -> None:
        """Move the top node to the bottom."""
        self._nodes.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom node to the top."""
        self._nodes.rotate(1)

    def swap(self) -> None:
        """Exchange the two topmost nodes; does nothing with fewer than two."""
        if len(self._nodes) < 2:
            return
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)

    def append(self, value: int) -> Node:
        """Add a new node holding value at the bottom and return it."""
        node = Node(value)
        self._nodes.append(node)
        return node

    def values(self) -> list[int]:
        """Values from top to bottom."""
        return [node.value for node in self._nodes]

    def indices(self) -> list[int]:
        """Indices from top to bottom."""
        return [node.index for node in self._nodes]


def assign_indices(stack: Stack) -> None:
    """Set each node's index to the number of values strictly smaller than it."""
    ordered = sorted(stack.values())
    for node in stack:
        node.index = bisect_left(ordered, node.value)


def is_sorted(stack: Stack) -> bool:
    """True when indices never decrease from top to bottom."""
    indices = stack.indices()
    return all(a <= b for a, b in zip(indices, indices[1:]))


def ceil_sqrt(n: int) -> int:
    """Smallest integer whose square is at least n."""
    root = math.isqrt(n)
    return root if root * root >= n else root + 1


def ceil_div(dividend: int, divisor: int) -> int:
    """Integer division rounded up."""
    return -(-dividend // divisor)