"""Command-line parsing into a stack of integers and a run configuration."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from pushswap.stack import Stack

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_DIGITS = frozenset("0123456789")


class ParseError(ValueError):
    """Raised when the arguments cannot be turned into a stack."""


class SortType(Enum):
    NOT_SPECIFIED = auto()
    SIMPLE = auto()
    MEDIUM = auto()
    COMPLEX = auto()
    ADAPTIVE = auto()


@dataclass
class Config:
    """Options chosen on the command line and facts gathered while running."""

    sort_type: SortType = SortType.NOT_SPECIFIED
    executed: SortType = SortType.NOT_SPECIFIED
    bench: bool = False
    disorder: float = 0.0


_SORT_OPTIONS = {
    "--simple": SortType.SIMPLE,
    "--medium": SortType.MEDIUM,
    "--complex": SortType.COMPLEX,
    "--adaptive": SortType.ADAPTIVE,
}


def parse_int(token: str) -> int:
    """Parse an optionally signed decimal that fits in a 32-bit int."""
    digits = token[1:] if token[:1] in ("-", "+") else token
    if not digits or not set(digits) <= _DIGITS:
        raise ParseError(f"not an integer: {token!r}")
    number = -int(digits) if token.startswith("-") else int(digits)
    if not INT_MIN <= number <= INT_MAX:
        raise ParseError(f"integer out of range: {token!r}")
    return number


def add_value(stack: Stack, token: str) -> None:
    """Parse token and append it to the bottom of stack, refusing duplicates."""
    number = parse_int(token)
    if number in stack.values():
        raise ParseError(f"duplicate value: {number}")
    stack.append(number)


def _apply_option(config: Config, token: str) -> None:
    if token == "--bench":
        config.bench = True
        return
    sort_type = _SORT_OPTIONS.get(token)
    if sort_type is None:
        raise ParseError(f"unknown option: {token!r}")
    if config.sort_type is not SortType.NOT_SPECIFIED:
        raise ParseError("sort strategy given more than once")
    config.sort_type = sort_type


def _tokens(arg: str) -> list[str]:
    if arg == "":
        raise ParseError("empty argument")
    return [token for token in arg.split(" ") if token]


def parse_arguments(args: Iterable[str]) -> tuple[Stack, Config]:
    """Build the initial stack and configuration from the program arguments."""
    stack = Stack()
    config = Config()
    for arg in args:
        for token in _tokens(arg):
            if token.startswith("--"):
                _apply_option(config, token)
            else:
                add_value(stack, token)
    return stack, config


def parse_checker_arguments(args: Iterable[str]) -> Stack:
    """Build the initial stack for the checker; options are not accepted."""
    stack = Stack()
    for arg in args:
        for token in _tokens(arg):
            add_value(stack, token)
    return stack