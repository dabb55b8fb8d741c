# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of instructions, and check that an instruction sequence really sorts a
given list.

## Instructions

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up (the top becomes the bottom)      |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down (the bottom becomes the top)    |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

An instruction that has nothing to act on does nothing: a swap or rotation
of a stack with fewer than two elements, or a push from an empty stack. The
combined instructions `ss`, `rr` and `rrr` act only when both stacks hold at
least two elements.

## Installation

```
pip install .
```

## Sorting

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The first number is the top of stack `a`. An argument may hold several
tokens separated by spaces. The instructions that sort the list are printed
one per line on standard output. If the input is already sorted, nothing is
printed. With no arguments the command does nothing and exits with status 0.

Options, which may appear anywhere among the numbers:

- `--simple`: insertion sort into `b`, O(n²)
- `--medium`: chunked sort, O(n√n)
- `--complex`: radix sort on the element ranks, O(n log n)
- `--adaptive`: pick a strategy from the measured disorder (the default)
- `--bench`: write a report to standard error

At most one strategy option may be given. With five elements or fewer, every
strategy uses a dedicated small sort.

The adaptive choice uses the disorder, the fraction of pairs that are out of
order: below 0.2 it picks simple, below 0.5 medium, and complex otherwise.

The `--bench` report looks like this:

```
[bench] disorder: 40.00%
[bench] strategy: Adaptive / O(n√n)
[bench] total_ops: 12
[bench] sa: 1 sb: 0 ss: 0 pa: 2 pb: 2
[bench] ra: 4 rb: 0 rr: 0 rra: 3 rrb: 0 rrr: 0
```

Bad input writes `Error` to standard error and exits with status 1. Bad
input is a token that is not a plain decimal integer with an optional sign,
a value outside the 32-bit signed range, a duplicate value, an empty
argument, an unknown option starting with `--`, or a second strategy option.

## Checking

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

The checker takes the numbers the same way (options are not accepted), reads
instructions from standard input, one per line, each ended by a newline, and
applies them. It prints `OK` if `a` ends up sorted and `b` is empty, and
`KO` otherwise. An unknown instruction or invalid numbers write `Error` to
standard error and exit with status 1; the whole input is still read first.

## Library use

```python
from pushswap.stack import Stack, assign_indices, is_sorted
from pushswap.operations import Machine
from pushswap.sorting import medium_sort

a = Stack([3, 2, 5, 1, 4, 9, 7])
assign_indices(a)
emitted = []
machine = Machine(a, Stack([]), emitted.append)
medium_sort(machine)
assert is_sorted(a)
print(emitted, machine.counts.total)
```

Modules:

- `pushswap.stack`: `Node`, `Stack`, `assign_indices`, `is_sorted`,
  `ceil_sqrt`, `ceil_div`
- `pushswap.parsing`: `parse_int`, `add_value`, `parse_arguments`,
  `parse_checker_arguments`, `Config`, `SortType`, `ParseError`
- `pushswap.operations`: `Operation`, `execute`, `OpCounts`, `Machine`
- `pushswap.sorting`: `compute_disorder`, `sort_small`, `simple_sort`,
  `medium_sort`, `complex_sort`
- `pushswap.bench`: `format_bench`, `display_bench`
- `pushswap.cli`: `choose_strategy`, `run`, `main`
- `pushswap.checker`: `read_operations`, `check`, `main`

The sorting functions expect the nodes of `a` to carry indices from
`assign_indices` and `b` to start empty.