import io

import pytest

from pushswap.cli import choose_strategy, main, run
from pushswap.operations import Operation, execute
from pushswap.parsing import Config, SortType
from pushswap.stack import Stack


def _run(args):
    out, err = io.StringIO(), io.StringIO()
    status = run(args, out, err)
    return status, out.getvalue(), err.getvalue()


def _replay(values, output):
    a, b = Stack(values), Stack()
    for name in output.splitlines():
        execute(Operation(name), a, b)
    return a, b


@pytest.mark.parametrize(
    "sort_type", [SortType.SIMPLE, SortType.MEDIUM, SortType.COMPLEX]
)
def test_explicit_strategy_wins(sort_type):
    config = Config(sort_type=sort_type, disorder=0.9)
    assert choose_strategy(config) is sort_type


@pytest.mark.parametrize(
    "disorder, expected",
    [
        (0.0, SortType.SIMPLE),
        (0.19, SortType.SIMPLE),
        (0.2, SortType.MEDIUM),
        (0.49, SortType.MEDIUM),
        (0.5, SortType.COMPLEX),
        (1.0, SortType.COMPLEX),
    ],
)
def test_adaptive_thresholds(disorder, expected):
    for sort_type in (SortType.NOT_SPECIFIED, SortType.ADAPTIVE):
        assert choose_strategy(Config(sort_type=sort_type, disorder=disorder)) is expected


def test_no_arguments_does_nothing():
    assert _run([]) == (0, "", "")


def test_two_values_swapped():
    assert _run(["2 1"]) == (0, "sa\n", "")


def test_three_reversed():
    status, out, _ = _run(["3", "2", "1"])
    assert status == 0
    assert out == "ra\nsa\n"


def test_sorted_input_prints_nothing():
    assert _run(["1", "2", "3", "4", "5", "6", "7"]) == (0, "", "")


@pytest.mark.parametrize("option", ["--simple", "--medium", "--complex", "--adaptive", None])
def test_output_sorts_the_input(option):
    values = [17, -4, 99, 3, 0, 42, -100, 8, 56, 21, 13, 7, -1, 64, 5]
    args = [str(v) for v in values]
    if option:
        args.insert(0, option)
    status, out, err = _run(args)
    assert status == 0
    assert err == ""
    a, b = _replay(values, out)
    assert a.values() == sorted(values)
    assert len(b) == 0


@pytest.mark.parametrize(
    "args",
    [
        ["1", "1"],
        ["1", "x"],
        [""],
        ["2147483648"],
        ["--simple", "--medium", "1"],
        ["--unknown", "1"],
        ["1 2 2"],
    ],
)
def test_errors(args):
    assert _run(args) == (1, "", "Error\n")


def test_bench_report_on_stderr():
    status, out, err = _run(["--bench", "--complex", "2", "1", "3"])
    assert status == 0
    lines = err.splitlines()
    assert len(lines) == 5
    assert all(line.startswith("[bench] ") for line in lines)
    assert lines[1] == "[bench] strategy: Complex / O(n log n)"
    assert lines[2] == f"[bench] total_ops: {len(out.splitlines())}"


def test_main_writes_to_stdout(capsys):
    assert main(["2", "1"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "sa\n"
    assert captured.err == ""


def test_main_reports_error(capsys):
    assert main(["1", "one"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""