import pytest

from pushswap.operations import Machine, OpCounts, Operation, execute
from pushswap.stack import Stack


def test_operation_names_match_instruction_text():
    names = {op.value for op in Operation}
    assert names == {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}
    assert Operation("rra") is Operation.RRA
    assert str(Operation.PB) == "pb"


def test_unknown_operation_name_is_rejected():
    with pytest.raises(ValueError):
        Operation("sx")


def test_sa_swaps_top_two_of_a_only():
    values = [4, 7, 9]
    a, b = Stack(values), Stack([1, 2])
    assert execute(Operation.SA, a, b) is True
    assert a.values() == [values[1], values[0], values[2]]
    assert b.values() == [1, 2]


def test_swap_on_single_element_does_nothing():
    a, b = Stack([5]), Stack()
    assert execute(Operation.SA, a, b) is False
    assert a.values() == [5]


def test_ss_needs_both_stacks_to_hold_two():
    a, b = Stack([1, 2, 3]), Stack([8])
    assert execute(Operation.SS, a, b) is False
    assert a.values() == [1, 2, 3]
    assert b.values() == [8]


def test_ss_swaps_both():
    a, b = Stack([1, 2]), Stack([3, 4])
    assert execute(Operation.SS, a, b) is True
    assert a.values() == [2, 1]
    assert b.values() == [4, 3]


def test_pb_then_pa_round_trip():
    values = [3, 1, 2]
    a, b = Stack(values), Stack()
    assert execute(Operation.PB, a, b) is True
    assert b.values() == [values[0]]
    assert a.values() == values[1:]
    assert execute(Operation.PA, a, b) is True
    assert a.values() == values
    assert len(b) == 0


def test_push_from_empty_stack_does_nothing():
    a, b = Stack([1]), Stack()
    assert execute(Operation.PA, a, b) is False
    assert a.values() == [1]
    assert len(b) == 0


def test_push_keeps_index():
    a, b = Stack([10, 20]), Stack()
    a.top.index = 1
    execute(Operation.PB, a, b)
    assert b.top.index == 1
    assert b.top.value == 10


def test_rotate_and_reverse_rotate_are_inverse():
    values = [5, 6, 7, 8]
    a, b = Stack(values), Stack()
    execute(Operation.RA, a, b)
    assert a.values() == values[1:] + values[:1]
    execute(Operation.RRA, a, b)
    assert a.values() == values


def test_reverse_rotate_moves_bottom_to_top():
    values = [5, 6, 7]
    a, b = Stack(), Stack(values)
    assert execute(Operation.RRB, a, b) is True
    assert b.values() == values[-1:] + values[:-1]


def test_rotate_single_element_is_no_op():
    a, b = Stack([1]), Stack([2])
    assert execute(Operation.RA, a, b) is False
    assert execute(Operation.RRB, a, b) is False


def test_rr_and_rrr_need_both_stacks():
    a, b = Stack([1, 2, 3]), Stack([4])
    assert execute(Operation.RR, a, b) is False
    assert execute(Operation.RRR, a, b) is False
    assert a.values() == [1, 2, 3]


def test_rr_rotates_both():
    a, b = Stack([1, 2, 3]), Stack([4, 5])
    assert execute(Operation.RR, a, b) is True
    assert a.values() == [2, 3, 1]
    assert b.values() == [5, 4]
    assert execute(Operation.RRR, a, b) is True
    assert a.values() == [1, 2, 3]
    assert b.values() == [4, 5]


def test_op_counts_record_per_operation_and_total():
    counts = OpCounts()
    counts.record(Operation.RA)
    counts.record(Operation.RA)
    counts.record(Operation.PB)
    assert counts.ra == 2
    assert counts.pb == 1
    assert counts.total == 3
    assert counts.sa == 0


def test_machine_emits_and_counts_effective_operations():
    emitted = []
    machine = Machine(Stack([2, 1, 3]), Stack(), emitted.append)
    assert machine.apply(Operation.SA) is True
    assert machine.apply(Operation.PB) is True
    assert machine.a.values() == [2, 3]
    assert machine.b.values() == [1]
    assert emitted == ["sa", "pb"]
    assert machine.counts.sa == 1
    assert machine.counts.pb == 1
    assert machine.counts.total == 2


def test_machine_ignores_operations_without_effect():
    emitted = []
    machine = Machine(Stack([1]), Stack(), emitted.append)
    assert machine.apply(Operation.PA) is False
    assert machine.apply(Operation.RRR) is False
    assert machine.apply(Operation.SB) is False
    assert emitted == []
    assert machine.counts == OpCounts()


def test_machine_without_emitter_still_counts():
    machine = Machine(Stack([1, 2]), Stack())
    machine.apply(Operation.RA)
    assert machine.a.values() == [2, 1]
    assert machine.counts.ra == 1
    assert machine.counts.total == 1


@pytest.mark.parametrize("op", list(Operation))
def test_every_operation_preserves_all_values(op):
    a, b = Stack([4, 2, 9]), Stack([7, 1])
    before = sorted(a.values() + b.values())
    execute(op, a, b)
    assert sorted(a.values() + b.values()) == before