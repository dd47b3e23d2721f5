import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
for target in (PROJECT_ROOT / "src", PROJECT_ROOT):
    target_str = str(target)
    if target_str not in sys.path:
        sys.path.append(target_str)

from hanoi_moves.solver import Move, enumerate_moves, iter_moves, move_count, plan_moves  # type: ignore  # pylint: disable=wrong-import-position


def check_halves(moves, n, src, aux, dst):
    """Middle move is src->dst; left half solves n-1 onto aux, right half from aux."""
    if n == 0:
        assert moves == []
        return
    mid = (1 << (n - 1)) - 1
    assert moves[mid] == Move(src, dst)
    check_halves(moves[:mid], n - 1, src, dst, aux)
    check_halves(moves[mid + 1:], n - 1, aux, src, dst)


@pytest.mark.parametrize("n,expected", [(0, 0), (1, 1), (2, 3), (3, 7), (10, 1023)])
def test_length_is_two_to_the_n_minus_one(n, expected):
    assert len(plan_moves(n)) == expected
    assert move_count(n) == expected


def test_single_disk():
    assert plan_moves(1) == [Move(1, 3)]


def test_two_disks():
    assert [tuple(m) for m in plan_moves(2)] == [(1, 2), (1, 3), (2, 3)]


@pytest.mark.parametrize("n", range(0, 9))
def test_recursive_structure(n):
    check_halves(plan_moves(n), n, 1, 2, 3)


def test_appends_into_caller_list():
    moves = [Move(9, 9)]
    enumerate_moves(2, moves)
    assert moves[0] == Move(9, 9)
    assert moves[1:] == plan_moves(2)


def test_zero_disks_appends_nothing():
    moves = []
    enumerate_moves(0, moves)
    assert moves == []


def test_deterministic():
    assert plan_moves(6) == plan_moves(6)


def test_labels_stay_in_domain():
    pegs = {7, 4, 5}
    for mv in plan_moves(5, 7, 4, 5):
        assert mv.from_peg in pegs and mv.to_peg in pegs
        assert mv.from_peg != mv.to_peg
    check_halves(plan_moves(5, 7, 4, 5), 5, 7, 4, 5)


@pytest.mark.parametrize("n", range(0, 10))
def test_iterative_matches_recursive(n):
    assert list(iter_moves(n)) == plan_moves(n)


def test_iterative_handles_deep_towers():
    # Deeper than the default recursion limit would allow for the recursive form.
    gen = iter_moves(5000)
    first = [next(gen) for _ in range(3)]
    assert first == [Move(1, 2), Move(1, 3), Move(2, 3)]


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        plan_moves(-1)
    with pytest.raises(ValueError):
        list(iter_moves(-2))
    with pytest.raises(ValueError):
        move_count(-1)


def test_duplicate_labels_rejected():
    with pytest.raises(ValueError):
        plan_moves(2, 1, 1, 3)


def test_move_formatting():
    mv = Move(1, 3)
    assert str(mv) == "1 3"
    src, dst = mv
    assert (src, dst) == (1, 3)
    with pytest.raises(AttributeError):
        mv.from_peg = 2  # type: ignore[misc]
