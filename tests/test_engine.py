import threading

import pytest

from magicsquare import (
    FamilyNotImplementedError,
    InvalidInputError,
    MagicSquareEngine,
    UnsupportedOrderError,
    compute_sum,
    compute_width,
    generate,
    is_valid,
)
from magicsquare.families import DOUBLY_EVEN, ODD, SINGLY_EVEN, FamilyName, OrderFamily

DOUBLY_EVEN_ORDERS = [4, 8, 12, 16, 20]

DURER_4 = [
    [16, 2, 3, 13],
    [5, 11, 10, 8],
    [9, 7, 6, 12],
    [4, 14, 15, 1],
]


@pytest.mark.parametrize("n", DOUBLY_EVEN_ORDERS)
def test_generated_squares_are_magic(n):
    assert is_valid(generate(n))


@pytest.mark.parametrize("n", DOUBLY_EVEN_ORDERS)
def test_generated_squares_hold_each_value_once(n):
    values = sorted(value for row in generate(n) for value in row)
    assert values == list(range(1, n * n + 1))


def test_generate_four_matches_durer_square():
    square = generate(4)
    assert square == DURER_4
    assert square[0][0] == 16
    assert square[3][3] == 1


def test_generate_returns_fresh_grid():
    first = generate(8)
    first[0][0] = -1
    assert generate(8)[0][0] != -1


@pytest.mark.parametrize("n", [1, 2, 3, 5, 6, 7, 9, 10, 14])
def test_generate_rejects_orders_without_family(n):
    with pytest.raises(UnsupportedOrderError):
        generate(n)


def test_no_family_accepts_two():
    for family in (DOUBLY_EVEN, ODD, SINGLY_EVEN):
        assert not family.test(2)


@pytest.mark.parametrize("bad", [0, -4, 4.0, "8", True, None])
def test_generate_rejects_non_positive_integers(bad):
    with pytest.raises(InvalidInputError):
        generate(bad)


@pytest.mark.parametrize(
    "n, expected",
    [(1, 1), (3, 15), (4, 34), (5, 65), (8, 260), (12, 870)],
)
def test_compute_sum(n, expected):
    assert compute_sum(n) == expected


@pytest.mark.parametrize("bad", [0, -1, 2.5])
def test_compute_sum_rejects_bad_input(bad):
    with pytest.raises(InvalidInputError):
        compute_sum(bad)


@pytest.mark.parametrize(
    "cells, expected",
    [(1, 4), (15, 4), (16, 4), (17, 8), (64, 8), (65, 12), (144, 12), (145, 16)],
)
def test_compute_width(cells, expected):
    assert compute_width(cells) == expected


@pytest.mark.parametrize("bad", [0, -16, 1.5, False])
def test_compute_width_rejects_bad_input(bad):
    with pytest.raises(InvalidInputError):
        compute_width(bad)


def test_compute_width_is_zero_without_enabled_families():
    assert MagicSquareEngine([]).compute_width(10) == 0
    assert MagicSquareEngine([DOUBLY_EVEN.with_enabled(False)]).compute_width(10) == 0


def test_compute_width_takes_minimum_over_enabled_families():
    engine = MagicSquareEngine([DOUBLY_EVEN, ODD.with_enabled(True)])
    # doubly-even offers 8, odd offers 5
    assert engine.compute_width(17) == 5
    assert engine.compute_width(16) == 4


def test_is_valid_empty_grid():
    assert is_valid([]) is False


def test_is_valid_detects_altered_cell():
    square = generate(8)
    square[2][5] += 1
    assert is_valid(square) is False


def test_is_valid_checks_diagonals():
    # Lo Shu with its first two columns swapped
    square = [
        [7, 2, 6],
        [5, 9, 1],
        [3, 4, 8],
    ]
    assert is_valid(square) is False


def test_is_valid_accepts_odd_order_magic_square():
    lo_shu = [
        [2, 7, 6],
        [9, 5, 1],
        [4, 3, 8],
    ]
    assert is_valid(lo_shu) is True


def test_is_valid_rejects_ragged_grid():
    with pytest.raises(InvalidInputError):
        is_valid([[1, 2], [3]])


def test_is_valid_rejects_non_square_grid():
    with pytest.raises(InvalidInputError):
        is_valid([[1, 2, 3], [4, 5, 6]])


def test_stub_family_fails_loudly_when_enabled():
    engine = MagicSquareEngine([DOUBLY_EVEN, ODD.with_enabled(True), SINGLY_EVEN.with_enabled(True)])
    with pytest.raises(FamilyNotImplementedError) as excinfo:
        engine.generate(5)
    assert excinfo.value.family == "odd"
    with pytest.raises(NotImplementedError):
        engine.generate(6)
    with pytest.raises(UnsupportedOrderError):
        engine.generate(2)
    assert engine.generate(4) == DURER_4


def test_first_matching_family_wins():
    calls = []

    def claim_all(n):
        calls.append(n)
        return [[n]]

    greedy = OrderFamily(
        name=FamilyName.ODD,
        test=lambda n: True,
        compute_width=lambda cells: 1,
        generator=claim_all,
    )
    assert MagicSquareEngine([DOUBLY_EVEN, greedy]).generate(4) == DURER_4
    assert calls == []
    assert MagicSquareEngine([greedy, DOUBLY_EVEN]).generate(4) == [[4]]
    assert calls == [4]


def test_supported_families_lists_enabled_only():
    assert MagicSquareEngine().supported_families() == [FamilyName.DOUBLY_EVEN]
    assert len(MagicSquareEngine().families) == 3


def test_engine_is_shareable_between_threads():
    engine = MagicSquareEngine()
    results = {}

    def worker(n):
        results[n] = engine.is_valid(engine.generate(n))

    threads = [threading.Thread(target=worker, args=(n,)) for n in DOUBLY_EVEN_ORDERS]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert all(results[n] for n in DOUBLY_EVEN_ORDERS)


def test_is_valid_rejects_non_integer_cells():
    with pytest.raises(InvalidInputError):
        is_valid([[1, None], [2, 3]])


def test_is_valid_with_huge_cells_does_not_overflow():
    # each line gains 4 * 2**62 == 2**64, which int64 sums would wrap back to 34
    square = [[value + 2 ** 62 for value in row] for row in generate(4)]
    assert is_valid(square) is False
