"""RandomSource behaviour: position stack, reseeding and derived draws."""

import math
import statistics

import pytest

from squirrel_rng import (
    MAX_SAFE_INTEGER,
    EmptyCollectionError,
    RandomSource,
    Squirrel3,
)


class ScriptedBasis:
    """Noise basis replaying a fixed list of draws, cycling by offset."""

    def __init__(self, values):
        self.values = list(values)
        self.seed = 0
        self.offset = 0

    def set_seed(self, seed):
        self.seed = seed

    def seek_to(self, offset):
        self.offset = offset

    def float(self):
        value = self.values[self.offset % len(self.values)]
        self.offset += 1
        return value


def test_seek_then_restore_resumes_previous_offset():
    rng = RandomSource.from_seed(1)
    expected = Squirrel3(1).float()

    rng.seek_to(5)
    assert rng.float() == Squirrel3(1, 5).float()
    rng.restore()

    assert rng.float() == expected
    assert rng.offset == 1


def test_position_stack_nests_and_empty_restore_is_noop():
    rng = RandomSource.from_seed(8)
    rng.float()
    rng.seek_to(10)
    rng.float()
    rng.seek_to(20)
    assert rng.depth == 2

    rng.restore()
    assert rng.offset == 11
    rng.restore()
    assert rng.offset == 1
    assert rng.depth == 0

    rng.restore()
    assert rng.offset == 1
    assert rng.depth == 0


def test_reseed_rewinds_to_zero():
    rng = RandomSource.from_seed(3, offset=500)
    for _ in range(17):
        rng.float()

    rng.reseed(42)

    assert rng.offset == 0
    assert rng.seed == 42
    assert rng.float() == Squirrel3(42).float()


def test_reseed_keeps_saved_positions():
    rng = RandomSource.from_seed(3)
    for _ in range(3):
        rng.float()
    rng.seek_to(30)

    rng.reseed(7)
    assert rng.depth == 1

    rng.restore()
    assert rng.offset == 3
    assert rng.seed == 7
    assert rng.float() == Squirrel3(7, 3).float()


def test_detour_restores_even_when_body_raises():
    rng = RandomSource.from_seed(11)
    rng.float()

    with rng.detour(100) as inner:
        assert inner.float() == Squirrel3(11, 100).float()
    assert rng.offset == 1

    with pytest.raises(RuntimeError):
        with rng.detour(200):
            rng.float()
            raise RuntimeError("boom")
    assert rng.offset == 1
    assert rng.depth == 0


def test_every_distribution_consumes_one_draw():
    rng = RandomSource.from_seed(21)
    calls = [
        rng.float,
        rng.bool,
        rng.normal,
        rng.integer,
        lambda: rng.integer(9),
        lambda: rng.integer(2, 9),
        lambda: rng.array_index([1, 2, 3]),
        lambda: rng.array_item("xyz"),
    ]
    for expected_offset, call in enumerate(calls, start=1):
        call()
        assert rng.offset == expected_offset


def test_integer_ranges_are_contained():
    rng = RandomSource.from_seed(0xBEEF)
    for _ in range(10_000):
        assert -5 <= rng.integer(-5, 12) < 12
        assert 0 <= rng.integer(7) < 7
        assert 0 <= rng.integer() < MAX_SAFE_INTEGER


def test_integer_matches_floor_formula():
    rng = RandomSource.from_seed(3)
    draw = Squirrel3(3).float()
    assert rng.integer(4, 90) == math.floor(draw * 86 + 4)


def test_inverted_integer_range_is_not_an_error():
    rng = RandomSource.from_seed(3)
    draw = Squirrel3(3).float()
    assert rng.integer(10, 0) == math.floor(draw * -10 + 10)


def test_integer_zero_draw_lands_on_lower_bound():
    rng = RandomSource(ScriptedBasis([0.0]))
    assert rng.integer(5) == 0
    assert rng.integer(2, 4) == 2
    assert rng.array_index("ab") == 0


def test_bool_extreme_odds():
    rng = RandomSource.from_seed(77)
    assert not any(rng.bool(0.0) for _ in range(1_000))
    assert all(rng.bool(1.0) for _ in range(1_000))
    assert not any(rng.bool(-3.0) for _ in range(100))
    assert all(rng.bool(2.0) for _ in range(100))


def test_bool_default_odds_is_a_coin_flip():
    rng = RandomSource.from_seed(5)
    trues = sum(rng.bool() for _ in range(20_000))
    assert 9_500 < trues < 10_500


def test_normal_centres_on_mean_for_midpoint_draw():
    rng = RandomSource(ScriptedBasis([0.5]))
    assert rng.normal() == 0.5
    assert rng.normal(3.0, 2.0) == 3.0


def test_normal_zero_draw_diverges():
    rng = RandomSource(ScriptedBasis([0.0]))
    assert rng.normal() == -math.inf


def test_normal_sample_moments():
    rng = RandomSource.from_seed(2024)
    samples = [rng.normal(3.0, 2.0) for _ in range(20_000)]

    assert abs(statistics.fmean(samples) - 3.0) < 0.1
    assert abs(statistics.pstdev(samples) - 2.0) < 0.1


def test_array_helpers_pick_members():
    rng = RandomSource.from_seed(9)
    items = ["ash", "birch", "cedar", "elm"]
    for _ in range(200):
        assert 0 <= rng.array_index(items) < len(items)
        assert rng.array_item(items) in items
        assert rng.array_item("hazel") in "hazel"


def test_array_index_matches_integer_of_length():
    a = RandomSource.from_seed(14)
    b = RandomSource.from_seed(14)
    for _ in range(50):
        assert a.array_index(range(13)) == b.integer(13)


def test_empty_collection_raises_without_drawing():
    rng = RandomSource.from_seed(1)
    with pytest.raises(EmptyCollectionError):
        rng.array_index([])
    with pytest.raises(IndexError):
        rng.array_item("")
    assert rng.offset == 0


def test_custom_basis_is_used_verbatim():
    basis = ScriptedBasis([0.25, 0.75])
    rng = RandomSource(basis)

    assert rng.float() == 0.25
    assert rng.float() == 0.75
    rng.reseed(99)
    assert basis.seed == 99
    assert rng.float() == 0.25


def test_default_construction_seeds_from_clock(caplog):
    with caplog.at_level("INFO", logger="squirrel_rng.noise"):
        rng = RandomSource()

    assert isinstance(rng.basis, Squirrel3)
    assert isinstance(rng.seed, int)
    assert rng.offset == 0
    assert rng.depth == 0
    assert "wall clock" in caplog.text
