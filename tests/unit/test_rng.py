"""Tests for the seedable random source.

Tests cover:
- Determinism (same seed -> same draws)
- Independence of differently named streams
- Dice rolling ranges and validation
"""

import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hexdice.utils.rng import generate_seed, make_rng, random_range, roll_dice


class TestGenerateSeed:
    """Tests for generate_seed function."""

    def test_basic_seed_generation(self):
        assert generate_seed(42, "board") == "42:board"

    def test_string_root(self):
        assert generate_seed("match-7", "combat") == "match-7:combat"

    def test_negative_root_raises_error(self):
        with pytest.raises(ValueError, match="must be non-negative"):
            generate_seed(-1, "board")

    def test_empty_context_raises_error(self):
        with pytest.raises(ValueError, match="context cannot be empty"):
            generate_seed(1, "")


class TestMakeRng:
    """Tests for make_rng function."""

    def test_same_string_seed_same_stream(self):
        a = make_rng("1:board")
        b = make_rng("1:board")
        assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]

    def test_integer_seed_matches_random_random(self):
        assert make_rng(99).random() == random.Random(99).random()

    def test_named_streams_differ(self):
        board = make_rng(generate_seed(3, "board"))
        combat = make_rng(generate_seed(3, "combat"))
        assert [board.randint(0, 10**9) for _ in range(3)] != [
            combat.randint(0, 10**9) for _ in range(3)
        ]

    def test_unseeded_returns_random_instance(self):
        assert isinstance(make_rng(), random.Random)


class TestRollDice:
    """Tests for roll_dice function."""

    def test_determinism_same_seed_same_result(self):
        assert roll_dice(make_rng(5), 8) == roll_dice(make_rng(5), 8)

    def test_number_of_faces(self):
        assert len(roll_dice(make_rng(1), 3)) == 3

    @given(seed=st.integers(min_value=0), num_dice=st.integers(min_value=1, max_value=8))
    def test_faces_within_die(self, seed, num_dice):
        faces = roll_dice(make_rng(seed), num_dice)
        assert len(faces) == num_dice
        assert all(1 <= face <= 6 for face in faces)

    def test_custom_sides(self):
        faces = roll_dice(make_rng(2), 50, num_sides=2)
        assert set(faces) <= {1, 2}

    @pytest.mark.parametrize(("num_dice", "num_sides"), [(0, 6), (-1, 6), (2, 0)])
    def test_invalid_arguments(self, num_dice, num_sides):
        with pytest.raises(ValueError, match="must be positive"):
            roll_dice(make_rng(1), num_dice, num_sides)


class TestRandomRange:
    """Tests for random_range function."""

    @given(seed=st.integers(min_value=0), high=st.integers(min_value=2, max_value=20))
    def test_half_open(self, seed, high):
        value = random_range(make_rng(seed), 1, high)
        assert 1 <= value < high

    def test_single_value_range(self):
        assert random_range(make_rng(0), 1, 2) == 1

    def test_empty_range_raises(self):
        with pytest.raises(ValueError, match="empty range"):
            random_range(make_rng(0), 1, 1)
