import logging
import math

import pytest

from common.randomizer import scale_factor, seeded_random, to_fixed


class TestSeededRandom:
    """Tests for the seedable random function."""

    def test_is_deterministic(self, seeds):
        for seed in seeds:
            assert seeded_random(seed) == seeded_random(seed)

    def test_within_unit_interval(self):
        for seed in range(-500, 500):
            value = seeded_random(seed)
            assert 0 <= value < 1

    def test_matches_fractional_part_of_scaled_sine(self):
        x = math.sin(3) * 10000

        assert seeded_random(3) == x - math.floor(x)

    def test_known_value(self):
        assert seeded_random(1) == pytest.approx(0.709848078965, abs=1e-9)

    def test_zero_seed(self):
        assert seeded_random(0) == 0

    def test_negative_seed_is_non_negative(self):
        assert seeded_random(-1) == pytest.approx(0.290151921035, abs=1e-9)

    def test_unstable_seed_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="common.randomizer"):
            value = seeded_random(10000)

        assert "unstable" in caplog.text
        x = math.sin(10000) * 10000
        assert value == x - math.floor(x)

    @pytest.mark.parametrize(
        "seed,error",
        [
            (10**400, OverflowError),
            (math.inf, ValueError),
            (-math.inf, ValueError),
        ],
        ids=["huge_int", "inf", "negative_inf"],
    )
    def test_seeds_outside_float_range_raise(self, seed, error):
        with pytest.raises(error):
            seeded_random(seed)

    def test_regular_seed_does_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="common.randomizer"):
            seeded_random(42)

        assert caplog.records == []


class TestScaleFactor:
    """Tests for scale_factor."""

    def test_no_seed_is_one(self):
        assert scale_factor() == 1
        assert scale_factor(None) == 1

    def test_seed_uses_random(self):
        assert scale_factor(5) == seeded_random(5)

    def test_zero_is_a_real_seed(self):
        assert scale_factor(0) == 0


class TestToFixed:
    """Tests for to_fixed formatting."""

    @pytest.mark.parametrize(
        "value,digits,expected",
        [
            (17.77, 2, "17.77"),
            (2.22, 2, "2.22"),
            (0, 2, "0.00"),
            (0.0, 2, "0.00"),
            (4.6, 2, "4.60"),
            (1.005, 2, "1.00"),
            (0.125, 2, "0.13"),
            (0.375, 2, "0.38"),
            (12.5, 0, "13"),
            (3.14159, 3, "3.142"),
        ],
        ids=[
            "plain",
            "small",
            "int_zero",
            "float_zero",
            "pads_zeros",
            "binary_below_half",
            "exact_tie_rounds_up",
            "exact_tie_odd",
            "no_decimals",
            "three_digits",
        ],
    )
    def test_formatting(self, value, digits, expected):
        assert to_fixed(value, digits) == expected

    def test_default_is_two_digits(self):
        assert to_fixed(19.99) == "19.99"
