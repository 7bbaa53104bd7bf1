"""TriangularDistribution, RandomGenerator 테스트"""
from fractions import Fraction

import pytest

from lotsim.config import MAX_PARKING_DURATION, PLATE_ALPHABET
from lotsim.utils.distributions import TriangularDistribution
from lotsim.utils.random_generator import RandomGenerator


class TestTriangularDistribution:

    def setup_method(self):
        self.dist = TriangularDistribution(0, MAX_PARKING_DURATION // 2, MAX_PARKING_DURATION)

    def test_peak_density(self):
        assert self.dist.pdf(MAX_PARKING_DURATION // 2) == Fraction(2, MAX_PARKING_DURATION)

    def test_rising_and_falling_branches_are_symmetric(self):
        quarter = MAX_PARKING_DURATION // 4
        assert self.dist.pdf(quarter) == Fraction(1, MAX_PARKING_DURATION)
        assert self.dist.pdf(MAX_PARKING_DURATION - quarter) == self.dist.pdf(quarter)

    @pytest.mark.parametrize("x", [-1, 0, MAX_PARKING_DURATION, MAX_PARKING_DURATION + 1])
    def test_zero_at_bounds_and_outside(self, x):
        assert self.dist.pdf(x) == 0

    def test_integer_input_gives_exact_fraction(self):
        assert isinstance(self.dist.pdf(100), Fraction)

    @pytest.mark.parametrize("x", [1, 3600, 14399, 14400, 14401, 28799])
    def test_integer_path_matches_exact_formula(self, x):
        assert self.dist.pdf(x) == self.dist.pdf(Fraction(x))

    def test_repeated_lookups_return_same_value(self):
        first = self.dist.pdf(500)
        assert self.dist.pdf(500) is first

    def test_float_input_gives_float(self):
        assert isinstance(self.dist.pdf(100.5), float)
        assert self.dist.pdf(100.5) == pytest.approx(float(self.dist.pdf(Fraction(201, 2))))

    def test_cdf_and_mean(self):
        assert self.dist.cdf(MAX_PARKING_DURATION // 2) == Fraction(1, 2)
        assert self.dist.cdf(-5) == 0
        assert self.dist.cdf(MAX_PARKING_DURATION) == 1
        assert self.dist.mean() == MAX_PARKING_DURATION // 2

    def test_mode_at_lower_bound(self):
        dist = TriangularDistribution(0, 0, 10)
        assert dist.pdf(0) == Fraction(1, 5)
        assert dist.pdf(5) == Fraction(1, 10)

    @pytest.mark.parametrize("a, c, b", [(0, 11, 10), (5, 0, 10), (3, 3, 3)])
    def test_invalid_parameters(self, a, c, b):
        with pytest.raises(ValueError):
            TriangularDistribution(a, c, b)


class TestRandomGenerator:

    def test_certain_and_impossible_events(self):
        rng = RandomGenerator(1)
        assert all(rng.event_occurred(Fraction(1)) for _ in range(100))
        assert not any(rng.event_occurred(Fraction(0)) for _ in range(100))
        assert not any(rng.event_occurred(0.0) for _ in range(100))

    def test_exact_fraction_frequency(self):
        rng = RandomGenerator(3)
        hits = sum(rng.event_occurred(Fraction(1, 4)) for _ in range(20000))
        assert 0.23 < hits / 20000 < 0.27

    def test_float_frequency(self):
        rng = RandomGenerator(3)
        hits = sum(rng.event_occurred(0.5) for _ in range(20000))
        assert 0.47 < hits / 20000 < 0.53

    def test_denominator_wider_than_one_draw(self):
        rng = RandomGenerator(4)
        huge = 2 ** 70
        assert sum(rng.event_occurred(Fraction(1, huge)) for _ in range(1000)) == 0
        assert sum(rng.event_occurred(Fraction(huge - 1, huge)) for _ in range(1000)) == 1000
        hits = sum(rng.event_occurred(Fraction(huge // 2 + 1, huge)) for _ in range(4000))
        assert 0.45 < hits / 4000 < 0.55

    def test_integer_probabilities(self):
        rng = RandomGenerator(4)
        assert rng.event_occurred(1) is True
        assert rng.event_occurred(0) is False
        with pytest.raises(ValueError):
            rng.event_occurred(2)

    @pytest.mark.parametrize("probability", [Fraction(-1, 2), Fraction(3, 2), -0.1, 1.5])
    def test_rejects_out_of_range_probability(self, probability):
        with pytest.raises(ValueError):
            RandomGenerator(0).event_occurred(probability)

    def test_car_identifier_shape(self):
        rng = RandomGenerator(5)
        for _ in range(50):
            car = rng.generate_random_car(3)
            assert len(car) == 3
            assert set(car) <= set(PLATE_ALPHABET)

    def test_invalid_car_length(self):
        with pytest.raises(ValueError):
            RandomGenerator(5).generate_random_car(0)

    def test_seeded_generators_repeat(self):
        first, second = RandomGenerator(9), RandomGenerator(9)
        assert [first.generate_random_car(4) for _ in range(5)] == \
               [second.generate_random_car(4) for _ in range(5)]
        assert [first.event_occurred(Fraction(1, 3)) for _ in range(50)] == \
               [second.event_occurred(Fraction(1, 3)) for _ in range(50)]
