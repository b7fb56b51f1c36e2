import math
import unittest
import warnings

import numpy as np

from src.weightinit.domain._errors import InvalidShapeError
from src.weightinit.infrastructure._config import InitConfig
from src.weightinit.infrastructure.utils.weight_initializer import (
    WeightInitializer,
    bounded_uniform,
    uniform_based_on_in_and_out,
)


def _fan_bound(n_in: int, n_out: int) -> float:
    return 4.0 * math.sqrt(6.0 / (n_in + n_out))


class TestUniformBasedOnInAndOut(unittest.TestCase):
    def test_small_matrix_within_bound(self):
        w = uniform_based_on_in_and_out((2, 2), 2, 2)
        bound = _fan_bound(2, 2)
        self.assertAlmostEqual(bound, 4.898979485566356)
        self.assertEqual(w.shape, (2, 2))
        self.assertTrue(np.all(np.abs(w) <= bound))

    def test_bounds_across_fans(self):
        for n_in, n_out in [(1, 1), (3, 7), (128, 64), (1, 500)]:
            w = uniform_based_on_in_and_out((n_in, n_out), n_in, n_out)
            bound = _fan_bound(n_in, n_out)
            self.assertLessEqual(float(w.max()), bound)
            self.assertGreaterEqual(float(w.min()), -bound)

    def test_spread_covers_range(self):
        w = uniform_based_on_in_and_out((256, 256), 256, 256)
        bound = _fan_bound(256, 256)
        self.assertGreater(float(w.max()), 0.9 * bound)
        self.assertLess(float(w.min()), -0.9 * bound)
        # For U(-b, b): Var = b^2 / 3
        self.assertTrue(
            math.isclose(float(w.std()), bound / math.sqrt(3.0), rel_tol=0.05)
        )

    def test_deterministic(self):
        a = uniform_based_on_in_and_out((10, 6), 10, 6)
        b = uniform_based_on_in_and_out((10, 6), 10, 6)
        np.testing.assert_array_equal(a, b)

    def test_seed_from_config(self):
        a = uniform_based_on_in_and_out((10, 6), 10, 6)
        b = uniform_based_on_in_and_out((10, 6), 10, 6, config=InitConfig(seed=7))
        self.assertFalse(np.array_equal(a, b))

    def test_fan_sum_must_be_positive(self):
        with self.assertRaises(InvalidShapeError):
            uniform_based_on_in_and_out((2, 2), 0, 0)


class TestBoundedUniform(unittest.TestCase):
    def test_within_bounds(self):
        w = bounded_uniform((30, 20), -0.3, 0.1)
        self.assertEqual(w.shape, (30, 20))
        self.assertGreaterEqual(float(w.min()), -0.3)
        self.assertLessEqual(float(w.max()), 0.1)

    def test_deterministic(self):
        np.testing.assert_array_equal(
            bounded_uniform((4, 4), -1.0, 1.0), bounded_uniform((4, 4), -1.0, 1.0)
        )

    def test_matches_seed_123_stream(self):
        expected = np.random.RandomState(123).uniform(-1.0, 1.0, size=(3, 3))
        np.testing.assert_array_equal(bounded_uniform((3, 3), -1.0, 1.0), expected)

    def test_equal_bounds_gives_constant(self):
        w = bounded_uniform((2, 3), 0.5, 0.5)
        self.assertTrue(np.all(w == 0.5))

    def test_inverted_bounds_raise(self):
        with self.assertRaises(ValueError):
            bounded_uniform((2, 2), 1.0, -1.0)


class TestUniformScheme(unittest.TestCase):
    def test_fan_in_one_uses_unit_bound(self):
        w = WeightInitializer("uniform")((1, 50))
        self.assertTrue(np.all(np.abs(w) <= 1.0))
        self.assertGreater(float(np.abs(w).max()), 0.0)

    def test_legacy_integer_bound_collapses_to_zero(self):
        with self.assertWarns(RuntimeWarning):
            w = WeightInitializer("uniform")((3, 4))
        self.assertEqual(w.shape, (3, 4))
        self.assertTrue(np.all(w == 0))

    def test_real_valued_bound_when_disabled(self):
        config = InitConfig(integer_division_uniform=False)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            w = WeightInitializer("uniform")((3, 40), config=config)
        self.assertTrue(np.all(np.abs(w) <= 1.0 / 3.0))
        self.assertGreater(float(np.abs(w).max()), 0.0)

    def test_deterministic(self):
        config = InitConfig(integer_division_uniform=False)
        init = WeightInitializer("uniform")
        np.testing.assert_array_equal(
            init((4, 4), config=config), init((4, 4), config=config)
        )


class TestFanInOutSizeScheme(unittest.TestCase):
    def test_delegates_to_fan_based_uniform(self):
        w = WeightInitializer("fan_in_out_size")((5, 4))
        np.testing.assert_array_equal(w, uniform_based_on_in_and_out((5, 4), 5, 4))

    def test_legacy_name(self):
        w = WeightInitializer("SIZE")((3, 3))
        self.assertTrue(np.all(np.abs(w) <= _fan_bound(3, 3)))

    def test_higher_rank_uses_first_two_dims(self):
        w = WeightInitializer("fan_in_out_size")((3, 4, 2))
        self.assertEqual(w.shape, (3, 4, 2))
        self.assertTrue(np.all(np.abs(w) <= _fan_bound(3, 4)))

    def test_requires_two_dimensions(self):
        with self.assertRaises(InvalidShapeError):
            WeightInitializer("fan_in_out_size")((6,))


if __name__ == "__main__":
    unittest.main()
