import unittest
import warnings

import numpy as np

from src.weightinit import (
    InitConfig,
    InvalidShapeError,
    UnrecognizedSchemeError,
    WeightInit,
    init_layer_weights,
    init_weights,
    uniform,
    uniform_based_on_in_and_out,
)


class TestInitWeights(unittest.TestCase):
    def test_zero_example(self):
        w = init_weights((4, 3), WeightInit.ZERO)
        self.assertEqual(w.shape, (4, 3))
        self.assertTrue(np.all(w == 0))

    def test_shape_preserved_for_every_scheme(self):
        shape = (5, 7)
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", RuntimeWarning)
            for scheme in WeightInit:
                w = init_weights(shape, scheme, uniform(0, -1.0, 1.0))
                self.assertEqual(w.shape, shape, msg=f"{scheme} changed the shape")

    def test_accepts_scheme_names(self):
        np.testing.assert_array_equal(
            init_weights((3, 2), "size"),
            uniform_based_on_in_and_out((3, 2), 3, 2),
        )

    def test_unrecognized_scheme(self):
        with self.assertRaises(UnrecognizedSchemeError):
            init_weights((2, 2), "orthogonal")

    def test_invalid_shape(self):
        with self.assertRaises(InvalidShapeError):
            init_weights((), WeightInit.NORMALIZED)

    def test_config_dtype(self):
        w = init_weights((2, 2), WeightInit.VARIANCE_SCALED, config=InitConfig(dtype="float32"))
        self.assertEqual(w.dtype, np.float32)


class TestInitLayerWeights(unittest.TestCase):
    def test_builds_in_out_matrix(self):
        w = init_layer_weights(4, 3, WeightInit.ZERO)
        self.assertEqual(w.shape, (4, 3))

    def test_activation_is_ignored(self):
        a = init_layer_weights(6, 2, WeightInit.FAN_IN_OUT_SIZE, activation="relu")
        b = init_layer_weights(6, 2, WeightInit.FAN_IN_OUT_SIZE, activation=np.tanh)
        np.testing.assert_array_equal(a, b)

    def test_matches_shape_form(self):
        np.testing.assert_array_equal(
            init_layer_weights(6, 2, "fan_in_out_size"),
            init_weights((6, 2), "fan_in_out_size"),
        )

    def test_distribution_forwarded(self):
        w = init_layer_weights(3, 4, "distribution_sampled", None, uniform(9, 2.0, 3.0))
        self.assertTrue(np.all((w >= 2.0) & (w <= 3.0)))


if __name__ == "__main__":
    unittest.main()
