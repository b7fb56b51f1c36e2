import unittest

import numpy as np

from src.weightinit.domain._errors import InvalidShapeError, UnrecognizedSchemeError
from src.weightinit.domain._weight_init import WeightInit
from src.weightinit.domain.utils._weight_initialization import (
    _calculate_fan_in_and_fan_out,
    _slice_size,
    _validate_shape,
)


class TestWeightInitParse(unittest.TestCase):
    def test_member_passes_through(self):
        self.assertIs(WeightInit.parse(WeightInit.ZERO), WeightInit.ZERO)

    def test_names_are_case_insensitive(self):
        self.assertIs(WeightInit.parse("zero"), WeightInit.ZERO)
        self.assertIs(WeightInit.parse("Fan_In_Out_Size"), WeightInit.FAN_IN_OUT_SIZE)

    def test_legacy_aliases(self):
        self.assertIs(WeightInit.parse("VI"), WeightInit.VARIANCE_SCALED)
        self.assertIs(WeightInit.parse("distribution"), WeightInit.DISTRIBUTION_SAMPLED)
        self.assertIs(WeightInit.parse("SIZE"), WeightInit.FAN_IN_OUT_SIZE)

    def test_unknown_name_raises(self):
        with self.assertRaises(UnrecognizedSchemeError) as ctx:
            WeightInit.parse("xavier")
        self.assertEqual(ctx.exception.scheme, "xavier")
        self.assertIn("Unrecognized initialization scheme", str(ctx.exception))

    def test_non_string_value_raises(self):
        with self.assertRaises(UnrecognizedSchemeError):
            WeightInit.parse(3)

    def test_closed_set_of_six(self):
        self.assertEqual(len(list(WeightInit)), 6)


class TestValidateShape(unittest.TestCase):
    def test_returns_tuple_of_ints(self):
        self.assertEqual(_validate_shape([4, 3]), (4, 3))

    def test_accepts_numpy_integers(self):
        dims = _validate_shape((np.int64(2), np.int32(5)))
        self.assertEqual(dims, (2, 5))
        self.assertTrue(all(type(d) is int for d in dims))

    def test_empty_shape_rejected(self):
        with self.assertRaises(InvalidShapeError) as ctx:
            _validate_shape(())
        self.assertEqual(ctx.exception.shape, ())

    def test_non_positive_dimension_rejected(self):
        with self.assertRaises(InvalidShapeError):
            _validate_shape((0, 3))
        with self.assertRaises(InvalidShapeError):
            _validate_shape((2, -1))

    def test_non_integer_dimension_rejected(self):
        with self.assertRaises(InvalidShapeError):
            _validate_shape((2.5, 3))
        with self.assertRaises(InvalidShapeError):
            _validate_shape((True, 3))

    def test_not_a_sequence_rejected(self):
        with self.assertRaises(InvalidShapeError):
            _validate_shape(None)

    def test_min_rank(self):
        with self.assertRaises(InvalidShapeError) as ctx:
            _validate_shape((5,), min_rank=2)
        self.assertIn("at least 2", ctx.exception.reason)

    def test_invalid_shape_is_value_error(self):
        self.assertTrue(issubclass(InvalidShapeError, ValueError))


class TestFanHelpers(unittest.TestCase):
    def test_matrix_rows_are_fan_in(self):
        self.assertEqual(_calculate_fan_in_and_fan_out((784, 10)), (784, 10))

    def test_vector(self):
        self.assertEqual(_calculate_fan_in_and_fan_out((7,)), (7, 7))

    def test_higher_rank_uses_first_two_dims(self):
        self.assertEqual(_calculate_fan_in_and_fan_out((3, 4, 5)), (3, 4))

    def test_slice_size(self):
        self.assertEqual(_slice_size((4, 3)), 3)
        self.assertEqual(_slice_size((2, 3, 4)), 12)
        self.assertEqual(_slice_size((5,)), 1)


if __name__ == "__main__":
    unittest.main()
