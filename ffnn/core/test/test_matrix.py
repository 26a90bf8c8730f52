import unittest

import numpy as np

from ffnn.core.activation import sigmoid
from ffnn.core.exception import DimensionMismatch, InvalidShape
from ffnn.core.matrix import Matrix


def _matrix(values, random_state=None):
    values = np.asarray(values, dtype=float)
    m = Matrix(*values.shape, random_state=random_state)
    m.data[...] = values
    return m


class TestMatrix(unittest.TestCase):

    def setUp(self):
        self.random_state = np.random.RandomState(1234)

    def _random_matrix(self, rows, cols):
        m = Matrix(rows, cols, random_state=self.random_state)
        m.randomize()
        return m

    def test_construct_zero_filled(self):
        m = Matrix(3, 4)

        self.assertEqual((3, 4), m.shape)
        self.assertEqual(3, m.rows)
        self.assertEqual(4, m.cols)
        self.assertTrue((m.data == 0).all())

    def test_construct_invalid_shape(self):
        for rows, cols in [(0, 2), (2, 0), (-1, 3), (2.5, 2),
                           ('2', 2), (True, 2), (None, 1)]:
            with self.assertRaises(InvalidShape):
                Matrix(rows, cols)

    def test_construct_accepts_numpy_integers(self):
        m = Matrix(np.int64(2), np.int32(3))
        self.assertEqual((2, 3), m.shape)

    def test_multiply_shape(self):
        a = self._random_matrix(3, 5)
        b = self._random_matrix(5, 2)

        product = Matrix.multiply(a, b)

        self.assertEqual((3, 2), product.shape)

    def test_multiply_values(self):
        a = _matrix([[1, 2], [3, 4]])
        b = _matrix([[5, 6, 7], [8, 9, 10]])

        product = Matrix.multiply(a, b)

        self.assertEqual([21., 24., 27., 47., 54., 61.], product.to_array())

    def test_multiply_identity(self):
        a = self._random_matrix(4, 3)
        identity = _matrix(np.eye(3))

        self.assertEqual(a, Matrix.multiply(a, identity))

    def test_multiply_dimension_mismatch(self):
        a = self._random_matrix(3, 2)
        b = self._random_matrix(3, 2)

        with self.assertRaises(DimensionMismatch):
            Matrix.multiply(a, b)

    def test_multiply_does_not_mutate_inputs(self):
        a = self._random_matrix(2, 3)
        b = self._random_matrix(3, 2)
        a_copy, b_copy = a.copy(), b.copy()

        Matrix.multiply(a, b)

        self.assertEqual(a_copy, a)
        self.assertEqual(b_copy, b)

    def test_scale_in_place(self):
        m = _matrix([[1, -2], [3, 0.5]])

        result = m.scale(2)

        self.assertIsNone(result)
        self.assertEqual([2., -4., 6., 1.], m.to_array())

    def test_scaled_is_pure(self):
        m = _matrix([[1, -2], [3, 0.5]])

        scaled = m.scaled(-1)

        self.assertEqual([-1., 2., -3., -0.5], scaled.to_array())
        self.assertEqual([1., -2., 3., 0.5], m.to_array())

    def test_multiply_elementwise_commutes(self):
        a = self._random_matrix(3, 4)
        b = self._random_matrix(3, 4)

        self.assertEqual(Matrix.multiply_elementwise(a, b),
                         Matrix.multiply_elementwise(b, a))

    def test_multiply_elementwise_values(self):
        a = _matrix([[1, 2], [3, 4]])
        b = _matrix([[2, 0], [-1, 0.5]])

        result = Matrix.multiply_elementwise(a, b)

        self.assertEqual([2., 0., -3., 2.], result.to_array())

    def test_multiply_elementwise_dimension_mismatch(self):
        with self.assertRaises(DimensionMismatch):
            Matrix.multiply_elementwise(Matrix(2, 3), Matrix(3, 2))

    def test_transpose(self):
        m = _matrix([[1, 2, 3], [4, 5, 6]])

        t = Matrix.transpose(m)

        self.assertEqual((3, 2), t.shape)
        self.assertEqual([1., 4., 2., 5., 3., 6.], t.to_array())

    def test_transpose_twice(self):
        m = self._random_matrix(3, 7)
        self.assertEqual(m, Matrix.transpose(Matrix.transpose(m)))

    def test_map_identity(self):
        m = self._random_matrix(4, 4)
        self.assertEqual(m, Matrix.map(m, lambda x: x))

    def test_map_is_pure(self):
        m = _matrix([[1, 2], [3, 4]])

        squared = Matrix.map(m, lambda x: x * x)

        self.assertEqual([1., 4., 9., 16.], squared.to_array())
        self.assertEqual([1., 2., 3., 4.], m.to_array())

    def test_map_sigmoid_range(self):
        m = self._random_matrix(5, 5)
        m.scale(10)

        result = Matrix.map(m, sigmoid)

        self.assertTrue((result.data > 0).all())
        self.assertTrue((result.data < 1).all())

    def test_apply_in_place(self):
        m = _matrix([[-1, 2], [-3, 4]])

        m.apply(lambda x: x if x > 0 else 0.0)

        self.assertEqual([0., 2., 0., 4.], m.to_array())

    def test_add_matrix(self):
        a = _matrix([[1, 2], [3, 4]])
        b = _matrix([[10, 20], [30, 40]])

        a.add_matrix(b)

        self.assertEqual([11., 22., 33., 44.], a.to_array())
        self.assertEqual([10., 20., 30., 40.], b.to_array())

    def test_add_matrix_commutes(self):
        a = self._random_matrix(3, 2)
        b = self._random_matrix(3, 2)

        ab = a.copy()
        ab.add_matrix(b)
        ba = b.copy()
        ba.add_matrix(a)

        self.assertEqual(ab, ba)

    def test_add_matrix_dimension_mismatch(self):
        a = Matrix(2, 2)

        with self.assertRaises(DimensionMismatch):
            a.add_matrix(Matrix(2, 1))

        self.assertTrue((a.data == 0).all())

    def test_add_scalar(self):
        m = _matrix([[1, 2], [3, 4]])

        m.add_scalar(-1.5)

        self.assertEqual([-0.5, 0.5, 1.5, 2.5], m.to_array())

    def test_subtract(self):
        a = _matrix([[5, 5], [5, 5]])
        b = _matrix([[1, 2], [3, 4]])

        self.assertEqual([4., 3., 2., 1.], Matrix.subtract(a, b).to_array())

    def test_subtract_dimension_mismatch(self):
        with self.assertRaises(DimensionMismatch):
            Matrix.subtract(Matrix(3, 1), Matrix(2, 1))

    def test_randomize_range(self):
        m = self._random_matrix(20, 30)

        self.assertTrue((m.data >= -1).all())
        self.assertTrue((m.data < 1).all())

    def test_randomize_successive_calls_differ(self):
        m = self._random_matrix(3, 3)
        first = m.copy()

        m.randomize()

        self.assertNotEqual(first, m)

    def test_randomize_seeded_is_reproducible(self):
        a = Matrix(4, 3, random_state=np.random.RandomState(42))
        b = Matrix(4, 3, random_state=np.random.RandomState(42))

        a.randomize()
        b.randomize()

        self.assertEqual(a, b)

    def test_from_array_round_trip(self):
        values = [0.25, -3.0, 7.5]

        m = Matrix.from_array(values)

        self.assertEqual((3, 1), m.shape)
        self.assertEqual(values, m.to_array())

    def test_from_array_invalid(self):
        with self.assertRaises(InvalidShape):
            Matrix.from_array([])

        with self.assertRaises(InvalidShape):
            Matrix.from_array([[1, 2], [3, 4]])

    def test_to_array_row_major(self):
        m = _matrix([[1, 2, 3], [4, 5, 6]])
        self.assertEqual([1., 2., 3., 4., 5., 6.], m.to_array())

    def test_data_cannot_be_replaced(self):
        m = Matrix(2, 2)

        with self.assertRaises(AttributeError):
            m.data = np.ones((1, 2))

        self.assertEqual((2, 2), m.data.shape)

        # In-place edits of the array are still allowed
        m.data[0, 1] = 3.0
        self.assertEqual([0., 3., 0., 0.], m.to_array())

    def test_equality(self):
        a = _matrix([[1, 2]])

        self.assertEqual(a, _matrix([[1, 2]]))
        self.assertNotEqual(a, _matrix([[1], [2]]))
        self.assertNotEqual(a, _matrix([[1, 3]]))
        self.assertNotEqual(a, [[1, 2]])


if __name__ == '__main__':
    unittest.main()
