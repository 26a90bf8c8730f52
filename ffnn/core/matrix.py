import numbers

import numpy

from ffnn.core.exception import DimensionMismatch, InvalidShape


def _validate_dimension(value, name):
    # bool is an Integral, but `Matrix(True, 2)` is certainly a mistake
    if (not isinstance(value, numbers.Integral) or
            isinstance(value, bool) or value < 1):
        msg = "`{}` should be a positive integer but was {!r}"
        raise InvalidShape(msg.format(name, value))
    return int(value)


def _check_same_shape(a, b, operation):
    if a.shape != b.shape:
        msg = "Shapes {} and {} must be identical for {}"
        raise DimensionMismatch(msg.format(a.shape, b.shape, operation))


class Matrix(object):
    """ A dense, fixed-shape 2d array of real numbers

    The static methods (`multiply`, `multiply_elementwise`, `subtract`,
    `transpose`, `map`) never modify their arguments and always return a
    new matrix. The instance methods `scale`, `apply`, `add_matrix`,
    `add_scalar` and `randomize` modify the matrix in place. No operation
    ever changes the shape of an existing matrix.
    """
    def __init__(self, rows, cols, random_state=None):
        """ Initialize a zero-filled matrix

        Parameters
        ----------
        rows: int
            The (positive) number of rows.

        cols: int
            The (positive) number of columns.

        random_state: numpy.random.RandomState, default=None
            The source of randomness for :meth:`randomize`. Provide a
            seeded RandomState for reproducible results.

        """
        self._rows = _validate_dimension(rows, 'rows')
        self._cols = _validate_dimension(cols, 'cols')

        if random_state is None:
            random_state = numpy.random.RandomState()
        self.random_state = random_state

        self._data = numpy.zeros((self._rows, self._cols), dtype=float)

    @property
    def data(self):
        """ The underlying (rows, cols) array

        The array may be modified in place, but it cannot be replaced, so
        the shape of a matrix never changes.
        """
        return self._data

    @property
    def rows(self):
        return self._rows

    @property
    def cols(self):
        return self._cols

    @property
    def shape(self):
        return (self._rows, self._cols)

    def __repr__(self):
        return "<Matrix rows={:d}, cols={:d}>".format(self._rows, self._cols)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.shape == other.shape and
                numpy.array_equal(self._data, other.data))

    def _new_like(self, rows, cols, data):
        result = Matrix(rows, cols, random_state=self.random_state)
        result.data[...] = data
        return result

    def copy(self):
        return self._new_like(self._rows, self._cols, self._data)

    @classmethod
    def from_array(cls, arr, random_state=None):
        """ Create a column matrix (shape `(len(arr), 1)`) from a flat
        sequence of numbers
        """
        values = numpy.asarray(arr, dtype=float)

        if values.ndim != 1:
            msg = "Expected a flat sequence but got {} dimensions"
            raise InvalidShape(msg.format(values.ndim))

        result = cls(len(values), 1, random_state=random_state)
        result.data[:, 0] = values
        return result

    def to_array(self):
        """ Flatten the matrix, row by row, into a list of floats
        """
        return self._data.ravel(order='C').tolist()

    @staticmethod
    def multiply(a, b):
        """ The matrix product `a b`

        Parameters
        ----------
        a, b: Matrix
            `a.cols` must equal `b.rows`.

        Returns
        -------
        product: Matrix, shape=(a.rows, b.cols)
            product[i, j] = sum_k a[i, k] * b[k, j]

        """
        if a.cols != b.rows:
            msg = ("Cannot multiply shapes {} and {}; columns of the first "
                   "must match rows of the second")
            raise DimensionMismatch(msg.format(a.shape, b.shape))

        return a._new_like(a.rows, b.cols, numpy.dot(a.data, b.data))

    @staticmethod
    def multiply_elementwise(a, b):
        """ The Hadamard product of two identically shaped matrices
        """
        _check_same_shape(a, b, 'element-wise multiplication')
        return a._new_like(a.rows, a.cols, a.data * b.data)

    @staticmethod
    def subtract(a, b):
        """ Element-wise difference `a - b`
        """
        _check_same_shape(a, b, 'subtraction')
        return a._new_like(a.rows, a.cols, a.data - b.data)

    @staticmethod
    def transpose(m):
        return m._new_like(m.cols, m.rows, m.data.T)

    @staticmethod
    def map(m, func):
        """ Return a new matrix with `func` applied to each element of `m`

        `func` takes and returns a single number.
        """
        result = m.copy()
        result.apply(func)
        return result

    def apply(self, func):
        """ Apply `func` to each element in place
        """
        self._data[...] = numpy.vectorize(func, otypes=[float])(self._data)

    def scale(self, n):
        """ Multiply each element by the scalar `n` in place
        """
        self._data *= n

    def scaled(self, n):
        """ Return a new matrix with each element multiplied by `n`
        """
        result = self.copy()
        result.scale(n)
        return result

    def add_matrix(self, other):
        """ Add the identically shaped matrix `other` element-wise in place
        """
        _check_same_shape(self, other, 'addition')
        self._data += other.data

    def add_scalar(self, n):
        """ Add the scalar `n` to each element in place
        """
        self._data += n

    def randomize(self):
        """ Fill the matrix in place with independent samples that are
        uniformly distributed over [-1, 1)
        """
        self._data[...] = self.random_state.uniform(
            low=-1.0, high=1.0, size=self.shape)
