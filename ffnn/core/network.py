"""
A small fully connected feedforward neural network with a single hidden
layer and sigmoid activations in both the hidden and output layers:

    Input (R^n) => Hidden (R^h) => Output (R^m)

For a single input column vector x, the computation chain is:

    hidden = sigmoid(W_ih x + b_h)
    output = sigmoid(W_ho hidden + b_o)

The network is trained online: each call to `train` performs a single
gradient descent step on the squared error of one example.
"""
import logging
import math
import numbers

import numpy

from ffnn.core.activation import sigmoid, sigmoid_derivative
from ffnn.core.exception import DimensionMismatch, InvalidShape
from ffnn.core.matrix import Matrix
from ffnn.score_functions import squared_error


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)

DEFAULT_LEARNING_RATE = 0.01

PARAM_NAMES = (
    'weights_input_hidden',
    'weights_hidden_output',
    'bias_hidden',
    'bias_output',
)


class NeuralNetwork(object):
    """
    Single hidden layer neural network with sigmoid hidden and output units.

    params: weights_input_hidden, shape=(hidden_size, input_size)
            weights_hidden_output, shape=(output_size, hidden_size)
            bias_hidden, shape=(hidden_size, 1)
            bias_output, shape=(output_size, 1)

    The four parameter matrices are owned by the network. They are updated
    in place by :meth:`train` and never replaced, so a network must not be
    trained from more than one thread at a time.
    """
    def __init__(self, input_size, hidden_size, output_size,
                 learning_rate=DEFAULT_LEARNING_RATE, random_state=None):
        """
        Parameters
        ----------
        input_size: int
            Number of input units.

        hidden_size: int
            Number of hidden units.

        output_size: int
            Number of output units.

        learning_rate: float, default=0.01
            The (positive) step size of each online update.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results. It is
            used to initialize the parameters uniformly over [-1, 1).
        """
        for name, size in [('input_size', input_size),
                           ('hidden_size', hidden_size),
                           ('output_size', output_size)]:
            if (not isinstance(size, numbers.Integral) or
                    isinstance(size, bool) or size < 1):
                msg = "`{}` should be a positive integer but was {!r}"
                raise InvalidShape(msg.format(name, size))

        msg = "`learning_rate` should be a positive number but was {!r}"
        if (not isinstance(learning_rate, numbers.Real) or
                isinstance(learning_rate, bool)):
            raise ValueError(msg.format(learning_rate))

        try:
            rate = float(learning_rate)
        except OverflowError:
            # e.g., a python int too large to be represented as a float
            raise ValueError(msg.format(learning_rate))

        if not math.isfinite(rate) or rate <= 0:
            raise ValueError(msg.format(learning_rate))

        self._input_size = int(input_size)
        self._hidden_size = int(hidden_size)
        self._output_size = int(output_size)
        self._learning_rate = rate

        if random_state is None:
            random_state = numpy.random.RandomState()
        self.random_state = random_state

        self.weights_input_hidden = Matrix(
            self._hidden_size, self._input_size, random_state=random_state)
        self.weights_hidden_output = Matrix(
            self._output_size, self._hidden_size, random_state=random_state)
        self.bias_hidden = Matrix(
            self._hidden_size, 1, random_state=random_state)
        self.bias_output = Matrix(
            self._output_size, 1, random_state=random_state)

        # Weights first, then biases
        for param in self._params():
            param.randomize()

        logger.debug("Initialized {!r}".format(self))

    def __repr__(self):
        return ("<NeuralNetwork input_size={:d}, hidden_size={:d}, "
                "output_size={:d}, learning_rate={:g}>").format(
                    self._input_size, self._hidden_size,
                    self._output_size, self._learning_rate)

    @property
    def input_size(self):
        return self._input_size

    @property
    def hidden_size(self):
        return self._hidden_size

    @property
    def output_size(self):
        return self._output_size

    @property
    def learning_rate(self):
        return self._learning_rate

    def _params(self):
        return [getattr(self, name) for name in PARAM_NAMES]

    def _to_column(self, arr, size, name):
        if len(arr) != size:
            msg = "`{}` has length {:d} but should have length {:d}"
            raise DimensionMismatch(msg.format(name, len(arr), size))

        column = Matrix.from_array(arr, random_state=self.random_state)

        if not numpy.isfinite(column.data).all():
            msg = "`{}` contains non-finite values: {!r}"
            raise ValueError(msg.format(name, column.to_array()))

        return column

    def _forward(self, inputs):
        hidden = Matrix.multiply(self.weights_input_hidden, inputs)
        hidden.add_matrix(self.bias_hidden)
        hidden.apply(sigmoid)

        outputs = Matrix.multiply(self.weights_hidden_output, hidden)
        outputs.add_matrix(self.bias_output)
        outputs.apply(sigmoid)

        return hidden, outputs

    def compute_output(self, input_array):
        """
        Parameters
        ----------
        input_array: sequence of float, length=input_size
            A single input example.

        Returns
        -------
        output: list of float, length=output_size
            The network output; each value lies in (0, 1).
        """
        inputs = self._to_column(input_array, self._input_size, 'input_array')
        _, outputs = self._forward(inputs)
        return outputs.to_array()

    def loss(self, input_array, target_array):
        """
        Half the squared error between the network's output for
        `input_array` and `target_array`.
        """
        if len(target_array) != self._output_size:
            msg = "`target_array` has length {:d} but should have length {:d}"
            raise DimensionMismatch(
                msg.format(len(target_array), self._output_size))
        return 0.5 * squared_error(
            self.compute_output(input_array), target_array)

    def train(self, input_array, target_array):
        """
        Run a single step of online backpropagation on one example,
        updating the weights and biases in place.

        Parameters
        ----------
        input_array: sequence of float, length=input_size
            The input example.

        target_array: sequence of float, length=output_size
            The desired output for `input_array`.
        """
        inputs = self._to_column(input_array, self._input_size, 'input_array')
        targets = self._to_column(
            target_array, self._output_size, 'target_array')

        hidden, outputs = self._forward(inputs)

        output_errors = Matrix.subtract(targets, outputs)

        # Gradient wrt the "hidden => output" parameters.
        output_gradient = Matrix.multiply_elementwise(
            Matrix.map(outputs, sigmoid_derivative), output_errors)
        output_gradient.scale(self._learning_rate)

        self.weights_hidden_output.add_matrix(
            Matrix.multiply(output_gradient, Matrix.transpose(hidden)))
        self.bias_output.add_matrix(output_gradient)

        # The output errors are propagated back through the hidden => output
        # weights *after* their update in this step.
        hidden_errors = Matrix.multiply(
            Matrix.transpose(self.weights_hidden_output), output_errors)

        # Gradient wrt the "input => hidden" parameters.
        hidden_gradient = Matrix.multiply_elementwise(
            Matrix.map(hidden, sigmoid_derivative), hidden_errors)
        hidden_gradient.scale(self._learning_rate)

        self.weights_input_hidden.add_matrix(
            Matrix.multiply(hidden_gradient, Matrix.transpose(inputs)))
        self.bias_hidden.add_matrix(hidden_gradient)

    def get_params(self, flat=False):
        """
        Parameters
        ----------
        flat: bool, default=False
            If True, the parameters are flattened into a single array.

        Returns
        -------
        params: list or ndarray
            If `flat` is False (default), copies of the parameters are
            returned as [weights_input_hidden, weights_hidden_output,
            bias_hidden, bias_output]. Otherwise, these are flattened
            (row by row, in that order) into a single array.
        """
        if flat:
            return numpy.hstack([p.data.ravel() for p in self._params()])
        else:
            return [p.copy() for p in self._params()]

    def set_params(self, weights_input_hidden, weights_hidden_output,
                   bias_hidden, bias_output):
        """
        Overwrite the parameter values with those provided in the arguments.
        Each argument is a Matrix or a 2d array-like of the matching shape.
        Nothing is written unless every shape matches.
        """
        new_values = []
        given = [weights_input_hidden, weights_hidden_output,
                 bias_hidden, bias_output]

        for name, param, value in zip(PARAM_NAMES, self._params(), given):
            if isinstance(value, Matrix):
                value = value.data
            value = numpy.asarray(value, dtype=float)

            if value.shape != param.shape:
                msg = "`{}` has shape {} but should have shape {}"
                raise DimensionMismatch(
                    msg.format(name, value.shape, param.shape))

            new_values.append(value)

        for param, value in zip(self._params(), new_values):
            param.data[...] = value

        logger.debug("Parameters of {!r} were set explicitly".format(self))
