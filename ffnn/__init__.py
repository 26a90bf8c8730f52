# flake8: noqa

from ._version import version as __version__

from .core.activation import sigmoid, sigmoid_derivative
from .core.exception import DimensionMismatch, InvalidShape
from .core.matrix import Matrix
from .core.network import NeuralNetwork
