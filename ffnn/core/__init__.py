# flake8: noqa

from .activation import sigmoid, sigmoid_derivative
from .exception import DimensionMismatch, InvalidShape
from .matrix import Matrix
from .network import NeuralNetwork
