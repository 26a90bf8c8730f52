from scipy.special import expit


def sigmoid(x):
    """ The logistic sigmoid, 1 / (1 + exp(-x))

    Works element-wise for scalars and arrays alike.
    """
    return expit(x)


def sigmoid_derivative(y):
    """ Derivative of the sigmoid given its *output* value

    Parameters
    ----------
    y: float or ndarray
        The value(s) of the sigmoid function, i.e., `y = sigmoid(x)`.
        This is not the input `x`.

    Returns
    -------
    dy: float or ndarray
        The derivative `y * (1 - y)`, which equals `d sigmoid / dx` at `x`.

    """
    return y * (1 - y)
