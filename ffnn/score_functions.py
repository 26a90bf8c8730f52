import numpy

from ffnn.core.exception import DimensionMismatch


DEFAULT_THRESHOLD = 0.5


def squared_error(output, target):
    """ Compute the sum of squared differences between `output` and `target`
    """
    output = numpy.asarray(output, dtype=float).ravel()
    target = numpy.asarray(target, dtype=float).ravel()

    if output.shape != target.shape:
        msg = "`output` has length {:d} but `target` has length {:d}"
        raise DimensionMismatch(msg.format(len(output), len(target)))

    diff = output - target
    return float(numpy.dot(diff, diff))


def accuracy(outputs, targets, threshold=DEFAULT_THRESHOLD):
    """ Compute the fraction of examples classified correctly

    Parameters
    ----------
    outputs: sequence of sequences of float
        One network output per example.

    targets: sequence of sequences of float
        The respective target for each example.

    threshold: float, default=0.5
        An output (or target) value is treated as the positive class
        when it is greater than `threshold`.

    Returns
    -------
    score: float
        The fraction of examples for which every thresholded output unit
        agrees with the thresholded target.

    """
    outputs = numpy.atleast_2d(numpy.asarray(outputs, dtype=float))
    targets = numpy.atleast_2d(numpy.asarray(targets, dtype=float))

    if outputs.size == 0:
        raise ValueError("`outputs` should contain at least one example")

    if outputs.shape != targets.shape:
        msg = "`outputs` has shape {} but `targets` has shape {}"
        raise DimensionMismatch(msg.format(outputs.shape, targets.shape))

    agree = (outputs > threshold) == (targets > threshold)
    return float(agree.all(axis=1).mean())
