import numbers

import numpy


INPUTS = (
    (0.0, 0.0),
    (0.0, 1.0),
    (1.0, 0.0),
    (1.0, 1.0),
)
TARGETS = (
    (0.0,),
    (1.0,),
    (1.0,),
    (0.0,),
)


def make():
    """
    Make the four-pattern XOR dataset.

    Returns
    -------
    inputs, targets: list of list of float
        `inputs[i]` is a length-2 input and `targets[i]` is its
        length-1 target, 1 exactly when the two inputs differ.
    """
    return [list(x) for x in INPUTS], [list(y) for y in TARGETS]


def make_stream(n, random_state=None):
    """
    Yield `n` (input, target) pairs drawn uniformly at random from the
    XOR patterns, suitable for online training.

    Parameters
    ----------
    n: int
        The number of examples to yield.

    random_state: numpy.random.RandomState, default=None
        RandomState object for reproducible results.
    """
    if (not isinstance(n, numbers.Integral) or
            isinstance(n, bool) or n < 0):
        msg = "`n` should be a non-negative integer but was {!r}"
        raise ValueError(msg.format(n))

    random_state = (random_state if random_state is not None
                    else numpy.random.RandomState())

    inputs, targets = make()

    for index in random_state.randint(len(inputs), size=n):
        yield inputs[index], targets[index]
