class DimensionMismatch(ValueError):
    """ Raised when the shapes of the operands of a matrix operation, or
    the length of an array given to a network, are incompatible
    """


class InvalidShape(ValueError):
    """ Raised when a matrix or network is given dimensions that are not
    positive integers
    """
