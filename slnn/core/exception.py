class ModelNotFit(Exception):
    """ Raised when trying access properties or methods that require a
    trained network
    """


class ShapeMismatch(ValueError):
    """ Raised when the shape of a matrix operand is incompatible with the
    network configuration or with another operand
    """


class EncodingTypeError(TypeError):
    """ Raised when a record value does not match the kind of the feature
    it is encoded with
    """
