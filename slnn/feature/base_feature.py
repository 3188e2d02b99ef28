""" Abstract base classes for input features and output definitions
"""
import abc


BINARY_FEATURE_TYPE = 'binary'
CONTINUOUS_FEATURE_TYPE = 'continuous'
CATEGORICAL_FEATURE_TYPE = 'categorical'
PROBABILITY_FEATURE_TYPE = 'probability'


class _Named(abc.ABC):
    """ Equality, hashing and printing by name
    """

    @property
    @abc.abstractmethod
    def kind(self):
        """ The kind of the feature, e.g., binary or continuous
        """
        raise NotImplementedError

    def __init__(self, name):
        if not isinstance(name, str):
            msg = "`name` must be a string (got {!r})"
            raise TypeError(msg.format(name))
        if not name:
            raise ValueError("`name` must not be empty")
        self.name = name

    def __eq__(self, other):
        return isinstance(other, type(self)) and self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __str__(self):
        return self.name

    def __repr__(self):
        return "<{} name={!r}>".format(type(self).__name__, self.name)


class BaseFeature(_Named):
    """ The abstract base class for all input features. A feature encodes
    the value of one record entry into `size` columns of the input matrix.
    """

    @property
    @abc.abstractmethod
    def size(self):
        """ The number of columns occupied by the encoded feature
        """
        raise NotImplementedError

    def __call__(self, value):
        """ Encode `value` after handling the missing value case

        Returns
        -------
        columns: list of float, length=size

        """
        if value is None:
            columns = self.encode_missing()
        else:
            columns = self.encode(value)

        if len(columns) != self.size:
            msg = "Feature {} encoded {} columns but should encode {}"
            raise RuntimeError(msg.format(self.name, len(columns), self.size))

        return columns

    @abc.abstractmethod
    def encode(self, value):
        """ Encode a present value into a list of `size` floats. Raises
        :class:`slnn.core.exception.EncodingTypeError` if `value` is not
        of the type expected by the feature.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def encode_missing(self):
        """ The list of `size` floats used when the value is absent
        """
        raise NotImplementedError


class BaseOutput(_Named):
    """ The abstract base class for all output definitions. Each output
    occupies a single column of the network output.
    """
    size = 1

    #: Whether :meth:`decode` gives the output a value
    decodable = True

    @abc.abstractmethod
    def decode(self, value):
        """ Map the network output `value` to the output's own units
        """
        raise NotImplementedError
