from collections import namedtuple
import math
import numbers


_NetworkConfig = namedtuple(
    '_NetworkConfig',
    ['n_input', 'n_hidden', 'n_output', 'n_epochs', 'learning_rate'])


class NetworkConfig(_NetworkConfig):
    """ The immutable hyperparameters of a single hidden layer network

    Parameters
    ----------
    n_input: int
        Number of input units (columns of the input matrix).

    n_hidden: int
        Number of hidden units.

    n_output: int
        Number of output units (columns of the target matrix).

    n_epochs: int
        Number of full-batch gradient descent epochs run by each training.

    learning_rate: float
        The gradient step size, must be positive.

    """
    __slots__ = ()

    def __new__(cls, n_input, n_hidden, n_output, n_epochs, learning_rate):

        for name, value in (('n_input', n_input),
                            ('n_hidden', n_hidden),
                            ('n_output', n_output),
                            ('n_epochs', n_epochs)):
            if (isinstance(value, bool) or
                    not isinstance(value, numbers.Integral)):
                msg = "`{}` must be an integer (got {!r})"
                raise TypeError(msg.format(name, value))
            if value < 1:
                msg = "`{}` must be positive (got {})"
                raise ValueError(msg.format(name, value))

        if (isinstance(learning_rate, bool) or
                not isinstance(learning_rate, numbers.Real)):
            msg = "`learning_rate` must be a real number (got {!r})"
            raise TypeError(msg.format(learning_rate))

        if not (learning_rate > 0 and math.isfinite(learning_rate)):
            msg = "`learning_rate` must be positive and finite (got {})"
            raise ValueError(msg.format(learning_rate))

        return super(NetworkConfig, cls).__new__(
            cls, int(n_input), int(n_hidden), int(n_output), int(n_epochs),
            float(learning_rate))

    @classmethod
    def from_dict(cls, values):
        """ Build a config from a mapping of field names to values
        """
        unknown = set(values) - set(cls._fields)
        if unknown:
            msg = "Unknown configuration keys: {}"
            raise ValueError(msg.format(', '.join(sorted(unknown))))

        return cls(**values)
