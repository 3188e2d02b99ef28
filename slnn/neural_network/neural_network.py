"""
This is a simple neural network class with a single hidden layer.

A general number of inputs, hidden units and outputs is supported.

Input (R^n) => Hidden (R^h) => Output (R^m)

Both layers use the logistic sigmoid activation, and the parameters are
trained with full-batch gradient descent on the squared error, i.e.,
every epoch is one forward and one backward pass over all of the samples.
"""
from collections import namedtuple
import logging

import numpy
from scipy.special import expit
from sklearn.utils import check_random_state

from slnn.core.config import NetworkConfig
from slnn.core.exception import ModelNotFit
from slnn.core.logger import log_training_progress
from slnn.util.matrix import add_row, as_matrix, check_shape, sum_along_axis


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)

# Approximate number of progress messages logged by a training run
N_PROGRESS_MESSAGES = 10


TrainedParams = namedtuple(
    'TrainedParams', ['w_hidden', 'b_hidden', 'w_out', 'b_out'])


def sigmoid(v):
    """ The logistic function, 1 / (1 + exp(-v)), element-wise
    """
    return expit(v)


def sigmoid_prime(s):
    """ Derivative of the sigmoid expressed with its output, i.e.,
    `s` must already be `sigmoid(v)`
    """
    return s * (1.0 - s)


def forward(inputs, params):
    """ Compute the hidden layer activations and the output of the network

    Parameters
    ----------
    inputs: ndarray, shape=(n_samples, n_input)
        Each row of `inputs` is an observation.

    params: TrainedParams
        The parameters of the network.

    Returns
    -------
    hidden, output: ndarrays
        Shapes (n_samples, n_hidden) and (n_samples, n_output).

    """
    hidden = sigmoid(add_row(numpy.dot(inputs, params.w_hidden),
                             params.b_hidden))
    output = sigmoid(add_row(numpy.dot(hidden, params.w_out),
                             params.b_out))
    return hidden, output


class NeuralNetwork(object):
    """
    Single hidden layer neural network with sigmoid hidden and output units.

    params: w_hidden, where w_hidden[i,j] = weight from input i to hidden j.
            b_hidden, where b_hidden[0,j] = bias into hidden unit j.
            w_out, where w_out[j,k] = weight from hidden j to output k.
            b_out, where b_out[0,k] = bias into output unit k.

    For an input matrix X (samples by row), the computation chain is:
    H = sigmoid( dot(X, w_hidden) + b_hidden )
    output = sigmoid( dot(H, w_out) + b_out )
    """
    def __init__(self, config, random_state=None):
        """
        Parameters
        ----------
        config: NetworkConfig
            The layer sizes, number of epochs and learning rate.

        random_state: int or numpy.random.RandomState, default=None
            Source of the random parameter initialization. Provide a
            seed or a RandomState for reproducible results. If None, a
            RandomState seeded from the operating system is used.
        """
        if not isinstance(config, NetworkConfig):
            msg = "`config` must be a NetworkConfig instance (got {})"
            raise TypeError(msg.format(type(config).__name__))

        self.config = config

        if random_state is None:
            self.random_state = numpy.random.RandomState()
        else:
            self.random_state = check_random_state(random_state)

        # None until trained, or until parameters are set explicitly
        self._params = None

    def __repr__(self):
        return "<NeuralNetwork n_input=%d, n_hidden=%d, n_output=%d>" % (
            self.config.n_input, self.config.n_hidden, self.config.n_output)

    @property
    def is_fitted(self):
        return self._params is not None

    @property
    def params(self):
        """ A copy of the TrainedParams of the network, or None if untrained
        """
        if self._params is None:
            return None
        return TrainedParams(*[p.copy() for p in self._params])

    def _param_shapes(self):
        conf = self.config
        return TrainedParams(
            w_hidden=(conf.n_input, conf.n_hidden),
            b_hidden=(1, conf.n_hidden),
            w_out=(conf.n_hidden, conf.n_output),
            b_out=(1, conf.n_output))

    def _check_fitted(self):
        if self._params is None:
            msg = "The network has not been trained"
            raise ModelNotFit(msg)

    def get_params(self, flat=False):
        """
        Parameters
        ----------
        flat: bool, default=False
            If True, the parameters are flattened into a single array.

        Returns
        -------
        params: list or array
            If `flat` is False (default), then copies of the parameters are
            returned as [w_hidden, b_hidden, w_out, b_out]. Otherwise, these
            are flattened into a single array and returned.
        """
        self._check_fitted()

        if flat:
            return numpy.hstack([p.ravel() for p in self._params])
        else:
            return [p.copy() for p in self._params]

    def set_params(self, w_hidden, b_hidden, w_out, b_out):
        """
        Set the parameter values to (copies of) those provided in the
        arguments. The parameters are only replaced if all four have the
        shapes required by the network configuration.
        """
        params = TrainedParams(
            w_hidden=as_matrix(w_hidden, 'w_hidden').copy(),
            b_hidden=as_matrix(b_hidden, 'b_hidden').copy(),
            w_out=as_matrix(w_out, 'w_out').copy(),
            b_out=as_matrix(b_out, 'b_out').copy())

        for name, param, shape in zip(TrainedParams._fields, params,
                                      self._param_shapes()):
            check_shape(param, rows=shape[0], cols=shape[1], name=name)

        self._params = params

    def _validate_inputs(self, inputs):
        inputs = as_matrix(inputs, 'inputs')
        check_shape(inputs, cols=self.config.n_input, name='inputs')
        return inputs

    def _validate_targets(self, targets, n_samples):
        targets = as_matrix(targets, 'targets')
        check_shape(targets, rows=n_samples, cols=self.config.n_output,
                    name='targets')
        return targets

    def predict(self, inputs):
        """
        Parameters
        ----------
        inputs: ndarray, shape=(n_samples, n_input)
            Each row of `inputs` is an observation.

        Returns
        -------
        output: ndarray, shape=(n_samples, n_output)
            output = sigmoid(dot(sigmoid(dot(X, w_hidden) + b_hidden), w_out)
                             + b_out)
        """
        self._check_fitted()
        inputs = self._validate_inputs(inputs)

        _, output = forward(inputs, self._params)

        return output

    def loss(self, inputs, targets):
        """
        Compute the mean-squared-error between the network's prediction
        of `inputs` and the values `targets`.

        Parameters
        ----------
        inputs: ndarray, shape=(n_samples, n_input)
            The input array.

        targets: ndarray, shape=(n_samples, n_output)
            The "correct" output values.

        Returns
        -------
        mse: float
            The squared error averaged over all samples and outputs.
        """
        output = self.predict(inputs)
        targets = self._validate_targets(targets, output.shape[0])

        return float(numpy.mean((targets - output)**2))

    def _initial_params(self, random_state):
        """ Uniform [0, 1) random parameters, drawn in the order
        w_hidden, b_hidden, w_out, b_out
        """
        return TrainedParams(*[random_state.rand(*shape)
                               for shape in self._param_shapes()])

    def train(self, inputs, targets, random_state=None, logger=None):
        """
        Randomly initialize the parameters and run `n_epochs` epochs of
        full-batch gradient descent. The previous parameters (if any) are
        only replaced once all epochs have completed.

        Parameters
        ----------
        inputs: ndarray, shape=(n_samples, n_input)
            The training inputs -- examples by row.

        targets: ndarray, shape=(n_samples, n_output)
            The training outputs.

        random_state: int or numpy.random.RandomState, default=None
            Overrides the network's random state for the parameter
            initialization of this call.

        logger: logging.Logger, default=None
            Receives the progress messages. Defaults to the module logger.
        """
        inputs = self._validate_inputs(inputs)
        targets = self._validate_targets(targets, inputs.shape[0])

        if random_state is None:
            random_state = self.random_state
        else:
            random_state = check_random_state(random_state)

        params = self._initial_params(random_state)

        self._backpropagate(inputs, targets, params, logger)

        self._params = params

    def _backpropagate(self, inputs, targets, params, log):
        """ Run the gradient descent epochs, updating `params` in place
        """
        if log is None:
            log = logger

        n_epochs = self.config.n_epochs
        step = self.config.learning_rate
        log_every = max(1, n_epochs // N_PROGRESS_MESSAGES)

        w_hidden, b_hidden, w_out, b_out = params
        warned = False

        for epoch in range(n_epochs):
            hidden, output = forward(inputs, params)

            error = targets - output

            d_output = error * sigmoid_prime(output)
            d_hidden = numpy.dot(d_output, w_out.T) * sigmoid_prime(hidden)

            w_out += step * numpy.dot(hidden.T, d_output)
            b_out += step * sum_along_axis(0, d_output)
            w_hidden += step * numpy.dot(inputs.T, d_hidden)
            b_hidden += step * sum_along_axis(0, d_hidden)

            mse = numpy.mean(error**2)

            if not warned and not numpy.isfinite(mse):
                log.warning("Non-finite training error at epoch %d",
                            epoch + 1)
                warned = True

            if epoch % log_every == 0 or epoch == n_epochs - 1:
                log_training_progress(log, epoch + 1, n_epochs, mse)
