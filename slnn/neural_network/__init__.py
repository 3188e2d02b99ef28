# flake8: noqa

from .neural_network import (
    forward,
    NeuralNetwork,
    sigmoid,
    sigmoid_prime,
    TrainedParams,
)
