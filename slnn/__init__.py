# flake8: noqa

from ._version import version as __version__

from .core.config import NetworkConfig
from .core.exception import EncodingTypeError, ModelNotFit, ShapeMismatch
from .feature import (
    BinaryFeature,
    BinaryOutput,
    CategoricalFeature,
    CategoricalOutput,
    ContinuousFeature,
    ContinuousOutput,
    ProbabilityOutput,
    Schema,
    TrainingDatum,
    training_matrices,
)
from .neural_network import NeuralNetwork
