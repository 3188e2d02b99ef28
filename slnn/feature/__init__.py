# flake8: noqa

from .base_feature import BaseFeature, BaseOutput

from .datum import TrainingDatum, training_matrices

from .provided import (
    BinaryFeature,
    BinaryOutput,
    CategoricalFeature,
    CategoricalOutput,
    ContinuousFeature,
    ContinuousOutput,
    ProbabilityOutput,
)

from .schema import Schema
