# flake8: noqa

from .inputs import (
    BinaryFeature,
    CategoricalFeature,
    ContinuousFeature,
)

from .outputs import (
    BinaryOutput,
    CategoricalOutput,
    ContinuousOutput,
    ProbabilityOutput,
)
