from slnn.feature.base_feature import (
    BaseOutput, BINARY_FEATURE_TYPE, CATEGORICAL_FEATURE_TYPE,
    CONTINUOUS_FEATURE_TYPE, PROBABILITY_FEATURE_TYPE)
from slnn.feature.provided.inputs import validate_range


class ContinuousOutput(BaseOutput):
    """ A real valued output; the network output in [0, 1] is mapped back
    to the range [min, max]
    """
    kind = CONTINUOUS_FEATURE_TYPE

    def __init__(self, name, min, max):
        super(ContinuousOutput, self).__init__(name)
        self.min, self.max = validate_range(name, min, max)

    def decode(self, value):
        return value * (self.max - self.min) + self.min


class ProbabilityOutput(BaseOutput):
    """ An output whose network value is already a probability
    """
    kind = PROBABILITY_FEATURE_TYPE

    def decode(self, value):
        return value


class _UndecodedOutput(BaseOutput):
    """ Outputs that occupy a column but are left out of decoded results
    """
    decodable = False

    def decode(self, value):
        msg = "{} outputs are not decoded".format(self.kind)
        raise NotImplementedError(msg)


class BinaryOutput(_UndecodedOutput):
    kind = BINARY_FEATURE_TYPE


class CategoricalOutput(_UndecodedOutput):
    kind = CATEGORICAL_FEATURE_TYPE
