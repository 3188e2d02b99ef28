import numbers

import numpy

from slnn.core.exception import EncodingTypeError
from slnn.feature.base_feature import (
    BaseFeature, BINARY_FEATURE_TYPE, CATEGORICAL_FEATURE_TYPE,
    CONTINUOUS_FEATURE_TYPE)


def _type_error(feature, expected, value):
    msg = "Feature {} expects {} but got {!r} (type {})"
    return EncodingTypeError(msg.format(
        feature.name, expected, value, type(value).__name__))


def _is_bool(value):
    return isinstance(value, (bool, numpy.bool_))


def validate_range(name, min, max):
    for bound_name, bound in (('min', min), ('max', max)):
        if _is_bool(bound) or not isinstance(bound, numbers.Real):
            msg = "`{}` of {} must be a real number (got {!r})"
            raise TypeError(msg.format(bound_name, name, bound))

    if min == max:
        msg = "`min` and `max` of {} are both {}; the range is degenerate"
        raise ValueError(msg.format(name, min))

    return float(min), float(max)


class BinaryFeature(BaseFeature):
    """ A true/false value, encoded as 1.0 or 0.0. Missing values are
    encoded as false.
    """
    kind = BINARY_FEATURE_TYPE
    size = 1

    def encode(self, value):
        if not _is_bool(value):
            raise _type_error(self, 'a bool', value)
        return [1.0 if value else 0.0]

    def encode_missing(self):
        return [0.0]


class ContinuousFeature(BaseFeature):
    """ A real value in the range [min, max], encoded with min-max
    normalization to [0, 1]. Values outside of the range are not clipped.
    Missing values are encoded as the midpoint of the range.
    """
    kind = CONTINUOUS_FEATURE_TYPE
    size = 1

    def __init__(self, name, min, max):
        """ Initialize a continuous feature

        Parameters
        ----------
        name: str
            The key of the feature in input records

        min, max: float
            The range of the feature values (must differ)

        """
        super(ContinuousFeature, self).__init__(name)
        self.min, self.max = validate_range(name, min, max)

    def encode(self, value):
        if _is_bool(value) or not isinstance(value, numbers.Real):
            raise _type_error(self, 'a real number', value)
        return [(float(value) - self.min) / (self.max - self.min)]

    def encode_missing(self):
        return [(self.min + self.max) / 2]


class CategoricalFeature(BaseFeature):
    """ One of an ordered list of string labels, one-hot encoded with a
    column per category. Unknown labels are encoded as all zeros, while
    missing values are encoded as the first category.
    """
    kind = CATEGORICAL_FEATURE_TYPE

    def __init__(self, name, categories):
        """ Initialize a categorical feature

        Parameters
        ----------
        name: str
            The key of the feature in input records

        categories: list of str
            The ordered, unique category labels. The first is the default
            for missing values.

        """
        super(CategoricalFeature, self).__init__(name)

        categories = tuple(categories)

        if len(categories) == 0:
            msg = "Categorical feature {} has no categories"
            raise ValueError(msg.format(name))

        if not all(isinstance(category, str) for category in categories):
            msg = "Categories of {} must be strings"
            raise TypeError(msg.format(name))

        if len(set(categories)) != len(categories):
            msg = "Categorical feature {} has repeated categories"
            raise ValueError(msg.format(name))

        self.categories = categories

    @property
    def size(self):
        return len(self.categories)

    def encode(self, value):
        if not isinstance(value, str):
            raise _type_error(self, 'a string', value)
        return [1.0 if category == value else 0.0
                for category in self.categories]

    def encode_missing(self):
        return [1.0] + [0.0] * (self.size - 1)
